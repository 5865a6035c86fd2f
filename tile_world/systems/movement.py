"""Agent movement system.

Attempts to move the controlled agent to ``next_pos``. The move is allowed
only if the tile map reports the destination passable; there is no bounds
check and no special casing of diagonals, which are judged solely on the
diagonal cell itself.

Returns the original ``WorldState`` if movement is not possible; otherwise a
new ``WorldState`` with the updated position. Rejection is a normal outcome
and never raises.
"""

import logging
from dataclasses import replace

from tile_world.components import Position
from tile_world.state import WorldState
from tile_world.types import EntityID

logger = logging.getLogger(__name__)


def movement_system(
    state: WorldState, entity_id: EntityID, next_pos: Position
) -> WorldState:
    """Move agent one step if allowed.

    Args:
        state (WorldState): Current state.
        entity_id (EntityID): Agent entity id (ignored if not an agent).
        next_pos (Position): Desired destination position.

    Returns:
        WorldState: Same state if blocked / invalid or updated with new position.
    """
    if entity_id not in state.agent:
        return state

    if not state.tile_map.is_passable(next_pos):
        logger.debug("Agent %d blocked at (%d,%d)", entity_id, next_pos.x, next_pos.y)
        return state

    logger.debug("Agent %d moves to (%d,%d)", entity_id, next_pos.x, next_pos.y)
    return replace(state, position=state.position.set(entity_id, next_pos))
