"""State reducer and step orchestration.

This module implements the movement state machine: one call to :func:`step`
consumes the actions that were edge-triggered during one frame and returns a
*new* :class:`tile_world.state.WorldState`.

Ordering:

1. ``position_system`` snapshots previous positions (enables move detection).
2. Triggered actions are summed into one direction; a zero vector is a no-op.
3. ``movement_system`` commits the candidate cell iff the tile map reports it
    passable.
4. The turn counter is bumped.

A missing agent is not an error: the step produces no transition and the
input state is returned as is. :func:`step_with_keys` and :func:`run_frames`
put the :class:`tile_world.inputs.KeyEdgeDetector` in front of the reducer
for callers that sample held keys per frame.
"""

import logging
from dataclasses import replace
from typing import AbstractSet, Iterable, Optional

from tile_world.actions import Action
from tile_world.inputs import KeyEdgeDetector
from tile_world.moves import NO_DIRECTION, combine_actions, next_position
from tile_world.state import WorldState
from tile_world.systems.movement import movement_system
from tile_world.systems.position import position_system
from tile_world.types import EntityID

logger = logging.getLogger(__name__)


def step(
    state: WorldState,
    actions: Iterable[Action],
    agent_id: Optional[EntityID] = None,
) -> WorldState:
    """Advance the world by one input step.

    Args:
        state (WorldState): Previous immutable world state.
        actions (Iterable[Action]): Actions whose key transitioned to pressed
            this step. Simultaneous actions combine additively.
        agent_id (EntityID | None): Explicit agent entity id. If ``None`` the
            first entity in ``state.agent`` is used.

    Returns:
        WorldState: Next state snapshot. If there is no agent (or it has no
            position) the same object is returned unchanged.
    """
    if agent_id is None:
        agent_id = next(iter(state.agent.keys()), None)
    if agent_id is None or agent_id not in state.position:
        logger.debug("No controllable agent; skipping step")
        return state

    state = position_system(state)

    direction = combine_actions(actions)
    if direction != NO_DIRECTION:
        candidate = next_position(state.position[agent_id], direction)
        state = movement_system(state, agent_id, candidate)

    return replace(state, turn=state.turn + 1)


def step_with_keys(
    state: WorldState,
    detector: KeyEdgeDetector,
    held: AbstractSet[Action],
    agent_id: Optional[EntityID] = None,
) -> WorldState:
    """Run one frame: reduce held actions to fresh presses, then :func:`step`."""
    return step(state, detector.update(held), agent_id=agent_id)


def run_frames(
    state: WorldState,
    frames: Iterable[AbstractSet[Action]],
    agent_id: Optional[EntityID] = None,
) -> WorldState:
    """Feed a sequence of held-action frames through a fresh edge detector.

    Holding an action across consecutive frames moves at most once.
    """
    detector = KeyEdgeDetector()
    for held in frames:
        state = step_with_keys(state, detector, held, agent_id=agent_id)
    return state
