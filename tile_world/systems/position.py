"""Position snapshot system.

Maintains ``prev_position`` as an immutable snapshot of all entity positions
at the start of a step. The renderer boundary compares it with ``position``
to report which entities moved (see
:func:`tile_world.renderer.records.position_updates`).
"""

from dataclasses import replace

from tile_world.state import WorldState


def position_system(state: WorldState) -> WorldState:
    """Snapshot current entity positions.

    Args:
        state (WorldState): Current immutable world state.

    Returns:
        WorldState: New state with ``prev_position`` replaced by the current
            ``position`` map (persistent, so no copy is needed).
    """
    return replace(state, prev_position=state.position)
