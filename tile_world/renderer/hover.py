"""Pointer hover highlighting.

Each record reacts to two display-only signals: the pointer entering it
switches on its highlight, the pointer leaving switches it back off. These
touch ``Appearance.highlighted`` and nothing else, so hovering never affects
the tile map or movement.

:func:`topmost_at` resolves which record a pointer over a cell actually hits:
the highest layer, and among equal layers the most recently spawned tile
record. The agent is not a hover target.
"""

from dataclasses import replace
from typing import Optional

from tile_world.components import Position
from tile_world.state import WorldState
from tile_world.types import EntityID


def _set_highlight(state: WorldState, eid: EntityID, highlighted: bool) -> WorldState:
    appearance = state.appearance.get(eid)
    if appearance is None or appearance.highlighted == highlighted:
        return state
    return replace(
        state,
        appearance=state.appearance.set(
            eid, replace(appearance, highlighted=highlighted)
        ),
    )


def pointer_over_system(state: WorldState, eid: EntityID) -> WorldState:
    """Highlight ``eid``; unknown ids are ignored."""
    return _set_highlight(state, eid, True)


def pointer_out_system(state: WorldState, eid: EntityID) -> WorldState:
    """Restore the base appearance of ``eid``; unknown ids are ignored."""
    return _set_highlight(state, eid, False)


def topmost_at(state: WorldState, pos: Position) -> Optional[EntityID]:
    """Record a pointer at ``pos`` hits, or ``None`` over empty space."""
    candidates = [eid for eid in state.terrain if state.position.get(eid) == pos]
    if not candidates:
        return None
    return max(candidates, key=lambda eid: (state.appearance[eid].layer, eid))
