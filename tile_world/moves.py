"""Direction arithmetic for movement actions.

Every action is a unit vector on a y-up grid. Actions triggered in the same
step combine additively, so ``{UP, RIGHT}`` is the diagonal ``(1, 1)`` and
``{UP, DOWN}`` cancels out to no movement at all.

Candidates are not clamped to the grid: whether a cell can be entered is
decided solely by :meth:`tile_world.tile_map.TileMap.is_passable`, which
rejects cells outside the generated area because they were never inserted.
"""

from typing import Dict, Iterable

from tile_world.actions import Action
from tile_world.components import Position
from tile_world.types import Direction

DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: (0, 1),
    Action.DOWN: (0, -1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

NO_DIRECTION: Direction = (0, 0)


def combine_actions(actions: Iterable[Action]) -> Direction:
    """Sum the unit vectors of all ``actions`` (each distinct action once)."""
    dx, dy = NO_DIRECTION
    for action in set(actions):
        ax, ay = DIRECTIONS[action]
        dx += ax
        dy += ay
    return (dx, dy)


def next_position(pos: Position, direction: Direction) -> Position:
    """Candidate cell one ``direction`` away from ``pos``."""
    dx, dy = direction
    return Position(pos.x + dx, pos.y + dy)
