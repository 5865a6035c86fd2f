"""Action enumerations.

Each :class:`Action` is a discrete direction pulse, one per physical key
press. ``MOVE_ACTIONS`` is the canonical ordered list of movement actions;
checks like ``if action in MOVE_ACTIONS`` are preferred over enum name
comparisons.
"""

from enum import StrEnum, auto


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]
