"""Edge-triggered input boundary.

The input collaborator reports which keys are *held* each frame. Movement,
however, advances one cell per physical press, so :class:`KeyEdgeDetector`
reduces the held set to the actions whose key went from released to pressed
since the previous frame. Holding a key therefore yields its action exactly
once; releasing and pressing again yields it again.
"""

import logging
from typing import AbstractSet, Dict, FrozenSet, Iterable

from tile_world.actions import Action

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "arrowup": Action.UP,
    "arrowdown": Action.DOWN,
    "arrowleft": Action.LEFT,
    "arrowright": Action.RIGHT,
}


def actions_for_keys(keys: Iterable[str]) -> FrozenSet[Action]:
    """Translate key names (case-insensitive) into actions, ignoring unbound keys."""
    actions = set()
    for key in keys:
        action = KEY_BINDINGS.get(key.lower())
        if action is None:
            logger.debug("Ignoring unbound key %r", key)
            continue
        actions.add(action)
    return frozenset(actions)


class KeyEdgeDetector:
    """Tracks held actions between frames and reports fresh presses."""

    def __init__(self) -> None:
        self._held: FrozenSet[Action] = frozenset()

    @property
    def held(self) -> FrozenSet[Action]:
        return self._held

    def update(self, held: AbstractSet[Action]) -> FrozenSet[Action]:
        """Record this frame's held actions and return the just-pressed ones.

        Args:
            held: Actions whose key is down during this frame.

        Returns:
            Actions held now that were not held on the previous update.
        """
        current = frozenset(held)
        pressed = current - self._held
        self._held = current
        return pressed

    def reset(self) -> None:
        """Forget held keys, e.g. after the window loses focus."""
        self._held = frozenset()
