"""Agent marker component.

Presence of :class:`Agent` designates the controllable entity. Only one
agent is generated; the reducer selects the first if several exist.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
