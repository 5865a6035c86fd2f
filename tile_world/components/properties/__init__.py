"""Property component aggregates.

This module re-exports the components attached to entities: where they are
(:class:`Position`), how they look (:class:`Appearance`), what terrain they
represent (:class:`Terrain`) and whether they are controlled
(:class:`Agent`).

All properties are immutable dataclasses; creating a new instance is how
state changes are expressed between steps.
"""

from .agent import Agent
from .appearance import Appearance, AppearanceName
from .position import Position
from .terrain import Terrain

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Position",
    "Terrain",
]
