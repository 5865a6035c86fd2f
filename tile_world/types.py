"""Common type aliases and enumerations.

``TerrainKind`` is the only per-cell state the logic layer cares about; the
richer ground / rock / water categories live in
:class:`tile_world.components.AppearanceName` and collapse to one of the two
kinds here.
"""

from enum import StrEnum, auto
from typing import Tuple

EntityID = int

Direction = Tuple[int, int]


class TerrainKind(StrEnum):
    """Two-valued passability classification stored per cell."""

    PASSABLE = auto()
    UNPASSABLE = auto()
