"""Position component.

Immutable integer grid coordinates. Stored in ``WorldState.position`` keyed
by entity id and used directly as the key of
:class:`tile_world.tile_map.TileMap`. The ``prev_position`` store records the
position held before the current step so move updates can be detected.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (grows to the right).
        y: Row index (grows upward).
    """

    x: int
    y: int
