"""Authoritative per-cell passability.

:class:`TileMap` is a persistent mapping from :class:`Position` to
:class:`TerrainKind`. ``insert`` returns a new map (last write wins), so the
map grows only while the generator threads it through its passes; once it
sits on a :class:`tile_world.state.WorldState` nothing can mutate it.

A coordinate absent from the map is treated exactly like ``UNPASSABLE``:
queries fail closed to blocking, never open to movement.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tile_world.components import Position
from tile_world.types import TerrainKind


@dataclass(frozen=True)
class TileMap:
    """Immutable coordinate -> terrain mapping.

    Attributes:
        tiles (PMap[Position, TerrainKind]): Backing persistent map.
    """

    tiles: PMap[Position, TerrainKind] = pmap()

    def insert(self, pos: Position, kind: TerrainKind) -> "TileMap":
        """Return a map with ``pos`` set to ``kind``, replacing any prior entry."""
        return TileMap(tiles=self.tiles.set(pos, kind))

    def is_passable(self, pos: Position) -> bool:
        """True iff an entry exists at ``pos`` and it is ``PASSABLE``."""
        return self.tiles.get(pos) == TerrainKind.PASSABLE

    def kind_at(self, pos: Position) -> Optional[TerrainKind]:
        """Stored kind at ``pos`` or ``None`` when the cell was never inserted."""
        return self.tiles.get(pos)

    def passable_positions(self) -> Iterator[Position]:
        for pos, kind in self.tiles.items():
            if kind == TerrainKind.PASSABLE:
                yield pos

    def __contains__(self, pos: object) -> bool:
        return pos in self.tiles

    def __len__(self) -> int:
        return len(self.tiles)
