"""Terrain component.

Carried by every generated tile record and holding the passability its
feature stands for (ground is passable, rock and water are not). This is
descriptive data for consumers; the authoritative per-cell answer always
comes from :class:`tile_world.tile_map.TileMap`.
"""

from dataclasses import dataclass

from tile_world.types import TerrainKind


@dataclass(frozen=True)
class Terrain:
    """Terrain classification of a tile record.

    Attributes:
        kind: Passability the feature represents.
    """

    kind: TerrainKind
