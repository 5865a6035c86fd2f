"""Rendering appearance component.

``Appearance`` controls how records stack when several occupy one cell.
Higher ``layer`` values draw on top; among equal layers the record spawned
later draws on top (entity ids are allocated in spawn order).

``highlighted`` is toggled by the hover helpers in
:mod:`tile_world.renderer.hover` and never read by generation or movement.
"""

from dataclasses import dataclass
from enum import StrEnum, auto


class AppearanceName(StrEnum):
    """Enumeration of visual categories."""

    GROUND = auto()
    ROCK = auto()
    WATER = auto()
    PLAYER = auto()


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Symbolic appearance identifier.
        layer: Depth / z order used for stacking.
        highlighted: True while a pointer hovers over the record.
    """

    name: AppearanceName
    layer: int = 0
    highlighted: bool = False
