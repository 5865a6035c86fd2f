"""tile_world.components
=================================

Aggregate import surface for the component dataclasses stored on
:class:`tile_world.state.WorldState`.

The symbols re-exported here are curated so downstream code can import
components from a single place, e.g.::

    from tile_world.components import Position, Appearance, Terrain

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are manipulated by systems during a step.
"""

from .properties import Agent
from .properties import Appearance, AppearanceName
from .properties import Position
from .properties import Terrain

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Position",
    "Terrain",
]
