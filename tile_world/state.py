"""Core immutable ECS ``WorldState`` dataclass.

This module defines the frozen :class:`WorldState` object that represents
the whole world at a single step: the passability map produced by
generation, the generated tile records, and the controlled agent. Systems
are pure functions that take a previous ``WorldState`` plus inputs (e.g. a
set of actions) and return a *new* ``WorldState``; no mutation happens
in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* ``tile_map`` is written only by :mod:`tile_world.levels.world`. Movement
    reads it and always hands it through untouched.
* The ``prev_position`` store is populated by
    :func:`tile_world.systems.position.position_system` at the start of each
    step so consumers can tell which entities moved.

See :mod:`tile_world.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tile_world.config import NOISE_SEED, TILE_SIZE
from tile_world.components import Agent, Appearance, Position, Terrain
from tile_world.entity import Entity
from tile_world.tile_map import TileMap
from tile_world.types import EntityID


@dataclass(frozen=True)
class WorldState:
    """Immutable ECS world state.

    Instances are *value objects*; every transition creates a new
    ``WorldState``. Only include persistent data here (no open handles or
    caches).

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        tile_map (TileMap): Authoritative passability per cell.
        seed (int): Noise seed the world was generated from.
        tile_size (float): World-space size of a cell (renderer boundary only).
        entity (PMap[EntityID, Entity]): Registry of allocated entities.
        agent (PMap[EntityID, Agent]): Controllable entity marker components.
        appearance (PMap[EntityID, Appearance]): Rendering metadata.
        position (PMap[EntityID, Position]): Current grid position of entities.
        terrain (PMap[EntityID, Terrain]): Terrain classification of tile records.
        prev_position (PMap[EntityID, Position]): Positions before the current step.
        turn (int): Step counter (0-based).
    """

    width: int
    height: int
    tile_map: TileMap = TileMap()
    seed: int = NOISE_SEED
    tile_size: float = TILE_SIZE

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    position: PMap[EntityID, Position] = pmap()
    terrain: PMap[EntityID, Terrain] = pmap()
    ## Extra
    prev_position: PMap[EntityID, Position] = pmap()

    # Status
    turn: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse summary of non-empty fields, for diagnostics.

        Component stores are reported by size rather than dumped, since a
        default world holds several thousand tile records.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, TileMap):
                value = len(value)
            elif isinstance(value, type(pmap())):
                if len(value) == 0:
                    continue
                value = len(value)
            description = description.set(field, value)
        return description
