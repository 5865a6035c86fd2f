"""Noise-driven world generation.

:func:`generate_world` visits every cell of a square grid once, samples the
noise field, and layers features on top of each other:

* every cell receives a **ground** record (layer 0) and is marked passable;
* above the rock threshold a **rock** record (layer 1) is stacked and the
    cell is overwritten as unpassable;
* the cell is sampled a second time and above the water threshold a
    **water** record (layer 1, spawned after the rock) is stacked and the
    cell is overwritten as unpassable again.

Both checks read the same noise value, so every water cell is also a rock
cell and the second overwrite leaves the tile map unchanged; only the visual
stack differs. Generation is deterministic for a given config: entity ids
come from a run-local counter and the sampler is pure.
"""

import logging
from collections import Counter
from dataclasses import replace
from typing import Dict, Iterator, Optional, Tuple

from tile_world.components import (
    Agent,
    Appearance,
    AppearanceName,
    Position,
    Terrain,
)
from tile_world.config import (
    FEATURE_LAYER,
    GROUND_LAYER,
    PLAYER_LAYER,
    WorldConfig,
)
from tile_world.entity import Entity, entity_id_generator
from tile_world.sampler import NoiseSampler, Sampler
from tile_world.state import WorldState
from tile_world.types import EntityID, TerrainKind

logger = logging.getLogger(__name__)

FeatureSpec = Tuple[int, TerrainKind]

FEATURES: Dict[AppearanceName, FeatureSpec] = {
    AppearanceName.GROUND: (GROUND_LAYER, TerrainKind.PASSABLE),
    AppearanceName.ROCK: (FEATURE_LAYER, TerrainKind.UNPASSABLE),
    AppearanceName.WATER: (FEATURE_LAYER, TerrainKind.UNPASSABLE),
}


def place_tile(
    state: WorldState,
    eid: EntityID,
    position: Tuple[int, int],
    name: AppearanceName,
) -> WorldState:
    """Spawn one tile record and overwrite the cell's tile map entry.

    The record's layer and terrain kind come from :data:`FEATURES`.
    """
    layer, kind = FEATURES[name]
    pos = Position(*position)
    return replace(
        state,
        tile_map=state.tile_map.insert(pos, kind),
        entity=state.entity.set(eid, Entity()),
        position=state.position.set(eid, pos),
        appearance=state.appearance.set(eid, Appearance(name=name, layer=layer)),
        terrain=state.terrain.set(eid, Terrain(kind=kind)),
    )


def place_agent(
    state: WorldState,
    eid: EntityID,
    position: Tuple[int, int],
) -> WorldState:
    """Spawn the controllable agent.

    The starting cell is not checked for passability; an agent spawned on
    rock simply cannot leave until an adjacent cell is passable.
    """
    return replace(
        state,
        entity=state.entity.set(eid, Entity()),
        agent=state.agent.set(eid, Agent()),
        position=state.position.set(eid, Position(*position)),
        appearance=state.appearance.set(
            eid, Appearance(name=AppearanceName.PLAYER, layer=PLAYER_LAYER)
        ),
    )


def populate_cell(
    state: WorldState,
    ids: Iterator[EntityID],
    sampler: Sampler,
    config: WorldConfig,
    x: int,
    y: int,
) -> WorldState:
    """Apply the layering rules to cell ``(x, y)``."""
    noise_val = sampler.sample(x, y)
    state = place_tile(state, next(ids), (x, y), AppearanceName.GROUND)
    if noise_val > config.rock_threshold:
        state = place_tile(state, next(ids), (x, y), AppearanceName.ROCK)

    # Sampled again; a pure sampler returns the value used for the rock check.
    noise_val = sampler.sample(x, y)
    if noise_val > config.water_threshold:
        state = place_tile(state, next(ids), (x, y), AppearanceName.WATER)
    return state


def generate_world(
    config: Optional[WorldConfig] = None,
    sampler: Optional[Sampler] = None,
) -> WorldState:
    """Build a fully populated world.

    Args:
        config (WorldConfig | None): Generation parameters; defaults to
            :class:`WorldConfig` defaults (64x64, seed 12, scale 10.3).
        sampler (Sampler | None): Noise source. Defaults to a
            :class:`NoiseSampler` built from ``config``.

    Returns:
        WorldState: State with every cell of the grid inserted into the tile
            map, one record per placed feature, and the agent at the centre.
    """
    if config is None:
        config = WorldConfig()
    if sampler is None:
        sampler = NoiseSampler(seed=config.noise_seed, scale=config.noise_scale)

    size = config.grid_size
    state = WorldState(
        width=size,
        height=size,
        seed=config.noise_seed,
        tile_size=config.tile_size,
    )
    ids = entity_id_generator()

    for x in range(size):
        for y in range(size):
            state = populate_cell(state, ids, sampler, config, x, y)

    state = place_agent(state, next(ids), config.center)

    features = Counter(appearance.name for appearance in state.appearance.values())
    logger.info(
        "Generated %dx%d world (seed=%d): ground=%d rock=%d water=%d passable=%d",
        size,
        size,
        config.noise_seed,
        features[AppearanceName.GROUND],
        features[AppearanceName.ROCK],
        features[AppearanceName.WATER],
        sum(1 for _ in state.tile_map.passable_positions()),
    )
    return state
