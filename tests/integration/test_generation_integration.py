from collections import defaultdict
from typing import Dict, List

import pytest

from tile_world.components import AppearanceName, Position
from tile_world.config import PLAYER_LAYER, WorldConfig
from tile_world.levels.world import generate_world
from tile_world.moves import DIRECTIONS
from tile_world.sampler import NoiseSampler
from tile_world.state import WorldState
from tile_world.step import step
from tile_world.types import EntityID, TerrainKind
from tests.test_utils import StubSampler

GROUND = AppearanceName.GROUND
ROCK = AppearanceName.ROCK
WATER = AppearanceName.WATER


@pytest.fixture(scope="module")
def default_world() -> WorldState:
    return generate_world()


def _names_by_cell(state: WorldState) -> Dict[Position, List[AppearanceName]]:
    cells: Dict[Position, List[AppearanceName]] = defaultdict(list)
    for eid in sorted(state.terrain):
        cells[state.position[eid]].append(state.appearance[eid].name)
    return cells


def test_every_cell_is_populated(default_world: WorldState) -> None:
    assert len(default_world.tile_map) == 64 * 64
    for x in range(64):
        for y in range(64):
            assert Position(x, y) in default_world.tile_map


def test_generation_is_deterministic(default_world: WorldState) -> None:
    assert generate_world() == default_world


def test_thresholds_decide_final_kind(default_world: WorldState) -> None:
    sampler = NoiseSampler(seed=12, scale=10.3)
    for x in range(64):
        for y in range(64):
            value = sampler.sample(x, y)
            kind = default_world.tile_map.kind_at(Position(x, y))
            if value > 0.3:
                assert kind == TerrainKind.UNPASSABLE
            else:
                assert kind == TerrainKind.PASSABLE


def test_default_world_has_rock_and_ground(default_world: WorldState) -> None:
    kinds = set(default_world.tile_map.tiles.values())
    assert kinds == {TerrainKind.PASSABLE, TerrainKind.UNPASSABLE}


def test_default_world_has_water_on_rock(default_world: WorldState) -> None:
    cells = _names_by_cell(default_world)
    water_cells = [
        pos for pos, names in cells.items() if AppearanceName.WATER in names
    ]
    assert water_cells
    for pos in water_cells:
        assert cells[pos] == [
            AppearanceName.GROUND,
            AppearanceName.ROCK,
            AppearanceName.WATER,
        ]
        assert default_world.tile_map.kind_at(pos) == TerrainKind.UNPASSABLE


def test_water_follows_real_samples(default_world: WorldState) -> None:
    sampler = NoiseSampler(seed=12, scale=10.3)
    cells = _names_by_cell(default_world)
    for pos, names in cells.items():
        has_water = sampler.sample(pos.x, pos.y) > 0.8
        assert (AppearanceName.WATER in names) == has_water


def test_every_cell_has_ground_record(default_world: WorldState) -> None:
    cells = _names_by_cell(default_world)
    assert len(cells) == 64 * 64
    assert all(names[0] == AppearanceName.GROUND for names in cells.values())


def test_agent_starts_at_center(default_world: WorldState) -> None:
    agent_id: EntityID = next(iter(default_world.agent))
    assert default_world.position[agent_id] == Position(32, 32)
    assert default_world.appearance[agent_id].layer == PLAYER_LAYER
    assert agent_id not in default_world.terrain


def test_water_stacks_on_rock() -> None:
    sampler = StubSampler(values={(1, 1): 0.9, (2, 2): 0.5})
    state = generate_world(WorldConfig(grid_size=4), sampler=sampler)
    cells = _names_by_cell(state)

    assert cells[Position(1, 1)] == [
        AppearanceName.GROUND,
        AppearanceName.ROCK,
        AppearanceName.WATER,
    ]
    assert cells[Position(2, 2)] == [AppearanceName.GROUND, AppearanceName.ROCK]
    assert cells[Position(0, 0)] == [AppearanceName.GROUND]

    assert state.tile_map.kind_at(Position(1, 1)) == TerrainKind.UNPASSABLE
    assert state.tile_map.kind_at(Position(2, 2)) == TerrainKind.UNPASSABLE
    assert state.tile_map.kind_at(Position(0, 0)) == TerrainKind.PASSABLE


def test_rock_and_water_share_layer() -> None:
    sampler = StubSampler(values={(0, 0): 0.95})
    state = generate_world(WorldConfig(grid_size=2), sampler=sampler)
    layers = {
        state.appearance[eid].name: state.appearance[eid].layer
        for eid in state.terrain
        if state.position[eid] == Position(0, 0)
    }
    assert layers == {
        AppearanceName.GROUND: 0,
        AppearanceName.ROCK: 1,
        AppearanceName.WATER: 1,
    }


@pytest.mark.parametrize(
    "value, kind, names",
    [
        (-1.0, TerrainKind.PASSABLE, [GROUND]),
        (0.3, TerrainKind.PASSABLE, [GROUND]),
        (0.30001, TerrainKind.UNPASSABLE, [GROUND, ROCK]),
        (0.8, TerrainKind.UNPASSABLE, [GROUND, ROCK]),
        (0.80001, TerrainKind.UNPASSABLE, [GROUND, ROCK, WATER]),
    ],
)
def test_thresholds_are_strict(
    value: float, kind: TerrainKind, names: List[AppearanceName]
) -> None:
    state = generate_world(
        WorldConfig(grid_size=1), sampler=StubSampler(values={(0, 0): value})
    )
    assert state.tile_map.kind_at(Position(0, 0)) == kind
    assert _names_by_cell(state)[Position(0, 0)] == names


def test_each_cell_is_sampled_twice() -> None:
    sampler = StubSampler()
    generate_world(WorldConfig(grid_size=3), sampler=sampler)
    assert sampler.calls == {(x, y): 2 for x in range(3) for y in range(3)}


def test_agent_may_spawn_on_rock() -> None:
    sampler = StubSampler(default=0.5)
    state = generate_world(WorldConfig(grid_size=4), sampler=sampler)
    agent_id = next(iter(state.agent))
    assert state.position[agent_id] == Position(2, 2)
    assert not state.tile_map.is_passable(Position(2, 2))


def test_moves_on_generated_world_follow_tile_map(default_world: WorldState) -> None:
    agent_id = next(iter(default_world.agent))
    start = default_world.position[agent_id]
    for action, (dx, dy) in DIRECTIONS.items():
        moved = step(default_world, {action})
        target = Position(start.x + dx, start.y + dy)
        if default_world.tile_map.is_passable(target):
            assert moved.position[agent_id] == target
        else:
            assert moved.position[agent_id] == start
        assert moved.tile_map is default_world.tile_map
