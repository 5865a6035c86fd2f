from tile_world.components import AppearanceName, Position
from tile_world.config import WorldConfig
from tile_world.levels.world import generate_world
from tile_world.renderer.hover import (
    pointer_out_system,
    pointer_over_system,
    topmost_at,
)
from tests.test_utils import StubSampler


def _world():
    sampler = StubSampler(values={(0, 0): 0.9, (1, 0): 0.5})
    return generate_world(WorldConfig(grid_size=2), sampler=sampler)


def test_topmost_record() -> None:
    state = _world()
    expected = {
        Position(0, 0): AppearanceName.WATER,
        Position(1, 0): AppearanceName.ROCK,
        Position(0, 1): AppearanceName.GROUND,
    }
    for pos, name in expected.items():
        eid = topmost_at(state, pos)
        assert eid is not None
        assert state.appearance[eid].name == name


def test_topmost_skips_agent_and_empty_space() -> None:
    state = _world()
    agent_id = next(iter(state.agent))
    hit = topmost_at(state, state.position[agent_id])
    assert hit is not None and hit != agent_id
    assert topmost_at(state, Position(5, 5)) is None


def test_pointer_over_and_out_toggle_highlight() -> None:
    state = _world()
    eid = topmost_at(state, Position(0, 1))
    assert eid is not None

    hovered = pointer_over_system(state, eid)
    assert hovered.appearance[eid].highlighted
    assert hovered.appearance[eid].name == state.appearance[eid].name

    restored = pointer_out_system(hovered, eid)
    assert not restored.appearance[eid].highlighted
    assert restored.appearance == state.appearance


def test_hover_leaves_logic_untouched() -> None:
    state = _world()
    eid = topmost_at(state, Position(0, 0))
    assert eid is not None
    hovered = pointer_over_system(state, eid)
    assert hovered.tile_map is state.tile_map
    assert hovered.position is state.position


def test_hover_unknown_entity_is_noop() -> None:
    state = _world()
    assert pointer_over_system(state, 10_000) is state
    assert pointer_out_system(state, 10_000) is state
