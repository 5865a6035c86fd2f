"""Renderable records and world-space conversion.

A :class:`TileRecord` is the write-only ``(entity, cell, layer, visual
category, terrain kind)`` tuple the generator emits for every feature it
places. Records are ordered bottom-to-top: by layer, then by spawn order, so
for a cell above both thresholds the water record comes after the rock
record on the same layer.

World-space points are ``grid * tile_size`` on x and y; z is the record's
layer (tiles) or the player layer (agent).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from tile_world.components import AppearanceName, Position
from tile_world.config import PLAYER_LAYER
from tile_world.state import WorldState
from tile_world.types import EntityID, TerrainKind


@dataclass(frozen=True)
class WorldPoint:
    """World-space coordinate used by the renderer."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class TileRecord:
    """One renderable tile feature.

    Attributes:
        entity_id: Entity the record belongs to (stable per generation run).
        position: Grid cell.
        layer: Depth order; higher draws on top.
        name: Visual category (ground, rock, water).
        kind: Passability the feature stands for.
    """

    entity_id: EntityID
    position: Position
    layer: int
    name: AppearanceName
    kind: TerrainKind


def world_position(pos: Position, tile_size: float, z: float = 0.0) -> WorldPoint:
    """Convert a grid cell to its world-space centre."""
    return WorldPoint(x=pos.x * tile_size, y=pos.y * tile_size, z=z)


def tile_records(state: WorldState) -> List[TileRecord]:
    """All generated tile records, ordered by layer then spawn order."""
    records = [
        TileRecord(
            entity_id=eid,
            position=state.position[eid],
            layer=state.appearance[eid].layer,
            name=state.appearance[eid].name,
            kind=terrain.kind,
        )
        for eid, terrain in state.terrain.items()
    ]
    records.sort(key=lambda record: (record.layer, record.entity_id))
    return records


def agent_world_position(
    state: WorldState, agent_id: Optional[EntityID] = None
) -> Optional[WorldPoint]:
    """World-space position of the agent, or ``None`` when there is none."""
    if agent_id is None:
        agent_id = next(iter(state.agent.keys()), None)
    if agent_id is None or agent_id not in state.position:
        return None
    return world_position(state.position[agent_id], state.tile_size, PLAYER_LAYER)


def position_updates(state: WorldState) -> Dict[EntityID, WorldPoint]:
    """Entities whose position changed during the last step, in world space.

    Empty after a blocked or zero-direction step. Only entities present in
    ``prev_position`` are considered, so a freshly generated world reports
    nothing until the first step.
    """
    updates: Dict[EntityID, WorldPoint] = {}
    for eid, prev in state.prev_position.items():
        current = state.position.get(eid)
        if current is None or current == prev:
            continue
        appearance = state.appearance.get(eid)
        z = appearance.layer if appearance is not None else 0
        updates[eid] = world_position(current, state.tile_size, z)
    return updates
