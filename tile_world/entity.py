"""Entity primitives & ID generation.

The world models each *thing* (a tile record or the agent) as an
``EntityID`` (an integer) plus zero or more component dataclasses stored in
persistent maps on :class:`tile_world.state.WorldState`.

IDs are allocated from a generator owned by whoever builds the state (see
:func:`tile_world.levels.world.generate_world`), not from a process-wide
counter. Two generation runs with the same parameters therefore produce
equal states, and ids double as spawn order.

Examples
--------
>>> from tile_world.entity import entity_id_generator
>>> ids = entity_id_generator()
>>> next(ids), next(ids)
(0, 1)
"""

from dataclasses import dataclass
from typing import Iterator

from tile_world.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Marker for an allocated entity id (no fields)."""

    pass


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1
