"""Command line entry point.

Generates a world, optionally replays a sequence of key presses against it
and prints an ASCII view (north up)::

    tile-world --seed 12 --size 32 --moves "up,up+right,left"

Each comma-separated group is one step; ``+`` joins actions pressed in the
same step. Groups accept action names (``up``) or bound key names (``w``).
"""

import argparse
import logging
import sys
from typing import Dict, FrozenSet, List, Optional, Sequence

from tile_world.actions import Action
from tile_world.components import AppearanceName, Position
from tile_world.config import (
    GRID_SIZE,
    NOISE_SCALE,
    NOISE_SEED,
    PLAYER_LAYER,
    WorldConfig,
)
from tile_world.inputs import KEY_BINDINGS
from tile_world.levels.world import generate_world
from tile_world.renderer.records import tile_records, world_position
from tile_world.state import WorldState
from tile_world.step import step

logger = logging.getLogger(__name__)

GLYPHS: Dict[AppearanceName, str] = {
    AppearanceName.GROUND: ".",
    AppearanceName.ROCK: "#",
    AppearanceName.WATER: "~",
    AppearanceName.PLAYER: "@",
}


def parse_moves(text: str) -> List[FrozenSet[Action]]:
    """Parse ``"up,up+right"`` into per-step action sets.

    Raises:
        ValueError: If a token is neither an action nor a bound key.
    """
    steps: List[FrozenSet[Action]] = []
    for group in text.split(","):
        group = group.strip()
        if not group:
            continue
        actions = set()
        for token in group.split("+"):
            token = token.strip().lower()
            action = KEY_BINDINGS.get(token)
            if action is None:
                try:
                    action = Action(token)
                except ValueError:
                    raise ValueError(f"Unknown move {token!r}") from None
            actions.add(action)
        steps.append(frozenset(actions))
    return steps


def render_ascii(state: WorldState) -> str:
    """Topmost glyph per cell, highest row first."""
    top: Dict[Position, AppearanceName] = {}
    for record in tile_records(state):
        top[record.position] = record.name
    for eid in state.agent:
        pos = state.position.get(eid)
        if pos is not None:
            top[pos] = AppearanceName.PLAYER

    rows = []
    for y in reversed(range(state.height)):
        rows.append(
            "".join(
                GLYPHS[top[Position(x, y)]] if Position(x, y) in top else " "
                for x in range(state.width)
            )
        )
    return "\n".join(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tile-world",
        description="Generate a noise-driven tile world and walk it.",
    )
    parser.add_argument("--seed", type=int, default=NOISE_SEED, help="Noise seed")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="Grid side length")
    parser.add_argument("--scale", type=float, default=NOISE_SCALE, help="Noise scale")
    parser.add_argument(
        "--moves",
        default="",
        help='Comma-separated steps, e.g. "up,up+right,a" (default: none)',
    )
    parser.add_argument(
        "--no-map", action="store_true", help="Do not print the ASCII map"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = WorldConfig(
            grid_size=args.size, noise_scale=args.scale, noise_seed=args.seed
        )
        moves = parse_moves(args.moves)
    except ValueError as exc:
        parser.error(str(exc))

    state = generate_world(config)
    logger.debug("Generated world: %s", dict(state.description))
    logger.debug("Replaying %d steps", len(moves))
    for actions in moves:
        state = step(state, actions)

    if not args.no_map:
        print(render_ascii(state))

    agent_id = next(iter(state.agent.keys()))
    pos = state.position[agent_id]
    point = world_position(pos, state.tile_size, PLAYER_LAYER)
    print(
        f"agent at ({pos.x}, {pos.y}) "
        f"world=({point.x:g}, {point.y:g}) after {state.turn} steps"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
