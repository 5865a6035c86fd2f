"""Construction-time world parameters.

These are fixed inputs to a single deterministic generation run, not
runtime flags. The module constants are the defaults; :class:`WorldConfig`
bundles them so tests and the CLI can build smaller or differently seeded
worlds.
"""

import math
from dataclasses import dataclass

GRID_SIZE = 64
NOISE_SCALE = 10.3
NOISE_SEED = 12
TILE_SIZE = 12.0

ROCK_THRESHOLD = 0.3
WATER_THRESHOLD = 0.8

GROUND_LAYER = 0
FEATURE_LAYER = 1
PLAYER_LAYER = 10


@dataclass(frozen=True)
class WorldConfig:
    """Parameters of one generation run.

    Attributes:
        grid_size (int): Side length of the square grid in cells.
        noise_scale (float): Divisor applied to integer coordinates before sampling.
        noise_seed (int): Seed (permutation base) of the Perlin noise.
        tile_size (float): World-space size of one cell (renderer boundary only).
        rock_threshold (float): Noise value above which a cell gets a rock.
        water_threshold (float): Noise value above which a cell gets water.
    """

    grid_size: int = GRID_SIZE
    noise_scale: float = NOISE_SCALE
    noise_seed: int = NOISE_SEED
    tile_size: float = TILE_SIZE
    rock_threshold: float = ROCK_THRESHOLD
    water_threshold: float = WATER_THRESHOLD

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.noise_scale == 0:
            raise ValueError("noise_scale must be non-zero")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        for name in ("rock_threshold", "water_threshold"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")

    @property
    def center(self) -> tuple[int, int]:
        """Starting cell of the agent (integer floor of half the grid)."""
        return (self.grid_size // 2, self.grid_size // 2)
