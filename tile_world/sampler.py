"""Deterministic coherent noise.

:class:`NoiseSampler` wraps ``noise.pnoise2`` (single-octave 2D Perlin
noise) behind a fixed seed and scale. Integer cell coordinates are divided
by ``scale`` before sampling so neighbouring cells receive smoothly
correlated values; this spatial coherence is what gives generated terrain
its blob-like features.

Raw ``pnoise2`` output stays within about +-0.707 (the 2D Perlin bound of
sqrt(0.5)). It is rescaled by sqrt(2) and clamped so the field spans [-1, 1]
and both feature thresholds can be crossed.

``Sampler`` is the structural type the world generator depends on, which
lets tests inject hand-written fields.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from noise import pnoise2

from tile_world.config import NOISE_SCALE, NOISE_SEED

PERLIN_NORMALIZATION = math.sqrt(2.0)


class Sampler(Protocol):
    """Anything mapping an integer cell to a scalar in roughly [-1, 1]."""

    def sample(self, x: int, y: int) -> float: ...


@dataclass(frozen=True)
class NoiseSampler:
    """Seeded, scaled 2D Perlin noise.

    Attributes:
        seed: Permutation base handed to ``pnoise2``.
        scale: Divisor applied to each coordinate before sampling.
    """

    seed: int = NOISE_SEED
    scale: float = NOISE_SCALE

    def sample(self, x: int, y: int) -> float:
        """Return the noise value at cell ``(x, y)``.

        Pure: identical arguments always give a bit-identical result.
        """
        value = pnoise2(x / self.scale, y / self.scale, base=self.seed)
        return max(-1.0, min(1.0, value * PERLIN_NORMALIZATION))
