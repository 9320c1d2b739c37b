"""
Elevation field generation.

The field layers four OpenSimplex noise samples:

- a broad base shape that decides where the continents are,
- a medium-frequency secondary undulation,
- fine jitter whose intensity is itself a smooth noise field, so rough
  coastlines and mountain ranges appear in some regions and not others.

Values >= 0 are land, values < 0 are water.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import structlog
from opensimplex import OpenSimplex

from ..utils.random import draw_seed

logger = structlog.get_logger()


@dataclass
class ElevationConfig:
    """Noise layering parameters. Scales are in pixels per noise unit."""

    base_scale: float = 100.0
    base_offset: float = 0.2
    secondary_scale: float = 20.0
    secondary_weight: float = 0.15
    jitter_scale: float = 15.0
    jitter_amount_scale: float = 50.0
    jitter_amount_weight: float = 0.6


def _sample(noise: OpenSimplex, xs: np.ndarray, ys: np.ndarray, scale: float) -> np.ndarray:
    """Evaluate noise over the pixel grid, returning an array indexed [x, y]."""
    # noise2array returns rows by y, columns by x
    return noise.noise2array(xs / scale, ys / scale).T


def generate_elevations(
    width: int,
    height: int,
    rng: np.random.Generator,
    config: Optional[ElevationConfig] = None,
) -> np.ndarray:
    """
    Generate a read-only elevation field.

    Four noise generators are seeded from ``rng`` in a fixed order (base,
    secondary, jitter, jitter amount), so the field is a pure function of the
    random source state and the dimensions.

    Args:
        width: Field width in pixels
        height: Field height in pixels
        rng: Random source for this generation call
        config: Noise layering parameters

    Returns:
        float64 array of shape (width, height)
    """
    config = config or ElevationConfig()

    base_noise = OpenSimplex(draw_seed(rng))
    secondary_noise = OpenSimplex(draw_seed(rng))
    jitter_noise = OpenSimplex(draw_seed(rng))
    jitter_amount_noise = OpenSimplex(draw_seed(rng))

    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)

    base = _sample(base_noise, xs, ys, config.base_scale) + config.base_offset
    secondary = _sample(secondary_noise, xs, ys, config.secondary_scale) * config.secondary_weight
    jitter = _sample(jitter_noise, xs, ys, config.jitter_scale)
    jitter_amount = (
        _sample(jitter_amount_noise, xs, ys, config.jitter_amount_scale)
        * config.jitter_amount_weight
    )

    elevations = np.ascontiguousarray(base + secondary + jitter * jitter_amount, dtype=np.float64)
    elevations.flags.writeable = False

    logger.debug(
        "Generated elevation field",
        width=width,
        height=height,
        land_fraction=float(np.mean(elevations >= 0)) if elevations.size else 0.0,
    )
    return elevations
