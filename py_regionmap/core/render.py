"""
Region map rendering.

Turns an elevation field plus city and route tiles into an RGBA image.
Rendering is a pure function of its inputs and never feeds back into
generation.
"""

from typing import Iterable, Optional

import numpy as np

from .tile import Tile

# Palette indices: two water hues, then land bands from lowest to highest
WATER_0, WATER_1, LAND_0, LAND_1, LAND_2, LAND_3, LAND_4 = range(7)

BASE_COLORS = np.array(
    [
        (152, 208, 248, 255),  # water, even rows
        (160, 176, 248, 255),  # water, odd rows
        (0, 112, 0, 255),
        (56, 168, 8, 255),
        (96, 208, 0, 255),
        (168, 232, 48, 255),
        (208, 248, 120, 255),
    ],
    dtype=np.uint8,
)

ROUTE_COLORS = np.array(
    [
        (72, 152, 224, 255),
        (40, 128, 224, 255),
        (224, 160, 0, 255),
        (232, 184, 56, 255),
        (240, 208, 80, 255),
        (232, 224, 112, 255),
        (232, 224, 168, 255),
    ],
    dtype=np.uint8,
)

CITY_COLOR = np.array((255, 0, 0, 255), dtype=np.uint8)

# Lower bounds of land bands 1..4; anything above 0 is at least band 0
LAND_THRESHOLDS = (0.35, 0.60, 0.85, 1.10)


def classify_elevations(elevations: np.ndarray) -> np.ndarray:
    """
    Map each pixel to a palette index.

    Args:
        elevations: Elevation field indexed [x, y]

    Returns:
        uint8 array of palette indices, indexed [y, x]
    """
    field = elevations.T
    land_band = np.searchsorted(LAND_THRESHOLDS, field, side="left")
    indices = (LAND_0 + land_band).astype(np.uint8)

    water = field <= 0
    odd_rows = (np.arange(field.shape[0]) % 2 == 1)[:, np.newaxis]
    indices[water] = WATER_0
    indices[water & odd_rows] = WATER_1
    return indices


def _tile_slices(tile: Tile, width: int, height: int):
    x0, y0, x1, y1 = tile.pixel_bounds()
    x0, y0 = max(x0, 0), max(y0, 0)
    x1, y1 = min(x1, width), min(y1, height)
    if x0 >= x1 or y0 >= y1:
        return None
    return slice(y0, y1), slice(x0, x1)


def render_region_map(
    elevations: np.ndarray,
    cities: Optional[Iterable[Tile]] = None,
    routes: Optional[Iterable[Tile]] = None,
) -> np.ndarray:
    """
    Render a region map to an RGBA image.

    Route tiles swap every pixel's color for the matching route color, then
    city tiles are painted solid red on top.

    Args:
        elevations: Elevation field indexed [x, y]
        cities: City tiles
        routes: Route tiles

    Returns:
        uint8 array of shape (height, width, 4)
    """
    width, height = elevations.shape
    indices = classify_elevations(elevations)
    image = BASE_COLORS[indices]

    for tile in routes or ():
        block = _tile_slices(tile, width, height)
        if block is not None:
            image[block] = ROUTE_COLORS[indices[block]]

    for tile in cities or ():
        block = _tile_slices(tile, width, height)
        if block is not None:
            image[block] = CITY_COLOR

    return image
