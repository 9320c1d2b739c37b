"""
Landmark tile selection.

Downsamples the pixel elevation field into 8x8 tiles, keeps the tiles with
enough land to hold a landmark, and buckets them into coarse partitions so
placement can be spread across the map.
"""

from typing import Dict, List, Tuple

import numpy as np
import structlog

from .tile import TILE_SIZE, Tile

logger = structlog.get_logger()

PartitionKey = Tuple[int, int]

# Strict threshold: a tile needs more than this many land pixels
MIN_LAND_PIXELS = 20


def get_valid_landmark_tiles(
    elevations: np.ndarray,
    min_land_pixels: int = MIN_LAND_PIXELS,
    tile_size: int = TILE_SIZE,
) -> List[Tile]:
    """
    Find the tiles with enough land pixels to hold a landmark.

    Remainder pixels beyond the last whole tile are ignored. Tiles are
    returned in x-major scan order (all tiles of column 0, then column 1...),
    which later shuffles depend on for determinism.

    Args:
        elevations: Elevation field indexed [x, y]
        min_land_pixels: A tile is valid if it has more land pixels than this
        tile_size: Tile edge in pixels

    Returns:
        List of valid tiles
    """
    tiles_width = elevations.shape[0] // tile_size
    tiles_height = elevations.shape[1] // tile_size
    if tiles_width == 0 or tiles_height == 0:
        return []

    land = elevations[: tiles_width * tile_size, : tiles_height * tile_size] >= 0
    land_counts = land.reshape(tiles_width, tile_size, tiles_height, tile_size).sum(axis=(1, 3))

    valid = [Tile(int(x), int(y)) for x, y in np.argwhere(land_counts > min_land_pixels)]

    logger.debug(
        "Selected landmark tiles",
        valid=len(valid),
        total=tiles_width * tiles_height,
    )
    return valid


def partition_tiles_by_location(
    partition_width: int,
    partition_height: int,
    tiles: List[Tile],
) -> Dict[PartitionKey, List[Tile]]:
    """
    Group tiles into partitions on a coarse grid.

    A tile falls into partition ``(x // partition_width, y // partition_height)``.
    Each bucket keeps the input order of its tiles; callers must not rely on
    the iteration order of the buckets themselves.

    Args:
        partition_width: Partition width in tiles
        partition_height: Partition height in tiles
        tiles: Tiles to group

    Returns:
        Mapping of partition key to its tiles
    """
    if partition_width <= 0 or partition_height <= 0:
        raise ValueError("Partition dimensions must be positive")

    partitions: Dict[PartitionKey, List[Tile]] = {}
    for tile in tiles:
        key = (tile.x // partition_width, tile.y // partition_height)
        partitions.setdefault(key, []).append(tile)

    logger.debug("Partitioned landmark tiles", partitions=len(partitions), tiles=len(tiles))
    return partitions
