"""
Settlement (city) placement.

Cities are placed one slot at a time, cycling through the landmark partitions
in a shuffled order so they spread across the map. Placement is best effort:
each slot gets a bounded number of attempts and is skipped if they all fail,
so fewer cities than requested is a normal outcome.

Constraints on a city tile:
1. Odd x and odd y, so routes laid on even rows/columns never run alongside
   a city and cities are never adjacent
2. Inside the placement bounds, clear of the map edges covered by the UI
3. Outside the bottom-right and top-right UI exclusion boxes
4. Not already taken by another city
"""

from typing import Dict, List, Optional, Set

import numpy as np
import structlog
from pydantic import BaseModel, ConfigDict, Field

from .landmarks import MIN_LAND_PIXELS, PartitionKey
from .tile import TILE_SIZE, Tile

logger = structlog.get_logger()


class SettlementOptions(BaseModel):
    """Settlement placement options. Defaults match the standard UI layout."""

    model_config = ConfigDict(frozen=True)

    tile_size: int = Field(default=TILE_SIZE, description="Tile edge in pixels")
    min_land_pixels: int = Field(
        default=MIN_LAND_PIXELS, description="A landmark tile needs more land pixels than this"
    )

    # Partitioning
    partition_width: int = Field(default=100, gt=0, description="Partition width in tiles")
    partition_height: int = Field(default=100, gt=0, description="Partition height in tiles")

    # Retry budget
    slot_attempts: int = Field(default=50, ge=1, description="Attempts per city slot")
    tile_attempts: int = Field(default=50, ge=1, description="Random tile draws per attempt")

    # Placement bounds (inclusive, in tiles)
    min_x: int = Field(default=1, description="Leftmost allowed tile column")
    max_x: int = Field(default=28, description="Rightmost allowed tile column")
    min_y: int = Field(default=2, description="Topmost allowed tile row")
    max_y: int = Field(default=16, description="Bottommost allowed tile row")

    # UI exclusion boxes
    bottom_right_x: int = Field(default=14, description="Exclude tiles with x above this and y above bottom_right_y")
    bottom_right_y: int = Field(default=14, description="See bottom_right_x")
    top_right_x: int = Field(default=19, description="Exclude tiles with x above this and y below top_right_y")
    top_right_y: int = Field(default=5, description="See top_right_x")


def is_valid_city_tile(tile: Tile, options: SettlementOptions) -> bool:
    """Check the parity, bounds and UI exclusion constraints for a city tile."""
    if tile.x % 2 != 1 or tile.y % 2 != 1:
        return False
    if tile.x < options.min_x or tile.y < options.min_y:
        return False
    if tile.x > options.max_x or tile.y > options.max_y:
        return False
    if tile.x > options.bottom_right_x and tile.y > options.bottom_right_y:
        return False
    if tile.x > options.top_right_x and tile.y < options.top_right_y:
        return False
    return True


def try_pick_city_tile(
    partition: List[Tile],
    taken: Set[Tile],
    rng: np.random.Generator,
    options: SettlementOptions,
) -> Optional[Tile]:
    """
    Draw random tiles from a partition until one can hold a city.

    Args:
        partition: Landmark tiles of one partition (non-empty)
        taken: Tiles already holding a city
        rng: Random source
        options: Placement options

    Returns:
        A free, valid tile, or None if every draw was rejected
    """
    for _ in range(options.tile_attempts):
        candidate = partition[int(rng.integers(len(partition)))]
        if candidate in taken:
            continue
        if is_valid_city_tile(candidate, options):
            return candidate
    return None


def generate_cities(
    partitions: Dict[PartitionKey, List[Tile]],
    num_cities: int,
    rng: np.random.Generator,
    options: Optional[SettlementOptions] = None,
) -> List[Tile]:
    """
    Place up to ``num_cities`` unique cities.

    Slot ``c`` draws from partition ``keys[c % len(keys)]`` where ``keys`` is
    a shuffled order of the partition keys. A slot that exhausts its attempts
    is skipped.

    Args:
        partitions: Landmark tiles grouped by partition
        num_cities: Requested number of cities
        rng: Random source
        options: Placement options

    Returns:
        Unique city tiles in placement order
    """
    options = options or SettlementOptions()
    if num_cities <= 0:
        return []

    # Sort before shuffling so the order depends only on the random source
    partition_keys = sorted(key for key, tiles in partitions.items() if tiles)
    if not partition_keys:
        logger.warning("No landmark tiles available, placing no cities")
        return []

    order = rng.permutation(len(partition_keys))
    partition_keys = [partition_keys[i] for i in order]

    cities: List[Tile] = []
    taken: Set[Tile] = set()
    for c in range(num_cities):
        partition = partitions[partition_keys[c % len(partition_keys)]]
        for _ in range(options.slot_attempts):
            city = try_pick_city_tile(partition, taken, rng, options)
            if city is not None:
                taken.add(city)
                cities.append(city)
                break
        else:
            logger.debug("Skipped city slot", slot=c)

    logger.info("Placed cities", requested=num_cities, placed=len(cities))
    return cities
