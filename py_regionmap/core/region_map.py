"""Region map aggregate produced by the generation pipeline."""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

import numpy as np

from .tile import TILE_SIZE, Tile


@dataclass(frozen=True, eq=False)
class RegionMap:
    """
    A generated region map.

    The elevation field is indexed ``elevations[x, y]`` with shape
    ``(pixel_width, pixel_height)``; values >= 0 are land and values < 0 are
    water. Cities and routes stay ``None`` until their stage has run.
    Pipeline re-entry builds a new instance with ``dataclasses.replace``.
    """
    pixel_width: int
    pixel_height: int
    elevations: np.ndarray = field(repr=False)
    cities: Optional[List[Tile]] = None        # unique, in placement order
    routes: Optional[FrozenSet[Tile]] = None

    def __post_init__(self):
        expected = (self.pixel_width, self.pixel_height)
        if self.elevations.shape != expected:
            raise ValueError(
                f"Elevation field shape {self.elevations.shape} does not match map size {expected}"
            )
        if self.cities is not None and len(set(self.cities)) != len(self.cities):
            raise ValueError("Region map cities must be unique tiles")
        for tile in list(self.cities or ()) + list(self.routes or ()):
            if not self.in_tile_bounds(tile):
                raise ValueError(f"{tile} is outside the {self.tiles_width}x{self.tiles_height} tile grid")

    @property
    def tiles_width(self) -> int:
        return self.pixel_width // TILE_SIZE

    @property
    def tiles_height(self) -> int:
        return self.pixel_height // TILE_SIZE

    def in_tile_bounds(self, tile: Tile) -> bool:
        """Check that a tile lies on this map's tile grid."""
        return 0 <= tile.x < self.tiles_width and 0 <= tile.y < self.tiles_height
