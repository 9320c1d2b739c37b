"""Tile value type for the coarse placement grid."""

from typing import NamedTuple, Tuple

# Pixels per tile edge
TILE_SIZE = 8


class Tile(NamedTuple):
    """An 8x8-pixel cell of a region map, addressed by tile coordinates."""
    x: int
    y: int

    def distance(self, other: "Tile") -> int:
        """Manhattan distance to another tile."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def pixel_bounds(self) -> Tuple[int, int, int, int]:
        """
        Pixel footprint of this tile as half-open ranges.

        Returns:
            (x0, y0, x1, y1) such that the tile covers [x0, x1) x [y0, y1)
        """
        x0 = self.x * TILE_SIZE
        y0 = self.y * TILE_SIZE
        return x0, y0, x0 + TILE_SIZE, y0 + TILE_SIZE
