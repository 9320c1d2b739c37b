"""Tests for landmark tile selection and partitioning."""

import numpy as np
import pytest

from py_regionmap.core.elevation import generate_elevations
from py_regionmap.core.landmarks import get_valid_landmark_tiles, partition_tiles_by_location
from py_regionmap.core.tile import Tile
from py_regionmap.utils.random import create_rng


def _field_with_land_count(land_pixels: int) -> np.ndarray:
    """Single 8x8 tile field with the given number of land pixels."""
    field = np.full(64, -1.0)
    field[:land_pixels] = 0.5
    return field.reshape(8, 8)


class TestValidLandmarkTiles:
    """Test the land-pixel threshold filter."""

    def test_all_land(self):
        tiles = get_valid_landmark_tiles(np.ones((16, 16)))
        assert tiles == [Tile(0, 0), Tile(0, 1), Tile(1, 0), Tile(1, 1)]

    def test_all_water(self):
        assert get_valid_landmark_tiles(np.full((16, 16), -0.5)) == []

    def test_threshold_is_strict(self):
        assert get_valid_landmark_tiles(_field_with_land_count(20)) == []
        assert get_valid_landmark_tiles(_field_with_land_count(21)) == [Tile(0, 0)]

    def test_zero_elevation_counts_as_land(self):
        field = np.full((8, 8), -1.0)
        field.flat[:21] = 0.0
        assert get_valid_landmark_tiles(field) == [Tile(0, 0)]

    def test_only_marked_tile_is_valid(self):
        field = np.full((24, 16), -1.0)
        field[8:16, 8:16] = 1.0
        assert get_valid_landmark_tiles(field) == [Tile(1, 1)]

    def test_remainder_pixels_are_ignored(self):
        """Dimensions not divisible by 8 are floor-truncated."""
        field = np.full((21, 13), -1.0)
        field[16:, :] = 1.0   # land only in the truncated remainder
        field[:8, :8] = 1.0
        assert get_valid_landmark_tiles(field) == [Tile(0, 0)]

    def test_field_smaller_than_a_tile(self):
        assert get_valid_landmark_tiles(np.ones((7, 30))) == []

    def test_generated_tiles_have_enough_land(self):
        """Every tile selected on a generated field has more than 20 land pixels."""
        for seed in range(3):
            elevations = generate_elevations(100, 60, create_rng(seed))
            for tile in get_valid_landmark_tiles(elevations):
                x0, y0, x1, y1 = tile.pixel_bounds()
                assert np.sum(elevations[x0:x1, y0:y1] >= 0) > 20


class TestPartitionTiles:
    """Test grouping tiles into coarse partitions."""

    def test_single_partition_for_small_maps(self):
        tiles = [Tile(0, 0), Tile(29, 19), Tile(5, 7)]
        partitions = partition_tiles_by_location(100, 100, tiles)
        assert partitions == {(0, 0): tiles}

    def test_keys_use_floor_division(self):
        tiles = [Tile(0, 0), Tile(4, 1), Tile(5, 0), Tile(9, 9), Tile(10, 10)]
        partitions = partition_tiles_by_location(5, 5, tiles)
        assert partitions == {
            (0, 0): [Tile(0, 0), Tile(4, 1)],
            (1, 0): [Tile(5, 0)],
            (1, 1): [Tile(9, 9)],
            (2, 2): [Tile(10, 10)],
        }

    def test_empty_input(self):
        assert partition_tiles_by_location(100, 100, []) == {}

    def test_invalid_partition_size(self):
        with pytest.raises(ValueError):
            partition_tiles_by_location(0, 100, [Tile(0, 0)])
