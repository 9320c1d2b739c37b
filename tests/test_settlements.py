"""
Unit tests for city placement.

Tests cover:
- Parity, bounds and UI exclusion constraints
- Random tile draws within a partition
- Round-robin slot assignment across partitions
- Best-effort under-placement and empty inputs
"""

import pytest
from pydantic import ValidationError

from py_regionmap.core.landmarks import partition_tiles_by_location
from py_regionmap.core.settlements import (
    SettlementOptions,
    generate_cities,
    is_valid_city_tile,
    try_pick_city_tile,
)
from py_regionmap.core.tile import Tile
from py_regionmap.utils.random import create_rng


def _assert_valid_cities(cities):
    assert len(set(cities)) == len(cities)
    for city in cities:
        assert city.x % 2 == 1 and city.y % 2 == 1
        assert 1 <= city.x <= 28
        assert 2 <= city.y <= 16
        assert not (city.x > 14 and city.y > 14)
        assert not (city.x > 19 and city.y < 5)


class TestSettlementOptions:
    """Test settlement options configuration."""

    def test_default_options(self):
        options = SettlementOptions()
        assert options.tile_size == 8
        assert options.min_land_pixels == 20
        assert options.partition_width == 100
        assert options.partition_height == 100
        assert options.slot_attempts == 50
        assert options.tile_attempts == 50
        assert (options.min_x, options.max_x, options.min_y, options.max_y) == (1, 28, 2, 16)

    def test_custom_options(self):
        options = SettlementOptions(slot_attempts=5, max_x=40)
        assert options.slot_attempts == 5
        assert options.max_x == 40

    def test_attempts_must_be_positive(self):
        with pytest.raises(ValidationError):
            SettlementOptions(tile_attempts=0)


class TestCityTileConstraints:
    """Test the placement constraints for a single tile."""

    @pytest.fixture
    def options(self):
        return SettlementOptions()

    @pytest.mark.parametrize("tile", [Tile(1, 3), Tile(13, 15), Tile(21, 5), Tile(27, 13), Tile(15, 13), Tile(19, 3)])
    def test_valid_tiles(self, tile, options):
        assert is_valid_city_tile(tile, options)

    @pytest.mark.parametrize("tile", [Tile(2, 3), Tile(1, 4), Tile(2, 4)])
    def test_even_coordinates_rejected(self, tile, options):
        assert not is_valid_city_tile(tile, options)

    @pytest.mark.parametrize("tile", [Tile(1, 1), Tile(29, 3), Tile(3, 17), Tile(-1, 3)])
    def test_out_of_bounds_rejected(self, tile, options):
        assert not is_valid_city_tile(tile, options)

    @pytest.mark.parametrize("tile", [Tile(15, 15), Tile(27, 15)])
    def test_bottom_right_box_rejected(self, tile, options):
        assert not is_valid_city_tile(tile, options)

    @pytest.mark.parametrize("tile", [Tile(21, 3), Tile(27, 3)])
    def test_top_right_box_rejected(self, tile, options):
        assert not is_valid_city_tile(tile, options)


class TestTryPickCityTile:
    """Test random draws within one partition."""

    def test_picks_the_only_valid_tile(self):
        partition = [Tile(2, 2), Tile(3, 3), Tile(4, 4)]
        city = try_pick_city_tile(partition, set(), create_rng(1), SettlementOptions())
        assert city == Tile(3, 3)

    def test_no_valid_tile(self):
        partition = [Tile(2, 2), Tile(15, 15), Tile(0, 0)]
        assert try_pick_city_tile(partition, set(), create_rng(1), SettlementOptions()) is None

    def test_taken_tile_is_rejected(self):
        partition = [Tile(3, 3), Tile(4, 4)]
        taken = {Tile(3, 3)}
        assert try_pick_city_tile(partition, taken, create_rng(1), SettlementOptions()) is None


class TestGenerateCities:
    """Test placing a set of cities."""

    @pytest.fixture
    def full_grid_partitions(self):
        """Every tile of a 30x20 tile map is a landmark tile."""
        tiles = [Tile(x, y) for x in range(30) for y in range(20)]
        return partition_tiles_by_location(100, 100, tiles)

    def test_places_requested_cities(self, full_grid_partitions):
        cities = generate_cities(full_grid_partitions, 10, create_rng(3))
        assert len(cities) == 10
        _assert_valid_cities(cities)

    def test_deterministic_for_seed(self, full_grid_partitions):
        first = generate_cities(full_grid_partitions, 8, create_rng(11))
        second = generate_cities(full_grid_partitions, 8, create_rng(11))
        assert first == second

    def test_under_placement_is_not_an_error(self):
        """Asking for more cities than there are valid tiles places what fits."""
        tiles = [Tile(1, 3), Tile(2, 3), Tile(3, 3), Tile(4, 4)]
        partitions = partition_tiles_by_location(100, 100, tiles)
        cities = generate_cities(partitions, 5, create_rng(2))
        assert set(cities) <= {Tile(1, 3), Tile(3, 3)}
        assert len(cities) <= 2
        _assert_valid_cities(cities)

    def test_round_robin_across_partitions(self):
        """Consecutive slots draw from different partitions."""
        partitions = {
            (0, 0): [Tile(1, 3)],
            (1, 0): [Tile(7, 3)],
            (0, 1): [Tile(1, 9)],
        }
        cities = generate_cities(partitions, 3, create_rng(4))
        assert sorted(cities) == [Tile(1, 3), Tile(1, 9), Tile(7, 3)]

    def test_wraps_around_partitions(self):
        partitions = {
            (0, 0): [Tile(1, 3), Tile(3, 3)],
            (1, 0): [Tile(7, 3), Tile(9, 3)],
        }
        cities = generate_cities(partitions, 4, create_rng(4))
        assert sorted(cities) == [Tile(1, 3), Tile(3, 3), Tile(7, 3), Tile(9, 3)]

    def test_no_partitions(self):
        assert generate_cities({}, 5, create_rng(1)) == []

    def test_zero_cities(self, full_grid_partitions):
        assert generate_cities(full_grid_partitions, 0, create_rng(1)) == []

    def test_custom_bounds(self, full_grid_partitions):
        options = SettlementOptions(min_x=5, max_x=9, min_y=5, max_y=9)
        cities = generate_cities(full_grid_partitions, 20, create_rng(6), options)
        assert cities
        for city in cities:
            assert 5 <= city.x <= 9 and 5 <= city.y <= 9
