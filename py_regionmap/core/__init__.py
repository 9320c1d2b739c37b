"""
Core region map generation functionality.
"""

from .tile import Tile, TILE_SIZE
from .region_map import RegionMap
from .elevation import ElevationConfig, generate_elevations
from .landmarks import get_valid_landmark_tiles, partition_tiles_by_location
from .settlements import SettlementOptions, generate_cities, try_pick_city_tile, is_valid_city_tile
from .clustering import ClusteringError, cluster_cities
from .routes import generate_routes, connect_cities, connect_horizontal_route, connect_vertical_route
from .render import render_region_map
from .generator import (
    generate_full, generate_base, regenerate_cities, regenerate_routes,
    render_base, render_with_cities, render_full,
)

__all__ = ['Tile', 'TILE_SIZE', 'RegionMap', 'ElevationConfig', 'generate_elevations',
           'get_valid_landmark_tiles', 'partition_tiles_by_location',
           'SettlementOptions', 'generate_cities', 'try_pick_city_tile', 'is_valid_city_tile',
           'ClusteringError', 'cluster_cities',
           'generate_routes', 'connect_cities', 'connect_horizontal_route', 'connect_vertical_route',
           'render_region_map',
           'generate_full', 'generate_base', 'regenerate_cities', 'regenerate_routes',
           'render_base', 'render_with_cities', 'render_full']
