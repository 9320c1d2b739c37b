"""
Region map generation entry points.

Pipeline:
1. generate_elevations() - Layered noise elevation field
2. get_valid_landmark_tiles() - Tiles with enough land for a landmark
3. partition_tiles_by_location() - Coarse buckets to spread placement
4. generate_cities() - Constrained random city placement
5. cluster_cities() - Two geographic clusters via k-means
6. generate_routes() - Nearest-neighbour loops plus one inter-cluster link

Each entry point creates its own random source from its seed, so calls are
independent of each other and safe to run side by side. The partial entry
points re-run only the downstream stages against an existing map.
"""

from dataclasses import replace
from typing import Optional

import numpy as np
import structlog

from ..config import settings
from ..utils.random import create_rng
from .clustering import cluster_cities
from .elevation import ElevationConfig, generate_elevations
from .landmarks import get_valid_landmark_tiles, partition_tiles_by_location
from .region_map import RegionMap
from .render import render_region_map
from .routes import generate_routes
from .settlements import SettlementOptions, generate_cities

logger = structlog.get_logger()


def _validate_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Map dimensions must be positive, got {width}x{height}")
    if width > settings.max_map_width or height > settings.max_map_height:
        raise ValueError(
            f"Map dimensions {width}x{height} exceed the maximum "
            f"{settings.max_map_width}x{settings.max_map_height}"
        )


def _validate_num_cities(num_cities: int) -> None:
    if num_cities < 0:
        raise ValueError(f"Number of cities cannot be negative, got {num_cities}")


def _validate_region_map(region_map: RegionMap) -> None:
    if region_map.elevations.size == 0:
        raise ValueError("Region map has no elevation field")


def _place_cities(elevations: np.ndarray, num_cities: int, rng: np.random.Generator, options: SettlementOptions):
    valid_tiles = get_valid_landmark_tiles(
        elevations,
        min_land_pixels=options.min_land_pixels,
        tile_size=options.tile_size,
    )
    partitions = partition_tiles_by_location(options.partition_width, options.partition_height, valid_tiles)
    return generate_cities(partitions, num_cities, rng, options)


def _build_routes(cities, rng: np.random.Generator):
    city_clusters = cluster_cities(cities, rng)
    return frozenset(generate_routes(city_clusters, rng))


def generate_full(
    seed: int,
    width: int,
    height: int,
    num_cities: int,
    *,
    elevation_config: Optional[ElevationConfig] = None,
    settlement_options: Optional[SettlementOptions] = None,
) -> RegionMap:
    """
    Generate a complete region map: elevations, cities and routes.

    Args:
        seed: Random seed
        width: Map width in pixels
        height: Map height in pixels
        num_cities: Requested number of cities (fewer may be placed)
        elevation_config: Noise layering parameters
        settlement_options: City placement options

    Returns:
        New RegionMap

    Raises:
        ClusteringError: Fewer than two cities could be placed, or the cities
            could not be split into two clusters
    """
    _validate_dimensions(width, height)
    _validate_num_cities(num_cities)
    options = settlement_options or SettlementOptions()

    logger.info("Generating region map", seed=seed, width=width, height=height, num_cities=num_cities)
    rng = create_rng(seed)
    elevations = generate_elevations(width, height, rng, elevation_config)
    cities = _place_cities(elevations, num_cities, rng, options)
    routes = _build_routes(cities, rng)

    region_map = RegionMap(
        pixel_width=width,
        pixel_height=height,
        elevations=elevations,
        cities=cities,
        routes=routes,
    )
    logger.info("Region map generated", cities=len(cities), route_tiles=len(routes))
    return region_map


def generate_base(
    seed: int,
    width: int,
    height: int,
    *,
    elevation_config: Optional[ElevationConfig] = None,
) -> RegionMap:
    """Generate a region map containing only elevations."""
    _validate_dimensions(width, height)

    logger.info("Generating base region map", seed=seed, width=width, height=height)
    rng = create_rng(seed)
    elevations = generate_elevations(width, height, rng, elevation_config)
    return RegionMap(pixel_width=width, pixel_height=height, elevations=elevations)


def regenerate_cities(
    seed: int,
    num_cities: int,
    region_map: RegionMap,
    *,
    settlement_options: Optional[SettlementOptions] = None,
) -> RegionMap:
    """
    Place new cities on an existing map's elevation field.

    Routes of the existing map are dropped since they connected the old cities.
    """
    _validate_region_map(region_map)
    _validate_num_cities(num_cities)
    options = settlement_options or SettlementOptions()

    logger.info("Regenerating cities", seed=seed, num_cities=num_cities)
    rng = create_rng(seed)
    cities = _place_cities(region_map.elevations, num_cities, rng, options)
    return replace(region_map, cities=cities, routes=None)


def regenerate_routes(seed: int, region_map: RegionMap) -> RegionMap:
    """
    Generate new routes between an existing map's cities.

    Raises:
        ClusteringError: The map has fewer than two cities, or they could not
            be split into two clusters
    """
    _validate_region_map(region_map)

    logger.info("Regenerating routes", seed=seed, cities=len(region_map.cities or []))
    rng = create_rng(seed)
    routes = _build_routes(region_map.cities, rng)
    return replace(region_map, routes=routes)


def render_base(region_map: RegionMap) -> np.ndarray:
    """Render a region map using only its elevations."""
    return render_region_map(region_map.elevations)


def render_with_cities(region_map: RegionMap) -> np.ndarray:
    """Render a region map using its elevations and cities."""
    return render_region_map(region_map.elevations, region_map.cities)


def render_full(region_map: RegionMap) -> np.ndarray:
    """Render a region map with elevations, cities and routes."""
    return render_region_map(region_map.elevations, region_map.cities, region_map.routes)
