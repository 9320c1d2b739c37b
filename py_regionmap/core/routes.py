"""
Route generation between cities.

Cities in each cluster are chained together by repeatedly connecting the
current city to its nearest unconnected neighbour (Manhattan distance), and
the chain is closed back to its first city so every city has at least two
connections. The two clusters are then joined through their nearest pair of
cities. Every connection is an orthogonal path of tiles with one elbow.
"""

from typing import List, Optional, Sequence, Set

import numpy as np
import structlog

from .tile import Tile

logger = structlog.get_logger()


def connect_horizontal_route(start: Tile, end: Tile, route_tiles: Set[Tile]) -> Tile:
    """
    Lay route tiles along start's row from start.x up to, not including, end.x.

    Returns:
        The elbow tile (end.x, start.y) where the next leg starts
    """
    step = 1 if start.x <= end.x else -1
    for x in range(start.x, end.x, step):
        route_tiles.add(Tile(x, start.y))
    return Tile(end.x, start.y)


def connect_vertical_route(start: Tile, end: Tile, route_tiles: Set[Tile]) -> Tile:
    """
    Lay route tiles along start's column from start.y up to, not including, end.y.

    Returns:
        The elbow tile (start.x, end.y) where the next leg starts
    """
    step = 1 if start.y <= end.y else -1
    for y in range(start.y, end.y, step):
        route_tiles.add(Tile(start.x, y))
    return Tile(start.x, end.y)


def connect_cities(
    city_a: Tile,
    city_b: Tile,
    route_tiles: Set[Tile],
    rng: np.random.Generator,
) -> None:
    """Connect two cities with an orthogonal path, picking the leg order at random."""
    if rng.integers(2) == 0:
        elbow = connect_horizontal_route(city_a, city_b, route_tiles)
        connect_vertical_route(elbow, city_b, route_tiles)
    else:
        elbow = connect_vertical_route(city_a, city_b, route_tiles)
        connect_horizontal_route(elbow, city_b, route_tiles)


def _nearest_unconnected(current: Tile, cities: Sequence[Tile], connected: Set[Tile]) -> Optional[Tile]:
    nearest = None
    min_distance = None
    for other in cities:
        if other == current or other in connected:
            continue
        distance = current.distance(other)
        if min_distance is None or distance < min_distance:
            min_distance = distance
            nearest = other
    return nearest


def _connect_cluster(cities: Sequence[Tile], route_tiles: Set[Tile], rng: np.random.Generator) -> None:
    """Chain a cluster's cities by nearest neighbour and close the loop."""
    first = current = cities[0]
    connected: Set[Tile] = set()
    total = len(set(cities))

    while len(connected) < total:
        nearest = _nearest_unconnected(current, cities, connected)
        # Each pass connects at least one new city, so a candidate always remains
        assert nearest is not None, "no unconnected city left while cluster is incomplete"
        connect_cities(current, nearest, route_tiles, rng)
        connected.add(current)
        connected.add(nearest)
        current = nearest

    connect_cities(current, first, route_tiles, rng)


def generate_routes(city_clusters: Sequence[Sequence[Tile]], rng: np.random.Generator) -> Set[Tile]:
    """
    Generate the route tiles connecting all cities.

    Args:
        city_clusters: Exactly two clusters of unique city tiles
        rng: Random source, one draw per connection

    Returns:
        Set of route tiles
    """
    if len(city_clusters) != 2:
        raise ValueError(f"Expected 2 city clusters, got {len(city_clusters)}")

    route_tiles: Set[Tile] = set()

    for cities in city_clusters:
        if len(cities) < 2:
            continue
        _connect_cluster(cities, route_tiles, rng)

    # Join the clusters through their nearest pair of cities
    cluster_a, cluster_b = city_clusters
    min_distance = None
    link: List[Tile] = []
    for a in cluster_a:
        for b in cluster_b:
            distance = a.distance(b)
            if min_distance is None or distance < min_distance:
                min_distance = distance
                link = [a, b]
    if link:
        connect_cities(link[0], link[1], route_tiles, rng)

    logger.debug("Generated routes", route_tiles=len(route_tiles), link=link)
    return route_tiles
