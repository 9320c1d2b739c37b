"""Two-way geographic clustering of cities."""

import warnings
from typing import List, Optional, Tuple

import numpy as np
import structlog
from sklearn.cluster import KMeans
from sklearn.exceptions import ConvergenceWarning

from ..utils.random import draw_seed
from .tile import Tile

logger = structlog.get_logger()


class ClusteringError(Exception):
    """Raised when cities cannot be split into two non-empty clusters."""


def cluster_cities(
    cities: Optional[List[Tile]],
    rng: np.random.Generator,
) -> Tuple[List[Tile], List[Tile]]:
    """
    Split cities into two geographic clusters with k-means.

    Cluster membership keeps the input order of the cities; repeated tiles
    are counted once.

    Args:
        cities: Unique city tiles
        rng: Random source, used to seed k-means

    Returns:
        Two non-empty lists whose union is the input

    Raises:
        ClusteringError: Fewer than two distinct cities, or k-means did not
            produce two non-empty clusters
    """
    # Duplicates would leave a cluster with no other city to chain to
    cities = list(dict.fromkeys(cities or []))
    if len(cities) < 2:
        raise ClusteringError(f"Failed to cluster cities: need at least 2 distinct cities, got {len(cities)}")

    points = np.array([[city.x, city.y] for city in cities], dtype=np.float64)
    random_state = draw_seed(rng) % 2**32

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            labels = KMeans(n_clusters=2, n_init=10, random_state=random_state).fit_predict(points)
    except (ValueError, ConvergenceWarning) as e:
        raise ClusteringError(f"Failed to cluster cities: {e}") from e

    clusters: Tuple[List[Tile], List[Tile]] = ([], [])
    for city, label in zip(cities, labels):
        clusters[int(label)].append(city)

    if not clusters[0] or not clusters[1]:
        raise ClusteringError("Failed to cluster cities: k-means produced an empty cluster")

    logger.debug("Clustered cities", sizes=[len(clusters[0]), len(clusters[1])])
    return clusters
