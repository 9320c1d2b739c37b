"""
Seeded region map generation: terrain, cities and the routes between them.
"""

from .core import (
    ClusteringError,
    ElevationConfig,
    RegionMap,
    SettlementOptions,
    Tile,
    generate_base,
    generate_full,
    regenerate_cities,
    regenerate_routes,
    render_base,
    render_full,
    render_with_cities,
)

__version__ = "0.1.0"

__all__ = ['ClusteringError', 'ElevationConfig', 'RegionMap', 'SettlementOptions', 'Tile',
           'generate_base', 'generate_full', 'regenerate_cities', 'regenerate_routes',
           'render_base', 'render_full', 'render_with_cities']
