"""
Utility helpers shared by the generation stages.
"""

from .random import create_rng, draw_seed

__all__ = ['create_rng', 'draw_seed']
