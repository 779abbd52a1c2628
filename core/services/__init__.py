"""
Core services - graph algorithms and their generic base.
"""
from .base_service import GraphAlgorithm
from .path_finder import PathFinder, PathQuery
from .dfs_service import DfsAlgorithm, DfsQuery

__all__ = [
    'GraphAlgorithm',
    'PathFinder',
    'PathQuery',
    'DfsAlgorithm',
    'DfsQuery',
]
