"""
Graph Platform - core package.

Public API:
    GraphPlatform   – registry of graphs and nodes, operation API (Facade / Singleton)
    PlatformConfig  – top-level configuration
"""
from .core import GraphPlatform
from .config import PlatformConfig

__all__ = [
    'GraphPlatform',
    'PlatformConfig',
]
