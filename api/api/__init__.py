"""
Weighted Graph API - models, enums and error types.
"""
from .types import Color, Result
from .exceptions import (
    GraphError,
    InvalidArgumentsError,
    ItemDoesntExistError,
    ItemAlreadyExistsError,
)
from .models.node import WeightedNode
from .models.path import Path
from .models.graph import Graph

__all__ = [
    'Color',
    'Result',
    'GraphError',
    'InvalidArgumentsError',
    'ItemDoesntExistError',
    'ItemAlreadyExistsError',
    'WeightedNode',
    'Path',
    'Graph',
]
