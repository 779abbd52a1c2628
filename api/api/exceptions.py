# api/api/exceptions.py
from .types import Result


class GraphError(Exception):
    """Base class for structural graph errors."""
    result: Result = Result.INVALID_ARGUMENTS


class InvalidArgumentsError(GraphError, ValueError):
    """Raised when an identifier or value is missing or malformed."""
    result = Result.INVALID_ARGUMENTS


class ItemDoesntExistError(GraphError, LookupError):
    """Raised when a graph or node name is not registered."""
    result = Result.ITEM_DOESNT_EXIST


class ItemAlreadyExistsError(GraphError, ValueError):
    """Raised when a node or edge already exists under that identity."""
    result = Result.ITEM_ALREADY_EXISTS
