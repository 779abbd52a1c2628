"""
    Shared enums: traversal colors and mutation results.
"""
from enum import Enum


class Color(Enum):
    """DFS visitation state of a node within a single run"""
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


class Result(Enum):
    """Outcome of a graph mutation (add node / add edge)"""
    SUCCESS = "success"
    INVALID_ARGUMENTS = "invalid_arguments"
    ITEM_DOESNT_EXIST = "item_doesnt_exist"
    ITEM_ALREADY_EXISTS = "item_already_exists"

    @property
    def ok(self) -> bool:
        return self is Result.SUCCESS
