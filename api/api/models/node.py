"""
    Node model - a named node carrying a non-negative integer cost.
"""
from typing import Any, Dict

from ..exceptions import InvalidArgumentsError


class WeightedNode:
    """
    Node of a weighted graph.
    The name is the node's identity; name and cost never change after creation.
    Traversal state (color, back edges) is kept by the algorithms, not here.
    """

    __slots__ = ('_name', '_cost')

    def __init__(self, name: str, cost: int):
        """
        Initialize a node.

        Args:
            name: Unique identifier of the node
            cost: Non-negative integer weight

        Raises:
            InvalidArgumentsError: If name is empty or cost is not a non-negative int
        """
        if not name:
            raise InvalidArgumentsError("Node name cannot be empty")
        # bool is an int subclass but never a meaningful cost
        if isinstance(cost, bool) or not isinstance(cost, int):
            raise InvalidArgumentsError(f"Cost of node {name} must be an integer, got {cost!r}")
        if cost < 0:
            raise InvalidArgumentsError(f"Cost of node {name} must be non-negative, got {cost}")

        self._name = str(name)
        self._cost = cost

    @property
    def name(self) -> str:
        return self._name

    @property
    def cost(self) -> int:
        return self._cost

    def __repr__(self) -> str:
        return f"WeightedNode({self._name}, cost={self._cost})"

    def __eq__(self, other) -> bool:
        """Two nodes are equal if they have the same name"""
        if not isinstance(other, WeightedNode):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        """Hash node by name"""
        return hash(self._name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'cost': self._cost,
        }
