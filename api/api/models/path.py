"""
    Path model - an ordered walk over weighted nodes and its total cost.
"""
from functools import total_ordering
from typing import Any, Dict, Iterator, Tuple

from ..exceptions import InvalidArgumentsError
from .node import WeightedNode


@total_ordering
class Path:
    """
    Immutable sequence of nodes from a start node to an end node.

    The cost is the sum of the costs of every node on the path,
    endpoints included.  Paths are ordered by cost first and then by
    their node names compared one by one, which gives the path finder
    a total, deterministic tie-break.
    """

    __slots__ = ('_nodes', '_names', '_cost')

    def __init__(self, nodes: Tuple[WeightedNode, ...], cost: int):
        if not nodes:
            raise InvalidArgumentsError("A path must contain at least one node")
        self._nodes = tuple(nodes)
        self._names = tuple(node.name for node in self._nodes)
        self._cost = cost

    @classmethod
    def of(cls, node: WeightedNode) -> 'Path':
        """Single-node path: start equals end"""
        return cls((node,), node.cost)

    def extend(self, node: WeightedNode) -> 'Path':
        """Return a new path with `node` appended"""
        return Path(self._nodes + (node,), self._cost + node.cost)

    @property
    def start(self) -> WeightedNode:
        return self._nodes[0]

    @property
    def end(self) -> WeightedNode:
        return self._nodes[-1]

    @property
    def nodes(self) -> Tuple[WeightedNode, ...]:
        return self._nodes

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def cost(self) -> int:
        return self._cost

    def contains(self, name: str) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[WeightedNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._names == other._names

    def __lt__(self, other: 'Path') -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (self._cost, self._names) < (other._cost, other._names)

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"Path({' '.join(self._names)}, cost={self._cost})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': list(self._names),
            'cost': self._cost,
        }
