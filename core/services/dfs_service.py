# core/services/dfs_service.py
"""
    DfsAlgorithm - depth-first traversal with coloring and back-edge counts.

    Extends ``GraphAlgorithm[DfsQuery, Optional[List[str]]]``.

    Colors and back-edge counters belong to the algorithm instance and
    are rebuilt at the start of every run, so nodes shared between
    graphs or runs never carry traversal state.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from api.api.exceptions import InvalidArgumentsError, ItemDoesntExistError
from api.api.models.graph import Graph
from api.api.types import Color
from .base_service import GraphAlgorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DfsQuery:
    """Start node and optional target for one traversal."""
    source: str
    target: Optional[str] = None


class DfsAlgorithm(GraphAlgorithm[DfsQuery, Optional[List[str]]]):
    """
    Depth-first traversal from one source node.

    Two modes:
    - ``call_dfs()``       → names in visit order (White → Gray transitions)
    - ``call_dfs(target)`` → names on the DFS stack from source to target
                             when the target is first reached, or ``None``

    Children are explored in the graph's child order.  Every edge that
    leads to a Gray node (an ancestor still on the stack) increments that
    node's back-edge count; edges to Black nodes are ignored.
    """

    def __init__(self, graph: Graph, source_name: str):
        """
        :raises InvalidArgumentsError: If the source name is empty
        :raises ItemDoesntExistError: If the source is not a member of the graph
        """
        if not source_name:
            raise InvalidArgumentsError("DFS source name cannot be empty.")
        if not graph.has_node(source_name):
            raise ItemDoesntExistError(f"Node {source_name} not in graph {graph.name}")

        self._graph = graph
        self._source = source_name
        self._colors: Dict[str, Color] = {}
        self._back_edges: Dict[str, int] = {}
        self._visit_order: List[str] = []
        self._stack: List[str] = []

    @property
    def source(self) -> str:
        return self._source

    def call_dfs(self, target_name: Optional[str] = None) -> Optional[List[str]]:
        """
        Run the traversal.

        :param target_name: Optional node to search for
        :return: Visit order without a target; path to the target or ``None`` with one
        :raises ItemDoesntExistError: If the target is not a member of the graph
        """
        return self.execute(self._graph, DfsQuery(self._source, target_name))

    # ── Per-run state queries ────────────────────────────────────

    def get_color(self, name: str) -> Color:
        if name not in self._colors:
            raise ItemDoesntExistError(f"Node {name} not in graph {self._graph.name}")
        return self._colors[name]

    def get_back_edge_count(self, name: str) -> int:
        if name not in self._back_edges:
            raise ItemDoesntExistError(f"Node {name} not in graph {self._graph.name}")
        return self._back_edges[name]

    def get_colors(self) -> Dict[str, Color]:
        return dict(self._colors)

    def get_back_edge_counts(self) -> Dict[str, int]:
        return dict(self._back_edges)

    def get_visit_order(self) -> List[str]:
        return list(self._visit_order)

    def total_back_edges(self) -> int:
        return sum(self._back_edges.values())

    def has_cycle(self) -> bool:
        """Whether the last run met a back edge, i.e. a cycle reachable from the source"""
        return self.total_back_edges() > 0

    # ── Template Method hooks ────────────────────────────────────

    def _validate_query(self, graph: Graph, query: DfsQuery) -> None:
        if query.target is not None:
            if not query.target:
                raise InvalidArgumentsError("DFS target name cannot be empty.")
            if not graph.has_node(query.target):
                raise ItemDoesntExistError(f"Node {query.target} not in graph {graph.name}")

    def _run(self, graph: Graph, query: DfsQuery) -> Optional[List[str]]:
        self._reset(graph)

        found = self._visit(graph, query.source, query.target)

        logger.debug("DFS in %s from %s visited %d node(s), %d back edge(s)",
                     graph.name, query.source, len(self._visit_order), self.total_back_edges())

        if query.target is None:
            return list(self._visit_order)
        if found:
            return list(self._stack)
        return None

    def _reset(self, graph: Graph) -> None:
        self._colors = {node.name: Color.WHITE for node in graph.get_nodes()}
        self._back_edges = {node.name: 0 for node in graph.get_nodes()}
        self._visit_order = []
        self._stack = []

    def _visit(self, graph: Graph, source: str, target: Optional[str]) -> bool:
        """
        Explore `source` and its descendants.

        Runs on an explicit stack of (name, pending children) pairs so the
        depth of the graph is not limited by the interpreter's call stack.
        Returns True as soon as the target turns Gray; ``self._stack`` is
        then left as it is so it holds the path from the source to the target.
        """
        pending: List[Iterator[str]] = []

        def enter(name: str) -> bool:
            self._colors[name] = Color.GRAY
            self._visit_order.append(name)
            self._stack.append(name)
            pending.append(iter(graph.get_children(name)))
            return name == target

        if enter(source):
            return True

        while pending:
            child = next(pending[-1], None)
            if child is None:
                self._colors[self._stack.pop()] = Color.BLACK
                pending.pop()
                continue

            color = self._colors[child]
            if color == Color.WHITE:
                if enter(child):
                    return True
            elif color == Color.GRAY:
                self._back_edges[child] += 1

        return False
