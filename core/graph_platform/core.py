"""
    GraphPlatform - the operation API of the graph engine.

    Design Patterns applied
    ───────────────────────
    • Singleton          – one process-wide platform
                           (via ``GraphPlatform.get_instance()``).
    • Repository         – ``_graphs`` and ``_nodes`` dicts hide storage.
                           Nodes live in one registry keyed by name; graphs
                           only hold references, so a node can be shared.
    • Facade             – single entry-point for the script dispatcher;
                           hides name resolution, algorithm construction
                           and result formatting.
"""
import logging
from typing import Dict, List, Optional, Sequence, Union

from api.api.exceptions import InvalidArgumentsError, ItemDoesntExistError
from api.api.models.graph import Graph
from api.api.models.node import WeightedNode
from api.api.models.path import Path
from api.api.types import Result

from core.services.path_finder import PathFinder
from core.services.dfs_service import DfsAlgorithm

from .config import PlatformConfig

logger = logging.getLogger(__name__)


class GraphPlatform:
    """
    Central registry of graphs and nodes - Facade for the dispatcher.

    Every operation takes names; an unregistered graph or node name
    raises ``ItemDoesntExistError``.  Graph mutations report their
    outcome as a ``Result``, queries return formatted text.
    """

    _instance: Optional['GraphPlatform'] = None

    # ── Singleton ────────────────────────────────────────────────

    @classmethod
    def get_instance(cls, config: Optional[PlatformConfig] = None) -> 'GraphPlatform':
        """
        Return the singleton platform instance, creating it on first call.

        Args:
            config: Optional custom config (only used on first call).
        """
        if cls._instance is None:
            cls._instance = cls(config or PlatformConfig())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Destroy the singleton (useful for testing)."""
        cls._instance = None

    # ── Constructor ──────────────────────────────────────────────

    def __init__(self, config: Optional[PlatformConfig] = None):
        self._config: PlatformConfig = config or PlatformConfig()
        self._graphs: Dict[str, Graph] = {}
        self._nodes: Dict[str, WeightedNode] = {}
        self._path_finder = PathFinder()

        logger.info("GraphPlatform initialized.")

    @property
    def config(self) -> PlatformConfig:
        return self._config

    @config.setter
    def config(self, value: PlatformConfig) -> None:
        self._config = value

    # ── Registries ───────────────────────────────────────────────

    def create_graph(self, name: str) -> Graph:
        """
        Register a new empty graph.  Reusing a name replaces the old graph.
        """
        if not name:
            raise InvalidArgumentsError("Graph name cannot be empty.")
        if name in self._graphs:
            logger.warning("Graph '%s' already exists and is replaced by an empty one.", name)

        graph = Graph(name)
        self._graphs[name] = graph
        logger.info("Graph '%s' created.", name)
        return graph

    def create_node(self, name: str, cost: Union[int, str]) -> WeightedNode:
        """
        Register a node in the node registry, independent of any graph.

        Args:
            name: Node name
            cost: Non-negative integer, or its decimal string form

        Raises:
            InvalidArgumentsError: If the name is empty or the cost is
                                   negative or not an integer
        """
        node = WeightedNode(name, self._parse_cost(name, cost))
        if name in self._nodes:
            logger.warning("Node '%s' re-registered; graphs keep the node they already hold.", name)
        self._nodes[name] = node
        logger.info("Node '%s' created with cost %d.", name, node.cost)
        return node

    def get_graph(self, name: str) -> Graph:
        graph = self._graphs.get(name)
        if graph is None:
            raise ItemDoesntExistError(f"Graph '{name}' not found.")
        return graph

    def get_node(self, name: str) -> WeightedNode:
        node = self._nodes.get(name)
        if node is None:
            raise ItemDoesntExistError(f"Node '{name}' not found.")
        return node

    def list_graphs(self) -> List[str]:
        return list(self._graphs)

    # ── Graph mutation ───────────────────────────────────────────

    def add_node(self, graph_name: str, node_name: str) -> Result:
        """Add a registered node to a registered graph."""
        graph = self.get_graph(graph_name)
        node = self.get_node(node_name)

        result = graph.add_node(node, node_name)
        if not result.ok:
            logger.warning("add_node(%s, %s) rejected: %s", graph_name, node_name, result.value)
        return result

    def add_edge(self, graph_name: str, parent_name: str, child_name: str) -> Result:
        """Add the directed edge parent -> child to a registered graph."""
        graph = self.get_graph(graph_name)

        result = graph.add_edge(parent_name, child_name)
        if not result.ok:
            logger.warning("add_edge(%s, %s, %s) rejected: %s",
                           graph_name, parent_name, child_name, result.value)
        return result

    # ── Queries ──────────────────────────────────────────────────

    def list_nodes(self, graph_name: str) -> str:
        graph = self.get_graph(graph_name)
        return graph.get_nodes_string(self._config.node_listing_order)

    def list_children(self, graph_name: str, node_name: str) -> str:
        graph = self.get_graph(graph_name)
        return graph.get_children_string(node_name)

    def shortest_path(self, graph_name: str, source_names: Sequence[str],
                      dest_names: Sequence[str]) -> Optional[Path]:
        """Cheapest path between the candidate sets, or ``None``."""
        graph = self.get_graph(graph_name)
        return self._path_finder.find_shortest_path(graph, source_names, dest_names)

    def find_shortest_path(self, graph_name: str, source_names: Sequence[str],
                           dest_names: Sequence[str]) -> str:
        """
        Returns:
            ``"found path in G: a c with cost 2"`` or ``"no path found in G"``.
        """
        path = self.shortest_path(graph_name, source_names, dest_names)
        return self.format_path(graph_name, path)

    @staticmethod
    def format_path(graph_name: str, path: Optional[Path]) -> str:
        if path is None:
            return f"no path found in {graph_name}"
        return " ".join([f"found path in {graph_name}:"] + list(path.names)) + f" with cost {path.cost}"

    def dfs(self, graph_name: str, start_name: str,
            target_name: Optional[str] = None) -> Optional[List[str]]:
        """Visit order, or the path to ``target_name`` (``None`` if unreachable)."""
        graph = self.get_graph(graph_name)
        return DfsAlgorithm(graph, start_name).call_dfs(target_name)

    def run_dfs(self, graph_name: str, start_name: str,
                target_name: Optional[str] = None) -> str:
        """
        Returns:
            ``"dfs algorithm output G a: a b c"`` without a target,
            ``"dfs algorithm output G a -> c: a c"`` with one, or
            ``"dfs algorithm output G a -> c: no path was found"``.
        """
        names = self.dfs(graph_name, start_name, target_name)

        if target_name is None:
            header = f"dfs algorithm output {graph_name} {start_name}:"
        else:
            header = f"dfs algorithm output {graph_name} {start_name} -> {target_name}:"

        if names is None:
            return f"{header} no path was found"
        return " ".join([header] + names)

    # ── Helpers ──────────────────────────────────────────────────

    @staticmethod
    def _parse_cost(name: str, cost: Union[int, str]) -> int:
        if isinstance(cost, str):
            try:
                cost = int(cost.strip())
            except ValueError:
                raise InvalidArgumentsError(f"Cost of node {name} is not an integer: '{cost}'")
        return cost

    def __repr__(self) -> str:
        return f"GraphPlatform(graphs={len(self._graphs)}, nodes={len(self._nodes)})"
