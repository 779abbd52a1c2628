# core/services/path_finder.py
"""
    PathFinder - minimum-cost path between candidate sources and destinations.

    Extends ``GraphAlgorithm[PathQuery, Optional[Path]]``.

    Cost lives on nodes only: a path costs the sum of its node costs.
    The search is a uniform-cost (Dijkstra) search whose frontier is
    seeded with the single-node path of every source, which is the same
    as starting from a virtual super-source linked to all of them.
"""
import heapq
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from api.api.exceptions import InvalidArgumentsError, ItemDoesntExistError
from api.api.models.graph import Graph
from api.api.models.path import Path
from .base_service import GraphAlgorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathQuery:
    """Candidate source and destination names for one search."""
    sources: Sequence[str]
    destinations: Sequence[str]


class PathFinder(GraphAlgorithm[PathQuery, Optional[Path]]):
    """
    Finds the cheapest path from any source to any destination.

    Ties in cost are broken by comparing node names along the path, and
    that comparator (``Path.__lt__``) is used both for the frontier order
    and for every relaxation, so the answer never depends on dict or
    heap iteration order.

    The finder holds no state between calls.
    """

    def find_shortest_path(self, graph: Graph, source_names: Sequence[str],
                           dest_names: Sequence[str]) -> Optional[Path]:
        """
        Convenience wrapper around the generic ``execute()``.

        :param graph: Graph to search
        :param source_names: Names of the candidate start nodes
        :param dest_names: Names of the candidate end nodes
        :return: The cheapest path, or ``None`` when no destination is reachable
        :raises InvalidArgumentsError: If either name list is empty or holds an empty name
        :raises ItemDoesntExistError: If a name is not a member of the graph
        """
        return self.execute(graph, PathQuery(tuple(source_names), tuple(dest_names)))

    # ── Template Method hooks ────────────────────────────────────

    def _validate_query(self, graph: Graph, query: PathQuery) -> None:
        if not query.sources:
            raise InvalidArgumentsError("At least one source node is required.")
        if not query.destinations:
            raise InvalidArgumentsError("At least one destination node is required.")

        for name in list(query.sources) + list(query.destinations):
            if not name:
                raise InvalidArgumentsError("Node names cannot be empty.")
            if not graph.has_node(name):
                raise ItemDoesntExistError(f"Node {name} not in graph {graph.name}")

    def _run(self, graph: Graph, query: PathQuery) -> Optional[Path]:
        destinations: Set[str] = set(query.destinations)
        best: Dict[str, Path] = {}  # node name -> cheapest known path ending there
        settled: Set[str] = set()
        frontier: List[Path] = []

        for name in query.sources:
            candidate = Path.of(graph.get_node(name))
            if name not in best or candidate < best[name]:
                best[name] = candidate
                heapq.heappush(frontier, candidate)

        while frontier:
            path = heapq.heappop(frontier)
            name = path.end.name

            # stale entry, a better path to this node was pushed later
            if name in settled or best[name] != path:
                continue
            settled.add(name)

            if name in destinations:
                logger.debug("Path found in %s after settling %d node(s): %r",
                             graph.name, len(settled), path)
                return path

            for child_name in graph.get_children(name):
                if child_name in settled:
                    continue
                candidate = path.extend(graph.get_node(child_name))
                current = best.get(child_name)
                if current is None or candidate < current:
                    best[child_name] = candidate
                    heapq.heappush(frontier, candidate)

        logger.debug("No path in %s from %s to %s (%d node(s) settled)",
                     graph.name, list(query.sources), list(query.destinations), len(settled))
        return None
