"""
    Generic base for graph algorithms.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of an algorithm run (validate → run),
    letting concrete subclasses (PathFinder, DfsAlgorithm) supply the steps.

    Genericity:
    ─────────────────────────
    Uses Generic[TQuery, TResult] so each algorithm declares its query
    object and its result type.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from api.api.models.graph import Graph

TQuery = TypeVar('TQuery')
TResult = TypeVar('TResult')


class GraphAlgorithm(ABC, Generic[TQuery, TResult]):
    """
    Abstract generic base for algorithms that run a query over a graph.

    Concrete subclasses must implement:
        - _validate_query(graph, query) → raise on invalid input
        - _run(graph, query)            → the algorithm's result
    """

    def execute(self, graph: Graph, query: TQuery) -> TResult:
        """
        Template Method: validate → run.

        Validation happens before any work, so a rejected query never
        leaves partial traversal state behind.
        """
        self._validate_query(graph, query)
        return self._run(graph, query)

    @abstractmethod
    def _validate_query(self, graph: Graph, query: TQuery) -> None:
        """
        Validate the query against the graph; raise a GraphError on failure.
        """
        ...

    @abstractmethod
    def _run(self, graph: Graph, query: TQuery) -> TResult:
        ...
