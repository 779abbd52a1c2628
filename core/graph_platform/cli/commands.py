"""
    CLI Commands - concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each script line is turned into a command object with
    ``execute(platform) → CommandResult``.  Commands only talk to the
    ``GraphPlatform`` facade, never to graphs or algorithms directly.

    Supported commands:
    ───────────────────
        CreateGraph  <graph>
        CreateNode   <node> <cost>
        AddNode      <graph> <node>
        AddEdge      <graph> <parent> <child>
        ListNodes    <graph>
        ListChildren <graph> <node>
        FindPath     <graph> <src> [<src> ...] -> <dst> [<dst> ...]
        DfsAlgorithm <graph> <start> [<target>]
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from api.api.types import Result
from core.graph_platform.core import GraphPlatform


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all script commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, platform: GraphPlatform) -> CommandResult:
        """Execute the command against the platform."""
        ...


# ═════════════════════════════════════════════════════════════════
#  REGISTRY COMMANDS
# ═════════════════════════════════════════════════════════════════

class CreateGraphCommand(Command):
    """
    Create a new empty graph.

    Syntax:
        CreateGraph G1
    """

    def __init__(self, graph_name: str):
        self._graph_name = graph_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        platform.create_graph(self._graph_name)
        return CommandResult(True, f"created graph {self._graph_name}")


class CreateNodeCommand(Command):
    """
    Create a node with a cost.  The node does not belong to any graph yet.

    Syntax:
        CreateNode n1 5
    """

    def __init__(self, node_name: str, cost: str):
        self._node_name = node_name
        self._cost = cost

    def execute(self, platform: GraphPlatform) -> CommandResult:
        node = platform.create_node(self._node_name, self._cost)
        return CommandResult(
            True,
            f"created node {node.name} with cost {node.cost}",
            data=node.to_dict(),
        )


# ═════════════════════════════════════════════════════════════════
#  GRAPH MUTATION COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddNodeCommand(Command):
    """
    Add an existing node to an existing graph.

    Syntax:
        AddNode G1 n1
    """

    def __init__(self, graph_name: str, node_name: str):
        self._graph_name = graph_name
        self._node_name = node_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        result = platform.add_node(self._graph_name, self._node_name)
        if result == Result.ITEM_ALREADY_EXISTS:
            return CommandResult(
                False,
                f"node {self._node_name} already exists in {self._graph_name}",
                data={'result': result.value},
            )
        if not result.ok:
            return CommandResult(
                False,
                f"could not add node {self._node_name} to {self._graph_name}: invalid arguments",
                data={'result': result.value},
            )
        return CommandResult(True, f"added node {self._node_name} to {self._graph_name}")


class AddEdgeCommand(Command):
    """
    Add a directed edge between two members of a graph.

    Syntax:
        AddEdge G1 n1 n2
    """

    _FAILURES = {
        Result.ITEM_DOESNT_EXIST: "the nodes given are not in the graph {graph}",
        Result.ITEM_ALREADY_EXISTS: "the edge from {parent} to {child} already exists in {graph}",
        Result.INVALID_ARGUMENTS: "the edge arguments are invalid",
    }

    def __init__(self, graph_name: str, parent_name: str, child_name: str):
        self._graph_name = graph_name
        self._parent_name = parent_name
        self._child_name = child_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        result = platform.add_edge(self._graph_name, self._parent_name, self._child_name)
        if not result.ok:
            message = self._FAILURES[result].format(
                graph=self._graph_name, parent=self._parent_name, child=self._child_name,
            )
            return CommandResult(False, message, data={'result': result.value})

        return CommandResult(
            True,
            f"added edge from {self._parent_name} to {self._child_name} in {self._graph_name}",
        )


# ═════════════════════════════════════════════════════════════════
#  QUERY COMMANDS (no graph mutation)
# ═════════════════════════════════════════════════════════════════

class ListNodesCommand(Command):
    """
    List the nodes of a graph.

    Syntax:
        ListNodes G1
    """

    def __init__(self, graph_name: str):
        self._graph_name = graph_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        return CommandResult(True, platform.list_nodes(self._graph_name))


class ListChildrenCommand(Command):
    """
    List the children of a node, in the order their edges were added.

    Syntax:
        ListChildren G1 n1
    """

    def __init__(self, graph_name: str, node_name: str):
        self._graph_name = graph_name
        self._node_name = node_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        return CommandResult(True, platform.list_children(self._graph_name, self._node_name))


class FindPathCommand(Command):
    """
    Find the cheapest path from any source to any destination.

    Syntax:
        FindPath G1 n1 n2 -> n5 n6
    """

    def __init__(self, graph_name: str, sources: List[str], destinations: List[str]):
        self._graph_name = graph_name
        self._sources = list(sources)
        self._destinations = list(destinations)

    def execute(self, platform: GraphPlatform) -> CommandResult:
        path = platform.shortest_path(self._graph_name, self._sources, self._destinations)
        data = path.to_dict() if path is not None else {}
        # "no path" is a normal answer, not a failure
        return CommandResult(True, platform.format_path(self._graph_name, path), data=data)


class DfsCommand(Command):
    """
    Run a depth-first traversal, optionally searching for a target.

    Syntax:
        DfsAlgorithm G1 n1
        DfsAlgorithm G1 n1 n4
    """

    def __init__(self, graph_name: str, start_name: str, target_name: Optional[str] = None):
        self._graph_name = graph_name
        self._start_name = start_name
        self._target_name = target_name

    def execute(self, platform: GraphPlatform) -> CommandResult:
        return CommandResult(
            True,
            platform.run_dfs(self._graph_name, self._start_name, self._target_name),
        )


class HelpCommand(Command):
    """
    Display available script commands.

    Syntax:
        help
    """

    def execute(self, platform: GraphPlatform) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  CreateGraph <graph>
      Create an empty graph (replaces a graph of the same name).

  CreateNode <node> <cost>
      Create a node with a non-negative integer cost.

  AddNode <graph> <node>
      Add a created node to a graph.

  AddEdge <graph> <parent> <child>
      Add a directed edge between two nodes of the graph.

  ListNodes <graph>
      List the nodes of a graph.

  ListChildren <graph> <node>
      List the children of a node.

  FindPath <graph> <src> [<src> ...] -> <dst> [<dst> ...]
      Find the cheapest path from any source to any destination.

  DfsAlgorithm <graph> <start> [<target>]
      Depth-first traversal, or the DFS path to a target.

  help
      Show this help text.

Lines that are blank or start with '#' are copied to the output.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
