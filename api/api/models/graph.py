"""
    Graph model - directed graph over weighted nodes.
    Cyclic graphs and self-loops are allowed.
"""
from typing import Dict, List, Optional

from ..exceptions import InvalidArgumentsError, ItemDoesntExistError
from ..types import Result
from .node import WeightedNode


NODE_ORDER_ALPHABETICAL = "alphabetical"
NODE_ORDER_INSERTION = "insertion"
NODE_ORDERS = (NODE_ORDER_ALPHABETICAL, NODE_ORDER_INSERTION)


class Graph:
    """
        Class for a directed graph of weighted nodes.

        Nodes are held by reference and keyed by name, so one node can be
        a member of several graphs.  Adjacency is stored by name with
        children kept in insertion order.
    """

    def __init__(self, name: str):
        """
        Initialize a graph.
        Args:
            name: Unique identifier of the graph
        """
        self.name = name
        self._nodes: Dict[str, WeightedNode] = {}  # name -> WeightedNode
        # parent name -> {child name: None}, a dict used as an ordered set
        self._adjacency: Dict[str, Dict[str, None]] = {}

    def add_node(self, node: WeightedNode, name: Optional[str] = None) -> Result:
        """Add a node to the graph under its name"""
        if node is None:
            return Result.INVALID_ARGUMENTS
        if name is None:
            name = node.name
        if not name or name != node.name:
            return Result.INVALID_ARGUMENTS
        if name in self._nodes:
            return Result.ITEM_ALREADY_EXISTS

        self._nodes[name] = node
        self._adjacency[name] = {}
        return Result.SUCCESS

    def add_edge(self, parent_name: str, child_name: str) -> Result:
        """
        Add a directed edge parent -> child.

        Every check runs before the adjacency is touched, so a rejected
        edge leaves the graph unchanged.
        """
        if not parent_name or not child_name:
            return Result.INVALID_ARGUMENTS
        if parent_name not in self._nodes or child_name not in self._nodes:
            return Result.ITEM_DOESNT_EXIST

        children = self._adjacency[parent_name]
        if child_name in children:
            return Result.ITEM_ALREADY_EXISTS

        children[child_name] = None
        return Result.SUCCESS

    def get_node(self, name: str) -> Optional[WeightedNode]:
        return self._nodes.get(name)

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def __contains__(self, name) -> bool:
        return name in self._nodes

    def has_edge(self, parent_name: str, child_name: str) -> bool:
        return child_name in self._adjacency.get(parent_name, {})

    def get_nodes(self) -> List[WeightedNode]:
        """All member nodes in insertion order"""
        return list(self._nodes.values())

    def get_children(self, parent_name: str) -> List[str]:
        """
        Names of the children of `parent_name`, in edge insertion order.

        Raises:
            ItemDoesntExistError: If the parent is not a member of this graph
        """
        if parent_name not in self._nodes:
            raise ItemDoesntExistError(f"Node {parent_name} not in graph {self.name}")
        return list(self._adjacency[parent_name])

    def get_node_names(self, order: str = NODE_ORDER_ALPHABETICAL) -> List[str]:
        """
        Member node names, alphabetical by default.

        Args:
            order: "alphabetical" or "insertion"
        """
        if order == NODE_ORDER_ALPHABETICAL:
            return sorted(self._nodes)
        if order == NODE_ORDER_INSERTION:
            return list(self._nodes)
        raise InvalidArgumentsError(f"Unknown node order '{order}'. Use one of {NODE_ORDERS}.")

    def get_nodes_string(self, order: str = NODE_ORDER_ALPHABETICAL) -> str:
        """Render as '<graph> contains: n1 n2 ...'"""
        names = self.get_node_names(order)
        return " ".join([f"{self.name} contains:"] + names)

    def get_children_string(self, parent_name: str) -> str:
        """Render as 'the children of <parent> in <graph> are: c1 c2 ...'"""
        children = self.get_children(parent_name)
        return " ".join([f"the children of {parent_name} in {self.name} are:"] + children)

    def get_number_of_nodes(self) -> int:
        return len(self._nodes)

    def get_number_of_edges(self) -> int:
        return sum(len(children) for children in self._adjacency.values())

    def __repr__(self) -> str:
        return f"Graph({self.name}, nodes={self.get_number_of_nodes()}, edges={self.get_number_of_edges()})"

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'nodes': [node.to_dict() for node in self._nodes.values()],
            'edges': [
                {'parent': parent, 'child': child}
                for parent, children in self._adjacency.items()
                for child in children
            ],
        }
