# tests/core_test/test_platform.py
"""
Tests for GraphPlatform (core/graph_platform/core.py) and PlatformConfig.
"""
import pytest

from api.api.exceptions import InvalidArgumentsError, ItemDoesntExistError
from api.api.types import Result
from core.graph_platform.config import PlatformConfig
from core.graph_platform.core import GraphPlatform


# ═════════════════════════════════════════════════════════════════
#  REGISTRIES
# ═════════════════════════════════════════════════════════════════

class TestRegistries:

    def test_create_graph(self):
        p = GraphPlatform()
        graph = p.create_graph("G1")
        assert p.get_graph("G1") is graph
        assert p.list_graphs() == ["G1"]

    def test_create_graph_overwrites(self, platform):
        old = platform.get_graph("G")
        new = platform.create_graph("G")
        assert new is not old
        assert new.get_number_of_nodes() == 0

    def test_create_graph_empty_name_raises(self):
        with pytest.raises(InvalidArgumentsError):
            GraphPlatform().create_graph("")

    def test_create_node_from_string_cost(self):
        node = GraphPlatform().create_node("n1", "7")
        assert node.cost == 7

    @pytest.mark.parametrize("cost", ["-1", "abc", "2.5", -3])
    def test_create_node_bad_cost_raises(self, cost):
        with pytest.raises(InvalidArgumentsError):
            GraphPlatform().create_node("n1", cost)

    def test_node_registry_independent_of_graphs(self):
        p = GraphPlatform()
        p.create_node("lonely", 1)
        p.create_graph("G1")
        assert p.get_node("lonely").name == "lonely"
        assert p.list_nodes("G1") == "G1 contains:"

    def test_recreated_node_does_not_touch_graphs(self, platform):
        platform.create_node("a", 50)
        assert platform.get_node("a").cost == 50
        assert platform.get_graph("G").get_node("a").cost == 1

    def test_unknown_names_raise(self, platform):
        with pytest.raises(ItemDoesntExistError):
            platform.get_graph("nope")
        with pytest.raises(ItemDoesntExistError):
            platform.get_node("nope")
        with pytest.raises(ItemDoesntExistError):
            platform.add_node("nope", "a")
        with pytest.raises(ItemDoesntExistError):
            platform.add_node("G", "nope")

    def test_singleton(self):
        first = GraphPlatform.get_instance()
        assert GraphPlatform.get_instance() is first
        GraphPlatform.reset_instance()
        assert GraphPlatform.get_instance() is not first


# ═════════════════════════════════════════════════════════════════
#  MUTATIONS
# ═════════════════════════════════════════════════════════════════

class TestMutations:

    def test_add_node_twice(self, platform):
        assert platform.add_node("G", "a") == Result.ITEM_ALREADY_EXISTS

    def test_node_in_two_graphs(self, platform):
        platform.create_graph("H")
        assert platform.add_node("H", "a") == Result.SUCCESS
        assert platform.get_graph("H").get_node("a") is platform.get_graph("G").get_node("a")

    def test_add_edge_results(self, platform):
        platform.create_node("d", 1)
        assert platform.add_edge("G", "a", "b") == Result.ITEM_ALREADY_EXISTS
        assert platform.add_edge("G", "a", "d") == Result.ITEM_DOESNT_EXIST
        assert platform.add_edge("G", "c", "a") == Result.SUCCESS
        assert platform.list_children("G", "a") == "the children of a in G are: b c"

    def test_add_edge_unknown_graph_raises(self, platform):
        with pytest.raises(ItemDoesntExistError):
            platform.add_edge("nope", "a", "b")


# ═════════════════════════════════════════════════════════════════
#  QUERIES
# ═════════════════════════════════════════════════════════════════

class TestQueries:

    def test_list_nodes_alphabetical(self):
        p = GraphPlatform()
        p.create_graph("G")
        for name in ["n3", "n1", "n2"]:
            p.create_node(name, 1)
            p.add_node("G", name)
        assert p.list_nodes("G") == "G contains: n1 n2 n3"

    def test_list_nodes_insertion_order_config(self):
        p = GraphPlatform(PlatformConfig(node_listing_order="insertion"))
        p.create_graph("G")
        for name in ["n3", "n1", "n2"]:
            p.create_node(name, 1)
            p.add_node("G", name)
        assert p.list_nodes("G") == "G contains: n3 n1 n2"

    def test_list_children_unknown_node_raises(self, platform):
        with pytest.raises(ItemDoesntExistError):
            platform.list_children("G", "z")

    def test_find_shortest_path(self, platform):
        assert platform.find_shortest_path("G", ["a"], ["c"]) == "found path in G: a c with cost 2"

    def test_find_shortest_path_none(self, platform):
        assert platform.find_shortest_path("G", ["c"], ["a"]) == "no path found in G"

    def test_find_shortest_path_unknown_node(self, platform):
        with pytest.raises(ItemDoesntExistError):
            platform.find_shortest_path("G", ["a"], ["z"])

    def test_shortest_path_object(self, platform):
        path = platform.shortest_path("G", ["a", "b"], ["c"])
        assert path.names == ("a", "c")

    def test_run_dfs(self, platform):
        assert platform.run_dfs("G", "a") == "dfs algorithm output G a: a b c"

    def test_run_dfs_target(self, platform):
        assert platform.run_dfs("G", "a", "c") == "dfs algorithm output G a -> c: a b c"

    def test_run_dfs_no_path(self, platform):
        assert platform.run_dfs("G", "c", "a") == "dfs algorithm output G c -> a: no path was found"

    def test_dfs_unknown_start(self, platform):
        with pytest.raises(ItemDoesntExistError):
            platform.run_dfs("G", "z")


# ═════════════════════════════════════════════════════════════════
#  CONFIG
# ═════════════════════════════════════════════════════════════════

class TestPlatformConfig:

    def test_defaults(self):
        config = PlatformConfig()
        assert config.node_listing_order == "alphabetical"
        assert config.echo_comments is True
        assert config.path_arrow == "->"

    def test_invalid_order(self):
        with pytest.raises(InvalidArgumentsError):
            PlatformConfig(node_listing_order="random")

    def test_invalid_arrow(self):
        with pytest.raises(InvalidArgumentsError):
            PlatformConfig(path_arrow="- >")
