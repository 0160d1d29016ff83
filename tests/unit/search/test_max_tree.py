"""Test tree analysis, networkx export and committing optimal actions."""

import pytest
import networkx as nx
from max_tree import (
    CommittedActionError,
    InvalidActionError,
    MaxNode,
    MaxTree,
    SearchAnalysis,
    full,
    update,
)


@pytest.fixture
def labyrinth_spec():
    return (0.0, {
        "left": (1.0, {"up": (4.0, {}), "down": (0.5, {})}),
        "right": (2.0, {}),
    })


def test_statistics(make_context, labyrinth_spec):
    tree = MaxTree(full(make_context(labyrinth_spec)))
    stats = tree.get_statistics()
    assert stats["total_nodes"] == 5
    assert stats["leaf_nodes"] == 3
    # right, up and down keep their own utility
    assert stats["terminal_nodes"] == 3
    assert stats["max_depth"] == 2
    assert stats["root_utility"] == 4.0
    assert stats["root_terminal"] is False


def test_optimal_nodes_and_best_terminal(make_context, labyrinth_spec):
    tree = MaxTree(full(make_context(labyrinth_spec)))
    assert tree.optimal_path() == [0, 0]
    assert [n.action for n in tree.optimal_nodes()] == [None, "left", "up"]
    best = tree.best_terminal()
    assert best.terminal
    assert best.own_utility == tree.root.utility


def test_check_unique_actions_whole_tree(make_context, labyrinth_spec):
    tree = MaxTree(full(make_context(labyrinth_spec)))
    assert tree.check_unique_actions()

    tree.root.children[0].children.append(MaxNode(own_utility=0.0, depth=2, action="up"))
    assert not tree.check_unique_actions()


def test_to_networkx(make_context, labyrinth_spec):
    graph = MaxTree(full(make_context(labyrinth_spec))).to_networkx()

    assert isinstance(graph, nx.DiGraph)
    assert graph.number_of_nodes() == 5
    assert graph.number_of_edges() == 4
    assert nx.is_tree(graph)
    assert graph.nodes[0]["utility"] == 4.0
    assert graph.nodes[0]["terminal"] is False
    assert graph.edges[0, 1]["action"] == "left"
    assert graph.nodes[1]["depth"] == 1


def test_update_walks_optimal_path(make_context, labyrinth_spec):
    root = full(make_context(labyrinth_spec))
    ctx = make_context(labyrinth_spec)

    node = root
    while True:
        i = update(node, ctx)
        if i is None:
            break
        node = node.children[i]

    assert ctx.path == ("left", "up")
    assert node.terminal


def test_update_terminal_node_does_nothing(make_context):
    spec = (5.0, {"a": (1.0, {})})
    ctx = make_context(spec)
    root = full(ctx)
    assert update(root, ctx) is None
    assert ctx.path == ()


def test_update_failure_raises(make_context, labyrinth_spec):
    root = full(make_context(labyrinth_spec))
    ctx = make_context(labyrinth_spec, fail={"left"})
    with pytest.raises(CommittedActionError) as excinfo:
        update(root, ctx)
    assert excinfo.value.action == "left"
    assert isinstance(excinfo.value.__cause__, InvalidActionError)


def test_analysis_memory_estimates():
    analysis = SearchAnalysis(node_count=2048)
    assert analysis.kib(node_size=512) == 1024.0
    assert analysis.mib(node_size=512) == 1.0
    assert analysis.gib(node_size=1024 * 1024) == 2.0
    assert analysis.memory_exceeded(1.0, node_size=512)
    assert not analysis.memory_exceeded(2.0, node_size=512)

    analysis.discard_nodes(5000)
    assert analysis.node_count == 0
