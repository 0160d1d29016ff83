"""Property tests: maximum tree invariants on random trees.

For every finalized node:
    utility == max(own_utility, max(child.utility))
    terminal == (utility == own_utility)
"""

import pytest
import numpy as np
from max_tree import MaxTree, SearchConfig, full, greedy


def _check_invariants(root):
    for node in root.iter_nodes():
        expected = max([node.own_utility] + [c.utility for c in node.children])
        assert node.utility == expected
        assert node.terminal == (node.utility == node.own_utility)
        if node.is_leaf():
            assert node.terminal
            assert node.utility == node.own_utility
        for child in node.children:
            assert child.depth == node.depth + 1


@pytest.mark.parametrize("tie_values", [False, True])
def test_full_search_invariants(make_context, random_spec, tie_values):
    rng = np.random.default_rng(7)
    for _ in range(25):
        spec = random_spec(rng, max_depth=4, max_branch=3, tie_values=tie_values)
        root = full(make_context(spec))
        _check_invariants(root)


def test_full_root_is_global_maximum(make_context, random_spec):
    rng = np.random.default_rng(11)

    def all_utilities(spec):
        yield spec[0]
        for child in spec[1].values():
            yield from all_utilities(child)

    for _ in range(25):
        spec = random_spec(rng, max_depth=4, max_branch=3)
        root = full(make_context(spec))
        assert root.utility == max(all_utilities(spec))
        assert MaxTree(root).best_terminal().own_utility == root.utility


def test_greedy_path_invariants(make_context, random_spec):
    rng = np.random.default_rng(3)
    for _ in range(25):
        spec = random_spec(rng, max_depth=5, max_branch=4)
        for elim in (True, False):
            path = greedy(make_context(spec), SearchConfig(greedy_elim=elim))
            _check_invariants(path[0])
            assert path[-1].terminal
            assert path[0].utility == path[-1].own_utility


def test_depth_discount_exact(make_context):
    d = 0.3
    # The same raw utility reached at depth 1 and at depth 3.
    spec = (0.0, {
        "short": (7.0, {}),
        "long": (0.0, {"x": (0.0, {"y": (7.0, {})})}),
    })
    root = full(make_context(spec), SearchConfig(eps_depth=d))
    shallow = root.children[0]
    deep = root.children[1].children[0].children[0]
    assert shallow.own_utility - deep.own_utility == pytest.approx(d * 2)
    assert root.optimal_actions() == ["short"]
    assert not root.children[1].children[0].terminal
