"""Bottom-up utility propagation.

Finalization is a post-order pass: a node is finalized once, after all of
its children are. After that:

    utility == max(own_utility, max(child.utility for child in children))
"""

from typing import List

from .node import MaxNode


def propagate(node: MaxNode) -> MaxNode:
    """Finalize a node from its already finalized children.

    A child overrides the node only when strictly greater, so ties leave the
    node terminal.
    """
    utility = node.own_utility
    for child in node.children:
        if child.utility > utility:
            utility = child.utility
    node.utility = utility
    return node


def propagate_path(path: List[MaxNode]) -> None:
    """Finalize a root-to-leaf path, deepest node first."""
    for node in reversed(path):
        propagate(node)


def propagate_tree(root: MaxNode) -> MaxNode:
    """Finalize a whole tree built by a custom algorithm."""
    order = list(root.iter_nodes())
    for node in reversed(order):
        propagate(node)
    return root
