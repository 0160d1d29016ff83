"""Maximum tree wrapper for analysis.

Once a maximum tree is built, choosing the best course of action is
trivial: every node knows the best utility below it.
"""

import logging
from typing import Dict, List, Optional

import networkx as nx

from ..core.context import Context
from ..core.errors import CommittedActionError, InvalidActionError
from .node import MaxNode

logger = logging.getLogger(__name__)


class MaxTree:
    """Read-only analysis over a finalized maximum tree."""

    def __init__(self, root: MaxNode):
        self.root = root

    def count_nodes(self) -> int:
        """Count total nodes."""
        return sum(1 for _ in self.root.iter_nodes())

    def count_leaves(self) -> int:
        return sum(1 for node in self.root.iter_nodes() if node.is_leaf())

    def count_terminal(self) -> int:
        """Count nodes whose utility is not overridden by a child."""
        return sum(1 for node in self.root.iter_nodes() if node.terminal)

    def max_depth(self) -> int:
        return max(node.depth for node in self.root.iter_nodes())

    def optimal_path(self) -> List[int]:
        return self.root.optimal_path()

    def optimal_nodes(self) -> List[MaxNode]:
        """Nodes along the optimal path, root included."""
        node = self.root
        path = [node]
        for i in self.root.optimal_path():
            node = node.children[i]
            path.append(node)
        return path

    def best_terminal(self) -> MaxNode:
        """The node credited with the root's utility."""
        return self.optimal_nodes()[-1]

    def check_unique_actions(self) -> bool:
        """True if no node has two children reached by the same action."""
        return all(node.check_unique_actions() for node in self.root.iter_nodes())

    def to_networkx(self) -> nx.DiGraph:
        """Export as a directed graph keyed by pre-order index.

        Node attributes: own_utility, utility, depth, terminal.
        Edge attributes: action.
        """
        graph = nx.DiGraph()
        index: Dict[int, int] = {}
        for i, node in enumerate(self.root.iter_nodes()):
            index[id(node)] = i
            graph.add_node(
                i,
                own_utility=node.own_utility,
                utility=node.utility,
                depth=node.depth,
                terminal=node.terminal,
            )
        for node in self.root.iter_nodes():
            for child in node.children:
                graph.add_edge(index[id(node)], index[id(child)], action=child.action)
        return graph

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "leaf_nodes": self.count_leaves(),
            "terminal_nodes": self.count_terminal(),
            "max_depth": self.max_depth(),
            "root_utility": self.root.utility,
            "root_terminal": self.root.terminal,
        }


def update(node: MaxNode, context: Context) -> Optional[int]:
    """Advance the real context along the node's optimal action.

    Returns:
        Index of the chosen child, or None if the node is terminal

    Raises:
        CommittedActionError: If the context rejects the action
    """
    i = node.optimal()
    if i is None:
        return None
    action = node.children[i].action
    try:
        context.apply(action)
    except InvalidActionError as e:
        raise CommittedActionError(action, node.depth, cause=e) from e
    logger.debug(f"Committed action {action!r} from depth {node.depth}")
    return i
