"""Maximum tree node.

Each node stores the utility of its own state and the maximum utility of
itself or any descendant. A child overrides its parent's utility only when
strictly better, so on ties the node itself is credited as the maximum.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, List, Optional


@dataclass(frozen=True)
class ActionFailure:
    """An action that failed to apply while expanding a node.

    Attributes:
        action: The rejected action
        depth: Depth the child would have had
        error: The exception raised by the context
    """
    action: Hashable
    depth: int
    error: Exception


@dataclass
class MaxNode:
    """Node of a maximum tree.

    Attributes:
        own_utility: Discounted utility of this node's state, fixed at creation
        utility: Maximum of own_utility and every child's utility
        depth: Distance from the search root
        action: Action applied to the parent to reach this node (None at root)
        children: Child nodes in action enumeration order
        failed_actions: Actions that failed to apply during expansion
    """
    own_utility: float
    depth: int = 0
    action: Optional[Hashable] = None
    children: List['MaxNode'] = field(default_factory=list)
    failed_actions: List[ActionFailure] = field(default_factory=list)
    utility: Optional[float] = None

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
        if self.utility is None:
            self.utility = self.own_utility

    @property
    def terminal(self) -> bool:
        """True if no child overrides this node's utility."""
        return self.utility == self.own_utility

    def is_leaf(self) -> bool:
        """Check if node has no children."""
        return len(self.children) == 0

    def optimal(self) -> Optional[int]:
        """Index of the child achieving this node's utility.

        Returns None for a terminal node. Ties go to the first child.
        """
        if self.terminal:
            return None
        for i, child in enumerate(self.children):
            if child.utility == self.utility:
                return i
        return None

    def optimal_child(self) -> Optional['MaxNode']:
        i = self.optimal()
        return None if i is None else self.children[i]

    def optimal_path(self) -> List[int]:
        """Child indices from this node down to the terminal it leads to."""
        path = []
        node = self
        while True:
            i = node.optimal()
            if i is None:
                return path
            path.append(i)
            node = node.children[i]

    def optimal_actions(self) -> List[Any]:
        """Actions along the optimal path."""
        actions = []
        node = self
        for i in self.optimal_path():
            node = node.children[i]
            actions.append(node.action)
        return actions

    def check_unique_actions(self) -> bool:
        """Returns True if all children were reached by distinct actions."""
        seen = set()
        for child in self.children:
            if child.action in seen:
                return False
            seen.add(child.action)
        return True

    def iter_nodes(self) -> Iterator['MaxNode']:
        """Pre-order walk of this subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return (f"MaxNode(action={self.action!r}, depth={self.depth}, "
                f"own={self.own_utility:.6g}, utility={self.utility:.6g}, "
                f"children={len(self.children)}, terminal={self.terminal})")
