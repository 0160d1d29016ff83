"""Breadth expansion: one level of children for every available action.

Used as the common sub-procedure of full and greedy search, and as a
building block for custom algorithms.
"""

import logging
from typing import Callable, List, Optional

from ..core.config import SearchConfig
from ..core.context import Context, branched
from ..core.errors import InvalidActionError
from .analysis import SearchAnalysis
from .node import ActionFailure, MaxNode

logger = logging.getLogger(__name__)

ChildCallback = Callable[[MaxNode, Context], None]


def evaluate_node(context: Context, depth: int, config: SearchConfig, action=None) -> MaxNode:
    """Create an unexpanded node for the context's current state."""
    own_utility = float(context.evaluate()) - config.discount(depth)
    return MaxNode(own_utility=own_utility, depth=depth, action=action)


def breadth(
    context: Context,
    depth: int,
    config: Optional[SearchConfig] = None,
    analysis: Optional[SearchAnalysis] = None,
    on_child: Optional[ChildCallback] = None,
    parent: Optional[MaxNode] = None,
) -> List[MaxNode]:
    """Build the children of the state the context is positioned at.

    Each action is applied inside its own branch of the context. An action
    that raises InvalidActionError is skipped; the failure is logged and
    recorded on ``analysis`` and ``parent`` but never aborts the expansion.

    Args:
        context: Context positioned at the parent state
        depth: Depth of the parent node
        config: Search configuration (discount, action cap)
        analysis: Optional counters to update
        on_child: Called as on_child(child, branch) while the branch is live
        parent: Node whose failed_actions receive the failures

    Returns:
        Unexpanded children in action enumeration order (empty if no actions)
    """
    config = config or SearchConfig()
    actions = list(context.actions())
    if config.max_actions is not None:
        actions = actions[:config.max_actions]

    children = []
    for action in actions:
        with branched(context) as branch:
            try:
                branch.apply(action)
            except InvalidActionError as e:
                failure = ActionFailure(action=action, depth=depth + 1, error=e)
                logger.warning(f"Skipping action {action!r} at depth {depth + 1}: {e}")
                if analysis is not None:
                    analysis.record_failure(failure)
                if parent is not None:
                    parent.failed_actions.append(failure)
                continue

            child = evaluate_node(branch, depth + 1, config, action=action)
            children.append(child)
            if analysis is not None:
                analysis.record_node()

            if on_child is not None:
                on_child(child, branch)

    logger.debug(f"Expanded depth {depth}: {len(children)}/{len(actions)} children")
    return children
