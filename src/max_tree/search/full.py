"""Full search: the complete maximum tree within the explored horizon.

Depth-first. Each child is searched inside its own branch of the context
and finalized before the next sibling is created, so only one path of
live branches exists at a time.
"""

import logging
from typing import Callable, Optional

from ..core.config import SearchConfig
from ..core.context import Context
from .analysis import SearchAnalysis
from .breadth import breadth, evaluate_node
from .node import MaxNode
from .propagate import propagate

logger = logging.getLogger(__name__)

StopRule = Callable[[MaxNode], bool]


def should_stop(
    node: MaxNode,
    config: SearchConfig,
    analysis: SearchAnalysis,
    stop: Optional[StopRule] = None,
) -> bool:
    """Check the stopping rule before expanding a node.

    Configured limits come first, then the caller's rule. Shared by full
    and greedy search so both honor the same limits.
    """
    if config.depth_reached(node.depth):
        return True
    if config.nodes_exhausted(analysis.node_count):
        return True
    if config.max_mib is not None and analysis.memory_exceeded(config.max_mib):
        return True
    return stop is not None and bool(stop(node))


def full(
    context: Context,
    config: Optional[SearchConfig] = None,
    stop: Optional[StopRule] = None,
    analysis: Optional[SearchAnalysis] = None,
    depth: int = 0,
) -> MaxNode:
    """Build the maximum tree reachable from the context's current state.

    Args:
        context: Context positioned at the root state
        config: Search configuration
        stop: Optional stop(node) -> bool; stopped nodes become leaves
        analysis: Optional counters (node count, failed actions)
        depth: Depth assigned to the root

    Returns:
        Root node with utility and terminal finalized everywhere
    """
    config = config or SearchConfig()
    analysis = analysis if analysis is not None else SearchAnalysis()

    root = evaluate_node(context, depth, config)
    expand(root, context, config, analysis, stop)

    logger.info(f"Full search done: utility={root.utility:.6g}, "
                f"nodes={analysis.node_count}, failures={len(analysis.failures)}")
    return root


def expand(
    node: MaxNode,
    context: Context,
    config: SearchConfig,
    analysis: SearchAnalysis,
    stop: Optional[StopRule] = None,
) -> MaxNode:
    """Fully search below an existing node and finalize it.

    The context must be positioned at the node's state. Lets a custom
    algorithm continue a tree from any node.
    """
    if not should_stop(node, config, analysis, stop):
        def visit(child: MaxNode, branch: Context) -> None:
            expand(child, branch, config, analysis, stop)

        node.children = breadth(
            context,
            node.depth,
            config,
            analysis=analysis,
            on_child=visit,
            parent=node,
        )
    return propagate(node)
