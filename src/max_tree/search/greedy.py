"""Greedy search: hill-climb one real step at a time.

Only picks choices that increase utility, so it finds a local maximum.
The context is actually advanced along the chosen path.
"""

import logging
from typing import List, Optional

from ..core.config import SearchConfig
from ..core.context import Context
from ..core.errors import CommittedActionError, InvalidActionError
from .analysis import SearchAnalysis
from .breadth import breadth, evaluate_node
from .full import StopRule, should_stop
from .node import MaxNode
from .propagate import propagate_path

logger = logging.getLogger(__name__)


def select_best(candidates: List[MaxNode]) -> Optional[MaxNode]:
    """Candidate with the greatest own utility, first one on ties."""
    best = None
    for candidate in candidates:
        if best is None or candidate.own_utility > best.own_utility:
            best = candidate
    return best


def greedy(
    context: Context,
    config: Optional[SearchConfig] = None,
    stop: Optional[StopRule] = None,
    analysis: Optional[SearchAnalysis] = None,
    depth: int = 0,
) -> List[MaxNode]:
    """Climb from the context's current state to a local maximum.

    Each iteration expands one level, stops if no candidate beats the
    current node, and otherwise applies the best candidate's action to the
    real context.

    Args:
        context: Context positioned at the start state; mutated in place
        config: Search configuration
        stop: Optional stop(node) -> bool checked before each expansion
        analysis: Optional counters (node count, failed actions)
        depth: Depth assigned to the start node

    Returns:
        The committed path, start node first, finalized

    Raises:
        CommittedActionError: If the chosen action fails on the real context
    """
    config = config or SearchConfig()
    analysis = analysis if analysis is not None else SearchAnalysis()

    node = evaluate_node(context, depth, config)
    path = [node]

    while not should_stop(node, config, analysis, stop):
        candidates = breadth(context, node.depth, config, analysis=analysis, parent=node)
        best = select_best(candidates)
        if best is None or node.own_utility >= best.own_utility:
            if config.greedy_elim:
                analysis.discard_nodes(len(candidates))
            else:
                node.children = candidates
            break

        try:
            context.apply(best.action)
        except InvalidActionError as e:
            propagate_path(path)
            raise CommittedActionError(best.action, node.depth, path, cause=e) from e

        if config.greedy_elim:
            analysis.discard_nodes(len(candidates) - 1)
            node.children = [best]
        else:
            node.children = candidates

        logger.debug(f"Greedy step {node.depth} -> {best.depth}: "
                     f"action={best.action!r}, utility={best.own_utility:.6g}")
        node = best
        path.append(node)

    propagate_path(path)
    logger.info(f"Greedy search done: steps={len(path) - 1}, "
                f"utility={path[-1].own_utility:.6g}")
    return path
