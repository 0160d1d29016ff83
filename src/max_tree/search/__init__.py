"""Search module: maximum tree construction and analysis.

- breadth builds one level of children for every available action
- full builds the whole tree, finding the global maximum
- greedy hill-climbs the real context, finding a local maximum
"""

from .node import MaxNode, ActionFailure
from .propagate import propagate, propagate_path, propagate_tree
from .analysis import SearchAnalysis
from .breadth import breadth, evaluate_node
from .full import full, expand, should_stop
from .greedy import greedy, select_best
from .tree import MaxTree, update

__all__ = [
    "MaxNode",
    "ActionFailure",
    "propagate",
    "propagate_path",
    "propagate_tree",
    "SearchAnalysis",
    "breadth",
    "evaluate_node",
    "full",
    "expand",
    "should_stop",
    "greedy",
    "select_best",
    "MaxTree",
    "update",
]
