"""max-tree: a utility maximizer built on a maximum tree.

A maximum tree stores, for every node, the maximum utility of the node or
any of its children:
- A leaf stores its own utility as maximum utility
- A node is terminal if no child has higher utility
- A node's utility is overridden when a child has higher utility

Components:
- core/ - Context capability, configuration, errors
- search/ - MaxNode, breadth expansion, full and greedy search, analysis

Full and greedy search assume a deterministic, perfectly observable
context. Whether reaching a terminal node is safe is for the application
to verify.
"""

__version__ = "0.1.0"

from .core.config import SearchConfig, load_config
from .core.context import BranchingContext, CheckpointContext, Context, branched
from .core.errors import CommittedActionError, ConfigError, InvalidActionError, MaxTreeError
from .search import (
    ActionFailure,
    MaxNode,
    MaxTree,
    SearchAnalysis,
    breadth,
    full,
    greedy,
    propagate,
    update,
)

__all__ = [
    "SearchConfig",
    "load_config",
    "Context",
    "BranchingContext",
    "CheckpointContext",
    "branched",
    "MaxTreeError",
    "InvalidActionError",
    "CommittedActionError",
    "ConfigError",
    "ActionFailure",
    "MaxNode",
    "MaxTree",
    "SearchAnalysis",
    "breadth",
    "full",
    "greedy",
    "propagate",
    "update",
]
