"""Core: context capability, configuration and errors."""

from .config import SearchConfig, load_config
from .context import (
    BranchingContext,
    CheckpointContext,
    Context,
    branched,
    supports_branching,
)
from .errors import (
    CommittedActionError,
    ConfigError,
    InvalidActionError,
    MaxTreeError,
)

__all__ = [
    "SearchConfig",
    "load_config",
    "Context",
    "BranchingContext",
    "CheckpointContext",
    "branched",
    "supports_branching",
    "MaxTreeError",
    "InvalidActionError",
    "CommittedActionError",
    "ConfigError",
]
