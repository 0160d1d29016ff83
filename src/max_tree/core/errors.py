"""Exceptions raised by the maximum tree core.

Only action application is fallible. Exploratory failures are recovered
per branch; a failure of an action that was committed to the real context
is raised to the caller.
"""

from typing import Any, List, Optional


class MaxTreeError(Exception):
    """Base class for all max-tree errors."""


class InvalidActionError(MaxTreeError):
    """Raised by a context when an action cannot be applied to its state."""

    def __init__(self, action: Any = None, message: Optional[str] = None):
        self.action = action
        super().__init__(message or f"Invalid action: {action!r}")


class CommittedActionError(InvalidActionError):
    """An action chosen for the real context failed to apply.

    Attributes:
        action: The action that failed
        depth: Depth of the node the action was applied from
        path: Nodes committed before the failure (may be empty)
    """

    def __init__(self, action: Any, depth: int, path: Optional[List] = None,
                 cause: Optional[BaseException] = None):
        self.depth = depth
        self.path = list(path or [])
        message = f"Committed action {action!r} failed at depth {depth}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(action, message)


class ConfigError(MaxTreeError, ValueError):
    """Invalid search configuration."""
