"""Context capability consumed by the search algorithms.

A context is the simulated environment being searched. The core never
implements one; it only talks to it through ``actions``, ``apply``,
``evaluate`` and one of two branching strategies:

- copy-on-branch: ``branch()`` returns an independent copy
- checkpoint/restore: ``checkpoint()`` returns a token, ``restore(token)``
  rolls the context back to it

Search assumes the context is deterministic and perfectly observable.
"""

from contextlib import contextmanager
from typing import Any, Hashable, Iterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Context(Protocol):
    """Environment model searched by ``full``, ``greedy`` and ``breadth``."""

    def actions(self) -> Sequence[Hashable]:
        """Actions available from the current state, in enumeration order."""
        ...

    def apply(self, action: Hashable) -> None:
        """Advance to the successor state.

        Raises:
            InvalidActionError: If the action is invalid for the current state
        """
        ...

    def evaluate(self) -> float:
        """Raw utility of the current state."""
        ...


@runtime_checkable
class BranchingContext(Context, Protocol):
    """Context that can produce independent copies of itself."""

    def branch(self) -> "BranchingContext":
        ...


@runtime_checkable
class CheckpointContext(Context, Protocol):
    """Context that can save and roll back its own state."""

    def checkpoint(self) -> Any:
        ...

    def restore(self, token: Any) -> None:
        ...


def supports_branching(context: Any) -> bool:
    """Check whether a context offers either branching strategy."""
    return isinstance(context, BranchingContext) or isinstance(context, CheckpointContext)


@contextmanager
def branched(context: Context) -> Iterator[Context]:
    """Scope in which the context can be mutated without leaking out.

    Copying contexts yield a fresh copy. Checkpoint contexts yield themselves
    and are restored on every exit from the block, including exceptions.

    Raises:
        TypeError: If the context supports neither strategy
    """
    if isinstance(context, BranchingContext):
        yield context.branch()
    elif isinstance(context, CheckpointContext):
        token = context.checkpoint()
        try:
            yield context
        finally:
            context.restore(token)
    else:
        raise TypeError(
            f"{type(context).__name__} must implement branch() or checkpoint()/restore()"
        )
