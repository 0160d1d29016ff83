"""Pytest fixtures for testing.

Mock contexts are deterministic and table driven. A tree spec is a nested
tuple ``(raw_utility, {action: child_spec, ...})``; states are identified by
the path of actions from the root.
"""

import pytest
import numpy as np

from max_tree import InvalidActionError


class TableContext:
    """Deterministic context walking a nested tree spec."""

    def __init__(self, spec, fail=(), path=()):
        self.spec = spec
        self.fail = set(fail)
        self.path = tuple(path)
        self.apply_calls = 0

    def _node(self):
        node = self.spec
        for action in self.path:
            node = node[1][action]
        return node

    def actions(self):
        return list(self._node()[1])

    def apply(self, action):
        self.apply_calls += 1
        if action in self.fail or action not in self._node()[1]:
            raise InvalidActionError(action)
        self.path = self.path + (action,)

    def evaluate(self):
        return float(self._node()[0])


class TreeContext(TableContext):
    """Copy-on-branch variant."""

    def branch(self):
        return TreeContext(self.spec, self.fail, self.path)


class CheckpointTreeContext(TableContext):
    """Checkpoint/restore variant mutating a single state."""

    def checkpoint(self):
        return self.path

    def restore(self, token):
        self.path = token


class ChainContext:
    """A chain where the raw utility equals the depth."""

    def __init__(self, length, position=0):
        self.length = length
        self.position = position

    def actions(self):
        return ["step"] if self.position < self.length else []

    def apply(self, action):
        if action != "step" or self.position >= self.length:
            raise InvalidActionError(action)
        self.position += 1

    def evaluate(self):
        return float(self.position)

    def branch(self):
        return ChainContext(self.length, self.position)


class BareContext:
    """Context without any branching strategy."""

    def actions(self):
        return ["a"]

    def apply(self, action):
        pass

    def evaluate(self):
        return 0.0


def leaf(utility):
    return (utility, {})


def random_tree_spec(rng, max_depth=4, max_branch=3, tie_values=False):
    """Random tree spec; tie_values draws from a tiny value set to force ties."""
    def build(depth):
        if tie_values:
            utility = float(rng.integers(0, 3))
        else:
            utility = float(np.round(rng.normal(), 3))
        if depth >= max_depth:
            return (utility, {})
        n = int(rng.integers(0, max_branch + 1))
        return (utility, {f"a{i}": build(depth + 1) for i in range(n)})
    return build(0)


@pytest.fixture
def make_context():
    """Factory for mock contexts over a tree spec."""
    def factory(spec, fail=(), checkpoint=False):
        cls = CheckpointTreeContext if checkpoint else TreeContext
        return cls(spec, fail)
    return factory


@pytest.fixture
def chain_context():
    return ChainContext


@pytest.fixture
def bare_context():
    return BareContext()


@pytest.fixture
def scenario_a_spec():
    """Root with three leaves of raw utility 5, 9 and 3."""
    return (0.0, {"a": leaf(5.0), "b": leaf(9.0), "c": leaf(3.0)})


@pytest.fixture
def rng():
    """Seeded generator for reproducible random trees."""
    return np.random.default_rng(42)


@pytest.fixture
def random_spec():
    return random_tree_spec
