"""Search analysis: node counting, memory estimates, failed actions."""

from dataclasses import dataclass, field
from typing import List

from .node import ActionFailure

# Rough per-node footprint of a MaxNode with an empty child list.
DEFAULT_NODE_SIZE = 512


@dataclass
class SearchAnalysis:
    """Counters collected while searching.

    Attributes:
        node_count: Nodes created by breadth expansion (roots excluded)
        failures: Every action that failed to apply during exploration
    """
    node_count: int = 0
    failures: List[ActionFailure] = field(default_factory=list)

    def record_node(self) -> None:
        self.node_count += 1

    def record_failure(self, failure: ActionFailure) -> None:
        self.failures.append(failure)

    def discard_nodes(self, count: int) -> None:
        """Forget nodes that were dropped from the tree."""
        self.node_count = max(0, self.node_count - count)

    def kib(self, node_size: int = DEFAULT_NODE_SIZE) -> float:
        """Estimated node memory in KiB."""
        return self.node_count * node_size / 1024.0

    def mib(self, node_size: int = DEFAULT_NODE_SIZE) -> float:
        """Estimated node memory in MiB."""
        return self.node_count * node_size / 1048576.0

    def gib(self, node_size: int = DEFAULT_NODE_SIZE) -> float:
        """Estimated node memory in GiB."""
        return self.node_count * node_size / 1073741824.0

    def memory_exceeded(self, limit_mib: float, node_size: int = DEFAULT_NODE_SIZE) -> bool:
        return self.mib(node_size) >= limit_mib

    def get_statistics(self) -> dict:
        return {
            "node_count": self.node_count,
            "failures": len(self.failures),
            "mib": self.mib(),
        }
