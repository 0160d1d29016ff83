"""Search configuration shared by all algorithms."""

import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError


@dataclass
class SearchConfig:
    """Configuration for maximum tree search.

    Every limit is applied identically by full and greedy search, so the
    two stay comparable.

    Attributes:
        eps_depth: Utility discount per depth (e.g. 1e-6). None or 0 disables.
        max_depth: Nodes at this depth are not expanded.
        max_actions: Only the first N actions are considered per expansion.
        max_nodes: Stop expanding once this many nodes have been created.
        max_mib: Stop expanding once the estimated node memory reaches this
            many MiB.
        greedy_elim: Greedy search keeps only the chosen child per path node.
    """
    eps_depth: Optional[float] = None
    max_depth: Optional[int] = None
    max_actions: Optional[int] = None
    max_nodes: Optional[int] = None
    max_mib: Optional[float] = None
    greedy_elim: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.eps_depth is not None and (
                isinstance(self.eps_depth, bool) or not isinstance(self.eps_depth, (int, float))):
            raise ConfigError(f"eps_depth must be a number, got {type(self.eps_depth).__name__}")
        if self.eps_depth is not None and not math.isfinite(self.eps_depth):
            raise ConfigError(f"eps_depth must be finite, got {self.eps_depth}")
        if self.eps_depth is not None and self.eps_depth < 0:
            raise ConfigError(f"eps_depth must be non-negative, got {self.eps_depth}")
        if self.max_mib is not None:
            if isinstance(self.max_mib, bool) or not isinstance(self.max_mib, (int, float)):
                raise ConfigError(f"max_mib must be a number, got {type(self.max_mib).__name__}")
            if not math.isfinite(self.max_mib) or self.max_mib < 0:
                raise ConfigError(f"max_mib must be finite and non-negative, got {self.max_mib}")
        for name in ("max_depth", "max_actions", "max_nodes"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ConfigError(f"{name} must be non-negative, got {value}")

    def discount(self, depth: int) -> float:
        """Utility subtracted from a node created at ``depth``."""
        if not self.eps_depth:
            return 0.0
        return self.eps_depth * depth

    def depth_reached(self, depth: int) -> bool:
        return self.max_depth is not None and depth >= self.max_depth

    def nodes_exhausted(self, node_count: int) -> bool:
        return self.max_nodes is not None and node_count >= self.max_nodes

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SearchConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown search options: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SearchConfig":
        return load_config(path)


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a SearchConfig from a YAML file.

    The options may sit at the top level or under a ``search:`` section.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with open(p, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")
    if "search" in data:
        data = data["search"] or {}
        if not isinstance(data, dict):
            raise ConfigError("Config section 'search' must be a mapping")
    return SearchConfig.from_dict(data)
