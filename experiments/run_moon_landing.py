#!/usr/bin/env python3
"""Land a spaceship on the Moon with greedy search.

Simplified model: no gravity, no torque, no fuel. The ship picks an
acceleration each timestep. Utility rewards closeness to the lunar surface,
and slowing down is weighted in smoothly as the ship gets close.

The space context copies itself on branch (the state is a few vectors).

Usage:
    python experiments/run_moon_landing.py --config configs/search/moon.yaml
"""

import argparse
import logging
from typing import List

import numpy as np
import yaml

from max_tree import SearchAnalysis, SearchConfig, greedy
from max_tree.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def absoid(z: float, n: float, x: float) -> float:
    """Smooth step from 1 (x << z) down to 0 (x >> z)."""
    return 1.0 / ((x / z) ** n + 1.0)


AXES = {"x": 0, "y": 1, "z": 2}


def acceleration_actions(magnitudes: List[float], axes: str = "x") -> List[tuple]:
    """Push and pull along each named axis, for every magnitude."""
    unknown = set(axes) - set(AXES)
    if unknown:
        raise ValueError(f"Unknown axes: {sorted(unknown)}")
    actions = []
    for v in magnitudes:
        for name in axes:
            axis = AXES[name]
            unit = [0.0, 0.0, 0.0]
            unit[axis] = v
            actions.append(tuple(unit))
            unit[axis] = -v
            actions.append(tuple(unit))
    return actions


class Space:
    """Spaceship travelling from the Earth towards the Moon."""

    def __init__(self, moon_position, moon_radius: float, dt: float, actions: List[tuple]):
        self.moon_position = np.asarray(moon_position, dtype=float)
        self.moon_radius = moon_radius
        self.dt = dt
        self._actions = actions
        self.pos = np.zeros(3)
        self.vel = np.zeros(3)

    def distance(self) -> float:
        """Distance to the lunar surface, negative below it."""
        return float(np.linalg.norm(self.moon_position - self.pos)) - self.moon_radius

    def speed(self) -> float:
        return float(np.linalg.norm(self.vel))

    def actions(self) -> List[tuple]:
        return list(self._actions)

    def apply(self, action: tuple) -> None:
        acc = np.asarray(action, dtype=float)
        # Velocity Verlet with constant acceleration over one step.
        self.vel = self.vel + acc * (0.5 * self.dt)
        self.pos = self.pos + self.vel * self.dt
        self.vel = self.vel + acc * (0.5 * self.dt)

    def evaluate(self) -> float:
        dist = abs(self.distance())
        return -dist + absoid(0.2, 1.0, dist) * -self.speed()

    def branch(self) -> "Space":
        other = Space(self.moon_position, self.moon_radius, self.dt, self._actions)
        other.pos = self.pos.copy()
        other.vel = self.vel.copy()
        return other


def main():
    parser = argparse.ArgumentParser(description="Greedy moon landing")
    parser.add_argument("--config", type=str, default="configs/search/moon.yaml",
                        help="YAML config with 'search' and 'moon' sections")
    args = parser.parse_args()

    setup_logging()

    with open(args.config, 'r') as f:
        config = yaml.safe_load(f)

    search_config = SearchConfig.from_dict(config.get('search', {}))
    moon = config.get('moon', {})
    space = Space(
        moon_position=moon.get('moon_position', [3.0, 0.0, 0.0]),
        moon_radius=moon.get('moon_radius', 1.0),
        dt=moon.get('dt', 1.0),
        actions=acceleration_actions(moon.get('accelerations', [0.1, 0.5, 1.0]),
                                     moon.get('axes', 'x')),
    )

    analysis = SearchAnalysis()
    path = greedy(space, search_config, analysis=analysis)

    for node in path[1:]:
        logger.info(f"Action: {node.action} -> utility {node.own_utility:.4f}")
    logger.info(f"Final pos={space.pos}, vel={space.vel}, "
                f"distance={space.distance():.4f}, speed={space.speed():.4f}")
    logger.info(f"Analysis: {analysis.get_statistics()}, KiB: {analysis.kib():.2f}")


if __name__ == "__main__":
    main()
