"""
world.py

Per-run constants shared by both links of the pendulum.
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True, eq=False)
class WorldModel:
    """
    Immutable world parameters.

    Attributes:
        gravity: Gravitational constant in pixels / tick^2. Must be positive.
        friction: Fraction of angular velocity removed each tick, in [0, 1).
        pivot: Fixed anchor origin as a length-2 array (x, y), +y pointing down.
    """

    gravity: float = 1.0
    friction: float = 0.001
    pivot: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        if not self.gravity > 0:
            raise ValueError("gravity must be positive")
        if not 0 <= self.friction < 1:
            raise ValueError("friction must lie in [0, 1)")

        pivot = np.array(self.pivot, dtype=float)
        if pivot.shape != (2,):
            raise ValueError("pivot must be a 2D point")
        pivot.setflags(write=False)
        object.__setattr__(self, "pivot", pivot)
