"""
Configuration for a double pendulum run.

Defaults reproduce the classic demo: two equal 200 px arms with 10 kg bobs,
both released horizontally (pi/2) under unit gravity, hung from a pivot in
the middle of a 1200 px wide canvas, 100 px from the top.
"""

import copy
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .link import LinkRole, PendulumLink
from .system import DoublePendulumSystem
from .world import WorldModel


@dataclass
class SimulationConfig:
    """
    Construction-time parameters of a simulation.

    Attributes:
        upper_length, lower_length: Arm lengths of the anchor and driven links.
        upper_mass, lower_mass: Bob masses.
        upper_angle, lower_angle: Initial angles (radians, 0 = hanging down).
        gravity: Scales every acceleration term linearly.
        friction: Per-tick multiplicative velocity decay in [0, 1).
        pivot: Fixed anchor origin in world coordinates.

    Example:
        >>> config = SimulationConfig()
        >>> calm = config.copy(friction=0.05)
        >>> system = calm.build_system()
    """

    upper_length: float = 200.0
    lower_length: float = 200.0
    upper_mass: float = 10.0
    lower_mass: float = 10.0
    upper_angle: float = np.pi / 2
    lower_angle: float = np.pi / 2
    gravity: float = 1.0
    friction: float = 0.001
    pivot: Tuple[float, float] = field(default_factory=lambda: (600.0, 100.0))

    def copy(self, **overrides) -> "SimulationConfig":
        """
        Create a copy with optional parameter overrides.

        Example:
            >>> base = SimulationConfig()
            >>> free = base.copy(friction=0.0)
        """
        new_config = copy.copy(self)
        for key, value in overrides.items():
            if hasattr(new_config, key):
                setattr(new_config, key, value)
            else:
                raise ValueError(f"Unknown parameter: {key}")
        return new_config

    @classmethod
    def undamped(cls) -> "SimulationConfig":
        """Preset without friction; never settles."""
        return cls(friction=0.0)

    @classmethod
    def heavily_damped(cls) -> "SimulationConfig":
        """Preset that damps the motion out quickly."""
        return cls(friction=0.05)

    def build_world(self) -> WorldModel:
        return WorldModel(gravity=self.gravity, friction=self.friction, pivot=self.pivot)

    def build_system(self) -> DoublePendulumSystem:
        """Constructs a wired system in its initial configuration."""
        anchor = PendulumLink(self.upper_length, self.upper_mass, LinkRole.ANCHOR)
        driven = PendulumLink(self.lower_length, self.lower_mass, LinkRole.DRIVEN)
        anchor.set_angle(self.upper_angle)
        driven.set_angle(self.lower_angle)
        return DoublePendulumSystem(self.build_world(), anchor, driven)

    def physics_args(self) -> Tuple[float, float, float, float, float]:
        """(L1, L2, m1, m2, g), in the order the physics functions take them."""
        return (
            self.upper_length,
            self.lower_length,
            self.upper_mass,
            self.lower_mass,
            self.gravity,
        )
