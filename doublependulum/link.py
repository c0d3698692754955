"""
link.py

State of a single pendulum link.

Convention: angle 0 is vertically DOWN, +y points down (screen coordinates),
so a link of length L at angle theta ends at parent + L * (sin theta, cos theta).
Angles are never wrapped.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class LinkRole(Enum):
    """Which end of the chain a link sits on."""

    ANCHOR = "anchor"
    DRIVEN = "driven"


@dataclass(eq=False)
class PendulumLink:
    """
    One arm and bob of the double pendulum.

    Attributes:
        length: Arm length (pixels). Must be positive.
        mass: Bob mass. Must be positive.
        role: ANCHOR (attached to the pivot) or DRIVEN (attached to the anchor bob).
        angle: Signed angle from the downward vertical, radians.
        angular_velocity: Radians per tick.
        angular_acceleration: Radians per tick^2.
        position: Bob position in world coordinates, derived once per tick.
        is_dragging: Whether the pointer currently holds this link.
    """

    length: float
    mass: float
    role: LinkRole
    angle: float = 0.0
    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    is_dragging: bool = False

    def __post_init__(self):
        if not self.length > 0:
            raise ValueError("length must be positive")
        if not self.mass > 0:
            raise ValueError("mass must be positive")
        self.role = LinkRole(self.role)
        self.position = np.array(self.position, dtype=float)

    @property
    def is_anchor(self) -> bool:
        return self.role is LinkRole.ANCHOR

    @property
    def radius(self) -> float:
        """Bob radius used for pointer hit-testing."""
        return self.mass * 2

    def set_angle(self, angle: float) -> None:
        self.angle = float(angle)

    def stop(self) -> None:
        """Kills all motion. Calling it repeatedly has no further effect."""
        self.angular_velocity = 0.0
        self.angular_acceleration = 0.0

    def reset(self) -> None:
        self.stop()
        self.angle = 0.0

    def derive_position(self, parent: np.ndarray) -> np.ndarray:
        """
        Recomputes the bob position from the current angle.

        Args:
            parent: Pivot for the anchor, the anchor's position for the driven link.

        Returns:
            The new position (also stored on the link).
        """
        self.position = np.asarray(parent, dtype=float) + self.length * np.array(
            [np.sin(self.angle), np.cos(self.angle)]
        )
        return self.position

    def contains(self, point: np.ndarray) -> bool:
        """True if `point` lies within the grab distance of the bob."""
        return bool(np.hypot(*(np.asarray(point, dtype=float) - self.position)) < self.radius / 2)
