"""
system.py

The coupled two-link pendulum and its per-tick integrator.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .drag import DragController
from .errors import UnwiredCounterpartError
from .link import LinkRole, PendulumLink
from .world import WorldModel
from . import physics as phys

# Below this, in both |angle| and |angular velocity|, a link is locked at rest.
REST_TOLERANCE = 2e-4


@dataclass(frozen=True)
class LinkSnapshot:
    """Read-only copy of one link's per-tick output."""

    role: LinkRole
    position: Tuple[float, float]
    angle: float
    angular_velocity: float
    angular_acceleration: float
    is_dragging: bool


class DoublePendulumSystem:
    """
    Owns the anchor and driven links and advances them one tick at a time.

    The links never reference each other; the system hands each one its
    counterpart's values when they are needed.

    Example:
        >>> world = WorldModel(gravity=1.0, friction=0.001, pivot=(600, 100))
        >>> system = DoublePendulumSystem(
        ...     world,
        ...     PendulumLink(200, 10, LinkRole.ANCHOR, angle=np.pi / 2),
        ...     PendulumLink(200, 10, LinkRole.DRIVEN, angle=np.pi / 2),
        ... )
        >>> system.step()
    """

    def __init__(
        self,
        world: WorldModel,
        anchor: Optional[PendulumLink] = None,
        driven: Optional[PendulumLink] = None,
    ):
        self.world = world
        self.anchor: Optional[PendulumLink] = None
        self.driven: Optional[PendulumLink] = None
        self.drag = DragController()
        self._log = logging.getLogger(__name__)

        if anchor is not None:
            if anchor.role is not LinkRole.ANCHOR:
                raise ValueError("anchor slot requires a link with the ANCHOR role")
            self.attach(anchor)
        if driven is not None:
            if driven.role is not LinkRole.DRIVEN:
                raise ValueError("driven slot requires a link with the DRIVEN role")
            self.attach(driven)

    # --- Wiring ---

    def attach(self, link: PendulumLink) -> None:
        """Places `link` in the slot matching its role."""
        if link.role is LinkRole.ANCHOR:
            self.anchor = link
        else:
            self.driven = link

        if self.is_wired:
            self._derive_positions()
            self._log.info(
                "Double pendulum wired: L=(%s, %s), m=(%s, %s), g=%s, friction=%s",
                self.anchor.length,
                self.driven.length,
                self.anchor.mass,
                self.driven.mass,
                self.world.gravity,
                self.world.friction,
            )

    @property
    def is_wired(self) -> bool:
        return self.anchor is not None and self.driven is not None

    def _require_wired(self) -> Tuple[PendulumLink, PendulumLink]:
        if not self.is_wired:
            missing = "anchor" if self.anchor is None else "driven"
            raise UnwiredCounterpartError(f"The {missing} link is not set")
        return self.anchor, self.driven

    @property
    def links(self) -> Tuple[PendulumLink, PendulumLink]:
        """Both links in update order (anchor first)."""
        return self._require_wired()

    def _derive_positions(self) -> None:
        self.anchor.derive_position(self.world.pivot)
        self.driven.derive_position(self.anchor.position)

    # --- Dynamics ---

    def acceleration_of(self, link: PendulumLink) -> float:
        """
        Angular acceleration of `link` from both links' current angles and velocities.
        """
        anchor, driven = self._require_wired()
        args = (
            anchor.angle,
            driven.angle,
            anchor.angular_velocity,
            driven.angular_velocity,
            anchor.length,
            driven.length,
            anchor.mass,
            driven.mass,
            self.world.gravity,
        )
        if link.role is LinkRole.ANCHOR:
            return phys.anchor_acceleration(*args)
        return phys.driven_acceleration(*args)

    def accelerations(self) -> Tuple[float, float]:
        """(alpha1, alpha2) for the current state, without modifying it."""
        anchor, driven = self._require_wired()
        return self.acceleration_of(anchor), self.acceleration_of(driven)

    def step(self, pointer: Optional[np.ndarray] = None) -> None:
        """
        Advances the whole system by one tick.

        The anchor is fully updated before the driven link, which therefore
        sees the anchor's new angle, velocity and position.

        Args:
            pointer: Current pointer position in world coordinates. Only read
                for links that are being dragged.
        """
        anchor, driven = self._require_wired()
        self.drag.update_pointer(pointer)

        self._update(anchor, self.world.pivot, None)
        self._update(driven, anchor.position, anchor)

    def _update(
        self,
        link: PendulumLink,
        parent: np.ndarray,
        counterpart: Optional[PendulumLink],
    ) -> None:
        # Position uses last tick's velocity (semi-implicit Euler)
        link.angle += link.angular_velocity
        link.derive_position(parent)

        if link.is_dragging:
            self.drag.apply(link, parent, counterpart)
            return

        link.angular_acceleration = self.acceleration_of(link)
        link.angular_velocity += link.angular_acceleration
        link.angular_velocity *= 1 - self.world.friction

        if (
            abs(link.angular_velocity) < REST_TOLERANCE
            and abs(link.angle) < REST_TOLERANCE
        ):
            if link.angular_velocity != 0 or link.angle != 0:
                self._log.debug("%s link snapped to rest", link.role.value)
            link.angular_velocity = 0.0
            link.angle = 0.0

    # --- Pointer interaction ---

    def press(self, pointer: np.ndarray) -> bool:
        """Starts dragging any link under the pointer. True if one was picked up."""
        return bool(self.drag.press(self.links, pointer))

    def release(self) -> None:
        self.drag.release(self.links)

    @property
    def is_dragging(self) -> bool:
        return any(link.is_dragging for link in self.links)

    # --- Output ---

    def state_vector(self) -> np.ndarray:
        """[theta1, theta2, omega1, omega2]"""
        anchor, driven = self._require_wired()
        return np.array(
            [
                anchor.angle,
                driven.angle,
                anchor.angular_velocity,
                driven.angular_velocity,
            ]
        )

    def snapshot(self) -> Tuple[LinkSnapshot, LinkSnapshot]:
        return tuple(
            LinkSnapshot(
                role=link.role,
                position=(float(link.position[0]), float(link.position[1])),
                angle=float(link.angle),
                angular_velocity=float(link.angular_velocity),
                angular_acceleration=float(link.angular_acceleration),
                is_dragging=link.is_dragging,
            )
            for link in self.links
        )

    def energy(self) -> float:
        """Total mechanical energy of the current state."""
        anchor, driven = self._require_wired()
        return float(
            phys.total_energy(
                self.state_vector(),
                anchor.length,
                driven.length,
                anchor.mass,
                driven.mass,
                self.world.gravity,
            )
        )
