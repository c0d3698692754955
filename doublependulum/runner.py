"""
runner.py

Driving the system: a pausable frame-clock host, trajectory recording and a
high-accuracy reference solution for comparison.
"""

import logging
from typing import Callable, Optional, Union

import numpy as np
from scipy.integrate import solve_ivp

from .config import SimulationConfig
from .system import DoublePendulumSystem
from . import physics as phys

logger = logging.getLogger(__name__)

PointerSource = Union[None, np.ndarray, Callable[[int], Optional[np.ndarray]]]


class SimulationRunner:
    """
    Host for a DoublePendulumSystem, standing in for a frame clock.

    Pausing only stops `tick` from stepping; no state is reset. Picking up
    a link resumes a paused runner.

    Example:
        >>> runner = SimulationRunner(SimulationConfig().build_system())
        >>> runner.tick()
        True
        >>> runner.pause()
        >>> runner.tick()
        False
    """

    def __init__(self, system: DoublePendulumSystem):
        self.system = system
        self.running = True
        self.ticks = 0

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "SimulationRunner":
        return cls(config.build_system())

    def pause(self) -> None:
        if self.running:
            logger.info("Simulation paused at tick %d", self.ticks)
        self.running = False

    def resume(self) -> None:
        if not self.running:
            logger.info("Simulation resumed at tick %d", self.ticks)
        self.running = True

    def toggle_pause(self) -> bool:
        """Flips between paused and running. Returns the new running state."""
        if self.running:
            self.pause()
        else:
            self.resume()
        return self.running

    def tick(self, pointer: Optional[np.ndarray] = None) -> bool:
        """Steps the system once if running. Returns whether it stepped."""
        if not self.running:
            return False
        self.system.step(pointer)
        self.ticks += 1
        return True

    def press(self, pointer: np.ndarray) -> bool:
        """Pointer down: picks up links under the pointer and resumes if any were hit."""
        picked = self.system.press(pointer)
        if picked:
            self.resume()
        return picked

    def release(self) -> None:
        self.system.release()


def simulate(
    system: DoublePendulumSystem, n_ticks: int, pointer: PointerSource = None
) -> np.ndarray:
    """
    Steps a system forward and records its state.

    Args:
        system: The system to advance (modified in place).
        n_ticks: Number of ticks.
        pointer: Fixed pointer position, or a callable tick -> pointer.

    Returns:
        Trajectory array of shape (4, n_ticks + 1) with rows
        [theta1, theta2, omega1, omega2]; column 0 is the initial state.
    """
    trajectory = np.zeros((4, n_ticks + 1))
    trajectory[:, 0] = system.state_vector()

    for i in range(n_ticks):
        p = pointer(i) if callable(pointer) else pointer
        system.step(p)
        trajectory[:, i + 1] = system.state_vector()

    return trajectory


def solve_reference(
    config: SimulationConfig,
    n_ticks: int,
    rtol: float = 1e-9,
    atol: float = 1e-12,
    method: str = "DOP853",
) -> np.ndarray:
    """
    Integrates the same equations of motion as a continuous ODE.

    Time is measured in ticks and friction is converted to the equivalent
    continuous decay rate, so the result is directly comparable with
    `simulate(config.build_system(), n_ticks)`.

    Returns:
        Solution array of shape (4, n_ticks + 1).
    """
    y0 = [config.upper_angle, config.lower_angle, 0.0, 0.0]
    t_points = np.arange(n_ticks + 1, dtype=float)
    damping = -np.log1p(-config.friction)

    sol = solve_ivp(
        phys.eom,
        (t_points[0], t_points[-1]),
        y0,
        t_eval=t_points,
        method=method,
        rtol=rtol,
        atol=atol,
        args=(*config.physics_args(), damping),
    )
    return sol.y
