"""
diagnostics.py

Plain-text readout of the per-tick state, one line per quantity.
"""

from typing import List, Optional

import numpy as np

from .system import DoublePendulumSystem


def format_diagnostics(
    system: DoublePendulumSystem, pointer: Optional[np.ndarray] = None
) -> List[str]:
    """
    Formats positions, angles, velocities and accelerations of both links.

    Positions are rounded to whole pixels, angular quantities to 8 decimals.
    """
    upper, lower = system.snapshot()
    lines = []
    if pointer is not None:
        lines.append(f"Pointer position: {pointer[0]:.0f}, {pointer[1]:.0f}")
    lines += [
        f"Upper position: {upper.position[0]:.0f}, {upper.position[1]:.0f}",
        f"Lower position: {lower.position[0]:.0f}, {lower.position[1]:.0f}",
        f"Upper angle: {upper.angle:.8f}",
        f"Lower angle: {lower.angle:.8f}",
        f"Upper angular velocity: {upper.angular_velocity:.8f}",
        f"Lower angular velocity: {lower.angular_velocity:.8f}",
        f"Upper angular acceleration: {upper.angular_acceleration:.8f}",
        f"Lower angular acceleration: {lower.angular_acceleration:.8f}",
        f"Friction: {system.world.friction}",
        f"Gravity: {system.world.gravity}",
    ]
    return lines
