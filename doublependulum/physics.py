"""
physics.py

Lagrangian equations of motion, coordinate transformations and energies
for the Double Pendulum, in tick units (one tick = one unit of time).

Subscript 1 is the anchor link, subscript 2 the driven link.
Convention: 0 is vertically DOWN, +y is Down (screen coordinates).
"""

from typing import List, Tuple, Union

import numpy as np


# --- 1. Angular Accelerations ---


def anchor_acceleration(
    th1: float,
    th2: float,
    w1: float,
    w2: float,
    L1: float,
    L2: float,
    m1: float,
    m2: float,
    g: float,
) -> float:
    """
    Angular acceleration of the anchor link.

    alpha1 = [-g(2m1+m2) sin th1 - m2 g sin(th1 - 2 th2)
              - 2 sin(th1 - th2) m2 (w2^2 L2 + w1^2 L1 cos(th1 - th2))]
             / [L1 (2m1 + m2 - m2 cos(2 th1 - 2 th2))]
    """
    num1 = -g * (2 * m1 + m2) * np.sin(th1)
    num2 = -m2 * g * np.sin(th1 - 2 * th2)
    num3 = -2 * np.sin(th1 - th2) * m2
    num4 = w2 * w2 * L2 + w1 * w1 * L1 * np.cos(th1 - th2)
    den = L1 * (2 * m1 + m2 - m2 * np.cos(2 * th1 - 2 * th2))
    return (num1 + num2 + num3 * num4) / den


def driven_acceleration(
    th1: float,
    th2: float,
    w1: float,
    w2: float,
    L1: float,
    L2: float,
    m1: float,
    m2: float,
    g: float,
) -> float:
    """
    Angular acceleration of the driven link.

    alpha2 = [2 sin(th1 - th2) (w1^2 L1 (m1+m2) + g (m1+m2) cos th1
              + w2^2 L2 m2 cos(th1 - th2))]
             / [L2 (2m1 + m2 - m1 cos(2 th1 - 2 th2))]
    """
    num5 = 2 * np.sin(th1 - th2)
    num6 = w1 * w1 * L1 * (m1 + m2)
    num7 = g * (m1 + m2) * np.cos(th1)
    num8 = w2 * w2 * L2 * m2 * np.cos(th1 - th2)
    den = L2 * (2 * m1 + m2 - m1 * np.cos(2 * th1 - 2 * th2))
    return (num5 * (num6 + num7 + num8)) / den


def eom(
    t: float,
    y: np.ndarray,
    L1: float = 200.0,
    L2: float = 200.0,
    m1: float = 10.0,
    m2: float = 10.0,
    g: float = 1.0,
    damping: float = 0.0,
) -> List[float]:
    """
    Continuous-time form of the tick equations, for use with solve_ivp.

    State vector: y = [theta1, theta2, omega1, omega2]
    `damping` is a linear velocity decay rate per tick.
    """
    th1, th2, w1, w2 = y
    a1 = anchor_acceleration(th1, th2, w1, w2, L1, L2, m1, m2, g)
    a2 = driven_acceleration(th1, th2, w1, w2, L1, L2, m1, m2, g)
    return [w1, w2, a1 - damping * w1, a2 - damping * w2]


# --- 2. Coordinates ---


def get_coords(
    th1: Union[float, np.ndarray],
    th2: Union[float, np.ndarray],
    L1: float = 200.0,
    L2: float = 200.0,
) -> Tuple[Union[float, np.ndarray], ...]:
    """
    Converts angles to Cartesian coordinates for both bobs, relative to the pivot.
    """
    x1 = L1 * np.sin(th1)
    y1 = L1 * np.cos(th1)
    x2 = x1 + L2 * np.sin(th2)
    y2 = y1 + L2 * np.cos(th2)
    return x1, y1, x2, y2


# --- 3. Energies ---


def kinetic_energy(th1, th2, w1, w2, L1, L2, m1, m2):
    return (
        0.5 * (m1 + m2) * (L1 * w1) ** 2
        + 0.5 * m2 * (L2 * w2) ** 2
        + m2 * L1 * L2 * w1 * w2 * np.cos(th1 - th2)
    )


def potential_energy(th1, th2, L1, L2, m1, m2, g):
    # y grows downward, so height is -y
    _, y1, _, y2 = get_coords(th1, th2, L1, L2)
    return -(m1 * g * y1 + m2 * g * y2)


def total_energy(
    state: np.ndarray,
    L1: float = 200.0,
    L2: float = 200.0,
    m1: float = 10.0,
    m2: float = 10.0,
    g: float = 1.0,
) -> Union[float, np.ndarray]:
    """
    Total mechanical energy of a state [theta1, theta2, omega1, omega2].

    Accepts a single state of shape (4,) or a trajectory of shape (4, N_time).
    """
    th1, th2, w1, w2 = state
    return kinetic_energy(th1, th2, w1, w2, L1, L2, m1, m2) + potential_energy(
        th1, th2, L1, L2, m1, m2, g
    )
