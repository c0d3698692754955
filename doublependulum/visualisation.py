"""
visualisation.py

Analysis plots for recorded double pendulum runs.
Focuses on energy dissipation and chaotic sensitivity.
"""

import numpy as np
import matplotlib.pyplot as plt

from .config import SimulationConfig
from . import physics as phys


def plot_energy_decay(
    trajectory: np.ndarray,
    config: SimulationConfig,
    title: str = "Mechanical Energy",
) -> None:
    """
    Plots kinetic, potential and total energy against tick number.

    Args:
        trajectory: Recorded states (4, N_ticks + 1).
        config: Parameters the trajectory was produced with.
    """
    L1, L2, m1, m2, g = config.physics_args()
    th1, th2, w1, w2 = trajectory
    ticks = np.arange(trajectory.shape[1])

    T = phys.kinetic_energy(th1, th2, w1, w2, L1, L2, m1, m2)
    V = phys.potential_energy(th1, th2, L1, L2, m1, m2, g)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ticks, T, "r-", alpha=0.6, label="Kinetic")
    ax.plot(ticks, V, "b-", alpha=0.6, label="Potential")
    ax.plot(ticks, T + V, "k-", lw=1.5, label="Total")
    ax.set_xlabel("Tick")
    ax.set_ylabel("Energy")
    ax.set_title(f"{title} (friction={config.friction})")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()


def plot_sensitivity_divergence(
    traj_ref: np.ndarray,
    traj_pert: np.ndarray,
    title: str = "Sensitivity to Initial Conditions",
) -> None:
    """
    Plots the divergence between two runs to demonstrate chaos.
    Top panel: Theta 2 of both runs.
    Bottom panel: Log-scale Euclidean distance between states.

    Args:
        traj_ref: Reference trajectory (4, N_ticks + 1).
        traj_pert: Perturbed trajectory (4, N_ticks + 1).
    """
    ticks = np.arange(traj_ref.shape[1])
    dist = np.linalg.norm(traj_ref - traj_pert, axis=0)

    fig, (ax_ts, ax_err) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax_ts.plot(ticks, traj_ref[1], "k-", label="Reference")
    ax_ts.plot(ticks, traj_pert[1], "r--", alpha=0.8, label="Perturbed")
    ax_ts.set_ylabel(r"$\theta_2$ (unwrapped)")
    ax_ts.set_title(title)
    ax_ts.legend(loc="upper right")
    ax_ts.grid(True, alpha=0.3)

    # Clip exact zeros (e.g. both runs locked at rest) for the log axis
    ax_err.semilogy(ticks, np.maximum(dist, np.finfo(float).tiny), "b-", lw=1.5)
    ax_err.set_ylabel("State Euclidean Distance (Log Scale)")
    ax_err.set_xlabel("Tick")
    ax_err.grid(True, which="both", alpha=0.3)
    ax_err.set_title("Divergence of Trajectories")

    plt.tight_layout()
    plt.show()
