"""
Double Pendulum Package.

A two-link pendulum advanced one tick at a time with closed-form Lagrangian
accelerations, friction damping, snap-to-rest and pointer dragging.
"""

# --- Core Model ---
from .world import WorldModel
from .link import LinkRole, PendulumLink
from .system import DoublePendulumSystem, LinkSnapshot, REST_TOLERANCE
from .drag import DragController
from .errors import UnwiredCounterpartError
from .config import SimulationConfig

# --- Physics ---
from .physics import (
    anchor_acceleration,
    driven_acceleration,
    eom,
    get_coords,
    kinetic_energy,
    potential_energy,
    total_energy,
)

# --- Driving & Analysis ---
from .runner import SimulationRunner, simulate, solve_reference
from .diagnostics import format_diagnostics
from .visualisation import plot_energy_decay, plot_sensitivity_divergence

__all__ = [
    # Core
    "WorldModel",
    "LinkRole",
    "PendulumLink",
    "DoublePendulumSystem",
    "LinkSnapshot",
    "REST_TOLERANCE",
    "DragController",
    "UnwiredCounterpartError",
    "SimulationConfig",
    # Physics
    "anchor_acceleration",
    "driven_acceleration",
    "eom",
    "get_coords",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    # Driving & Analysis
    "SimulationRunner",
    "simulate",
    "solve_reference",
    "format_diagnostics",
    "plot_energy_decay",
    "plot_sensitivity_divergence",
]
