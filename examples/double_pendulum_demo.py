import logging

import numpy as np

from doublependulum import (
    SimulationConfig,
    SimulationRunner,
    format_diagnostics,
    plot_energy_decay,
    plot_sensitivity_divergence,
    simulate,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

# The classic demo: both arms released horizontally.
config = SimulationConfig()

# Two runs whose lower arms start a micro-radian apart.
n_ticks = 2000
traj_ref = simulate(config.build_system(), n_ticks)
traj_pert = simulate(config.copy(lower_angle=np.pi / 2 + 1e-6).build_system(), n_ticks)
plot_sensitivity_divergence(traj_ref, traj_pert)

# With heavier friction the pendulum locks at rest.
damped = SimulationConfig.heavily_damped()
plot_energy_decay(simulate(damped.build_system(), 1500), damped)

# Pick up the lower bob, hold it level with the pivot, then let go.
runner = SimulationRunner.from_config(config)
for _ in range(100):
    runner.tick()

lower = runner.system.driven.position
runner.press(lower)
for _ in range(30):
    runner.tick(np.array([900.0, 100.0]))
runner.release()

for _ in range(100):
    runner.tick()

print("\n".join(format_diagnostics(runner.system)))
