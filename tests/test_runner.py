"""
Tests for configuration, the frame-clock host and trajectory tools.
"""

import pytest
import numpy as np
from unittest.mock import patch

from doublependulum import (
    SimulationConfig,
    SimulationRunner,
    format_diagnostics,
    plot_energy_decay,
    plot_sensitivity_divergence,
    simulate,
    solve_reference,
)

# --- Fixtures ---


@pytest.fixture
def config():
    return SimulationConfig()


@pytest.fixture
def runner(config):
    return SimulationRunner.from_config(config)


# --- 1. Configuration ---


def test_default_config_matches_demo(config):
    assert config.physics_args() == (200.0, 200.0, 10.0, 10.0, 1.0)
    assert config.friction == 0.001
    assert config.pivot == (600.0, 100.0)
    assert config.upper_angle == config.lower_angle == np.pi / 2


def test_config_copy_overrides(config):
    free = config.copy(friction=0.0, gravity=2.0)
    assert free.friction == 0.0
    assert free.gravity == 2.0
    assert config.friction == 0.001

    with pytest.raises(ValueError, match="Unknown parameter"):
        config.copy(viscosity=1.0)


def test_presets():
    assert SimulationConfig.undamped().friction == 0.0
    assert SimulationConfig.heavily_damped().friction == 0.05


def test_build_system(config):
    system = config.build_system()
    anchor, driven = system.links

    assert anchor.angle == driven.angle == np.pi / 2
    assert anchor.angular_velocity == driven.angular_velocity == 0
    np.testing.assert_allclose(anchor.position, [800.0, 100.0], atol=1e-9)
    np.testing.assert_allclose(driven.position, [1000.0, 100.0], atol=1e-9)
    np.testing.assert_array_equal(system.world.pivot, [600.0, 100.0])


def test_build_system_validates(config):
    with pytest.raises(ValueError):
        config.copy(lower_mass=0.0).build_system()
    with pytest.raises(ValueError):
        config.copy(friction=1.5).build_system()


# --- 2. Frame Clock Host ---


def test_tick_steps_while_running(runner):
    assert runner.tick()
    assert runner.ticks == 1
    assert runner.system.anchor.angular_velocity != 0


def test_pause_keeps_state(runner):
    for _ in range(5):
        runner.tick()
    state = runner.system.state_vector()

    runner.pause()
    assert not runner.tick()
    assert runner.ticks == 5
    np.testing.assert_array_equal(runner.system.state_vector(), state)

    runner.resume()
    assert runner.tick()
    assert not np.array_equal(runner.system.state_vector(), state)


def test_toggle_pause(runner):
    assert runner.toggle_pause() is False
    assert runner.toggle_pause() is True


def test_press_on_bob_resumes(runner):
    runner.pause()

    assert not runner.press((0.0, 0.0))
    assert not runner.running

    assert runner.press((1000.0, 100.0))
    assert runner.running
    assert runner.system.driven.is_dragging

    runner.tick((1000.0, 300.0))
    assert runner.system.anchor.angular_velocity == 0

    runner.release()
    assert not runner.system.is_dragging


# --- 3. Trajectories ---


def test_simulate_shape_and_initial_column(config):
    traj = simulate(config.build_system(), 50)
    assert traj.shape == (4, 51)
    np.testing.assert_array_equal(traj[:, 0], [np.pi / 2, np.pi / 2, 0.0, 0.0])
    assert not np.allclose(traj[:, -1], traj[:, 0])


def test_simulate_with_pointer_schedule(config):
    system = config.build_system()
    system.anchor.is_dragging = True

    traj = simulate(system, 10, pointer=lambda i: np.array([600.0, 300.0]))

    np.testing.assert_array_equal(traj[0, 1:], np.zeros(10))
    np.testing.assert_array_equal(traj[2, 1:], np.zeros(10))


def test_tick_integrator_tracks_reference_for_small_swings():
    config = SimulationConfig(upper_angle=0.02, lower_angle=0.02, friction=0.0)
    n_ticks = 20

    traj = simulate(config.build_system(), n_ticks)
    ref = solve_reference(config, n_ticks)

    assert ref.shape == (4, n_ticks + 1)
    np.testing.assert_allclose(traj[:2], ref[:2], atol=5e-3)


# --- 4. Diagnostics & Plot Smoke Tests ---


def test_format_diagnostics(config):
    system = config.build_system()
    system.step()

    lines = format_diagnostics(system, pointer=(12.4, 7.6))

    assert lines[0] == "Pointer position: 12, 8"
    assert lines[1] == "Upper position: 800, 100"
    assert lines[3] == f"Upper angle: {np.pi / 2:.8f}"
    assert lines[7] == "Upper angular acceleration: -0.00500000"
    assert lines[-2:] == ["Friction: 0.001", "Gravity: 1.0"]
    assert len(format_diagnostics(system)) == len(lines) - 1


@patch("matplotlib.pyplot.show")
def test_visualisation_smoke(mock_show, config):
    """Ensure plotting functions run without errors."""
    traj_ref = simulate(config.build_system(), 200)
    traj_pert = simulate(config.copy(lower_angle=np.pi / 2 + 1e-6).build_system(), 200)

    plot_energy_decay(traj_ref, config)
    plot_sensitivity_divergence(traj_ref, traj_pert)

    assert mock_show.call_count == 2
