"""Tests for Euler steppers, the clamp and the model right-hand sides."""

import numpy as np
import pytest

from odegallery.core import NumericDomainError, SimulationState
from odegallery.catalog import get_model
from odegallery.physics import (
    DampedOscillator,
    EulerIntegrator,
    LogisticGrowth,
    PredatorPrey,
    SIRModel,
    TwoCompartmentDrug,
    build_physics,
    clamp_non_negative,
    euler_step,
    sequential_euler_step,
)


def test_euler_step_linear_decay() -> None:
    f = lambda x, t: -0.5 * x
    x = euler_step(f, np.array([2.0]), 0.0, 0.1)
    np.testing.assert_allclose(x, [2.0 - 0.1 * 1.0])


def test_sequential_step_uses_updated_velocity() -> None:
    osc = DampedOscillator(omega0=2.0, zeta=0.1)
    x0 = np.array([1.0, 0.0])
    dt = 0.01
    x1 = osc.step(x0, 0.0, dt)
    # v first: a = -omega0^2 * x = -4; v = -0.04; then x uses the new v
    assert x1[1] == pytest.approx(-0.04)
    assert x1[0] == pytest.approx(1.0 - 0.04 * dt)
    plain = euler_step(osc.rhs, x0, 0.0, dt)
    assert plain[0] == 1.0
    assert x1[0] != plain[0]


def test_sequential_step_matches_hand_loop() -> None:
    omega0, zeta, dt = 2.0, 0.1, 0.01
    osc = DampedOscillator(omega0=omega0, zeta=zeta)
    state = np.array([1.0, 0.0])
    x, v = 1.0, 0.0
    for _ in range(500):
        state = osc.step(state, 0.0, dt)
        a = -2 * zeta * omega0 * v - omega0 * omega0 * x
        v += a * dt
        x += v * dt
    assert state[0] == x
    assert state[1] == v


def test_sequential_euler_step_does_not_mutate_input() -> None:
    x = np.array([1.0, 0.0])
    sequential_euler_step(lambda s, t: np.array([s[1], -s[0]]), x, 0.0, 0.1, (1, 0))
    np.testing.assert_array_equal(x, [1.0, 0.0])


def test_sir_rhs_conserves_population() -> None:
    sir = SIRModel(beta=0.5, gamma=0.1, N=1000.0)
    d = sir.rhs(np.array([999.0, 1.0, 0.0]), 0.0)
    assert d.sum() == pytest.approx(0.0, abs=1e-12)
    assert d[0] < 0 and d[2] > 0


def test_predator_prey_rhs() -> None:
    pp = PredatorPrey()
    d = pp.rhs(np.array([40.0, 9.0]), 0.0)
    np.testing.assert_allclose(d, [0.1 * 40 - 0.02 * 40 * 9, 0.01 * 40 * 9 - 0.1 * 9])


def test_drug_rhs() -> None:
    drug = TwoCompartmentDrug()
    d = drug.rhs(np.array([100.0, 0.0]), 0.0)
    np.testing.assert_allclose(d, [-35.0, 20.0])


def test_clamp_non_negative() -> None:
    x = np.array([-1.0, -2.0, 3.0])
    out = clamp_non_negative(x, (0,))
    np.testing.assert_array_equal(out, [0.0, -2.0, 3.0])
    np.testing.assert_array_equal(x, [-1.0, -2.0, 3.0])
    np.testing.assert_array_equal(clamp_non_negative(x, ()), x)


def test_state_advance_clamps_flagged_components() -> None:
    class Crash(PredatorPrey):
        def rhs(self, x, t):
            return np.array([-1000.0, -1000.0])

    state = SimulationState(names=("R", "F"), values=[1.0, 1.0], non_negative=(0,))
    state.advance(Crash(), 0.1)
    assert state["R"] == 0.0
    assert state["F"] < 0.0
    assert state.index == 1
    assert state.t == pytest.approx(0.1)


def test_state_advance_rejects_non_finite() -> None:
    class Blowup(SIRModel):
        def rhs(self, x, t):
            return np.array([np.inf, 0.0, 0.0])

    state = SimulationState(names=("S", "I", "R"), values=[1.0, 1.0, 0.0])
    with pytest.raises(NumericDomainError):
        state.advance(Blowup(), 0.1)


def test_state_shape_validation() -> None:
    with pytest.raises(ValueError):
        SimulationState(names=("S", "I"), values=[1.0, 2.0, 3.0])


def test_build_physics_from_catalog() -> None:
    model = build_physics(get_model("sir"))
    assert isinstance(model, SIRModel)
    assert model.beta == 0.5 and model.gamma == 0.1 and model.N == 1000.0
    assert isinstance(model.integrator, EulerIntegrator)


def test_logistic_guard_on_bad_denominator() -> None:
    logistic = LogisticGrowth(r=0.5, K=1000.0)
    with pytest.raises(NumericDomainError):
        logistic.evaluate(np.array([-2000.0]), 1.0)
