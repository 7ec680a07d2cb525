"""
Parametric models ready to use.

Four closed-form models (AnalyticModel subclasses) and four models integrated
with Euler (ODEModel subclasses). Parameters are plain keyword arguments so a
descriptor's `parameters` mapping can be passed straight through.
MODEL_LIBRARY maps the physics name used by descriptors to the class.
"""

from typing import Any, Dict, Type, Union

import numpy as np

from odegallery.core.errors import NumericDomainError
from odegallery.physics.integrators import SequentialEulerIntegrator
from odegallery.physics.ode import AnalyticModel, ODEModel


# --- Closed form ---


class NewtonCooling(AnalyticModel):
    """
    Newton's law of cooling: dT/dt = -k (T - T_room).
    T(t) = T_room + (T0 - T_room) * exp(-k t).
    """

    state_names = ("T",)

    def __init__(self, k: float = 0.1, T_room: float = 20.0) -> None:
        self.k = float(k)
        self.T_room = float(T_room)

    def evaluate(self, x0: np.ndarray, t: float) -> np.ndarray:
        T0 = x0[0]
        return np.array([self.T_room + (T0 - self.T_room) * np.exp(-self.k * t)])


class ExponentialGrowth(AnalyticModel):
    """Unbounded growth: dP/dt = r P, P(t) = P0 exp(r t)."""

    state_names = ("P",)

    def __init__(self, r: float = 0.1) -> None:
        self.r = float(r)

    def evaluate(self, x0: np.ndarray, t: float) -> np.ndarray:
        return np.array([x0[0] * np.exp(self.r * t)])


class RadioactiveDecay(AnalyticModel):
    """Decay: dN/dt = -lam N, N(t) = N0 exp(-lam t)."""

    state_names = ("N",)

    def __init__(self, lam: float = 0.15) -> None:
        self.lam = float(lam)

    def evaluate(self, x0: np.ndarray, t: float) -> np.ndarray:
        return np.array([x0[0] * np.exp(-self.lam * t)])


class LogisticGrowth(AnalyticModel):
    """
    Logistic growth: dP/dt = r P (1 - P/K).
    P(t) = K P0 exp(r t) / (K + P0 (exp(r t) - 1)).
    """

    state_names = ("P",)

    def __init__(self, r: float = 0.5, K: float = 1000.0) -> None:
        self.r = float(r)
        self.K = float(K)

    def evaluate(self, x0: np.ndarray, t: float) -> np.ndarray:
        P0 = x0[0]
        growth = np.exp(self.r * t)
        denominator = self.K + P0 * (growth - 1)
        if not denominator > 0:
            raise NumericDomainError(
                f"logistic: denominator {denominator!r} <= 0 at t={t:g} (K={self.K}, P0={P0})"
            )
        return np.array([self.K * P0 * growth / denominator])


# --- Integrated (Euler) ---


class SIRModel(ODEModel):
    """
    SIR epidemic: dS = -beta S I / N, dI = beta S I / N - gamma I, dR = gamma I.
    State [S, I, R].
    """

    state_names = ("S", "I", "R")

    def __init__(self, beta: float = 0.5, gamma: float = 0.1, N: float = 1000.0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.beta = float(beta)
        self.gamma = float(gamma)
        self.N = float(N)

    def rhs(self, x: np.ndarray, t: float) -> np.ndarray:
        S, I, R = x[0], x[1], x[2]
        infection = self.beta * S * I / self.N
        return np.array([-infection, infection - self.gamma * I, self.gamma * I])


class PredatorPrey(ODEModel):
    """
    Lotka-Volterra: dR = alpha R - beta R F, dF = delta R F - gamma F.
    State [R (rabbits), F (foxes)].
    """

    state_names = ("R", "F")

    def __init__(
        self,
        alpha: float = 0.1,
        beta: float = 0.02,
        delta: float = 0.01,
        gamma: float = 0.1,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.delta = float(delta)
        self.gamma = float(gamma)

    def rhs(self, x: np.ndarray, t: float) -> np.ndarray:
        R, F = x[0], x[1]
        dR = self.alpha * R - self.beta * R * F
        dF = self.delta * R * F - self.gamma * F
        return np.array([dR, dF])


class DampedOscillator(ODEModel):
    """
    Damped oscillator: x'' + 2 zeta omega0 x' + omega0^2 x = 0.
    State [x, v]; v is advanced first and x uses the updated v (symplectic Euler).
    """

    state_names = ("x", "v")

    def __init__(self, omega0: float = 2.0, zeta: float = 0.1, **kwargs: Any) -> None:
        kwargs.setdefault("integrator", SequentialEulerIntegrator(order=(1, 0)))
        super().__init__(**kwargs)
        self.omega0 = float(omega0)
        self.zeta = float(zeta)

    def rhs(self, x: np.ndarray, t: float) -> np.ndarray:
        pos, vel = x[0], x[1]
        acc = -2 * self.zeta * self.omega0 * vel - self.omega0 * self.omega0 * pos
        return np.array([vel, acc])


class TwoCompartmentDrug(ODEModel):
    """
    Two-compartment pharmacokinetics (blood C1, tissue C2):
      dC1 = -k12 C1 - k10 C1 + k21 C2
      dC2 = k12 C1 - k21 C2
    """

    state_names = ("C1", "C2")

    def __init__(self, k12: float = 0.2, k21: float = 0.1, k10: float = 0.15, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.k12 = float(k12)
        self.k21 = float(k21)
        self.k10 = float(k10)

    def rhs(self, x: np.ndarray, t: float) -> np.ndarray:
        C1, C2 = x[0], x[1]
        dC1 = -self.k12 * C1 - self.k10 * C1 + self.k21 * C2
        dC2 = self.k12 * C1 - self.k21 * C2
        return np.array([dC1, dC2])


PhysicsModel = Union[AnalyticModel, ODEModel]

MODEL_LIBRARY: Dict[str, Type[PhysicsModel]] = {
    "newton_cooling": NewtonCooling,
    "exponential_growth": ExponentialGrowth,
    "radioactive_decay": RadioactiveDecay,
    "logistic_growth": LogisticGrowth,
    "sir": SIRModel,
    "lotka_volterra": PredatorPrey,
    "damped_oscillator": DampedOscillator,
    "two_compartment_drug": TwoCompartmentDrug,
}


def build_physics(descriptor: Any) -> PhysicsModel:
    """Instantiate the library model named by descriptor.physics with its parameters."""
    try:
        cls = MODEL_LIBRARY[descriptor.physics]
    except KeyError:
        raise ValueError(
            f"{descriptor.id}: unknown physics {descriptor.physics!r} "
            f"(available: {', '.join(sorted(MODEL_LIBRARY))})"
        ) from None
    if tuple(cls.state_names) != tuple(descriptor.state_names):
        raise ValueError(
            f"{descriptor.id}: state {descriptor.state_names} does not match "
            f"{cls.__name__} state {cls.state_names}"
        )
    return cls(**descriptor.parameters)
