"""Base classes for models: right-hand side (ODEModel) or closed form (AnalyticModel)."""

from typing import Any, Optional, Tuple

import numpy as np

from odegallery.physics.integrators import EulerIntegrator


class ODEModel:
    """
    Base class for models described by an ODE: dx/dt = f(x, t).
    Subclasses implement rhs() and list their state components in state_names.
    """

    state_names: Tuple[str, ...] = ()

    def __init__(self, integrator: Optional[Any] = None) -> None:
        """
        Args:
            integrator: object with a step(f, x, t, dt) method. Default: explicit Euler.
        """
        self.integrator = integrator or EulerIntegrator()

    def rhs(self, x: np.ndarray, t: float) -> np.ndarray:
        """
        Right-hand side of the ODE: dx/dt = rhs(x, t).
        Must be implemented in subclasses.
        """
        raise NotImplementedError("Subclasses must implement rhs(x, t).")

    def step(self, x: np.ndarray, t: float, dt: float) -> np.ndarray:
        """Advance the state by one step of size dt."""
        return self.integrator.step(self.rhs, np.atleast_1d(x), t, dt)


class AnalyticModel:
    """
    Base class for models with a closed-form solution x(t) = F(x0, t).
    Subclasses implement evaluate().
    """

    state_names: Tuple[str, ...] = ()

    def evaluate(self, x0: np.ndarray, t: float) -> np.ndarray:
        """State at time t for initial state x0 (t measured from t0 = 0)."""
        raise NotImplementedError("Subclasses must implement evaluate(x0, t).")
