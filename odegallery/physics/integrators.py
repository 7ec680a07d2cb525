"""
Fixed-step integrators for ODEs: x_{n+1} = step(f, x_n, t_n, dt).

Pure numerical level: no dependency on descriptors or the catalog.
Interface: step(f, x, t, dt) -> x_next, with f(x, t) -> dx/dt.
"""

from typing import Callable, Sequence

import numpy as np

# Type for ODE right-hand side: (x, t) -> dx/dt
RHS = Callable[[np.ndarray, float], np.ndarray]


def euler_step(f: RHS, x: np.ndarray, t: float, dt: float) -> np.ndarray:
    """Explicit Euler, order 1: x_{n+1} = x_n + dt * f(x_n, t_n)."""
    return x + dt * f(x, t)


def sequential_euler_step(
    f: RHS,
    x: np.ndarray,
    t: float,
    dt: float,
    order: Sequence[int],
) -> np.ndarray:
    """
    Semi-implicit Euler: components advanced one at a time in `order`.

    Each component's derivative is evaluated on the state that already holds
    the components updated earlier in the same step. For a position/velocity
    pair with order (vel, pos) this is symplectic Euler.
    """
    x_next = np.array(x, dtype=float)
    for i in order:
        x_next[i] = x_next[i] + dt * f(x_next, t)[i]
    return x_next


class EulerIntegrator:
    """Explicit Euler integrator, order 1."""

    @staticmethod
    def step(f: RHS, x: np.ndarray, t: float, dt: float) -> np.ndarray:
        return euler_step(f, x, t, dt)


class SequentialEulerIntegrator:
    """Semi-implicit Euler integrator with a fixed component update order."""

    def __init__(self, order: Sequence[int]) -> None:
        self.order = tuple(int(i) for i in order)

    def step(self, f: RHS, x: np.ndarray, t: float, dt: float) -> np.ndarray:
        return sequential_euler_step(f, x, t, dt, self.order)
