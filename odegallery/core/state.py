"""Working state of the numerical integrator."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import numpy as np

from odegallery.core.errors import NumericDomainError
from odegallery.physics.clamp import clamp_non_negative


@dataclass
class SimulationState:
    """
    Current state vector, time and step index of one integration run.
    Mutated in place by advance(); local to a single trajectory computation.
    """

    names: Tuple[str, ...]
    values: np.ndarray
    t: float = 0.0
    index: int = 0
    non_negative: Tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        self.values = np.array(self.values, dtype=float)
        if self.values.shape != (len(self.names),):
            raise ValueError(
                f"values must have shape ({len(self.names)},), got {self.values.shape}"
            )

    @classmethod
    def initial(cls, descriptor: Any) -> "SimulationState":
        """State at t0 built from a ModelDescriptor."""
        return cls(
            names=descriptor.state_names,
            values=descriptor.initial_vector(),
            t=descriptor.time_domain.t0,
            non_negative=descriptor.non_negative_indices(),
        )

    def __getitem__(self, name: str) -> float:
        return float(self.values[self.names.index(name)])

    def as_dict(self) -> Dict[str, float]:
        return {name: float(v) for name, v in zip(self.names, self.values)}

    def advance(self, model: Any, dt: float) -> None:
        """One integrator step of `model`, then clamp, then t += dt."""
        x_next = model.step(self.values, self.t, dt)
        if self.non_negative:
            x_next = clamp_non_negative(x_next, self.non_negative)
        if not np.all(np.isfinite(x_next)):
            raise NumericDomainError(
                f"Non-finite state at t={self.t + dt:g}: {dict(zip(self.names, x_next.tolist()))}"
            )
        self.values = x_next
        self.t += dt
        self.index += 1
