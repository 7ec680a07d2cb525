"""Static description of one dynamical model: parameters, state, domain, outputs."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

import numpy as np

from odegallery.sampling import SamplingPolicy


class ModelKind(str, Enum):
    """How a model's trajectory is computed."""

    ANALYTIC = "analytic"
    INTEGRATED = "integrated"


@dataclass(frozen=True)
class TimeDomain:
    """Time interval [t0, t_end] with fixed step dt."""

    t0: float
    t_end: float
    dt: float

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.t_end < self.t0:
            raise ValueError(f"t_end ({self.t_end}) must be >= t0 ({self.t0})")

    @property
    def n_steps(self) -> int:
        """Number of dt steps between t0 and t_end."""
        return int(round((self.t_end - self.t0) / self.dt))

    def grid(self) -> np.ndarray:
        """Grid t0 + i*dt, i = 0..n_steps (t_end included)."""
        return self.t0 + self.dt * np.arange(self.n_steps + 1)


@dataclass(frozen=True)
class OutputField:
    """One plotted series: output key, source state component, label and colour."""

    key: str
    state: str
    label: str = ""
    color: str = ""


@dataclass(frozen=True)
class AxisLabels:
    x: str = ""
    y: str = ""


@dataclass(frozen=True)
class ModelDescriptor:
    """
    Immutable descriptor of one model in the catalog.

    `physics` names the entry in physics.library.MODEL_LIBRARY that supplies the
    closed form (ANALYTIC) or the right-hand side (INTEGRATED). `parameters` are
    passed to it as keyword arguments. State components listed in
    `non_negative` are clamped to >= 0 after each integration step.
    """

    id: str
    display_name: str
    equation_text: str
    kind: ModelKind
    physics: str
    parameters: Mapping[str, float] = field(hash=False)
    initial_state: Tuple[Tuple[str, float], ...]
    time_domain: TimeDomain
    sampling: SamplingPolicy
    output_fields: Tuple[OutputField, ...]
    description: str = ""
    axis_labels: AxisLabels = AxisLabels()
    non_negative: Tuple[str, ...] = ()
    time_decimals: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ModelKind):
            object.__setattr__(self, "kind", ModelKind(self.kind))
        object.__setattr__(
            self,
            "parameters",
            MappingProxyType({str(k): float(v) for k, v in dict(self.parameters).items()}),
        )
        object.__setattr__(
            self,
            "initial_state",
            tuple((str(name), float(value)) for name, value in self.initial_state),
        )
        object.__setattr__(self, "output_fields", tuple(self.output_fields))
        object.__setattr__(self, "non_negative", tuple(self.non_negative))
        names = self.state_names
        if len(set(names)) != len(names):
            raise ValueError(f"{self.id}: duplicate state names {names}")
        for f in self.output_fields:
            if f.state not in names:
                raise ValueError(f"{self.id}: output field {f.key!r} refers to unknown state {f.state!r}")
        for name in self.non_negative:
            if name not in names:
                raise ValueError(f"{self.id}: non_negative refers to unknown state {name!r}")

    @property
    def state_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.initial_state)

    @property
    def output_keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.output_fields)

    @property
    def clamped(self) -> bool:
        """True if at least one state component is clamped to be non-negative."""
        return bool(self.non_negative)

    def initial_vector(self) -> np.ndarray:
        return np.array([value for _, value in self.initial_state], dtype=float)

    def state_index(self, name: str) -> int:
        return self.state_names.index(name)

    def non_negative_indices(self) -> Tuple[int, ...]:
        return tuple(self.state_index(name) for name in self.non_negative)

    def summary(self) -> Dict[str, Any]:
        """Presentation view: what a chart or model picker needs, without data."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "equation_text": self.equation_text,
            "description": self.description,
            "output_fields": [
                {"key": f.key, "label": f.label, "color": f.color} for f in self.output_fields
            ],
            "axis_labels": {"x": self.axis_labels.x, "y": self.axis_labels.y},
        }

    def to_config(self) -> Dict[str, Any]:
        """JSON-friendly dict; inverse of io.descriptor_from_config."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "equation_text": self.equation_text,
            "description": self.description,
            "kind": self.kind.value,
            "physics": self.physics,
            "parameters": dict(self.parameters),
            "initial_state": [[name, value] for name, value in self.initial_state],
            "time_domain": {
                "t0": self.time_domain.t0,
                "t_end": self.time_domain.t_end,
                "dt": self.time_domain.dt,
            },
            "sampling": self.sampling.to_config(),
            "output_fields": [
                {"key": f.key, "state": f.state, "label": f.label, "color": f.color}
                for f in self.output_fields
            ],
            "axis_labels": {"x": self.axis_labels.x, "y": self.axis_labels.y},
            "non_negative": list(self.non_negative),
            "time_decimals": self.time_decimals,
        }
