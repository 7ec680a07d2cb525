"""Core: model descriptors, integrator state, trajectories and errors."""

from odegallery.core.descriptor import (
    AxisLabels,
    ModelDescriptor,
    ModelKind,
    OutputField,
    TimeDomain,
)
from odegallery.core.errors import NumericDomainError, OdeGalleryError, UnknownModelError
from odegallery.core.state import SimulationState
from odegallery.core.trajectory import DataPoint, Trajectory

__all__ = [
    "AxisLabels",
    "ModelDescriptor",
    "ModelKind",
    "OutputField",
    "TimeDomain",
    "SimulationState",
    "DataPoint",
    "Trajectory",
    "OdeGalleryError",
    "UnknownModelError",
    "NumericDomainError",
]
