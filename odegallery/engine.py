"""
Trajectory engine: descriptor -> (closed form | Euler + clamp) -> sampler -> Trajectory.

Every call recomputes from scratch; nothing is cached and no state survives
between calls.
"""

import logging
from typing import Callable, Dict, Iterator, List, Union

import numpy as np

from odegallery.catalog import get_model
from odegallery.core.descriptor import ModelDescriptor, ModelKind
from odegallery.core.errors import NumericDomainError
from odegallery.core.state import SimulationState
from odegallery.core.trajectory import DataPoint, Trajectory
from odegallery.physics.library import build_physics
from odegallery.physics.ode import AnalyticModel, ODEModel

logger = logging.getLogger(__name__)


def evaluate(descriptor: ModelDescriptor, t: float) -> np.ndarray:
    """Closed-form state of an ANALYTIC model at time t."""
    model = build_physics(descriptor)
    if not isinstance(model, AnalyticModel):
        raise TypeError(f"{descriptor.id}: {type(model).__name__} has no closed form")
    return _evaluate_checked(descriptor, model, t)


def _evaluate_checked(descriptor: ModelDescriptor, model: AnalyticModel, t: float) -> np.ndarray:
    x = np.atleast_1d(model.evaluate(descriptor.initial_vector(), t - descriptor.time_domain.t0))
    if not np.all(np.isfinite(x)):
        raise NumericDomainError(f"{descriptor.id}: non-finite value {x.tolist()} at t={t:g}")
    return x


def integrate(descriptor: ModelDescriptor) -> Iterator[SimulationState]:
    """
    Yield the integrator state at every step of an INTEGRATED model.

    The state is offered before each Euler step while t <= t_end, with t
    accumulated as t += dt. The yielded object is mutated by the next step:
    copy what you keep.
    """
    model = build_physics(descriptor)
    if not isinstance(model, ODEModel):
        raise TypeError(f"{descriptor.id}: {type(model).__name__} has no right-hand side")
    state = SimulationState.initial(descriptor)
    domain = descriptor.time_domain
    while state.t <= domain.t_end:
        yield state
        state.advance(model, domain.dt)


def make_point(descriptor: ModelDescriptor, t: float, x: np.ndarray) -> DataPoint:
    """Bind state components to output keys and round time for display."""
    values = tuple(
        (f.key, float(x[descriptor.state_index(f.state)])) for f in descriptor.output_fields
    )
    return DataPoint(time=round(float(t), descriptor.time_decimals), values=values)


def assemble(descriptor: ModelDescriptor, points: List[DataPoint]) -> Trajectory:
    return Trajectory(model_id=descriptor.id, fields=descriptor.output_keys, points=tuple(points))


def _run_analytic(descriptor: ModelDescriptor) -> Trajectory:
    model = build_physics(descriptor)
    if not isinstance(model, AnalyticModel):
        raise TypeError(f"{descriptor.id}: {type(model).__name__} has no closed form")
    grid = descriptor.time_domain.grid()
    points = []
    for index, t in enumerate(grid):
        if descriptor.sampling.retains(index, t):
            points.append(make_point(descriptor, t, _evaluate_checked(descriptor, model, t)))
    logger.debug("%s: evaluated %d grid points, kept %d", descriptor.id, len(grid), len(points))
    return assemble(descriptor, points)


def _run_integrated(descriptor: ModelDescriptor) -> Trajectory:
    points = []
    n_computed = 0
    for state in integrate(descriptor):
        n_computed += 1
        if descriptor.sampling.retains(state.index, state.t):
            points.append(make_point(descriptor, state.t, state.values))
    logger.debug("%s: integrated %d steps, kept %d", descriptor.id, n_computed, len(points))
    return assemble(descriptor, points)


_SOLVERS: Dict[ModelKind, Callable[[ModelDescriptor], Trajectory]] = {
    ModelKind.ANALYTIC: _run_analytic,
    ModelKind.INTEGRATED: _run_integrated,
}


def simulate(descriptor: ModelDescriptor) -> Trajectory:
    """Compute the trajectory of any descriptor (catalog entry or loaded from config)."""
    logger.debug("simulate %s kind=%s sampling=%s", descriptor.id, descriptor.kind.value, descriptor.sampling.kind.value)
    return _SOLVERS[descriptor.kind](descriptor)


def generate_trajectory(model: Union[str, ModelDescriptor]) -> Trajectory:
    """
    Trajectory of a catalog model.

    Args:
        model: catalog id (e.g. "sir") or a ModelDescriptor.

    Returns:
        Trajectory with one DataPoint per retained sample.

    Raises:
        UnknownModelError: if the id is not in the catalog.
        NumericDomainError: if a closed form or a step leaves its valid domain.
    """
    descriptor = model if isinstance(model, ModelDescriptor) else get_model(model)
    return simulate(descriptor)
