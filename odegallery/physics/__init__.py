"""
Physics models for the trajectory engine.

Hierarchy:
  - integrators: fixed-step integration (explicit Euler, semi-implicit sequential Euler)
  - clamp: non-negativity clamp applied after integration steps
  - ode: base classes (ODEModel with rhs(), AnalyticModel with evaluate())
  - library: the eight parametric models and the MODEL_LIBRARY registry
"""

# --- Integrators (numerical level) ---
from odegallery.physics.integrators import (
    EulerIntegrator,
    SequentialEulerIntegrator,
    euler_step,
    sequential_euler_step,
)
from odegallery.physics.clamp import clamp_non_negative

# --- Base classes ---
from odegallery.physics.ode import AnalyticModel, ODEModel

# --- Library (parametric models) ---
from odegallery.physics.library import (
    MODEL_LIBRARY,
    DampedOscillator,
    ExponentialGrowth,
    LogisticGrowth,
    NewtonCooling,
    PredatorPrey,
    RadioactiveDecay,
    SIRModel,
    TwoCompartmentDrug,
    build_physics,
)

__all__ = [
    # Integrators
    "EulerIntegrator",
    "SequentialEulerIntegrator",
    "euler_step",
    "sequential_euler_step",
    "clamp_non_negative",
    # Base
    "ODEModel",
    "AnalyticModel",
    # Library
    "NewtonCooling",
    "ExponentialGrowth",
    "RadioactiveDecay",
    "LogisticGrowth",
    "SIRModel",
    "PredatorPrey",
    "DampedOscillator",
    "TwoCompartmentDrug",
    "MODEL_LIBRARY",
    "build_physics",
]
