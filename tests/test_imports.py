"""Verify that main modules are importable."""

import pytest


def test_import_odegallery() -> None:
    import odegallery
    assert odegallery.__version__ == "0.1.0"


def test_import_core() -> None:
    from odegallery.core import ModelDescriptor, SimulationState, Trajectory, DataPoint, TimeDomain
    assert ModelDescriptor is not None
    assert SimulationState is not None
    assert Trajectory is not None
    assert DataPoint is not None
    assert TimeDomain is not None


def test_import_physics() -> None:
    from odegallery.physics import ODEModel, AnalyticModel, EulerIntegrator, SequentialEulerIntegrator, MODEL_LIBRARY
    assert ODEModel is not None
    assert AnalyticModel is not None
    assert EulerIntegrator is not None
    assert SequentialEulerIntegrator is not None
    assert len(MODEL_LIBRARY) == 8


def test_import_io() -> None:
    from odegallery.io import save_config, load_config, descriptor_from_config, trajectory_to_records
    assert save_config is not None
    assert load_config is not None
    assert descriptor_from_config is not None
    assert trajectory_to_records is not None


def test_public_api() -> None:
    from odegallery import list_models, get_model, generate_trajectory, UnknownModelError, NumericDomainError
    assert callable(list_models)
    assert callable(get_model)
    assert callable(generate_trajectory)
    assert issubclass(UnknownModelError, LookupError)
    assert issubclass(NumericDomainError, ArithmeticError)
