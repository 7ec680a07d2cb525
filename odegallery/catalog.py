"""
Model catalog: the eight built-in descriptors.

Descriptors are built once at import time and never mutated. Lookup order is
the display order of list_models().
"""

from typing import Any, Dict, List, Tuple

from odegallery.core.descriptor import (
    AxisLabels,
    ModelDescriptor,
    ModelKind,
    OutputField,
    TimeDomain,
)
from odegallery.core.errors import UnknownModelError
from odegallery.sampling import SamplingPolicy

_CATALOG: Tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="cooling",
        display_name="Newton's Law of Cooling",
        equation_text="dT/dt = -k(T - T_room)",
        description="A hot coffee cools down to room temperature",
        kind=ModelKind.ANALYTIC,
        physics="newton_cooling",
        parameters={"k": 0.1, "T_room": 20.0},
        initial_state=(("T", 90.0),),
        time_domain=TimeDomain(0.0, 50.0, 0.5),
        sampling=SamplingPolicy.none(),
        output_fields=(OutputField("value", "T", "Temperature (°C)", "#e74c3c"),),
        axis_labels=AxisLabels("Time (minutes)", "Temperature (°C)"),
    ),
    ModelDescriptor(
        id="growth",
        display_name="Exponential Growth",
        equation_text="dP/dt = r·P",
        description="Bacteria multiply without any constraint",
        kind=ModelKind.ANALYTIC,
        physics="exponential_growth",
        parameters={"r": 0.1},
        initial_state=(("P", 100.0),),
        time_domain=TimeDomain(0.0, 50.0, 0.5),
        sampling=SamplingPolicy.none(),
        output_fields=(OutputField("value", "P", "Population", "#2ecc71"),),
        axis_labels=AxisLabels("Time (hours)", "Population"),
    ),
    ModelDescriptor(
        id="decay",
        display_name="Radioactive Decay",
        equation_text="dN/dt = -λ·N",
        description="Radioactive material decays over time",
        kind=ModelKind.ANALYTIC,
        physics="radioactive_decay",
        parameters={"lam": 0.15},
        initial_state=(("N", 1000.0),),
        time_domain=TimeDomain(0.0, 30.0, 0.5),
        sampling=SamplingPolicy.none(),
        output_fields=(OutputField("value", "N", "Amount", "#9b59b6"),),
        axis_labels=AxisLabels("Time (years)", "Amount"),
    ),
    ModelDescriptor(
        id="logistic",
        display_name="Logistic Growth",
        equation_text="dP/dt = r·P(1 - P/K)",
        description="Population growth with limited resources",
        kind=ModelKind.ANALYTIC,
        physics="logistic_growth",
        parameters={"r": 0.5, "K": 1000.0},
        initial_state=(("P", 50.0),),
        time_domain=TimeDomain(0.0, 20.0, 0.2),
        sampling=SamplingPolicy.none(),
        output_fields=(OutputField("value", "P", "Population", "#3498db"),),
        axis_labels=AxisLabels("Time", "Population"),
    ),
    ModelDescriptor(
        id="sir",
        display_name="SIR Epidemic Model",
        equation_text="dS/dt = -βSI, dI/dt = βSI - γI, dR/dt = γI",
        description="A disease spreads through a population",
        kind=ModelKind.INTEGRATED,
        physics="sir",
        parameters={"beta": 0.5, "gamma": 0.1, "N": 1000.0},
        initial_state=(("S", 999.0), ("I", 1.0), ("R", 0.0)),
        time_domain=TimeDomain(0.0, 100.0, 0.1),
        sampling=SamplingPolicy.index_modulo(10),
        output_fields=(
            OutputField("susceptible", "S", "Susceptible (S)", "#3498db"),
            OutputField("infected", "I", "Infected (I)", "#e74c3c"),
            OutputField("recovered", "R", "Recovered (R)", "#2ecc71"),
        ),
        axis_labels=AxisLabels("Time (days)", "People"),
    ),
    ModelDescriptor(
        id="predatorprey",
        display_name="Predator-Prey (Lotka-Volterra)",
        equation_text="dR/dt = αR - βRF, dF/dt = δRF - γF",
        description="Rabbit and fox populations rise and fall in cycles",
        kind=ModelKind.INTEGRATED,
        physics="lotka_volterra",
        parameters={"alpha": 0.1, "beta": 0.02, "delta": 0.01, "gamma": 0.1},
        initial_state=(("R", 40.0), ("F", 9.0)),
        time_domain=TimeDomain(0.0, 200.0, 0.1),
        sampling=SamplingPolicy.time_modulo(2.0, 0.1),
        output_fields=(
            OutputField("rabbits", "R", "Rabbits", "#95a5a6"),
            OutputField("foxes", "F", "Foxes", "#e67e22"),
        ),
        axis_labels=AxisLabels("Time", "Population"),
        non_negative=("R", "F"),
    ),
    ModelDescriptor(
        id="oscillator",
        display_name="Damped Oscillator",
        equation_text="d²x/dt² + 2ζω₀(dx/dt) + ω₀²x = 0",
        description="A spring-mass system loses energy to friction",
        kind=ModelKind.INTEGRATED,
        physics="damped_oscillator",
        parameters={"omega0": 2.0, "zeta": 0.1},
        initial_state=(("x", 1.0), ("v", 0.0)),
        time_domain=TimeDomain(0.0, 10.0, 0.01),
        sampling=SamplingPolicy.time_modulo(0.1, 0.01),
        output_fields=(OutputField("value", "x", "Position", "#1abc9c"),),
        axis_labels=AxisLabels("Time (seconds)", "Position"),
        time_decimals=2,
    ),
    ModelDescriptor(
        id="drug",
        display_name="Two-Compartment Drug Model",
        equation_text="dC₁/dt = -k₁₂C₁ - k₁₀C₁ + k₂₁C₂",
        description="A drug distributes between blood and tissue",
        kind=ModelKind.INTEGRATED,
        physics="two_compartment_drug",
        parameters={"k12": 0.2, "k21": 0.1, "k10": 0.15},
        initial_state=(("C1", 100.0), ("C2", 0.0)),
        time_domain=TimeDomain(0.0, 50.0, 0.1),
        sampling=SamplingPolicy.time_modulo(0.5, 0.1),
        output_fields=(
            OutputField("blood", "C1", "Blood", "#e74c3c"),
            OutputField("tissue", "C2", "Tissue", "#3498db"),
        ),
        axis_labels=AxisLabels("Time (hours)", "Concentration (mg/L)"),
    ),
)

_BY_ID: Dict[str, ModelDescriptor] = {d.id: d for d in _CATALOG}


def list_models() -> List[ModelDescriptor]:
    """All descriptors, in display order."""
    return list(_CATALOG)


def model_ids() -> List[str]:
    return [d.id for d in _CATALOG]


def get_model(model_id: str) -> ModelDescriptor:
    """Descriptor for `model_id`; raises UnknownModelError if absent."""
    try:
        return _BY_ID[model_id]
    except (KeyError, TypeError):
        raise UnknownModelError(model_id, tuple(_BY_ID)) from None


def model_summaries() -> List[Dict[str, Any]]:
    """Presentation view of the catalog (no trajectory data)."""
    return [d.summary() for d in _CATALOG]
