"""Save and load descriptor configurations and trajectory records as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np

from odegallery.core.descriptor import AxisLabels, ModelDescriptor, OutputField, TimeDomain
from odegallery.core.trajectory import Trajectory
from odegallery.sampling import SamplingPolicy


def _convert(d: Any) -> Any:
    """Convert numpy values (recursively) to plain JSON types."""
    if isinstance(d, np.ndarray):
        return d.tolist()
    if isinstance(d, dict):
        return {k: _convert(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return [_convert(x) for x in d]
    if isinstance(d, (np.floating, np.integer)):
        return float(d) if isinstance(d, np.floating) else int(d)
    return d


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save a configuration (dict) to JSON.
    Numpy arrays are converted to lists.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_convert(config), f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration from JSON."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def descriptor_from_config(config: Dict[str, Any]) -> ModelDescriptor:
    """
    Build a ModelDescriptor from a dict produced by ModelDescriptor.to_config().
    Missing presentation keys fall back to empty strings.
    """
    try:
        domain = config["time_domain"]
        return ModelDescriptor(
            id=config["id"],
            display_name=config.get("display_name", config["id"]),
            equation_text=config.get("equation_text", ""),
            description=config.get("description", ""),
            kind=config["kind"],
            physics=config["physics"],
            parameters=config.get("parameters", {}),
            initial_state=tuple((name, value) for name, value in config["initial_state"]),
            time_domain=TimeDomain(float(domain["t0"]), float(domain["t_end"]), float(domain["dt"])),
            sampling=SamplingPolicy.from_config(config.get("sampling", {})),
            output_fields=tuple(
                OutputField(f["key"], f["state"], f.get("label", ""), f.get("color", ""))
                for f in config["output_fields"]
            ),
            axis_labels=AxisLabels(**config.get("axis_labels", {})),
            non_negative=tuple(config.get("non_negative", ())),
            time_decimals=int(config.get("time_decimals", 1)),
        )
    except KeyError as exc:
        raise ValueError(f"descriptor config is missing key {exc.args[0]!r}") from None


def save_descriptor(descriptor: ModelDescriptor, path: Union[str, Path]) -> None:
    save_config(descriptor.to_config(), path)


def load_descriptor(path: Union[str, Path]) -> ModelDescriptor:
    return descriptor_from_config(load_config(path))


def trajectory_to_records(trajectory: Trajectory) -> List[Dict[str, float]]:
    """Flat {time, <field>...} dicts, ready for json.dumps or a chart library."""
    return trajectory.to_records()
