"""Tests for JSON configuration of descriptors."""

import json

import numpy as np
import pytest

from odegallery import generate_trajectory, get_model, list_models, simulate
from odegallery.io import (
    descriptor_from_config,
    load_config,
    load_descriptor,
    save_config,
    save_descriptor,
    trajectory_to_records,
)


def test_save_and_load_config_converts_numpy(tmp_path) -> None:
    path = tmp_path / "nested" / "cfg.json"
    save_config({"a": np.array([1.0, 2.0]), "b": np.float64(0.5), "c": np.int64(3)}, path)
    assert load_config(path) == {"a": [1.0, 2.0], "b": 0.5, "c": 3}


@pytest.mark.parametrize("model_id", [m.id for m in list_models()])
def test_descriptor_config_roundtrip(model_id: str) -> None:
    d = get_model(model_id)
    assert descriptor_from_config(json.loads(json.dumps(d.to_config()))) == d


def test_descriptor_file_roundtrip_and_simulate(tmp_path) -> None:
    path = tmp_path / "sir.json"
    save_descriptor(get_model("sir"), path)
    loaded = load_descriptor(path)
    assert simulate(loaded) == generate_trajectory("sir")


def test_modified_constants_change_the_trajectory() -> None:
    config = get_model("cooling").to_config()
    config["id"] = "cooling_fridge"
    config["parameters"]["T_room"] = 4.0
    d = descriptor_from_config(config)
    traj = simulate(d)
    assert traj.model_id == "cooling_fridge"
    assert traj[-1]["value"] < generate_trajectory("cooling")[-1]["value"]


def test_missing_key_is_value_error() -> None:
    config = get_model("drug").to_config()
    del config["time_domain"]
    with pytest.raises(ValueError, match="time_domain"):
        descriptor_from_config(config)


def test_unknown_physics_is_value_error() -> None:
    config = get_model("drug").to_config()
    config["physics"] = "navier_stokes"
    with pytest.raises(ValueError, match="unknown physics"):
        simulate(descriptor_from_config(config))


def test_trajectory_to_records_is_json_serializable() -> None:
    records = trajectory_to_records(generate_trajectory("predatorprey"))
    text = json.dumps(records)
    assert json.loads(text)[0] == {"time": 0.0, "rabbits": 40.0, "foxes": 9.0}
