"""Input/output: JSON configuration of descriptors and trajectory records."""

from odegallery.io.serializers import (
    descriptor_from_config,
    load_config,
    load_descriptor,
    save_config,
    save_descriptor,
    trajectory_to_records,
)

__all__ = [
    "save_config",
    "load_config",
    "descriptor_from_config",
    "save_descriptor",
    "load_descriptor",
    "trajectory_to_records",
]
