"""
Plotting helpers for trajectories: one line per output field, catalog colours and labels.

Matplotlib is optional; the functions raise ImportError if it is not installed.
The engine never imports this module.
"""

from typing import Any, Optional, Union

import numpy as np

from odegallery.catalog import get_model
from odegallery.core.descriptor import ModelDescriptor
from odegallery.core.trajectory import Trajectory
from odegallery.engine import generate_trajectory


def plot_trajectory(
    trajectory: Union[str, Trajectory],
    descriptor: Optional[ModelDescriptor] = None,
    ax: Optional[Any] = None,
    title: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """
    Plot every output field of a trajectory vs time.

    Args:
        trajectory: Trajectory, or a catalog id (the trajectory is then generated).
        descriptor: descriptor for labels/colours (default: catalog entry of trajectory.model_id).
        ax: matplotlib axes (if None, creates new figure).
        title: axes title (default: descriptor display name).
        **kwargs: passed to ax.plot().

    Returns:
        matplotlib axes.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_trajectory.")
    if isinstance(trajectory, str):
        trajectory = generate_trajectory(trajectory)
    if descriptor is None:
        descriptor = get_model(trajectory.model_id)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 4))
    t = trajectory.time
    for f in descriptor.output_fields:
        style = dict(kwargs)
        if f.color:
            style.setdefault("color", f.color)
        ax.plot(t, trajectory.get(f.key), label=f.label or f.key, **style)
    ax.set_xlabel(descriptor.axis_labels.x or "time")
    ax.set_ylabel(descriptor.axis_labels.y)
    ax.set_title(title if title is not None else descriptor.display_name)
    ax.legend(loc="best", fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax


def plot_phase_portrait(
    trajectory: Trajectory,
    x_key: str,
    y_key: str,
    ax: Optional[Any] = None,
    title: str = "Phase portrait",
    **kwargs: Any,
) -> Any:
    """
    Plot one output series against another (e.g. rabbits vs foxes).

    Returns:
        matplotlib axes.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_phase_portrait.")
    xs = np.asarray(trajectory.get(x_key))
    ys = np.asarray(trajectory.get(y_key))
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 5))
    ax.plot(xs, ys, **kwargs)
    ax.set_xlabel(x_key)
    ax.set_ylabel(y_key)
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    return ax
