"""Plot helpers (skipped if matplotlib is not installed)."""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from odegallery import generate_trajectory
from odegallery.viz import plot_phase_portrait, plot_trajectory


def test_plot_trajectory_uses_catalog_labels() -> None:
    ax = plot_trajectory("sir")
    labels = [line.get_label() for line in ax.get_lines()]
    assert labels == ["Susceptible (S)", "Infected (I)", "Recovered (R)"]
    assert ax.get_xlabel() == "Time (days)"
    assert ax.get_title() == "SIR Epidemic Model"
    plt.close("all")


def test_plot_phase_portrait() -> None:
    traj = generate_trajectory("predatorprey")
    ax = plot_phase_portrait(traj, "rabbits", "foxes")
    (line,) = ax.get_lines()
    assert len(line.get_xdata()) == len(traj)
    plt.close("all")
