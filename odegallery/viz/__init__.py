"""
Visualization: matplotlib views of trajectories (a consumer of the engine).
"""

from odegallery.viz._utils import plot_phase_portrait, plot_trajectory

__all__ = ["plot_trajectory", "plot_phase_portrait"]
