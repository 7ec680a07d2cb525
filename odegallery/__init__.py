"""
odegallery: trajectories of eight classic ODE models (closed form or Euler).
"""

__version__ = "0.1.0"

from odegallery.catalog import get_model, list_models, model_summaries
from odegallery.core.errors import NumericDomainError, OdeGalleryError, UnknownModelError
from odegallery.engine import generate_trajectory, simulate

__all__ = [
    "__version__",
    "list_models",
    "get_model",
    "model_summaries",
    "generate_trajectory",
    "simulate",
    "OdeGalleryError",
    "UnknownModelError",
    "NumericDomainError",
]
