"""Non-negativity clamp for population/concentration state components."""

from typing import Sequence

import numpy as np


def clamp_non_negative(x: np.ndarray, indices: Sequence[int]) -> np.ndarray:
    """Return a copy of x with x[i] = max(0, x[i]) for each i in indices."""
    out = np.array(x, dtype=float)
    if len(indices):
        idx = list(indices)
        out[idx] = np.maximum(out[idx], 0.0)
    return out
