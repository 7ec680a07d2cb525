"""Trajectory container: ordered DataPoints with series access by output key."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class DataPoint:
    """One emitted sample: time plus one value per output field."""

    time: float
    values: Tuple[Tuple[str, float], ...]

    def __getitem__(self, key: str) -> float:
        if key == "time":
            return self.time
        for k, v in self.values:
            if k == key:
                return v
        raise KeyError(key)

    def as_dict(self) -> Dict[str, float]:
        """Flat record {"time": t, key: value, ...}."""
        record = {"time": self.time}
        record.update(self.values)
        return record


@dataclass(frozen=True)
class Trajectory:
    """
    Ordered sequence of DataPoint for one model.
    Time is non-decreasing along the sequence.
    """

    model_id: str
    fields: Tuple[str, ...]
    points: Tuple[DataPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> DataPoint:
        return self.points[index]

    @property
    def time(self) -> np.ndarray:
        return np.array([p.time for p in self.points], dtype=float)

    def get(self, key: str) -> np.ndarray:
        """Series for an output key as a numpy array."""
        if key == "time":
            return self.time
        if key not in self.fields:
            raise KeyError(f"{self.model_id}: no output field {key!r} (fields: {self.fields})")
        return np.array([p[key] for p in self.points], dtype=float)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """All series as arrays, 'time' included."""
        out = {"time": self.time}
        for key in self.fields:
            out[key] = self.get(key)
        return out

    def to_records(self) -> List[Dict[str, Any]]:
        """List of flat dicts, one per point (chart-library friendly)."""
        return [p.as_dict() for p in self.points]
