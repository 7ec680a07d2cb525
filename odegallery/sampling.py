"""
Output downsampling: which computed points make it into a trajectory.

The integrator always runs at the descriptor's full dt; a SamplingPolicy only
decides which of the computed states are kept. Three policies:

  - NONE: keep everything (closed-form models, grid = output resolution).
  - INDEX_MODULO(n): keep step indices 0, n, 2n, ...
  - TIME_MODULO(interval, tolerance): keep a point when fmod(t, interval) < tolerance.

TIME_MODULO works on the accumulated float time, so a sample near an interval
boundary can occasionally be admitted twice or skipped. That jitter is part of
the output and is not corrected here.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


class SamplingKind(str, Enum):
    NONE = "none"
    INDEX_MODULO = "index_modulo"
    TIME_MODULO = "time_modulo"


@dataclass(frozen=True)
class SamplingPolicy:
    """Retention rule applied to (step index, time) pairs."""

    kind: SamplingKind = SamplingKind.NONE
    n: int = 1
    interval: float = 0.0
    tolerance: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, SamplingKind):
            object.__setattr__(self, "kind", SamplingKind(self.kind))
        if self.kind is SamplingKind.INDEX_MODULO and int(self.n) < 1:
            raise ValueError(f"INDEX_MODULO needs n >= 1, got {self.n}")
        if self.kind is SamplingKind.TIME_MODULO:
            if self.interval <= 0:
                raise ValueError(f"TIME_MODULO needs interval > 0, got {self.interval}")
            if self.tolerance <= 0:
                raise ValueError(f"TIME_MODULO needs tolerance > 0, got {self.tolerance}")

    @classmethod
    def none(cls) -> "SamplingPolicy":
        return cls(SamplingKind.NONE)

    @classmethod
    def index_modulo(cls, n: int) -> "SamplingPolicy":
        return cls(SamplingKind.INDEX_MODULO, n=int(n))

    @classmethod
    def time_modulo(cls, interval: float, tolerance: float) -> "SamplingPolicy":
        return cls(SamplingKind.TIME_MODULO, interval=float(interval), tolerance=float(tolerance))

    def retains(self, index: int, t: float) -> bool:
        """True if the point computed at step `index`, time `t` is kept."""
        if self.kind is SamplingKind.INDEX_MODULO:
            return index % self.n == 0
        if self.kind is SamplingKind.TIME_MODULO:
            return math.fmod(t, self.interval) < self.tolerance
        return True

    def select(self, samples: Iterable[Tuple[int, float, T]]) -> Iterator[Tuple[int, float, T]]:
        """Filter an iterable of (index, t, payload) triples."""
        for index, t, payload in samples:
            if self.retains(index, t):
                yield index, t, payload

    def to_config(self) -> Dict[str, Any]:
        if self.kind is SamplingKind.INDEX_MODULO:
            return {"kind": self.kind.value, "n": self.n}
        if self.kind is SamplingKind.TIME_MODULO:
            return {"kind": self.kind.value, "interval": self.interval, "tolerance": self.tolerance}
        return {"kind": self.kind.value}

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SamplingPolicy":
        kind = SamplingKind(config.get("kind", SamplingKind.NONE.value))
        if kind is SamplingKind.INDEX_MODULO:
            return cls.index_modulo(config["n"])
        if kind is SamplingKind.TIME_MODULO:
            return cls.time_modulo(config["interval"], config["tolerance"])
        return cls.none()


__all__ = ["SamplingKind", "SamplingPolicy"]
