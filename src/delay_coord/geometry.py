# src/delay_coord/geometry.py
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen = True)
class CoordinateGeometry(ABC):
    """
    Parameters and index law of a delay-embedding scheme.

    A geometry maps a logical coordinate index in [0, dimension) to a physical
    offset inside a window of `window_size` consecutive samples. It knows
    nothing about the data being embedded; the sliding and the views live in
    `delay_coord.mapping`.
    """
    dimension: int
    delay: int

    def __post_init__(self):
        for name in ("dimension", "delay"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise TypeError(f"{name} must be an int, got {type(v).__name__}")
            if v < 0:
                raise ValueError(f"{name} must be >= 0, got {v}")

    @property
    def window_size(self) -> int:
        """Consecutive samples spanned by one embedded point."""
        if self.dimension == 0:
            return 0
        return (self.dimension - 1) * self.delay + 1

    @abstractmethod
    def map_coord(self, index: int) -> Optional[int]:
        """Physical offset of logical `index`, or None when out of range."""

    def mapping_iter(self, data: Sequence):
        from .mapping import MappingIterator
        return MappingIterator(self, data)


class ForwardDelayCoordinates(CoordinateGeometry):
    """
    Forward delay embedding: components ordered newest first.

    Logical index 0 is the last sample of the window, index dimension-1 the
    first one, i.e. v_t = [x_t, x_{t-delay}, ..., x_{t-(dimension-1)*delay}].
    """

    def map_coord(self, index: int) -> Optional[int]:
        if index < 0 or index >= self.dimension:
            return None
        return (self.dimension - index - 1) * self.delay
