from __future__ import annotations

"""
Minimum and maximum cell widths needed to render something.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Measurement:
    minimum: int
    maximum: int

    @property
    def span(self) -> int:
        """Difference between maximum and minimum."""
        return self.maximum - self.minimum

    def as_tuple(self) -> Tuple[int, int]:
        return self.minimum, self.maximum

    def normalized(self) -> "Measurement":
        """Ensure 0 <= minimum <= maximum."""
        minimum, maximum = self.as_tuple()
        minimum = min(max(0, minimum), maximum)
        return Measurement(max(0, minimum), max(0, minimum, maximum))

    def with_maximum(self, width: int) -> "Measurement":
        """Cap both widths at `width`."""
        return Measurement(min(self.minimum, width), min(self.maximum, width))

    def with_minimum(self, width: int) -> "Measurement":
        """Raise both widths to at least `width`."""
        width = max(0, width)
        return Measurement(max(self.minimum, width), max(self.maximum, width))

    def clamp(self, min_width: Optional[int] = None, max_width: Optional[int] = None) -> "Measurement":
        measurement = self
        if min_width is not None:
            measurement = measurement.with_minimum(min_width)
        if max_width is not None:
            measurement = measurement.with_maximum(max_width)
        return measurement


__all__ = ["Measurement"]
