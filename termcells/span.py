from __future__ import annotations

"""
Styled character ranges over a piece of text.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .style import Style


@dataclass(frozen=True)
class Span:
    """A half-open `[start, end)` character range with a style."""

    start: int
    end: int
    style: Optional[Style] = None

    def __bool__(self) -> bool:
        return self.end > self.start

    def split(self, offset: int) -> Tuple["Span", Optional["Span"]]:
        """Split in two at `offset`; the second part is None when `offset` is outside the span."""
        if offset < self.start or offset >= self.end:
            return self, None
        first = Span(self.start, min(self.end, offset), self.style)
        return first, Span(first.end, self.end, self.style)

    def with_offset(self, offset: int) -> "Span":
        return Span(self.start + offset, self.end + offset, self.style)

    def right_crop(self, offset: int) -> "Span":
        if offset >= self.end:
            return self
        return Span(self.start, offset, self.style)


__all__ = ["Span"]
