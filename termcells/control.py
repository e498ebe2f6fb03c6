from __future__ import annotations

"""Non printing control codes."""

from typing import Iterable, List

from .segment import Segment


STRIP_CONTROL_CODES = frozenset(("\b", "\v", "\f", "\r"))


class Control:
    """Control codes wrapped in a control segment.

    They take no cells and are never restyled or split.
    """

    def __init__(self, *codes: str) -> None:
        self.segment = Segment.control("".join(codes))

    def segments(self) -> List[Segment]:
        return [self.segment]

    def __str__(self) -> str:
        return self.segment.text

    def __repr__(self) -> str:
        return f"Control({self.segment.text!r})"


def strip_control_codes(text: str, codes: Iterable[str] = STRIP_CONTROL_CODES) -> str:
    """Remove backspace, vertical tab, form feed and carriage return."""
    codes = codes if isinstance(codes, (set, frozenset)) else frozenset(codes)
    return "".join(character for character in text if character not in codes)


__all__ = ["Control", "strip_control_codes", "STRIP_CONTROL_CODES"]
