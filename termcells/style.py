from __future__ import annotations

"""
Terminal style: colours, attribute flags and an optional link.

Attributes are tri-state (on, off or not set) and packed in two bit
masks: `_set_attributes` marks which flags are set, `_attributes` holds
their values. Combining styles lets flags set on the right hand side
override the left.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional


ATTRIBUTE_NAMES = (
    "bold",
    "dim",
    "italic",
    "underline",
    "blink",
    "blink2",
    "reverse",
    "conceal",
    "strike",
    "underline2",
    "frame",
    "encircle",
    "overline",
)
_BITS = {name: 1 << index for index, name in enumerate(ATTRIBUTE_NAMES)}


def _attribute(name: str) -> property:
    bit = _BITS[name]

    def getter(self: "Style") -> Optional[bool]:
        if self._set_attributes & bit:
            return bool(self._attributes & bit)
        return None

    getter.__name__ = name
    getter.__doc__ = f"{name} flag: True, False or None when not set."
    return property(getter)


@dataclass(frozen=True)
class Style:
    color: Optional[str] = None
    bgcolor: Optional[str] = None
    _attributes: int = 0
    _set_attributes: int = 0
    link: Optional[str] = None

    bold = _attribute("bold")
    dim = _attribute("dim")
    italic = _attribute("italic")
    underline = _attribute("underline")
    blink = _attribute("blink")
    blink2 = _attribute("blink2")
    reverse = _attribute("reverse")
    conceal = _attribute("conceal")
    strike = _attribute("strike")
    underline2 = _attribute("underline2")
    frame = _attribute("frame")
    encircle = _attribute("encircle")
    overline = _attribute("overline")

    @classmethod
    def create(
        cls,
        *,
        color: Optional[str] = None,
        bgcolor: Optional[str] = None,
        link: Optional[str] = None,
        **attributes: Optional[bool],
    ) -> "Style":
        """Build a style from keyword flags, e.g. Style.create(bold=True, color="red")."""
        set_mask = 0
        value_mask = 0
        for name, value in attributes.items():
            if name not in _BITS:
                raise TypeError(f"unknown style attribute {name!r}")
            if value is None:
                continue
            set_mask |= _BITS[name]
            if value:
                value_mask |= _BITS[name]
        return cls(color, bgcolor, value_mask, set_mask, link)

    @classmethod
    def null(cls) -> "Style":
        return NULL_STYLE

    def __bool__(self) -> bool:
        return bool(self._set_attributes or self.color or self.bgcolor or self.link)

    def combine(self, other: Optional["Style"]) -> "Style":
        """Merge `other` on top of this style; what `other` sets wins."""
        if other is None or not other:
            return self
        if not self:
            return other
        return Style(
            other.color or self.color,
            other.bgcolor or self.bgcolor,
            (self._attributes & ~other._set_attributes) | (other._attributes & other._set_attributes),
            self._set_attributes | other._set_attributes,
            other.link or self.link,
        )

    def __add__(self, other: Optional["Style"]) -> "Style":
        if other is not None and not isinstance(other, Style):
            return NotImplemented
        return self.combine(other)

    @classmethod
    def chain(cls, *styles: Optional["Style"]) -> "Style":
        return combine(styles)

    def update_link(self, link: Optional[str] = None) -> "Style":
        return replace(self, link=link)

    @property
    def without_color(self) -> "Style":
        return replace(self, color=None, bgcolor=None)

    def __str__(self) -> str:
        words = []
        for name in ATTRIBUTE_NAMES:
            value = getattr(self, name)
            if value is not None:
                words.append(name if value else f"not {name}")
        if self.color:
            words.append(self.color)
        if self.bgcolor:
            words.extend(("on", self.bgcolor))
        if self.link:
            words.extend(("link", self.link))
        return " ".join(words) or "none"


NULL_STYLE = Style()


def combine(styles: Iterable[Optional[Style]]) -> Style:
    """Combine styles left to right."""
    result = NULL_STYLE
    for style in styles:
        result = result.combine(style)
    return result


__all__ = ["Style", "NULL_STYLE", "ATTRIBUTE_NAMES", "combine"]
