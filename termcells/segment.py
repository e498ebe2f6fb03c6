from __future__ import annotations

"""
Segments: runs of text sharing one style.

A line is a list of segments. Control segments hold non printing escape
codes; they take no cells, are never split on newlines and never
restyled. Every operation returns new segments, nothing is mutated.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .cells import cell_len as _cell_len
from .cells import get_character_cell_size, set_cell_size
from .errors import CellsError
from .style import Style


def _split_once(text: str, stage: str) -> Tuple[str, Optional[str]]:
    parts = text.split("\n", 1)
    if len(parts) == 2:
        return parts[0], parts[1]
    if len(parts) == 1:
        return parts[0], None
    raise CellsError('E002', stage, f'split produced {len(parts)} parts')


@dataclass(frozen=True)
class Segment:
    text: str
    style: Optional[Style] = None
    is_control: bool = False

    def __bool__(self) -> bool:
        return bool(self.text)

    def cell_len(self) -> int:
        """Cells used by this segment, 0 for control segments."""
        if self.is_control:
            return 0
        return _cell_len(self.text)

    @classmethod
    def control(cls, text: str, style: Optional[Style] = None) -> "Segment":
        return cls(text, style, True)

    @classmethod
    def line(cls, is_control: bool = False) -> "Segment":
        """A new line segment."""
        return cls("\n", None, is_control)

    @classmethod
    def make_control(cls, segments: Iterable["Segment"]) -> List["Segment"]:
        return [cls(segment.text, segment.style, True) for segment in segments]

    def split_cells(self, cut: int) -> Tuple["Segment", "Segment"]:
        """Split in two at a cell offset.

        A double width character straddling `cut` is replaced by a space on
        each side. Zero width characters right after the cut stay on the
        left.
        """
        text, style, is_control = self.text, self.style, self.is_control
        cut = max(0, cut)
        if cut >= self.cell_len():
            return self, Segment("", style, is_control)
        position = 0
        cell_position = 0
        while position < len(text):
            size = get_character_cell_size(text[position])
            if cell_position + size > cut:
                if cell_position == cut:
                    break
                return (
                    Segment(text[:position] + " ", style, is_control),
                    Segment(" " + text[position + 1 :], style, is_control),
                )
            cell_position += size
            position += 1
        return Segment(text[:position], style, is_control), Segment(text[position:], style, is_control)

    @classmethod
    def apply_style(
        cls, segments: Iterable["Segment"], style: Optional[Style] = None
    ) -> Iterator["Segment"]:
        """Combine `style` over each segment's own style.

        Attributes set on `style` win. Control segments lose their style.
        """
        if style is None:
            yield from segments
            return
        for segment in segments:
            if segment.is_control:
                yield cls(segment.text, None, True)
            elif segment.style is None:
                yield cls(segment.text, style, False)
            else:
                yield cls(segment.text, segment.style.combine(style), False)

    @classmethod
    def filter_control(
        cls, segments: Iterable["Segment"], is_control: bool = False
    ) -> Iterator["Segment"]:
        return (segment for segment in segments if segment.is_control == is_control)

    @classmethod
    def adjust_line_length(
        cls,
        line: Sequence["Segment"],
        length: int,
        style: Optional[Style] = None,
        pad: bool = True,
    ) -> List["Segment"]:
        """Crop or pad a line to exactly `length` cells.

        With `pad=False` a short line is returned as is.
        """
        length = max(0, length)
        line_length = sum(segment.cell_len() for segment in line)
        new_line: List[Segment]

        if line_length < length:
            if pad:
                new_line = list(line) + [cls(" " * (length - line_length), style)]
            else:
                new_line = list(line)
        elif line_length > length:
            new_line = []
            append = new_line.append
            line_length = 0
            cropped = False
            for segment in line:
                if segment.is_control:
                    append(segment)
                    continue
                if cropped:
                    continue
                segment_length = segment.cell_len()
                if line_length + segment_length < length:
                    append(segment)
                    line_length += segment_length
                else:
                    append(cls(set_cell_size(segment.text, length - line_length), segment.style))
                    cropped = True
        else:
            new_line = list(line)
        return new_line

    @classmethod
    def split_lines(cls, segments: Iterable["Segment"]) -> List[List["Segment"]]:
        """Split segments in to lines on newline characters.

        The newlines themselves are dropped.
        """
        lines: List[List[Segment]] = []
        line: List[Segment] = []
        for segment in segments:
            if segment.is_control or "\n" not in segment.text:
                line.append(segment)
                continue
            text: Optional[str] = segment.text
            while text:
                _text, text = _split_once(text, 'segment.split_lines')
                if _text:
                    line.append(cls(_text, segment.style))
                if text is not None:
                    lines.append(line)
                    line = []
        if line:
            lines.append(line)
        return lines

    @classmethod
    def split_and_crop_lines(
        cls,
        segments: Iterable["Segment"],
        length: int,
        style: Optional[Style] = None,
        pad: bool = True,
        include_new_lines: bool = True,
    ) -> List[List["Segment"]]:
        """Split segments in to lines and crop or pad each to `length` cells."""
        lines: List[List[Segment]] = []
        line: List[Segment] = []
        adjust_line_length = cls.adjust_line_length
        new_line_segment = cls.line()
        for segment in segments:
            if segment.is_control or "\n" not in segment.text:
                line.append(segment)
                continue
            text: Optional[str] = segment.text
            while text:
                _text, text = _split_once(text, 'segment.split_and_crop_lines')
                if _text:
                    line.append(cls(_text, segment.style))
                if text is not None:
                    cropped_line = adjust_line_length(line, length, style=style, pad=pad)
                    if include_new_lines:
                        cropped_line.append(new_line_segment)
                    lines.append(cropped_line)
                    line = []
        if line:
            lines.append(adjust_line_length(line, length, style=style, pad=pad))
        return lines

    @classmethod
    def get_line_length(cls, line: Iterable["Segment"]) -> int:
        return sum(segment.cell_len() for segment in line)

    @classmethod
    def get_shape(cls, lines: Sequence[Sequence["Segment"]]) -> Tuple[int, int]:
        """(width, height) of the rectangle enclosing `lines`."""
        get_line_length = cls.get_line_length
        max_width = max((get_line_length(line) for line in lines), default=0)
        return max_width, len(lines)

    @classmethod
    def set_shape(
        cls,
        lines: Sequence[Sequence["Segment"]],
        width: int,
        height: Optional[int] = None,
        style: Optional[Style] = None,
    ) -> List[List["Segment"]]:
        """Crop or pad every line to `width`, and the line count to `height`."""
        _height = len(lines) if height is None else max(0, height)
        adjust_line_length = cls.adjust_line_length
        shaped_lines = [adjust_line_length(line, width, style=style) for line in lines[:_height]]
        while len(shaped_lines) < _height:
            shaped_lines.append([cls(" " * max(0, width), style)])
        return shaped_lines

    @classmethod
    def simplify(cls, segments: Iterable["Segment"]) -> Iterator["Segment"]:
        """Merge neighbouring segments with equal styles.

        Control segments are passed through and end a run.
        """
        iter_segments = iter(segments)
        try:
            last_segment = next(iter_segments)
        except StopIteration:
            return
        for segment in iter_segments:
            if (
                not last_segment.is_control
                and not segment.is_control
                and last_segment.style == segment.style
            ):
                last_segment = cls(last_segment.text + segment.text, last_segment.style)
            else:
                yield last_segment
                last_segment = segment
        yield last_segment

    @classmethod
    def strip_links(cls, segments: Iterable["Segment"]) -> Iterator["Segment"]:
        for segment in segments:
            if segment.is_control or segment.style is None:
                yield segment
            else:
                yield cls(segment.text, segment.style.update_link(None))

    @classmethod
    def strip_styles(cls, segments: Iterable["Segment"]) -> Iterator["Segment"]:
        for segment in segments:
            yield cls(segment.text, None, segment.is_control)

    @classmethod
    def divide(cls, segments: Iterable["Segment"], cuts: Iterable[int]) -> List[List["Segment"]]:
        """Divide segments at ascending cell offsets, one list per cut.

        Content past the last cut is dropped; parts beyond the end of the
        content are empty.
        """
        cut_list = list(cuts)
        parts: List[List[Segment]] = []
        line: List[Segment] = []
        position = 0
        index = 0
        for segment in segments:
            while index < len(cut_list) and position >= cut_list[index]:
                parts.append(line)
                line = []
                index += 1
            if index == len(cut_list):
                break
            cut = cut_list[index]
            end_position = position + segment.cell_len()
            if end_position <= cut:
                line.append(segment)
                position = end_position
                continue
            while end_position > cut:
                before, segment = segment.split_cells(cut - position)
                if before:
                    line.append(before)
                parts.append(line)
                line = []
                index += 1
                position = cut
                if index == len(cut_list):
                    break
                cut = cut_list[index]
            if index == len(cut_list):
                break
            if segment:
                line.append(segment)
            position = end_position
        while index < len(cut_list):
            parts.append(line)
            line = []
            index += 1
        return parts


__all__ = ["Segment"]
