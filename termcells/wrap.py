from __future__ import annotations

"""
Greedy word wrapping by terminal cells.

`divide_line` returns the character offsets where a line should be
broken; breaks always fall at the start of a word, or inside a word that
is too wide for any line when folding.
"""

import re
from typing import Iterator, List, Tuple

from .cells import cell_len, chop_cells
from .iters import loop_last


re_word = re.compile(r"\s*\S+\s*")


def words(text: str) -> Iterator[Tuple[int, int, str]]:
    """Yield (start, end, word) for each word and its surrounding whitespace."""
    word_match = re_word.match(text, 0)
    while word_match is not None:
        start, end = word_match.span()
        yield start, end, word_match.group(0)
        word_match = re_word.match(text, end)


def divide_line(text: str, width: int, fold: bool = True) -> List[int]:
    """Offsets at which to break `text` so lines fit in `width` cells.

    Trailing whitespace may hang past `width`. Words wider than `width`
    are chopped when `fold` is set, otherwise they overflow their line.
    """
    divides: List[int] = []
    append = divides.append
    line_position = 0
    _cell_len = cell_len
    for start, _end, word in words(text):
        stripped = word.rstrip()
        word_length = _cell_len(stripped)
        if line_position + word_length > width:
            if word_length > width:
                if fold:
                    trailing = _cell_len(word[len(stripped):])
                    for last, line in loop_last(chop_cells(stripped, width, position=line_position)):
                        if last:
                            line_position = _cell_len(line) + trailing
                        else:
                            start += len(line)
                            if start and (not divides or start > divides[-1]):
                                append(start)
                else:
                    if start:
                        append(start)
                    line_position = _cell_len(word)
            elif line_position and start:
                append(start)
                line_position = _cell_len(word)
        else:
            line_position += _cell_len(word)
    return divides


def wrap(text: str, width: int, fold: bool = True) -> List[str]:
    """Wrap text in to lines, keeping explicit newlines.

    Trailing whitespace is removed from each wrapped line.
    """
    lines: List[str] = []
    for raw_line in text.split("\n"):
        offsets = [0, *divide_line(raw_line, width, fold=fold), len(raw_line)]
        for start, end in zip(offsets, offsets[1:]):
            lines.append(raw_line[start:end].rstrip())
    return lines


__all__ = ["words", "divide_line", "wrap"]
