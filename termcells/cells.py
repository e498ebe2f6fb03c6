from __future__ import annotations

"""
Terminal cell widths of Unicode text.

ASCII is always one cell. Other codepoints are resolved by binary search
over `CELL_WIDTHS` and memoized; codepoints outside every range are one
cell wide.
"""

import functools
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ._cell_widths import CELL_WIDTHS
from .cache import LRUCache
from .config import CONFIG
from .errors import CellsError


_log = logging.getLogger('termcells.cells')

WidthRange = Tuple[int, int, int]

DEFAULT_CELL_LEN_CACHE: LRUCache[str, int] = LRUCache(CONFIG.cell_len_cache_size)


def _lookup_codepoint(codepoint: int, table: Sequence[WidthRange] = CELL_WIDTHS) -> int:
    lower_bound = 0
    upper_bound = len(table) - 1
    while lower_bound <= upper_bound:
        index = (lower_bound + upper_bound) // 2
        start, end, width = table[index]
        if codepoint < start:
            upper_bound = index - 1
        elif codepoint > end:
            lower_bound = index + 1
        else:
            return 0 if width == -1 else width
    return 1


@functools.lru_cache(maxsize=CONFIG.codepoint_cache_size)
def get_codepoint_cell_size(codepoint: int) -> int:
    """Cells used by a codepoint (0, 1 or 2)."""
    return _lookup_codepoint(codepoint)


def get_character_cell_size(character: str) -> int:
    """Cells used by a single character."""
    codepoint = ord(character)
    if codepoint < 128:
        return 1
    return get_codepoint_cell_size(codepoint)


def _cacheable(text: str) -> bool:
    limit = CONFIG.cell_len_max_bytes
    return len(text) <= limit and len(text.encode('utf-8', 'surrogatepass')) <= limit


def cell_len(text: str, cache: Optional[LRUCache[str, int]] = None) -> int:
    """Number of cells required to display `text`.

    Short strings are memoized in `cache` (the shared default when None).
    """
    if cache is None:
        cache = DEFAULT_CELL_LEN_CACHE
    cached = cache.get(text)
    if cached is not None:
        return cached
    _get_size = get_character_cell_size
    total_size = sum(_get_size(character) for character in text)
    if _cacheable(text):
        cache.put(text, total_size)
    return total_size


def set_cell_size(text: str, total: int) -> str:
    """Crop or pad `text` so it occupies exactly `total` cells.

    When the cut lands inside a double width character the vacated cell
    is filled with a space.
    """
    total = max(0, total)
    cell_size = cell_len(text)
    if cell_size == total:
        return text
    if cell_size < total:
        return text + " " * (total - cell_size)

    character_sizes = [get_character_cell_size(character) for character in text]
    excess = cell_size - total
    while excess > 0 and character_sizes:
        excess -= character_sizes.pop()
    text = text[: len(character_sizes)]
    if excess < 0:
        text += " " * -excess
    return text


def chop_cells(text: str, max_size: int, position: int = 0) -> List[str]:
    """Break text in to chunks of at most `max_size` cells.

    `position` is the number of cells already used on the first chunk's
    line; the first chunk is empty when not even one character fits there.
    """
    _get_size = get_character_cell_size
    characters = [(character, _get_size(character)) for character in text][::-1]
    total_size = position
    lines: List[List[str]] = [[]]
    append = lines[-1].append
    pop = characters.pop
    while characters:
        character, size = pop()
        if total_size + size > max_size:
            lines.append([character])
            append = lines[-1].append
            total_size = size
        else:
            total_size += size
            append(character)
    return ["".join(line) for line in lines]


def check_cell_widths(table: Iterable[WidthRange] = CELL_WIDTHS) -> int:
    """Validate a width table, return the number of ranges.

    Raises CellsError (E001) when ranges are unsorted, overlapping,
    inverted or carry a width outside {-1, 0, 1, 2}.
    """
    previous_end = -1
    count = 0
    for index, (start, end, width) in enumerate(table):
        if start > end:
            raise CellsError('E001', 'cells.check_cell_widths', f'range {index} is inverted: {start}..{end}')
        if start <= previous_end:
            raise CellsError('E001', 'cells.check_cell_widths', f'range {index} overlaps or is out of order at {start}')
        if width not in (-1, 0, 1, 2):
            raise CellsError('E001', 'cells.check_cell_widths', f'range {index} has width {width}')
        previous_end = end
        count += 1
    _log.debug("width table ok: %d ranges", count)
    return count


__all__ = [
    "DEFAULT_CELL_LEN_CACHE",
    "get_codepoint_cell_size",
    "get_character_cell_size",
    "cell_len",
    "set_cell_size",
    "chop_cells",
    "check_cell_widths",
]
