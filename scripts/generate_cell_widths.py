#!/usr/bin/env python3
"""
Regenerate termcells/_cell_widths.py from the wcwidth tables.

Each codepoint is classified once with `wcwidth.wcwidth`:
- NUL -> 0
- C0/C1 controls -> -1 (resolved as zero cells)
- everything else -> whatever wcwidth reports (0, 1 or 2)

Consecutive codepoints with the same width are merged and only ranges
whose width is not 1 are written, the lookup defaults to 1.

Usage: generate_cell_widths.py [output-path] [--check]

--check compares the existing table with a fresh build and exits 1 on drift.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from wcwidth import list_versions, wcwidth

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUTPUT = ROOT / "termcells" / "_cell_widths.py"
MAX_CODEPOINT = 0x10FFFF

HEADER = """\
# Auto generated by scripts/generate_cell_widths.py
# (start, end, width): inclusive codepoint ranges whose width is not 1.
# -1 marks control characters and is resolved as 0 cells.

UNICODE_VERSION = {version!r}

CELL_WIDTHS = [
"""

log = logging.getLogger("termcells.scripts.generate")


def unicode_version() -> str:
    return list_versions()[-1]


def codepoint_width(codepoint: int) -> int:
    if codepoint == 0:
        return 0
    if 1 <= codepoint <= 31 or 127 <= codepoint <= 159:
        return -1
    return wcwidth(chr(codepoint))


def iter_ranges(last: int = MAX_CODEPOINT) -> Iterator[Tuple[int, int, int]]:
    """Yield merged (start, end, width) ranges whose width is not 1."""
    start = 0
    width = codepoint_width(0)
    for codepoint in range(1, last + 1):
        current = codepoint_width(codepoint)
        if current != width:
            if width != 1:
                yield start, codepoint - 1, width
            start, width = codepoint, current
    if width != 1:
        yield start, last, width


def render(ranges: List[Tuple[int, int, int]], version: Optional[str] = None) -> str:
    header = HEADER.format(version=version or unicode_version())
    body = "".join(f"    ({start}, {end}, {width}),\n" for start, end, width in ranges)
    return header + body + "]\n"


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    check = "--check" in args
    paths = [a for a in args if not a.startswith("--")]
    output = Path(paths[0]) if paths else DEFAULT_OUTPUT

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log.info("wcwidth unicode version %s", unicode_version())
    source = render(list(iter_ranges()))
    if check:
        current = output.read_text(encoding="utf-8") if output.exists() else ""
        if current != source:
            log.error("%s is out of date, rerun without --check", output)
            return 1
        log.info("%s is up to date", output)
        return 0
    output.write_text(source, encoding="utf-8")
    log.info("wrote %d ranges to %s", source.count("\n    ("), output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
