from __future__ import annotations

"""
Error codes with human readable titles.

Output format: "Error [<CODE>]: <Title>. Stage: <stage>. Details: <detail>"

Usage:
- raise CellsError('E001', 'cells.check_cell_widths', 'range 12 overlaps range 11')
- msg = format_error('E002', 'segment.split_lines', 'split produced 3 parts')
"""

from dataclasses import dataclass
from typing import Optional


ERROR_TITLES: dict[str, str] = {
    'E001': 'Malformed width table',
    'E002': 'Unreachable split state',
    'E003': 'Invalid ratio arguments',
    'E004': 'Invalid cache capacity',
}


def format_error(code: str, stage: str, detail: Optional[str] = None) -> str:
    title = ERROR_TITLES.get(code, 'Unknown error')
    stage = (stage or '').strip() or '-'
    detail = (detail or '').strip()
    base = f"Error [{code}]: {title}. Stage: {stage}."
    if detail:
        return f"{base} Details: {detail}"
    return base


@dataclass
class CellsError(Exception):
    code: str
    stage: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        return format_error(self.code, self.stage, self.detail)


__all__ = ["ERROR_TITLES", "format_error", "CellsError"]
