from __future__ import annotations

"""
Integer distribution by ratio.

Used to share a fixed number of cells between columns.
"""

from math import ceil
from typing import List, Optional, Sequence

from .errors import CellsError


def ratio_reduce(
    total: int, ratios: Sequence[int], maximums: Sequence[int], values: Sequence[int]
) -> List[int]:
    """Subtract up to `total` from `values` in proportion to `ratios`.

    No value is reduced by more than its maximum; a ratio whose maximum
    is 0 takes no share.
    """
    ratios = [ratio if _max else 0 for ratio, _max in zip(ratios, maximums)]
    total_ratio = sum(ratios)
    if not total_ratio:
        return list(values)
    total_remaining = total
    result: List[int] = []
    for ratio, maximum, value in zip(ratios, maximums, values):
        if ratio and total_ratio > 0:
            distributed = min(maximum, round(ratio * total_remaining / total_ratio))
            result.append(value - distributed)
            total_remaining -= distributed
            total_ratio -= ratio
        else:
            result.append(value)
    return result


def ratio_distribute(
    total: int, ratios: Sequence[int], minimums: Optional[Sequence[int]] = None
) -> List[int]:
    """Split `total` in to parts proportional to `ratios`.

    Each part is at least its minimum; the parts sum to `total` unless
    minimums force more.
    """
    if minimums:
        ratios = [ratio if _min else 0 for ratio, _min in zip(ratios, minimums)]
    total_ratio = sum(ratios)
    if total_ratio <= 0:
        raise CellsError('E003', 'ratio.ratio_distribute', f'sum of ratios is {total_ratio}')

    total_remaining = total
    distributed_total: List[int] = []
    append = distributed_total.append
    _minimums = list(minimums) if minimums else [0] * len(ratios)
    for ratio, minimum in zip(ratios, _minimums):
        if total_ratio > 0:
            distributed = max(minimum, ceil(ratio * total_remaining / total_ratio))
        else:
            distributed = total_remaining
        append(distributed)
        total_ratio -= ratio
        total_remaining -= distributed
    return distributed_total


__all__ = ["ratio_reduce", "ratio_distribute"]
