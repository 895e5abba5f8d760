"""
Summarization policy: which indices of an axis are shown.

An axis of extent n is summarized when n > max(threshold, 2*edgeitems); only
the first and last `edgeitems` indices are then kept. Rows and columns are
decided independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .options import RenderOptions


@dataclass(frozen=True)
class AxisSelection:
    """Indices kept along one axis; an empty `post` means not summarized."""

    pre: Tuple[int, ...]
    post: Tuple[int, ...] = ()

    @property
    def summarized(self) -> bool:
        return bool(self.post)

    @property
    def indices(self) -> Tuple[int, ...]:
        return self.pre + self.post


def select_axis(n: int, threshold, edgeitems) -> AxisSelection:
    """
    Select the indices to show along an axis of extent `n`.

    Parameters
    ----------
    n : int
        Axis extent.
    threshold, edgeitems : int or math.inf
        Summarization parameters; math.inf means "never summarize".

    Returns
    -------
    AxisSelection
        pre = 0..edgeitems-1 and post = n-edgeitems..n-1 when summarized,
        otherwise pre = 0..n-1 and post = ().

    Example
    -------
    >>> select_axis(11, 5, 3)
    AxisSelection(pre=(0, 1, 2), post=(8, 9, 10))
    >>> select_axis(4, 5, 3)
    AxisSelection(pre=(0, 1, 2, 3), post=())
    """
    # comparisons against inf are well defined, so no special-casing needed
    if n > max(threshold, 2 * edgeitems):
        edge = int(edgeitems)
        return AxisSelection(tuple(range(edge)), tuple(range(n - edge, n)))
    return AxisSelection(tuple(range(n)))


def select_matrix(shape, options: RenderOptions) -> Tuple[AxisSelection, AxisSelection]:
    """Row and column selections for a rank-2 shape."""
    return (
        select_axis(shape[0], options.threshold, options.edgeitems),
        select_axis(shape[1], options.threshold, options.edgeitems),
    )


__all__ = [
    'AxisSelection',
    'select_axis',
    'select_matrix',
]
