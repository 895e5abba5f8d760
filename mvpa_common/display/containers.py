"""
Container renderers: records, heterogeneous sequences, and N-D pages.

Each renderer receives the dispatcher as `render` (obj, options) -> TextBlock
and calls it for every field, cell, or page, so recursion depth is governed
by the dispatcher alone.
"""

from __future__ import annotations

import itertools
from typing import Callable, List, Optional

import numpy as np

from .blocks import TextBlock, compose, vstack
from .leaves import COLUMN_INFIX, ROW_MARKER, render_summary, render_text, surround
from .options import RenderOptions
from .summarize import select_matrix
from .values import Value

Renderer = Callable[[object, RenderOptions], TextBlock]

FIELD_MARKER = '.'
FIELD_INDENT = 2
CELL_GAP = '  '
PAGE_LABEL_INDENT = '   '


# =============================================================================
# Records
# =============================================================================

def _record_fields(value: Value):
    if isinstance(value.data, np.ndarray):
        return [(name, value.data[name]) for name in value.data.dtype.names]
    return list(value.data.items())


def _field_names(value: Value) -> List[str]:
    if isinstance(value.data, np.ndarray):
        return list(value.data.dtype.names)
    return [str(key) for key in value.data]


def render_record(value: Value, options: RenderOptions, render: Renderer) -> TextBlock:
    """
    Render each field as '.name' followed by its value indented by two columns.

    Arrays of records with rank > 2 are listed by field name only:

        <ndarray>@2x2x2 with fields:
           'name'
           'score'
    """
    if value.ndim > 2:
        header = f"{render_summary(value).to_text()} with fields:"
        names = [
            compose([[PAGE_LABEL_INDENT, render_text(name, options)]])
            for name in _field_names(value)
        ]
        return vstack([header] + names)

    grid = []
    for key, field_value in _record_fields(value):
        block = render(field_value, options)
        grid.append([f"{FIELD_MARKER}{key}"])
        grid.append([block.indent(FIELD_INDENT)])
    return compose(grid)


# =============================================================================
# Sequences
# =============================================================================

def render_sequence(value: Value, options: RenderOptions, render: Renderer) -> TextBlock:
    """
    Render a rank-2 sequence of arbitrary values in braces.

    Cells are rendered recursively and laid out on a grid with two-blank
    gaps; summarized axes get the same ':' row and ' ... ' column markers as
    numeric matrices.

    Example
    -------
    >>> from mvpa_common.display import render
    >>> print(render(list('abcdefghijk')))
    { 'a'  'b'  'c' ... 'i'  'j'  'k'   }@1x11
    """
    rows, cols = select_matrix(value.shape, options)
    nrows = len(rows.indices) + rows.summarized
    ncols = len(cols.indices) + cols.summarized

    # grid column 2*j+2 holds cell column j, odd columns hold the gaps
    grid: List[List[Optional[object]]] = [[None] * (2 * ncols + 1) for _ in range(nrows)]
    for j in range(1, ncols if nrows else 0):
        grid[0][2 * j + 1] = CELL_GAP

    row_groups = [rows.pre, rows.post]
    col_groups = [cols.pre, cols.post]
    marker_row = len(rows.pre)

    grid_col = 0
    for col_part, col_indices in enumerate(col_groups):
        for ci, col_index in enumerate(col_indices):
            target = grid_col + 2 * ci + 2
            grid_row = 0
            cell_sizes = []
            for row_part, row_indices in enumerate(row_groups):
                if not row_indices:
                    continue
                if row_part == 1:
                    grid_row = marker_row + 1
                for ri, row_index in enumerate(row_indices):
                    block = render(value.data[row_index, col_index], options)
                    grid[grid_row + ri][target] = block
                    cell_sizes.append(block.height * block.width)
                    if col_part == 1 and ci == 0:
                        grid[grid_row + ri][target - 1] = COLUMN_INFIX
            if rows.summarized:
                # indent ':' by half the character count (rows x columns) of the largest cell
                spaces = max(max(cell_sizes) // 2 - 1, 0)
                grid[marker_row][target] = ' ' * spaces + ROW_MARKER
        grid_col += 2 * len(col_indices)

    show_shape = options.always_show_shape or rows.summarized or cols.summarized
    return surround(show_shape, '{ ', compose(grid), ' }', value.shape)


# =============================================================================
# N-D pages
# =============================================================================

def page_label(index) -> str:
    """'   (:,:,i3,...) = ' with 1-based trailing indices."""
    return f"{PAGE_LABEL_INDENT}(:,:,{','.join(str(i + 1) for i in index)}) = "


def render_pages(value: Value, options: RenderOptions, render: Renderer) -> TextBlock:
    """
    Render a rank > 2 array as labeled 2-D pages under a summary header.

    Pages enumerate the trailing dimensions in row-major order (last index
    varies fastest). Arrays with a zero-length dimension render as the
    summary header alone, e.g. '<float64>@2x0x3 (empty)'.

    Example
    -------
    >>> from mvpa_common.display import render
    >>> print(render(np.arange(8).reshape(2, 2, 2)))
    <int64>@2x2x2
       (:,:,1) = [ 0         2
                   4         6 ]
       (:,:,2) = [ 1         3
                   5         7 ]
    """
    header = render_summary(value)
    if value.size == 0:
        return header

    data = value.data
    grid = [[header, None]]
    for index in itertools.product(*(range(n) for n in value.shape[2:])):
        page = data[(slice(None), slice(None)) + index]
        grid.append([page_label(index), render(page, options)])
    return compose(grid)


__all__ = [
    'render_record',
    'render_sequence',
    'render_pages',
    'page_label',
]
