"""
Leaf renderers: opaque summaries, text, numeric matrices, and callables.

None of these recurse; each turns one rank-2 Value into a TextBlock.

Layout conventions
------------------
- Opening border ('[ ', "'") on the first row, closing border plus shape
  suffix on the last row
- Shape suffix '@3x4', followed by ' (empty)' when any dimension is zero
- Summarized rows are replaced by one ':' row, summarized columns by ' ... '
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .blocks import TextBlock, compose, vstack
from .options import RenderOptions
from .summarize import select_matrix
from .values import Kind, Value, as_value

STRING_INFIX = ' ... '
COLUMN_INFIX = ' ... '
ROW_MARKER = ':'


def shape_suffix(shape: Sequence[int], show: bool) -> str:
    """'@d1xd2x...' (plus ' (empty)') if `show` and the value is not a single element."""
    n = int(np.prod(shape))
    if not show or n == 1:
        return ''
    suffix = '@' + 'x'.join(str(d) for d in shape)
    if n == 0:
        suffix += ' (empty)'
    return suffix


def surround(show_shape: bool, pre: str, body: TextBlock, post: str, shape) -> TextBlock:
    """Wrap `body` in borders; the closing border goes on the last row."""
    post = post + shape_suffix(shape, show_shape)
    if body.is_empty:
        return TextBlock.from_text(pre.rstrip() + post)
    closing = vstack([TextBlock.blank(body.height - 1, 0), post])
    return compose([[pre, body, closing]])


def render_summary(value: Value) -> TextBlock:
    """
    One-line '<type>@AxB' summary of any value, without looking inside it.

    Objects without a shape are treated as a single element, so no suffix
    is added (e.g. '<NoneType>', '<dict>').
    """
    shape = value.shape if value.has_defined_shape else (1, 1)
    return TextBlock.from_text(f"<{value.type_name}>{shape_suffix(shape, True)}")


# =============================================================================
# Text
# =============================================================================

def render_text(value, options: RenderOptions) -> TextBlock:
    """
    Render a character grid between quotes, truncating wide rows.

    Rows wider than options.max_string_length keep
    (max_string_length - 5) // 2 characters at each end around ' ... '.

    Raises
    ------
    TypeError
        If `value` is not text.
    """
    value = as_value(value)
    if value.kind is not Kind.TEXT or value.ndim != 2:
        raise TypeError(f"Expected a 2-D text value, got {value.type_name} ({value.kind.value})")

    lines: Tuple[str, ...] = value.data
    ncols = value.shape[1]
    if ncols > options.max_string_length:
        keep = max((options.max_string_length - len(STRING_INFIX)) // 2, 0)
        lines = tuple(line[:keep] + STRING_INFIX + line[ncols - keep:] for line in lines)

    body = TextBlock(lines)
    closing = vstack([TextBlock.blank(body.height - 1, 0), "'"])
    return compose([["'", body, closing]])


# =============================================================================
# Callables
# =============================================================================

def render_callable(value: Value, options: RenderOptions) -> TextBlock:
    """'@name' for functions, '@(x, y)' for lambdas."""
    quoted = render_text(as_value(value.data), options)
    return compose([['@', quoted.columns(1, -1)]])


# =============================================================================
# Numeric matrices
# =============================================================================

def format_numbers(matrix: np.ndarray, precision: int) -> List[str]:
    """
    Fixed-width text for a 2-D numeric array, one string per row.

    Each value is printed with '%.{precision}g' right-aligned in a field of
    precision+7 characters (wider if needed, so columns never touch), and
    the blank prefix shared by all rows is removed.
    """
    if matrix.size == 0:
        return []
    if matrix.dtype.kind == 'b':
        matrix = matrix.astype(int)

    cells = [[format(v, f'.{precision}g') for v in row] for row in matrix.tolist()]
    longest = max(len(cell) for row in cells for cell in row)
    width = max(precision + 7, longest + 1)
    lines = [''.join(cell.rjust(width) for cell in row) for row in cells]

    lead = min(len(line) - len(line.lstrip(' ')) for line in lines)
    return [line[lead:] for line in lines]


def _column_runs(lines: List[str]) -> List[int]:
    """
    Label each character column with the number column it belongs to.

    Character columns that are blank on every line separate number columns
    and get label 0; the k-th run of non-blank columns gets label k.
    """
    width = len(lines[0])
    labels = [0] * width
    count = 1
    in_number = True
    for k in range(width):
        blank = all(line[k] == ' ' for line in lines)
        if in_number:
            if blank:
                count += 1
                in_number = False
            else:
                labels[k] = count
        elif not blank:
            in_number = True
            labels[k] = count
    return labels


def _row_marker(labels: List[int]) -> str:
    """A line with ':' at the (rounded) middle of every number column."""
    marker = [' '] * len(labels)
    for run in range(1, max(labels, default=0) + 1):
        positions = [k for k, label in enumerate(labels) if label == run]
        if positions:
            middle = math.floor(sum(positions) / len(positions) + 0.5)
            marker[middle] = ROW_MARKER
    return ''.join(marker)


def render_matrix(value: Value, options: RenderOptions) -> TextBlock:
    """
    Render a rank-2 numeric array in brackets.

    Example
    -------
    >>> print(render_matrix(as_value(np.array([[1, 2, 3], [4, 5, 6]])), RenderOptions()))
    [ 1         2         3
      4         5         6 ]
    """
    rows, cols = select_matrix(value.shape, options)
    selected = value.data[np.ix_(rows.indices, cols.indices)]
    lines = format_numbers(selected, options.precision)

    if not lines:
        body = TextBlock()
    else:
        if rows.summarized:
            labels = _column_runs(lines)
            edge = len(rows.pre)
            row_blocks = [lines[:edge], [_row_marker(labels)], lines[edge:]]
        else:
            row_blocks = [lines]

        if cols.summarized:
            labels = _column_runs(lines)
            edge = len(cols.pre)
            pre_end = max(k for k, label in enumerate(labels) if label == edge) + 2
            post_start = min(k for k, label in enumerate(labels) if label == edge + 1) - 1
            grid = []
            for k, block_lines in enumerate(row_blocks):
                block = TextBlock(tuple(block_lines))
                # the ':' row gets no column infix
                infix = None if rows.summarized and k == 1 else '\n'.join([COLUMN_INFIX] * block.height)
                grid.append([block.columns(None, pre_end), infix, block.columns(post_start, None)])
        else:
            grid = [[TextBlock(tuple(block_lines))] for block_lines in row_blocks]
        body = compose(grid)

    show_shape = options.always_show_shape or rows.summarized or cols.summarized
    return surround(show_shape, '[ ', body, ' ]', value.shape)


__all__ = [
    'render_summary',
    'render_text',
    'render_callable',
    'render_matrix',
    'format_numbers',
    'shape_suffix',
    'surround',
]
