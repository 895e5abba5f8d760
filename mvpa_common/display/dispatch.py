"""
Depth-limited dispatcher and public entry points.

render() returns the text representation of any value; disp() prints it.

Examples
--------
>>> import math
>>> import numpy as np
>>> from mvpa_common.display import disp
>>> x = {
...     'a_cell': [np.zeros((0, 0)), ['cell within cell', np.array([[1, 2], [3, 4]])]],
...     'small_matrix': np.array([[10, 11, 12], [13, 14, 15]]),
...     'a_string': 'hello world',
...     'func': abs,
... }
>>> disp(x)
.a_cell
  { [ ]  { 'cell within cell'  [ 1         2
                                 3         4 ] } }
.small_matrix
  [ 10        11        12
    13        14        15 ]
.a_string
  'hello world'
.func
  @abs

>>> nested = 'hello'
>>> for _ in range(10):
...     nested = [nested]
>>> disp(nested)
{ { { { { { <list> } } } } } }
>>> disp(nested, max_depth=math.inf)
{ { { { { { { { { { 'hello' } } } } } } } } } }
"""

from __future__ import annotations

import logging

from .blocks import TextBlock
from .containers import render_pages, render_record, render_sequence
from .leaves import render_callable, render_matrix, render_summary, render_text
from .options import RenderOptions
from .values import Kind, as_value

logger = logging.getLogger(__name__)

_LEAF_RENDERERS = {
    Kind.NUMERIC: render_matrix,
    Kind.TEXT: render_text,
    Kind.CALLABLE: render_callable,
}


def render_block(obj, options: RenderOptions) -> TextBlock:
    """
    Render any value into a TextBlock.

    When the depth budget is exhausted, containers (records, sequences and
    arrays of rank > 2) are shown as a one-line '<type>@shape' summary; leaf
    values never recurse and are shown in full, so that e.g. an empty list
    field still reads "[ ]" one level below the last expanded record (a
    stricter rule would summarize every kind at depth 0). Otherwise the
    budget is decremented once and the value is routed by kind.

    Parameters
    ----------
    obj : Any
        Value to render.
    options : RenderOptions
        Display options; options.max_depth is the remaining budget.

    Returns
    -------
    TextBlock
        Rectangular rendering of `obj`.
    """
    value = as_value(obj)
    if options.exhausted and value.is_container:
        logger.debug(f"Depth budget exhausted at <{value.type_name}>; showing summary")
        return render_summary(value)

    child_options = options.descend()

    if not value.has_defined_shape or value.kind is Kind.OPAQUE:
        return render_summary(value)
    if value.kind is Kind.RECORD:
        return render_record(value, child_options, render_block)
    if value.ndim > 2:
        return render_pages(value, child_options, render_block)
    if value.kind is Kind.SEQUENCE:
        return render_sequence(value, child_options, render_block)
    return _LEAF_RENDERERS[value.kind](value, child_options)


def _resolve_options(options, overrides) -> RenderOptions:
    if options is None:
        options = RenderOptions.from_kwargs(**overrides)
    elif overrides:
        options = RenderOptions.from_kwargs(options, **overrides)
    if options.max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {options.max_depth!r}")
    return options


def render(value, options: RenderOptions = None, **overrides) -> str:
    """
    Text representation of `value`.

    Parameters
    ----------
    value : Any
        Value to render: dicts, lists/tuples, numpy arrays of any rank,
        strings, numbers, callables, or anything else (shown as '<type>').
    options : RenderOptions, optional
        Display options. Defaults to RenderOptions() (values from CONFIG).
    **overrides
        Individual option overrides, e.g. threshold=math.inf, precision=5.
        The aliases strlen, depth and show_size are accepted.

    Returns
    -------
    str
        Rendered text, lines separated by '\\n' without trailing blanks.

    Example
    -------
    >>> render(np.pi * np.array([1, 2]), precision=5)
    '[ 3.1416      6.2832 ]'
    >>> render(list('abcdefghijk'), edgeitems=2)
    "{ 'a'  'b' ... 'j'  'k'   }@1x11"
    """
    return render_block(value, _resolve_options(options, overrides)).to_text()


def disp(value, options: RenderOptions = None, **overrides) -> None:
    """Print the text representation of `value` (see render)."""
    print(render(value, options, **overrides))


__all__ = [
    'render_block',
    'render',
    'disp',
]
