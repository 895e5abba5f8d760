"""
Structured-value display for datasets and analysis results.

Renders arbitrary nested values (dicts, lists, numpy arrays of any rank,
strings, callables) as aligned text, summarizing long axes with edge items
and limiting recursion depth.

Organization:
- options.py: RenderOptions (threshold, edgeitems, precision, ...)
- blocks.py: TextBlock and the compose() layout primitive
- summarize.py: Which indices of an axis are shown
- values.py: Classification of Python objects into display kinds
- leaves.py: Text, numeric matrix, callable and summary renderers
- containers.py: Record, sequence and N-D page renderers
- dispatch.py: Depth-limited dispatcher, render() and disp()
"""

# Options
from .options import RenderOptions

# Layout
from .blocks import (
    TextBlock,
    compose,
    hconcat,
    vstack,
)

# Summarization policy
from .summarize import (
    AxisSelection,
    select_axis,
    select_matrix,
)

# Value model
from .values import (
    Kind,
    Value,
    as_value,
)

# Renderers
from .leaves import (
    render_summary,
    render_text,
    render_callable,
    render_matrix,
)
from .containers import (
    render_record,
    render_sequence,
    render_pages,
)

# Entry points
from .dispatch import (
    render_block,
    render,
    disp,
)

__all__ = [
    # Options
    'RenderOptions',
    # Layout
    'TextBlock',
    'compose',
    'hconcat',
    'vstack',
    # Summarization
    'AxisSelection',
    'select_axis',
    'select_matrix',
    # Value model
    'Kind',
    'Value',
    'as_value',
    # Renderers
    'render_summary',
    'render_text',
    'render_callable',
    'render_matrix',
    'render_record',
    'render_sequence',
    'render_pages',
    # Entry points
    'render_block',
    'render',
    'disp',
]
