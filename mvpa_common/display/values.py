"""
Value model for the display package.

as_value() inspects an arbitrary Python object once and classifies it into a
closed set of kinds (record, sequence, numeric, text, callable, opaque) with a
normalized rank >= 2 shape. Renderers only ever see Value instances, so no
layout code needs to check what an object supports.
"""

from __future__ import annotations

import enum
import functools
import inspect
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np


class Kind(enum.Enum):
    RECORD = 'record'
    SEQUENCE = 'sequence'
    NUMERIC = 'numeric'
    TEXT = 'text'
    CALLABLE = 'callable'
    OPAQUE = 'opaque'


# Kinds whose rendering recurses into other values
CONTAINER_KINDS = frozenset({Kind.RECORD, Kind.SEQUENCE})

_NUMERIC_DTYPE_KINDS = 'biufc'


@dataclass(frozen=True)
class Value:
    """
    A classified value ready for rendering.

    Attributes
    ----------
    kind : Kind
        Rendering kind.
    type_name : str
        Name used in summaries, e.g. '<float64>@2x3'.
    shape : tuple of int or None
        Normalized shape (rank >= 2); None when the object has no shape.
    data : Any
        Kind-specific payload: ndarray for numeric, sequence and array-backed
        text/records; tuple of lines for plain text; the mapping for records;
        the display name for callables; the object itself for opaque values.
    """

    kind: Kind
    type_name: str
    shape: Optional[Tuple[int, ...]]
    data: Any

    @property
    def has_defined_shape(self) -> bool:
        return self.shape is not None

    @property
    def ndim(self) -> int:
        return len(self.shape) if self.shape is not None else 0

    @property
    def size(self) -> int:
        return int(np.prod(self.shape)) if self.shape is not None else 1

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS or self.ndim > 2


def normalize_shape(shape) -> Tuple[int, ...]:
    """Rank 0 -> (1, 1), rank 1 (n,) -> (1, n), higher ranks unchanged."""
    shape = tuple(int(d) for d in shape)
    if len(shape) == 0:
        return (1, 1)
    if len(shape) == 1:
        return (1,) + shape
    return shape


def _is_number(x) -> bool:
    return isinstance(x, (numbers.Number, np.bool_))


def _is_char_array(arr: np.ndarray) -> bool:
    return arr.dtype.kind in 'US' and arr.dtype.itemsize == np.dtype(arr.dtype.kind + '1').itemsize


def _shape_attribute(obj) -> Optional[Tuple[int, ...]]:
    shape = getattr(obj, 'shape', None)
    if isinstance(shape, tuple) and all(isinstance(d, numbers.Integral) for d in shape):
        return normalize_shape(shape)
    return None


def char_rows(arr: np.ndarray) -> Tuple[str, ...]:
    """Rows of a 2-D single-character array as strings."""
    rows = []
    for row in arr.tolist():
        chars = [c.decode('latin-1') if isinstance(c, bytes) else c for c in row]
        rows.append(''.join(c or ' ' for c in chars))
    return tuple(rows)


def text_lines(text: str) -> Tuple[str, ...]:
    """A string as a rectangular character grid (one row per line)."""
    lines = text.split('\n')
    width = max(len(line) for line in lines)
    return tuple(line.ljust(width) for line in lines)


def callable_name(func) -> str:
    """Display name of a callable: its name, or its parameter list for lambdas."""
    if isinstance(func, functools.partial):
        return f"partial({callable_name(func.func)})"
    name = getattr(func, '__qualname__', None) or getattr(func, '__name__', None)
    if name is None:
        return type(func).__name__
    if name.endswith('<lambda>'):
        try:
            return str(inspect.signature(func))
        except (TypeError, ValueError):
            return name
    return name


def _object_array(items, shape) -> np.ndarray:
    arr = np.empty(len(items), dtype=object)
    for k, item in enumerate(items):
        arr[k] = item
    return arr.reshape(shape)


def _from_ndarray(arr: np.ndarray) -> Value:
    shape = normalize_shape(arr.shape)
    arr = arr.reshape(shape)
    if arr.dtype.names:
        return Value(Kind.RECORD, 'ndarray', shape, arr)
    if arr.dtype.kind in _NUMERIC_DTYPE_KINDS:
        return Value(Kind.NUMERIC, arr.dtype.name, shape, arr)
    if _is_char_array(arr):
        data = char_rows(arr) if arr.ndim == 2 else arr
        return Value(Kind.TEXT, 'str', shape, data)
    if arr.dtype.kind in 'OUS':
        return Value(Kind.SEQUENCE, 'object', shape, arr.astype(object))
    return Value(Kind.OPAQUE, arr.dtype.name, shape, arr)


def as_value(obj) -> Value:
    """
    Classify `obj` into a Value.

    Parameters
    ----------
    obj : Any
        Object to display.

    Returns
    -------
    Value
        Classified value with a normalized shape.

    Example
    -------
    >>> as_value([1, 2, 3]).kind, as_value([1, 2, 3]).shape
    (<Kind.NUMERIC: 'numeric'>, (1, 3))
    >>> as_value(['a', 2]).kind
    <Kind.SEQUENCE: 'sequence'>
    """
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, Mapping):
        return Value(Kind.RECORD, type(obj).__name__, (1, 1), obj)
    if isinstance(obj, np.ndarray):
        return _from_ndarray(obj)
    if isinstance(obj, str):
        lines = text_lines(obj)
        return Value(Kind.TEXT, 'str', (len(lines), len(lines[0])), lines)
    if _is_number(obj):
        arr = np.asarray(obj).reshape(1, 1)
        return Value(Kind.NUMERIC, arr.dtype.name, (1, 1), arr)
    if isinstance(obj, (list, tuple)):
        if all(_is_number(item) for item in obj):
            arr = np.asarray(obj, dtype=float if not obj else None)
            shape = (1, len(obj)) if obj else (0, 0)
            return Value(Kind.NUMERIC, arr.dtype.name, shape, arr.reshape(shape))
        return Value(Kind.SEQUENCE, type(obj).__name__, (1, len(obj)),
                     _object_array(obj, (1, len(obj))))
    if callable(obj):
        return Value(Kind.CALLABLE, type(obj).__name__, (1, 1), callable_name(obj))
    return Value(Kind.OPAQUE, type(obj).__name__, _shape_attribute(obj), obj)


__all__ = [
    'Kind',
    'Value',
    'as_value',
    'normalize_shape',
    'callable_name',
    'char_rows',
    'text_lines',
]
