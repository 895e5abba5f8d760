"""
Render options for the structured-value display.

RenderOptions is an immutable configuration value built once per render call
and threaded explicitly through every recursive call. The only field that
changes on the way down is max_depth, which descend() copies and decrements.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Union

from ..constants import CONFIG

Count = Union[int, float]

# Short option names accepted for compatibility
_ALIASES = {
    'strlen': 'max_string_length',
    'depth': 'max_depth',
    'show_size': 'always_show_shape',
}


def _is_count(value, allow_inf: bool) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return allow_inf and math.isinf(value) and value > 0


@dataclass(frozen=True)
class RenderOptions:
    """
    Configuration for render().

    Parameters
    ----------
    threshold : int or math.inf
        If the number of items along an axis exceeds max(threshold, 2*edgeitems),
        that axis is shown in summary style.
    edgeitems : int or math.inf
        Items kept at the beginning and end of a summarized axis.
    precision : int
        Significant digits used for numbers.
    max_string_length : int
        Strings with more columns are shown as head ' ... ' tail.
    max_depth : int or math.inf
        Remaining number of container levels that may be expanded.
    always_show_shape : bool
        Append the @AxB shape suffix even when nothing was summarized.

    Raises
    ------
    ValueError
        If a field is out of range (e.g., negative precision).
    """

    threshold: Count = CONFIG['DISP_THRESHOLD']
    edgeitems: Count = CONFIG['DISP_EDGEITEMS']
    precision: int = CONFIG['DISP_PRECISION']
    max_string_length: int = CONFIG['DISP_STRLEN']
    max_depth: Count = CONFIG['DISP_DEPTH']
    always_show_shape: bool = CONFIG['DISP_SHOW_SIZE']

    def __post_init__(self):
        if not _is_count(self.threshold, allow_inf=True) or self.threshold < 0:
            raise ValueError(f"threshold must be a non-negative integer or inf, got {self.threshold!r}")
        if not _is_count(self.edgeitems, allow_inf=True) or self.edgeitems < 1:
            raise ValueError(f"edgeitems must be a positive integer or inf, got {self.edgeitems!r}")
        if not _is_count(self.precision, allow_inf=False) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")
        if not _is_count(self.max_string_length, allow_inf=False) or self.max_string_length < 1:
            raise ValueError(
                f"max_string_length must be a positive integer, got {self.max_string_length!r}"
            )
        # max_depth may already be exhausted (descend() never checks), so only
        # the type is validated here; render() checks the starting budget.
        if not _is_count(self.max_depth, allow_inf=True):
            raise ValueError(f"max_depth must be an integer or inf, got {self.max_depth!r}")
        if not isinstance(self.always_show_shape, bool):
            raise ValueError(f"always_show_shape must be a bool, got {self.always_show_shape!r}")

    @classmethod
    def from_kwargs(cls, base: "RenderOptions" = None, **kwargs) -> "RenderOptions":
        """
        Build options from keyword overrides on top of `base` (or the defaults).

        Accepts the field names and the aliases 'strlen', 'depth' and 'show_size'.

        Raises
        ------
        TypeError
            If an option name is not recognized.
        """
        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in kwargs.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"Unknown display option '{key}'. Supported: {sorted(known)}")
            overrides[name] = value
        if base is None:
            return cls(**overrides)
        return replace(base, **overrides)

    def descend(self) -> "RenderOptions":
        """Copy with one level less of recursion budget."""
        return replace(self, max_depth=self.max_depth - 1)

    @property
    def exhausted(self) -> bool:
        return self.max_depth <= 0


__all__ = [
    'RenderOptions',
]
