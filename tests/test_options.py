import dataclasses
import math

import pytest

from mvpa_common.constants import CONFIG
from mvpa_common.display import RenderOptions, render


def test_defaults_come_from_config():
    opts = RenderOptions()
    assert opts.threshold == CONFIG['DISP_THRESHOLD']
    assert opts.edgeitems == CONFIG['DISP_EDGEITEMS']
    assert opts.precision == CONFIG['DISP_PRECISION']
    assert opts.max_string_length == CONFIG['DISP_STRLEN']
    assert opts.max_depth == CONFIG['DISP_DEPTH']
    assert opts.always_show_shape is CONFIG['DISP_SHOW_SIZE']


def test_options_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RenderOptions().precision = 5


def test_from_kwargs_accepts_aliases():
    opts = RenderOptions.from_kwargs(strlen=10, depth=2, show_size=True)
    assert opts.max_string_length == 10
    assert opts.max_depth == 2
    assert opts.always_show_shape is True


def test_from_kwargs_overrides_base():
    base = RenderOptions(precision=5)
    opts = RenderOptions.from_kwargs(base, threshold=math.inf)
    assert opts.precision == 5
    assert opts.threshold == math.inf


def test_unknown_option_raises_type_error():
    with pytest.raises(TypeError, match="Unknown display option 'colour'"):
        RenderOptions.from_kwargs(colour='red')
    with pytest.raises(TypeError):
        render(1, colour='red')


@pytest.mark.parametrize("kwargs", [
    {'precision': -1},
    {'precision': 1.5},
    {'precision': math.inf},
    {'edgeitems': 0},
    {'threshold': -1},
    {'threshold': True},
    {'max_string_length': 0},
    {'max_depth': 1.5},
    {'always_show_shape': 1},
])
def test_invalid_values_raise_value_error(kwargs):
    with pytest.raises(ValueError):
        RenderOptions(**kwargs)


def test_infinite_counts_are_allowed():
    opts = RenderOptions(threshold=math.inf, edgeitems=math.inf, max_depth=math.inf)
    assert opts.descend().max_depth == math.inf


def test_descend_decrements_depth_only():
    opts = RenderOptions(max_depth=2, precision=4)
    child = opts.descend()
    assert child.max_depth == 1
    assert child.precision == 4
    assert opts.max_depth == 2
    assert not child.exhausted
    assert child.descend().exhausted


def test_render_rejects_negative_starting_depth():
    with pytest.raises(ValueError, match="max_depth"):
        render([1, 2], max_depth=-1)
