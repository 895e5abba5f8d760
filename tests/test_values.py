import functools
from collections import OrderedDict

import numpy as np
import pytest

from mvpa_common.display.values import Kind, as_value, callable_name, normalize_shape, text_lines


@pytest.mark.parametrize("shape, expected", [
    ((), (1, 1)),
    ((4,), (1, 4)),
    ((2, 3), (2, 3)),
    ((2, 3, 4), (2, 3, 4)),
])
def test_normalize_shape_has_rank_at_least_two(shape, expected):
    assert normalize_shape(shape) == expected


def test_mappings_are_single_records():
    for obj in ({'a': 1}, OrderedDict(a=1), {}):
        value = as_value(obj)
        assert value.kind is Kind.RECORD
        assert value.shape == (1, 1)
        assert value.is_container
    assert as_value(OrderedDict()).type_name == 'OrderedDict'


def test_numeric_arrays():
    value = as_value(np.zeros((2, 3)))
    assert value.kind is Kind.NUMERIC
    assert value.type_name == 'float64'
    assert value.shape == (2, 3)
    assert not value.is_container


def test_vectors_and_scalars_become_rows():
    assert as_value(np.arange(3)).shape == (1, 3)
    assert as_value(np.arange(3)).data.shape == (1, 3)
    assert as_value(2.5).shape == (1, 1)
    assert as_value(np.float32(2.5)).type_name == 'float32'
    assert as_value(True).type_name == 'bool'


def test_higher_rank_arrays_are_containers():
    value = as_value(np.zeros((2, 2, 2)))
    assert value.kind is Kind.NUMERIC
    assert value.ndim == 3
    assert value.is_container


def test_number_lists_are_numeric_rows():
    value = as_value([1, 2, 3])
    assert value.kind is Kind.NUMERIC
    assert value.shape == (1, 3)
    assert as_value((1.5, 2)).kind is Kind.NUMERIC


def test_empty_list_is_empty_matrix():
    value = as_value([])
    assert value.kind is Kind.NUMERIC
    assert value.shape == (0, 0)
    assert value.size == 0


def test_mixed_lists_are_sequences():
    value = as_value(['a', 2])
    assert value.kind is Kind.SEQUENCE
    assert value.type_name == 'list'
    assert value.shape == (1, 2)
    assert value.data[0, 0] == 'a'
    assert as_value(('a', [1])).type_name == 'tuple'


def test_nested_list_cells_are_kept_as_objects():
    value = as_value([[1, 2], [3, 4]])
    assert value.kind is Kind.SEQUENCE
    assert value.shape == (1, 2)
    assert value.data[0, 1] == [3, 4]


def test_strings_are_character_grids():
    value = as_value('ab\nc')
    assert value.kind is Kind.TEXT
    assert value.shape == (2, 2)
    assert value.data == ('ab', 'c ')
    assert as_value('').shape == (1, 0)
    assert text_lines('xyz') == ('xyz',)


def test_single_character_arrays_are_text():
    value = as_value(np.array([['a', 'b'], ['c', 'd']]))
    assert value.kind is Kind.TEXT
    assert value.data == ('ab', 'cd')
    assert as_value(np.array([b'x', b'y'])).data == ('xy',)


def test_string_and_object_arrays_are_sequences():
    value = as_value(np.array(['ab', 'cd']))
    assert value.kind is Kind.SEQUENCE
    assert value.type_name == 'object'
    assert value.data.dtype == object
    assert as_value(np.array([None, 1], dtype=object)).kind is Kind.SEQUENCE


def test_structured_arrays_are_records():
    arr = np.zeros((2, 2, 2), dtype=[('name', 'U3'), ('score', float)])
    value = as_value(arr)
    assert value.kind is Kind.RECORD
    assert value.type_name == 'ndarray'
    assert value.shape == (2, 2, 2)


def test_callables():
    assert as_value(abs).kind is Kind.CALLABLE
    assert as_value(abs).data == 'abs'
    assert callable_name(lambda x, y: x) == '(x, y)'
    assert callable_name(functools.partial(max, 1)) == 'partial(max)'
    assert callable_name(str.upper) == 'str.upper'


def test_other_objects_are_opaque():
    value = as_value(None)
    assert value.kind is Kind.OPAQUE
    assert value.type_name == 'NoneType'
    assert not value.has_defined_shape

    class Shaped:
        shape = (3,)

    shaped = as_value(Shaped())
    assert shaped.kind is Kind.OPAQUE
    assert shaped.shape == (1, 3)


def test_as_value_is_idempotent():
    value = as_value([1, 2])
    assert as_value(value) is value
