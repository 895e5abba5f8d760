import numpy as np
import pytest

from mvpa_common.display import RenderOptions, as_value, render, render_text
from mvpa_common.display.leaves import format_numbers, render_summary, shape_suffix


def test_shape_suffix():
    assert shape_suffix((2, 3), True) == '@2x3'
    assert shape_suffix((2, 3), False) == ''
    assert shape_suffix((1, 1), True) == ''
    assert shape_suffix((0, 3), True) == '@0x3 (empty)'


def test_summary_of_values_without_shape():
    assert render(None) == '<NoneType>'
    assert render(object()) == '<object>'
    assert render_summary(as_value(np.zeros((0, 0)))).to_text() == '<float64>@0x0 (empty)'


def test_format_numbers_aligns_columns_and_strips_common_prefix():
    assert format_numbers(np.array([[1, 2], [30, 4]]), 3) == [
        ' 1         2',
        '30         4',
    ]


def test_format_numbers_widens_field_for_long_numbers():
    lines = format_numbers(np.array([[123456789012, 1]]), 3)
    assert lines == ['1.23e+11         1']


def test_matrix(small_matrix):
    assert render(small_matrix) == (
        "[ 1         2         3\n"
        "  4         5         6 ]"
    )


def test_matrix_precision():
    assert render(np.pi * np.array([1, 2]), precision=5) == '[ 3.1416      6.2832 ]'
    assert render(3.5) == '[ 3.5 ]'


def test_booleans_render_as_integers():
    assert render(np.array([True, False])) == '[ 1         0 ]'


def test_empty_matrix():
    assert render(np.zeros((0, 0))) == '[ ]'
    assert render(np.zeros((0, 3))) == '[ ]'
    assert render(np.zeros((0, 3)), always_show_shape=True) == '[ ]@0x3 (empty)'


def test_always_show_shape():
    assert render(np.zeros((2, 3)), always_show_shape=True) == (
        "[ 0         0         0\n"
        "  0         0         0 ]@2x3"
    )
    assert render(5, always_show_shape=True) == '[ 5 ]'


def test_summarized_columns():
    assert render(np.arange(1, 12)) == '[ 1         2         3  ...  9        10        11 ]@1x11'


def test_summarized_rows():
    assert render(np.arange(1, 8).reshape(7, 1)) == (
        "[ 1\n"
        "  2\n"
        "  3\n"
        "  :\n"
        "  5\n"
        "  6\n"
        "  7 ]@7x1"
    )


def test_summarized_rows_and_columns():
    lines = render(np.arange(1, 50).reshape(7, 7)).split('\n')
    assert len(lines) == 7
    assert lines[3].split() == [':'] * 6
    assert '...' not in lines[3]
    assert all(' ... ' in line for k, line in enumerate(lines) if k != 3)
    assert lines[0].startswith('[ ')
    assert lines[-1].endswith(' ]@7x7')


def test_edgeitems_and_threshold_control_summary():
    assert render(np.arange(1, 12), edgeitems=1) == '[ 1  ...  11 ]@1x11'
    assert '...' not in render(np.arange(1, 12), threshold=20)


def test_text():
    assert render('hello') == "'hello'"
    assert render('') == "''"


def test_multiline_text_closes_on_last_row():
    assert render('ab\ncd') == "'ab\n cd'"


def test_long_text_is_truncated():
    text = 'abcdefghijklmnopqrstuvwxyz1234'
    assert render(text) == "'abcdefg ... xyz1234'"
    assert render(text, max_string_length=11) == "'abc ... 234'"
    assert render(text, strlen=100) == f"'{text}'"


def test_render_text_rejects_non_text():
    with pytest.raises(TypeError, match="text"):
        render_text(as_value(3), RenderOptions())
    with pytest.raises(TypeError):
        render_text(np.zeros(2), RenderOptions())


def test_callables():
    assert render(abs) == '@abs'
    assert render(lambda x: x) == '@(x)'


@pytest.mark.parametrize("length", [21, 22, 40, 101])
def test_truncated_text_length_does_not_depend_on_input_length(length):
    out = render('x' * length)
    assert out == "'" + 'x' * 7 + ' ... ' + 'x' * 7 + "'"
    assert len(out) == len(render('y' * 21))


def test_multirow_text_truncates_every_row_alike():
    text = 'abcdefghijklmnopqrstuvwxyz\nABCDEFGHIJKLMNOPQRSTUVWXYZ'
    assert render(text) == "'abcdefg ... tuvwxyz\n ABCDEFG ... TUVWXYZ'"


def test_big_matrix_layout():
    big_matrix = np.arange(1, 201).reshape(20, 10).T
    assert render(big_matrix) == '\n'.join([
        "[  1        11        21  ...  171       181       191",
        "   2        12        22  ...  172       182       192",
        "   3        13        23  ...  173       183       193",
        "   :         :         :        :         :         :",
        "   8        18        28  ...  178       188       198",
        "   9        19        29  ...  179       189       199",
        "  10        20        30  ...  180       190       200 ]@10x20",
    ])
