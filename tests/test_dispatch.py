import math

import numpy as np
import pytest

from mvpa_common.display import RenderOptions, disp, render, render_block


def nested_in_lists(value, levels):
    for _ in range(levels):
        value = [value]
    return value


def test_mixed_record():
    x = {
        'a_cell': [np.zeros((0, 0)), ['cell within cell', np.array([[1, 2], [3, 4]])]],
        'small_matrix': np.array([[10, 11, 12], [13, 14, 15]]),
        'a_string': 'hello world',
        'func': abs,
    }
    assert render(x) == '\n'.join([
        ".a_cell",
        "  { [ ]  { 'cell within cell'  [ 1         2",
        " " * 33 + "3         4 ] } }",
        ".small_matrix",
        "  [ 10        11        12",
        "    13        14        15 ]",
        ".a_string",
        "  'hello world'",
        ".func",
        "  @abs",
    ])


def test_default_depth_limits_nesting():
    assert render(nested_in_lists('hello', 10)) == '{ { { { { { <list> } } } } } }'


def test_infinite_depth_expands_everything():
    expected = '{ ' * 10 + "'hello'" + ' }' * 10
    assert render(nested_in_lists('hello', 10), max_depth=math.inf) == expected


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_depth_counts_container_levels(depth):
    out = render(nested_in_lists(1, 5), depth=depth)
    assert out == '{ ' * depth + '<list>' + ' }' * depth


def test_depth_zero_summarizes_containers_only():
    assert render({'a': 1}, max_depth=0) == '<dict>'
    assert render(['a', 1], max_depth=0) == '<list>@1x2'
    assert render(np.zeros((2, 2, 2)), max_depth=0) == '<float64>@2x2x2'
    assert render(np.ones(2), max_depth=0) == '[ 1         1 ]'
    assert render('abc', max_depth=0) == "'abc'"


def test_leaves_still_render_when_depth_runs_out():
    assert render({'a': [], 'b': {'x': [1, 2]}}, max_depth=1) == (
        ".a\n"
        "  [ ]\n"
        ".b\n"
        "  <dict>"
    )


def test_options_object_and_overrides_combine():
    opts = RenderOptions(precision=2)
    assert render(np.pi, opts) == '[ 3.1 ]'
    assert render(np.pi, opts, precision=4) == '[ 3.142 ]'


def test_render_block_is_rectangular():
    block = render_block({'a': 'x', 'long_name': [1, 2, 3]}, RenderOptions())
    assert len({len(line) for line in block.lines}) == 1


@pytest.mark.parametrize("value", [
    {'a': np.arange(20).reshape(4, 5), 'b': ['x', [1, 2]]},
    np.arange(30).reshape(2, 3, 5),
    list('abcdefghijk'),
    'multi\nline\ntext',
])
def test_rendered_lines_have_no_trailing_blanks(value):
    for line in render(value).split('\n'):
        assert line == line.rstrip()


def test_render_does_not_mutate_input():
    x = {'a': [1, 2, 3], 'b': np.arange(4)}
    render(x)
    assert x['a'] == [1, 2, 3]
    assert np.array_equal(x['b'], np.arange(4))


def test_disp_prints_rendering(capsys, small_matrix):
    disp(small_matrix)
    assert capsys.readouterr().out == render(small_matrix) + '\n'


def test_rendering_is_deterministic():
    x = {
        'cells': [np.arange(12).reshape(3, 4), 'text', {'nested': list('abcdefgh')}],
        'pages': np.arange(24).reshape(2, 3, 4),
        'func': abs,
    }
    opts = RenderOptions(edgeitems=2, precision=4)
    assert render(x, opts) == render(x, opts)
    assert render_block(x, opts) == render_block(x, opts)
