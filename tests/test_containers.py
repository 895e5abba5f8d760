import numpy as np

from mvpa_common.display import render
from mvpa_common.display.containers import page_label


def test_record_fields_are_indented_under_their_names():
    assert render({'a': 1, 'b': 'x'}) == (
        ".a\n"
        "  [ 1 ]\n"
        ".b\n"
        "  'x'"
    )


def test_nested_records():
    assert render({'outer': {'inner': [1, 2]}}) == (
        ".outer\n"
        "  .inner\n"
        "    [ 1         2 ]"
    )


def test_empty_record_renders_nothing():
    assert render({}) == ''


def test_structured_array_fields():
    arr = np.zeros(1, dtype=[('x', int)])
    assert render(arr) == ".x\n  [ 0 ]"


def test_high_rank_structured_array_lists_field_names():
    arr = np.zeros((2, 2, 2), dtype=[('name', 'U3'), ('score', float)])
    assert render(arr) == (
        "<ndarray>@2x2x2 with fields:\n"
        "   'name'\n"
        "   'score'"
    )


def test_sequence():
    assert render(['a', 1]) == "{ 'a'  [ 1 ] }"


def test_sequence_with_summarized_columns():
    assert render(list('abcdefghijk')) == "{ 'a'  'b'  'c' ... 'i'  'j'  'k'   }@1x11"
    assert render(list('abcdefghijk'), edgeitems=2) == "{ 'a'  'b' ... 'j'  'k'   }@1x11"


def test_sequence_with_summarized_rows():
    column = np.array(list('abcdefg'), dtype=object).reshape(7, 1)
    assert render(column) == (
        "{ 'a'\n"
        "  'b'\n"
        "  'c'\n"
        "  :\n"
        "  'e'\n"
        "  'f'\n"
        "  'g' }@7x1"
    )


def test_empty_sequences():
    assert render(np.empty((0, 0), dtype=object)) == '{ }'
    assert render(np.empty((0, 3), dtype=object)) == '{ }'
    assert render(np.empty((3, 0), dtype=object), show_size=True) == '{ }@3x0 (empty)'


def test_sequence_cells_of_different_heights():
    assert render(['x', np.array([[1], [2]])]) == (
        "{ 'x'  [ 1\n"
        "         2 ] }"
    )


def test_page_label_is_one_based():
    assert page_label((0,)) == '   (:,:,1) = '
    assert page_label((1, 2)) == '   (:,:,2,3) = '


def test_pages():
    arr = np.arange(8, dtype=np.int64).reshape(2, 2, 2)
    assert render(arr) == (
        "<int64>@2x2x2\n"
        "   (:,:,1) = [ 0         2\n"
        "               4         6 ]\n"
        "   (:,:,2) = [ 1         3\n"
        "               5         7 ]"
    )


def test_pages_enumerate_last_index_fastest():
    out = render(np.zeros((1, 1, 2, 2)))
    labels = [line.split('=')[0].strip() for line in out.split('\n')[1:]]
    assert labels == ['(:,:,1,1)', '(:,:,1,2)', '(:,:,2,1)', '(:,:,2,2)']


def test_empty_high_rank_array_is_header_only():
    assert render(np.zeros((2, 0, 3))) == '<float64>@2x0x3 (empty)'


def test_text_pages():
    chars = np.array(list('ABCDEFGH')).reshape((2, 2, 2), order='F')
    assert render(chars) == (
        "<str>@2x2x2\n"
        "   (:,:,1) = 'AC\n"
        "              BD'\n"
        "   (:,:,2) = 'EG\n"
        "              FH'"
    )


def test_sequence_row_marker_indent_uses_cell_character_count():
    column = np.empty((7, 1), dtype=object)
    for k in range(7):
        column[k, 0] = np.array([[1], [2]])
    lines = render(column).split('\n')
    # each cell is 2 rows x 5 columns, so ':' is indented by 10 // 2 - 1 blanks
    assert lines[6] == '  ' + ' ' * 4 + ':'
    assert lines[0] == '{ [ 1'
    assert lines[-1] == '    2 ] }@7x1'
