import pytest

from asciidraw.shapes import arrow, square, triangle


@pytest.mark.parametrize("left_col,size", [(0, 1), (5, 5), (3, 4), (10, 2)])
def test_square_rows(left_col, size):
    lines = square(left_col, size).splitlines()
    assert len(lines) == size
    for line in lines:
        assert line[:left_col] == " " * left_col
        assert line[left_col:] == "*" * size


def test_square_of_size_zero_is_empty():
    assert square(4, 0) == ""


def test_square_ends_with_newline():
    assert square(2, 3).endswith("*\n")


@pytest.mark.parametrize("left_col,size", [(0, 0), (5, 7), (2, 3)])
def test_triangle_rows(left_col, size):
    lines = triangle(left_col, size).splitlines()
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        indent = left_col + size - row
        assert line[:indent] == " " * indent
        assert line[indent:] == "*" * (2 * row + 1)


def test_small_triangle():
    assert triangle(0, 1) == " *\n***\n"


def test_negative_size_triangle_is_empty():
    assert triangle(3, -1) == ""


def test_arrow_is_triangle_over_square():
    assert arrow() == triangle(5, 7) + square(10, 5)


def test_arrow_shaft_is_centred_under_head():
    lines = arrow().splitlines()
    head, shaft = lines[0], lines[-1]
    apex = head.index("*")
    assert shaft.index("*") + 2 == apex