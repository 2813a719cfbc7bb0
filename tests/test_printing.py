import io
import random

import pytest

from sortsteps.linked import create_listint
from sortsteps.printing import (
    RAND_MAX,
    check_array,
    check_list,
    format_array,
    print_array,
    print_list,
    rand_array,
)


def test_format_array_joins_with_comma_space():
    assert format_array([19, 48, 99]) == "19, 48, 99"


def test_format_array_empty():
    assert format_array([]) == ""


def test_print_array_writes_line():
    out = io.StringIO()
    print_array([19, 1, 0], out)
    assert out.getvalue() == "19, 1, 0\n"


def test_print_empty_array_writes_newline_only():
    out = io.StringIO()
    print_array([], out)
    assert out.getvalue() == "\n"


def test_print_list_matches_print_array():
    values = [39, 31, 19, 42, 12]
    out_list = io.StringIO()
    out_array = io.StringIO()
    print_list(create_listint(values), out_list)
    print_array(values, out_array)
    assert out_list.getvalue() == out_array.getvalue()


def test_check_array_reports_disorder():
    out = io.StringIO()
    violations = check_array([1, 3, 2, 5, 4], out)
    assert violations == [(3, 2), (5, 4)]
    assert out.getvalue() == "ERROR: [3] > [2]\nERROR: [5] > [4]\n"


def test_check_array_sorted_is_silent():
    out = io.StringIO()
    assert check_array([1, 1, 2, 7], out) == []
    assert out.getvalue() == ""


def test_check_array_empty():
    out = io.StringIO()
    assert check_array([], out) == []
    assert out.getvalue() == ""


def test_check_list_reports_disorder():
    out = io.StringIO()
    violations = check_list(create_listint([2, 1, 3]), out)
    assert violations == [(2, 1)]
    assert out.getvalue() == "ERROR: [2] > [1]\n"


def test_rand_array_length_and_bounds():
    values = rand_array(500, 1000, random.Random(7))
    assert len(values) == 500
    assert all(0 <= v < 1000 for v in values)


def test_rand_array_zero_maximum_uses_full_range():
    values = rand_array(50, 0, random.Random(3))
    assert len(values) == 50
    assert all(0 <= v < RAND_MAX for v in values)


def test_rand_array_repeatable_with_seed():
    first = rand_array(20, 100, random.Random(42))
    second = rand_array(20, 100, random.Random(42))
    assert len(first) == 20
    assert all(0 <= v < 100 for v in first)
    assert first == second


def test_rand_array_empty():
    assert rand_array(0, 10) == []


@pytest.mark.parametrize("length, maximum", [(-1, 10), (5, -3)])
def test_rand_array_rejects_negative(length, maximum):
    with pytest.raises(ValueError):
        rand_array(length, maximum)