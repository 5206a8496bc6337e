import pytest

from dsakit.recursion import (
    filter_even,
    ladder,
    num_of_symbols,
    reverse_string,
    triangle_numbers,
)


@pytest.mark.parametrize("text", ["", "a", "ab", "hello world", "racecar"])
def test_reverse_string_is_an_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_reverse_string_swaps_ends():
    text = "abcdef"
    result = reverse_string(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]


def test_ladder_base_cases():
    assert ladder(-5) == 0
    assert ladder(-1) == 0
    assert ladder(0) == 1
    assert ladder(1) == 1


def test_ladder_follows_recurrence():
    for n in range(2, 40):
        assert ladder(n) == ladder(n - 1) + ladder(n - 2) + ladder(n - 3)


def test_ladder_large_input_does_not_recurse():
    assert ladder(2000) > ladder(1999)


def test_num_of_symbols_empty():
    assert num_of_symbols([]) == 0


def test_num_of_symbols_is_additive():
    first = ["ab", "", "cde"]
    second = ["xyz", "q"]
    assert num_of_symbols(first + second) == num_of_symbols(first) + num_of_symbols(second)
    assert num_of_symbols(["hello"]) == len("hello")


def test_filter_even_keeps_order_and_only_evens():
    data = [5, -4, 3, 2, 0, 7, 8, -3]
    result = filter_even(data)
    assert all(n % 2 == 0 for n in result)
    assert result == [n for n in data if n in result]
    assert len(result) == sum(1 for n in data if n % 2 == 0)


def test_filter_even_empty():
    assert filter_even([]) == []


def test_triangle_numbers_below_one():
    assert triangle_numbers(0) == 0
    assert triangle_numbers(-3) == 0
    assert triangle_numbers(1) == 1


def test_triangle_numbers_step():
    for n in range(2, 100):
        assert triangle_numbers(n) - triangle_numbers(n - 1) == n