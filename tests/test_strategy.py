import random

import pytest

from chango.strategy import LETTERS, random_integer, random_string


def test_random_string_has_requested_length_and_alphabet():
    rng = random.Random(1)
    text = random_string(25, rng)
    assert len(text) == 25
    assert set(text) <= set("abcdefghijklmnop")


def test_random_string_empty():
    assert random_string(0) == ""


def test_random_string_negative_length_rejected():
    with pytest.raises(ValueError):
        random_string(-1)


def test_random_string_is_reproducible_with_seed():
    first = random_string(12, random.Random(7))
    second = random_string(12, random.Random(7))
    assert len(first) == 12
    assert set(first) <= set(LETTERS)
    assert first == second


def test_random_string_uses_whole_alphabet_eventually():
    text = random_string(2000, random.Random(3))
    assert set(text) == set(LETTERS)


def test_random_integer_stays_in_half_open_range():
    rng = random.Random(5)
    values = [random_integer(12, 4, rng) for _ in range(500)]
    assert all(4 <= value < 12 for value in values)
    assert set(values) == set(range(4, 12))


def test_random_integer_single_value_range():
    assert random_integer(8, 7) == 7


@pytest.mark.parametrize("maximum,minimum", [(3, 3), (1, 5)])
def test_random_integer_empty_range_rejected(maximum, minimum):
    with pytest.raises(ValueError):
        random_integer(maximum, minimum)