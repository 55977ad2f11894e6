import random

import pytest

from whocares.config import AppConfig, Config
from whocares.counter import Counter, format_number


def _value(formatted):
    return int(formatted.replace(",", ""))


def test_count_stays_within_variation():
    counter = Counter(Config(app=AppConfig(seed=100)), random.Random(1))
    for _ in range(50):
        value = _value(counter.get_count())
        assert 100 <= value < 100 + 500000


def test_same_rng_seed_gives_same_counts():
    cfg = Config(app=AppConfig(seed=10))
    first = Counter(cfg, random.Random(7))
    second = Counter(cfg, random.Random(7))
    assert [first.get_count() for _ in range(5)] == [second.get_count() for _ in range(5)]


def test_default_seed_is_lower_bound():
    value = _value(Counter(Config()).get_count())
    assert 8000000 <= value < 8000000 + 500000


def test_format_small_numbers_untouched():
    assert format_number(999) == "999"
    assert format_number(0) == "0"


def test_format_thousand():
    assert format_number(1000) == "1,000"


@pytest.mark.parametrize("n", [1, 12, 123, 1234, 12345, 123456, 1234567, 8000000, 98765432101])
def test_format_grouping_invariants(n):
    formatted = format_number(n)
    groups = formatted.split(",")
    assert _value(formatted) == n
    assert 1 <= len(groups[0]) <= 3
    assert all(len(group) == 3 for group in groups[1:])


def test_format_negative_counts_sign_as_character():
    assert format_number(-123) == "-,123"
    assert format_number(-1234) == "-1,234"