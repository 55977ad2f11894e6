import re

import pytest

from whocares.og_utils import (
    ThemeName,
    check_cache,
    generate_cache_key,
    generate_sarcastic_filename,
    get_theme,
    wrap_text,
)

LONG_TEXT = (
    "nobody asked for this opinion yet here it is again delivered with "
    "unwavering confidence to an audience that has already left the room"
)


def test_short_text_unchanged():
    assert wrap_text("short text", 40) == "short text"


def test_text_at_limit_unchanged():
    text = "y" * 40
    assert wrap_text(text, 40) == text


@pytest.mark.parametrize("width", [10, 20, 40])
def test_wrapped_lines_fit_and_keep_words(width):
    wrapped = wrap_text(LONG_TEXT, width)
    lines = wrapped.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= width for line in lines)
    assert " ".join(lines).split() == LONG_TEXT.split()


def test_default_width_is_forty():
    assert wrap_text(LONG_TEXT) == wrap_text(LONG_TEXT, 40)


def test_overlong_word_gets_own_line():
    word = "x" * 50
    wrapped = wrap_text(f"a {word} b", 10)
    assert word in wrapped.split("\n")
    assert wrapped.split() == ["a", word, "b"]


def test_cache_key_of_nothing():
    assert generate_cache_key() == "d41d8cd98f00"


def test_cache_key_shape_and_stability():
    key = generate_cache_key("1,000", "hello", "")
    assert re.fullmatch(r"[0-9a-f]{12}", key)
    assert key == generate_cache_key("1,000", "hello", "")
    assert key != generate_cache_key("hello", "1,000", "")


def test_cache_key_joins_with_colon():
    assert generate_cache_key("a:b") == generate_cache_key("a", "b")


def test_check_cache_hit_and_miss(tmp_path):
    key = generate_cache_key("x")
    assert check_cache(key, tmp_path) is None
    (tmp_path / f"{key}.png").write_bytes(b"")
    assert check_cache(key, tmp_path) == str(tmp_path / f"{key}.png")


def test_sarcastic_filename_empty_count():
    assert generate_sarcastic_filename("", "") == "corporate-silence-0.png"


def test_sarcastic_filename_empty_count_with_target():
    assert generate_sarcastic_filename("", "ACME") == "corporate-silence-acme-ignored.png"


def test_sarcastic_filename_with_target_shares_word():
    count = "8,123,456"
    without_target = generate_sarcastic_filename(count, "")
    word = without_target.rsplit("-", 1)[0]
    assert generate_sarcastic_filename(count, "ACME") == f"{word}-acme-ignored.png"


@pytest.mark.parametrize("count", ["8,123,456", "1", "9" * 100])
def test_sarcastic_filename_without_target(count):
    name = generate_sarcastic_filename(count, "")
    match = re.fullmatch(r"[a-z]+-[a-z]+-(\d+)\.png", name)
    assert match is not None
    assert int(match.group(1)) < 10000
    assert name == generate_sarcastic_filename(count, "")


def test_default_theme_colours():
    theme = get_theme()
    assert theme.background == (12, 10, 18, 255)
    assert theme.primary_text == (243, 248, 240, 255)
    assert theme.accent_text == (255, 112, 166, 230)


def test_unknown_theme_falls_back():
    assert get_theme("nope") == get_theme(ThemeName.BRUTALIST)
    assert get_theme("brutalist") == get_theme(None)