"""Helpers for Open Graph images: text wrapping, cache keys, file names and themes."""

import hashlib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MAX_TEXT_WIDTH = 40
FILE_EXTENSION = ".png"
HASH_LENGTH = 12
MAX_FILENAME_ID = 10000

_SARCASTIC_WORDS = (
    "corporate-silence", "professional-void", "executive-quiet",
    "strategic-ignore", "enterprise-mute", "business-shush",
    "silence-metrics", "quiet-kpis", "mute-analytics",
    "wisdom-declined", "insights-rejected", "thoughts-ignored",
)

_INT64 = 1 << 64
_INT64_HALF = 1 << 63


def wrap_text(text: str, max_width: int = MAX_TEXT_WIDTH) -> str:
    """Break text into newline-separated lines of at most max_width characters."""
    if len(text) <= max_width:
        return text

    lines = []
    current: list[str] = []
    current_length = 0
    for word in text.split():
        if current_length + len(word) + 1 > max_width:
            if current:
                lines.append(" ".join(current))
                current = [word]
                current_length = len(word)
            else:
                lines.append(word)
                current = []
                current_length = 0
        else:
            current.append(word)
            current_length += len(word) + 1
    if current:
        lines.append(" ".join(current))
    return "\n".join(lines)


def generate_cache_key(*args: str) -> str:
    """Short MD5 hex digest of the values joined with colons."""
    content = ":".join(args)
    return hashlib.md5(content.encode("utf-8")).hexdigest()[:HASH_LENGTH]


def check_cache(cache_key: str, directory) -> str | None:
    """Path of the cached image for the key, or None if there is none."""
    path = Path(directory) / f"{cache_key}{FILE_EXTENSION}"
    return str(path) if path.exists() else None


def _wrap_int64(value: int) -> int:
    return (value + _INT64_HALF) % _INT64 - _INT64_HALF


def generate_sarcastic_filename(count: str, target: str) -> str:
    digest = 0
    for char in count:
        digest = _wrap_int64(digest * 31 + ord(char))
    digest = abs(digest)

    word = _SARCASTIC_WORDS[digest % len(_SARCASTIC_WORDS)]
    if target:
        return f"{word}-{target.lower()}-ignored{FILE_EXTENSION}"
    return f"{word}-{digest % MAX_FILENAME_ID}{FILE_EXTENSION}"


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    background: RGBA
    primary_text: RGBA
    secondary_text: RGBA
    accent_text: RGBA


class ThemeName(str, Enum):
    BRUTALIST = "brutalist"


DEFAULT_THEME = ThemeName.BRUTALIST

_THEMES = {
    ThemeName.BRUTALIST: Theme(
        background=(12, 10, 18, 255),
        primary_text=(243, 248, 240, 255),
        secondary_text=(164, 183, 160, 255),
        accent_text=(255, 112, 166, 230),
    ),
}


def get_theme(name=None) -> Theme:
    """Theme for the name, falling back to the default theme."""
    if name is None:
        return _THEMES[DEFAULT_THEME]
    try:
        return _THEMES[ThemeName(name)]
    except (ValueError, KeyError):
        return _THEMES[DEFAULT_THEME]