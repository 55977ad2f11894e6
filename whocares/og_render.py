"""Drawing Open Graph images: fonts, layout and the cached image generator."""

import functools
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from whocares.config import Config
from whocares.og_utils import (
    FILE_EXTENSION,
    MAX_TEXT_WIDTH,
    Theme,
    ThemeName,
    check_cache,
    generate_cache_key,
    get_theme,
    wrap_text,
)
from whocares.pages import CounterData

HUGE_FONT_SIZE = 150.0
LARGE_FONT_SIZE = 48.0
MEDIUM_FONT_SIZE = 36.0
SMALL_FONT_SIZE = 24.0

MIN_COUNTER_FONT_SIZE = 120.0
FONT_SIZE_STEP = 20.0

IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 630

COUNTER_Y_POSITION = 0.25
MESSAGE_Y_POSITION = 0.65
MAX_COUNTER_WIDTH = 1
LINE_HEIGHT = 60.0
BRAND_BOTTOM_MARGIN = 20.0
BRAND_RIGHT_MARGIN = 30.0
LINE_HEIGHT_MULTIPLIER = 0.8

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontConfig:
    fonts_dir: str
    bold: str = "JetBrainsMono-Bold.ttf"
    extra_bold: str = "JetBrainsMono-ExtraBold.ttf"
    regular: str = "JetBrainsMono-Regular.ttf"

    def bold_path(self) -> str:
        return os.path.join(self.fonts_dir, self.bold)

    def extra_bold_path(self) -> str:
        return os.path.join(self.fonts_dir, self.extra_bold)

    def regular_path(self) -> str:
        return os.path.join(self.fonts_dir, self.regular)


@dataclass
class FontSet:
    huge: object = None
    large: object = None
    medium: object = None
    small: object = None

    def any_loaded(self) -> bool:
        return any(face is not None for face in (self.huge, self.large, self.medium, self.small))


@functools.lru_cache(maxsize=1)
def _default_font():
    return ImageFont.load_default()


def _load_font(path: str, size: float, fallback_path: str):
    for candidate in (path, fallback_path):
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return None


def load_fonts(config: FontConfig) -> FontSet:
    """Load the four faces; if none can be read, use the built-in font for all."""
    fonts = FontSet(
        huge=_load_font(config.extra_bold_path(), HUGE_FONT_SIZE, config.bold_path()),
        large=_load_font(config.regular_path(), LARGE_FONT_SIZE, config.bold_path()),
        medium=_load_font(config.bold_path(), MEDIUM_FONT_SIZE, config.regular_path()),
        small=_load_font(config.regular_path(), SMALL_FONT_SIZE, config.bold_path()),
    )
    if not fonts.any_loaded():
        fallback = _default_font()
        return FontSet(huge=fallback, large=fallback, medium=fallback, small=fallback)
    return fonts


@dataclass
class DrawConfig:
    width: int = IMAGE_WIDTH
    height: int = IMAGE_HEIGHT
    fonts: FontSet = field(default_factory=FontSet)
    theme: Theme = field(default_factory=get_theme)
    brand_text: str = ""


def _pick(*faces):
    for face in faces:
        if face is not None:
            return face
    return _default_font()


def _measure(font, text: str) -> tuple[float, float]:
    width = float(font.getlength(text))
    try:
        ascent, descent = font.getmetrics()
        height = float(ascent + descent)
    except AttributeError:
        height = float(font.getbbox("Ag")[3])
    return width, height


def _draw_string(image, text: str, x: float, y: float, font, fill) -> None:
    """Draw text with its baseline at y."""
    draw = ImageDraw.Draw(image, "RGBA")
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text((x, y), text, font=font, fill=fill, anchor="ls")
    else:
        _, height = _measure(font, text)
        draw.text((x, y - height), text, font=font, fill=fill)


def draw_background(image, config: DrawConfig) -> None:
    draw = ImageDraw.Draw(image, "RGBA")
    draw.rectangle((0, 0, config.width, config.height), fill=config.theme.background)


def draw_counter(image, count: str, config: DrawConfig) -> None:
    center_y = config.height * COUNTER_Y_POSITION
    font = _pick(config.fonts.huge)
    text_width, text_height = _measure(font, count)
    max_width = config.width * MAX_COUNTER_WIDTH

    log.debug("Counter text width: %f, max width: %f", text_width, max_width)
    if text_width > max_width:
        font = _pick(config.fonts.large, font)
        text_width, text_height = _measure(font, count)

    x = (config.width - text_width) / 2
    y = center_y + text_height / 2
    _draw_string(image, count, x, y, font, config.theme.primary_text)


def draw_message(image, message: str, config: DrawConfig) -> None:
    center_y = config.height * MESSAGE_Y_POSITION
    font = _pick(config.fonts.large)

    lines = wrap_text(message, MAX_TEXT_WIDTH).split("\n")
    total_height = len(lines) * LINE_HEIGHT
    start_y = center_y - total_height / 2

    for index, line in enumerate(lines):
        text_width, _ = _measure(font, line)
        x = (config.width - text_width) / 2
        y = start_y + index * LINE_HEIGHT + LINE_HEIGHT * LINE_HEIGHT_MULTIPLIER
        _draw_string(image, line, x, y, font, config.theme.primary_text)


def draw_brand(image, config: DrawConfig) -> None:
    if not config.brand_text:
        return
    font = _pick(config.fonts.small)
    text_width, _ = _measure(font, config.brand_text)
    x = config.width - text_width - BRAND_RIGHT_MARGIN
    y = config.height - BRAND_BOTTOM_MARGIN
    _draw_string(image, config.brand_text, x, y, font, config.theme.accent_text)


class Generator:
    """Renders counter images into a directory, reusing earlier renders."""

    def __init__(self, config: Config, og_dir) -> None:
        self.config = config
        self.og_dir = Path(og_dir)
        self.font_config = FontConfig(config.static.fonts_dir)
        self.fonts = load_fonts(self.font_config)
        self.brand_text = config.base.title

    def generate(self, counter: CounterData, theme_name=ThemeName.BRUTALIST) -> str:
        """Return the path of the image for the counter, drawing it if needed."""
        theme = get_theme(theme_name)
        cache_key = generate_cache_key(counter.count, counter.message, counter.target)
        cached = check_cache(cache_key, self.og_dir)
        if cached is not None:
            return cached

        image = Image.new("RGBA", (IMAGE_WIDTH, IMAGE_HEIGHT))
        config = DrawConfig(
            width=IMAGE_WIDTH,
            height=IMAGE_HEIGHT,
            fonts=self.fonts,
            theme=theme,
            brand_text=self.brand_text,
        )
        draw_background(image, config)
        draw_counter(image, counter.count, config)
        draw_message(image, counter.message, config)
        draw_brand(image, config)

        output_path = self.og_dir / f"{cache_key}{FILE_EXTENSION}"
        image.save(output_path, format="PNG")
        return str(output_path)