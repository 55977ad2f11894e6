"""The ever-growing count of things nobody asked about."""

import random

from whocares.config import Config

VARIATION = 500_000


def format_number(n: int) -> str:
    """Insert a comma before every group of three trailing characters."""
    digits = str(n)
    length = len(digits)
    parts = []
    for position, char in enumerate(digits):
        if position and (length - position) % 3 == 0:
            parts.append(",")
        parts.append(char)
    return "".join(parts)


class Counter:
    """Produces a count near the configured seed."""

    def __init__(self, config: Config, rng: random.Random | None = None) -> None:
        self._base = config.app.seed
        self._rng = rng if rng is not None else random.Random()

    def get_count(self) -> str:
        return format_number(self._base + self._rng.randrange(VARIATION))