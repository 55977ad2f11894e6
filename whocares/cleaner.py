"""Removal of stale Open Graph images, once or on a schedule."""

import logging
import os
import threading
import time
from collections.abc import Iterator
from pathlib import Path

from whocares.config import Config

OG_SUBDIR = "og"
CLEAN_INTERVAL = 600.0

log = logging.getLogger(__name__)


def _files_below(directory: str | os.PathLike) -> Iterator[str]:
    """Yield every non-directory path below a directory, in lexical order."""
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _files_below(entry.path)
        else:
            yield entry.path


class Cleaner:
    """Deletes generated images older than the configured cache duration."""

    def __init__(self, config: Config) -> None:
        self._config = config

    @property
    def og_dir(self) -> Path:
        return Path(self._config.static.public_dir) / OG_SUBDIR

    def clean_old_images(self, now: float | None = None) -> int:
        """Remove old files below the og directory and return how many went.

        The cache duration is compared against file age in nanoseconds.
        """
        now_ns = time.time_ns() if now is None else round(now * 1_000_000_000)
        max_age = self._config.app.cache_duration
        removed = 0
        for path in _files_below(self.og_dir):
            if now_ns - os.lstat(path).st_mtime_ns > max_age:
                os.remove(path)
                removed += 1
        return removed


class CronService:
    """Runs a Cleaner periodically on a background thread."""

    def __init__(self, cleaner: Cleaner, interval: float = CLEAN_INTERVAL) -> None:
        self.cleaner = cleaner
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self.cleaner.clean_old_images()
            except OSError as exc:
                log.error("Error cleaning old images: %s", exc)
            else:
                log.info("Successfully cleaned old OG images")

    def start(self) -> None:
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stop_event,), daemon=True)
        self._thread.start()
        log.info("Cron service started - cleaning OG images every %s seconds", self.interval)

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        log.info("Cron service stopped")