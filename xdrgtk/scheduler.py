"""Cycling the tuner through a list of frequencies on a timer."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass


class SchedulerError(Exception):
    """Raised when the scheduler cannot be started."""


@dataclass(frozen=True)
class SchedulerEntry:
    """A frequency in kHz and how long to stay on it, in seconds."""

    freq: int
    timeout: float

    def __post_init__(self) -> None:
        if self.timeout < 0:
            raise ValueError(f"timeout must not be negative: {self.timeout}")


class Scheduler:
    """Tunes each entry in turn, waiting its timeout before moving on."""

    def __init__(self, tune: Callable[[int], object], entries: Iterable[SchedulerEntry]) -> None:
        self.tune = tune
        self.entries = list(entries)
        self._timer: threading.Timer | None = None
        self._next = 0
        self._generation = 0
        self._lock = threading.RLock()

    def is_running(self) -> bool:
        with self._lock:
            return self._timer is not None

    def start(self) -> None:
        """Tune the first entry and start cycling."""
        with self._lock:
            if not self.entries:
                raise SchedulerError("No scheduler frequencies defined.\nAdd some in settings first.")
            self.stop()
            self._generation += 1
            self._next = 0
            self._switch(self._generation)

    def stop(self) -> None:
        """Stop cycling; does nothing when not running."""
        with self._lock:
            if self._timer is None:
                return
            self._generation += 1
            self._timer.cancel()
            self._timer = None

    def toggle(self) -> bool:
        """Start when stopped, stop when running; return whether it now runs."""
        with self._lock:
            if self._timer is None:
                self.start()
            else:
                self.stop()
            return self._timer is not None

    def _switch(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            if not self.entries:
                self._timer = None
                return
            entry = self.entries[self._next % len(self.entries)]
            self.tune(entry.freq)
            timer = threading.Timer(entry.timeout, self._switch, args=(generation,))
            timer.daemon = True
            self._timer = timer
            self._next = (self._next + 1) % len(self.entries)
            timer.start()