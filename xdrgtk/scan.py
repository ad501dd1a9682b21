"""Spectral scan data, frequency marks and scan commands for the tuner."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

SCAN_MIN_SAMPLES = 2
SCAN_MAX_SAMPLES = 700


class ScanError(Exception):
    """Raised when a spectral scan cannot be requested."""


@dataclass
class ScanPoint:
    """Signal level measured at one frequency in kHz."""

    freq: int
    signal: float


@dataclass
class ScanData:
    """One spectral scan: the measured points and the level range they span."""

    signals: list[ScanPoint]
    min: float | None = None
    max: float | None = None

    def __post_init__(self) -> None:
        if not self.signals:
            raise ValueError("a scan needs at least one point")
        levels = [point.signal for point in self.signals]
        if self.min is None:
            self.min = min(levels)
        if self.max is None:
            self.max = max(levels)

    def __len__(self) -> int:
        return len(self.signals)

    def __iter__(self) -> Iterator[ScanPoint]:
        return iter(self.signals)

    @property
    def first_freq(self) -> int:
        return self.signals[0].freq

    @property
    def last_freq(self) -> int:
        return self.signals[-1].freq

    def contains(self, freq: int) -> bool:
        """Whether ``freq`` lies within the scanned range."""
        return self.first_freq <= freq <= self.last_freq

    def copy(self) -> "ScanData":
        """Return an independent copy of the scan."""
        return ScanData(
            [ScanPoint(point.freq, point.signal) for point in self.signals],
            self.min,
            self.max,
        )

    def same_range(self, other: "ScanData") -> bool:
        """Whether both scans cover the same frequencies with the same sample count."""
        return (
            len(self) == len(other)
            and self.first_freq == other.first_freq
            and self.last_freq == other.last_freq
        )


@dataclass
class ScanMarks:
    """A sorted set of marked frequencies."""

    _items: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._items = sorted(set(self._items))

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, freq: object) -> bool:
        if not isinstance(freq, int):
            return False
        index = bisect_left(self._items, freq)
        return index < len(self._items) and self._items[index] == freq

    def add(self, freq: int) -> None:
        """Mark ``freq``; marking it again changes nothing."""
        if freq not in self:
            insort(self._items, freq)

    def toggle(self, freq: int) -> None:
        """Mark ``freq`` when unmarked, unmark it otherwise."""
        if freq in self:
            self.remove(freq)
        else:
            self.add(freq)

    def remove(self, freq: int) -> None:
        """Unmark ``freq``; unknown frequencies are ignored."""
        index = bisect_left(self._items, freq)
        if index < len(self._items) and self._items[index] == freq:
            del self._items[index]

    def clear(self) -> None:
        """Remove every mark."""
        self._items.clear()

    def clear_range(self, low: int, high: int) -> None:
        """Remove every mark between ``low`` and ``high`` inclusive."""
        if high < low:
            return
        del self._items[bisect_left(self._items, low):bisect_right(self._items, high)]

    def extend(self, freqs: Iterable[int]) -> None:
        """Mark every frequency in ``freqs``."""
        for freq in freqs:
            self.add(freq)


def validate_range(start: int, stop: int, step: int) -> tuple[int, int]:
    """Order the range and check its sample count; return ``(start, stop)``."""
    if step <= 0:
        raise ValueError(f"scan step must be positive, not {step}")
    if stop < start:
        start, stop = stop, start
    samples = int((stop - start) / step)
    if samples < SCAN_MIN_SAMPLES:
        raise ScanError("The selected sample count is too low.")
    if samples > SCAN_MAX_SAMPLES:
        raise ScanError("The selected sample count is too large.")
    return start, stop


def build_scan_command(
    start: int,
    stop: int,
    step: int,
    antenna: int,
    offset: int,
    filter_id: int,
    bandwidth: int,
    continuous: bool,
    tef668x_mode: bool,
) -> str:
    """Build the tuner command that starts a spectral scan."""
    if tef668x_mode:
        bw_part = f"Sw{bandwidth}\n"
    else:
        bw_part = f"Sf{filter_id}\nSw{bandwidth}\n"
    return (
        f"Sa{start + offset}\n"
        f"Sb{stop + offset}\n"
        f"Sc{step}\n"
        f"{bw_part}"
        f"Sz{antenna}\n"
        f"S{'m' if continuous else ''}"
    )