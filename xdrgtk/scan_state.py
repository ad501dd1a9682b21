"""The state behind the spectral scan view: current, peak and held scans plus marks."""

from __future__ import annotations

import math

from .scan import ScanData, ScanError, ScanMarks
from .scheduler import SchedulerEntry


class ScanState:
    """Keeps the latest scan, its peak-hold and hold copies, and frequency marks."""

    def __init__(self) -> None:
        self.data: ScanData | None = None
        self.peak: ScanData | None = None
        self.hold: ScanData | None = None
        self.marks = ScanMarks()
        self.active = False

    def update(self, data: ScanData, peakhold: bool) -> None:
        """Take a freshly completed scan, folding it into the peak when asked."""
        self.active = True

        if self.data is not None:
            if peakhold and self.data.same_range(data):
                if self.peak is None:
                    self.peak = self.data
            else:
                self.peak = None

        self.data = data

        if self.hold is not None and not self.hold.same_range(data):
            self.hold = None

        if self.peak is not None:
            for peak_point, point in zip(self.peak.signals, data.signals):
                if point.signal > peak_point.signal:
                    peak_point.signal = point.signal
            if data.max > self.peak.max:
                self.peak.max = data.max
            if data.min < self.peak.min:
                self.peak.min = data.min

    def update_value(self, freq: int, value: float, peakhold: bool, live_update: bool) -> bool:
        """Apply a single measured level; return whether the scan changed."""
        self.active = False

        if not live_update or self.data is None:
            return False

        found = next(
            (index for index, point in enumerate(self.data.signals) if point.freq == freq),
            None,
        )
        if found is None:
            return False

        self.data.signals[found].signal = value
        if value > self.data.max:
            self.data.max = math.ceil(value)
        if value < self.data.min:
            self.data.min = math.floor(value)

        if peakhold and self.peak is None:
            self.peak = self.data.copy()

        if self.peak is not None:
            peak_point = self.peak.signals[found]
            if peak_point.signal < value:
                peak_point.signal = value
                if value > self.peak.max:
                    self.peak.max = math.ceil(value)
            if value < self.peak.min:
                self.peak.min = math.floor(value)

        return True

    def toggle_hold(self, active: bool) -> bool:
        """Drop the held scan and, when ``active``, hold a copy of the current one.

        Returns whether a scan is held afterwards.
        """
        self.hold = None
        if active and self.data is not None:
            self.hold = self.data.copy()
        return self.hold is not None

    def clear(self) -> bool:
        """Forget the current, peak and held scans; return whether anything was cleared."""
        if self.data is None:
            return False
        self.data = None
        self.hold = None
        self.peak = None
        return True

    def visible_marks(self) -> list[int]:
        """Marks that fall within the current scan's frequency range."""
        if self.data is None:
            return []
        return [freq for freq in self.marks if self.data.contains(freq)]

    def prev_mark(self, current: int) -> int | None:
        """The nearest visible mark below ``current``, wrapping to the highest one."""
        visible = self.visible_marks()
        below = [freq for freq in visible if freq < current]
        if below:
            return below[-1]
        return visible[-1] if visible else None

    def next_mark(self, current: int) -> int | None:
        """The nearest visible mark above ``current``, wrapping to the lowest one."""
        visible = self.visible_marks()
        above = (freq for freq in visible if freq > current)
        found = next(above, None)
        if found is not None:
            return found
        return visible[0] if visible else None

    def add_marks(self, step: int) -> None:
        """Mark every multiple of ``step`` kHz within the current scan."""
        if step <= 0:
            raise ValueError(f"mark step must be positive, not {step}")
        if self.data is None:
            return
        low = math.ceil(self.data.first_freq / step) * step
        high = math.floor(self.data.last_freq / step) * step
        self.marks.extend(range(low, high + 1, step))

    def clear_marks(self, all_marks: bool) -> None:
        """Remove every mark, or only those visible in the current scan."""
        if all_marks:
            self.marks.clear()
        elif self.data is not None:
            self.marks.clear_range(self.data.first_freq, self.data.last_freq)

    def scheduler_entries(self, timeout: float) -> list[SchedulerEntry]:
        """Scheduler entries for every visible mark, each lasting ``timeout`` seconds."""
        visible = self.visible_marks()
        if not visible:
            raise ScanError("There are no visible marks that can be added to the scheduler.")
        return [SchedulerEntry(freq, timeout) for freq in visible]