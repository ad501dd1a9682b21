"""Geometry of the spectral scan plot: scale, spectrum curve, marks and focus."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from .scan import ScanData
from .scan_state import ScanState

SCAN_FONT_SCALE_SIZE = 12
SCAN_OFFSET_LEFT = 30
SCAN_OFFSET_RIGHT = 20
SCAN_OFFSET_TOP = SCAN_FONT_SCALE_SIZE // 2 + 2
SCAN_OFFSET_BOTTOM = SCAN_FONT_SCALE_SIZE + 5
SCAN_DEFAULT_MIN_LEVEL = 3.0
SCAN_DEFAULT_MAX_LEVEL = 84.0

Point = tuple[float, float]
LevelFunc = Callable[[float], float]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class ScaleTick:
    """A labelled tick on the signal level scale."""

    position: float
    value: int

    @property
    def label(self) -> str:
        return f"{self.value:3d}"


@dataclass
class SpectrumPath:
    """A closed outline of the spectrum: a start, Bezier curves and closing lines."""

    start: Point
    curves: list[tuple[Point, Point, Point]] = field(default_factory=list)
    close: list[Point] = field(default_factory=list)


def format_frequency(freq: int) -> str:
    """Format a frequency in kHz as MHz, dropping trailing zeros but keeping one decimal."""
    text = f"{freq / 1000.0:.3f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0") or "0"
    return f"{whole}.{fraction}"


def map_value(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``value`` from one range onto another."""
    if in_max == in_min:
        raise ValueError("input range must not be empty")
    return (value - in_min) * (out_max - out_min) / float(in_max - in_min) + out_min


def level_range(state: ScanState, relative: bool, level: LevelFunc | None = None) -> tuple[float, float]:
    """The displayed (min, max) signal levels of the plot.

    ``level`` converts a raw signal into the displayed unit.
    """
    level = level or float
    if not relative:
        return level(SCAN_DEFAULT_MIN_LEVEL), level(SCAN_DEFAULT_MAX_LEVEL)

    data = state.data
    if data is None:
        raise ValueError("no scan data to derive a relative range from")

    peak, hold = state.peak, state.hold
    if peak is not None and hold is not None:
        return (
            min(level(peak.min), level(hold.min)),
            max(level(peak.max), level(hold.max)),
        )
    if peak is not None:
        return level(peak.min), level(peak.max)
    if hold is not None:
        return (
            min(level(data.min), level(hold.min)),
            max(level(data.max), level(hold.max)),
        )
    return level(data.min), level(data.max)


def scale_ticks(height: float, min_level: float, max_level: float) -> list[ScaleTick]:
    """Ticks of the level scale, thinned so labels never overlap."""
    if max_level < min_level:
        raise ValueError("max level must not be below min level")
    top = math.ceil(max_level)
    scale_points = top - math.floor(min_level)
    step = height / scale_points if scale_points else math.inf

    ticks: list[ScaleTick] = []
    current = top
    position = SCAN_OFFSET_TOP + 0.5
    last_position = -float(SCAN_FONT_SCALE_SIZE)
    while position <= SCAN_OFFSET_TOP + height:
        if last_position + SCAN_FONT_SCALE_SIZE + 1.0 < position:
            ticks.append(ScaleTick(position, current))
            last_position = position
        current -= 1
        position += step
    return ticks


def spectrum_path(
    data: ScanData,
    width: float,
    height: float,
    min_level: float,
    max_level: float,
    level: LevelFunc | None = None,
) -> SpectrumPath:
    """The smoothed outline of a scan, closed along the bottom of the plot."""
    level = level or float
    if len(data) < 2:
        raise ValueError("a spectrum needs at least two points")

    def y_of(signal: float) -> float:
        sample = min(max(level(signal), min_level), max_level)
        return height - map_value(sample, min_level, max_level, 0.0, height)

    step = width / float(len(data) - 1)
    x_src = 0.0
    y_src = y_of(data.signals[0].signal)
    path = SpectrumPath(start=(SCAN_OFFSET_LEFT + x_src, SCAN_OFFSET_TOP + y_src))

    x_dest = 0.0
    for point in data.signals[1:]:
        x_dest += step
        x_control = x_src + (x_dest - x_src) / 2.0
        y_dest = y_of(point.signal)
        path.curves.append(
            (
                (SCAN_OFFSET_LEFT + x_control, SCAN_OFFSET_TOP + y_src),
                (SCAN_OFFSET_LEFT + x_control, SCAN_OFFSET_TOP + y_dest),
                (SCAN_OFFSET_LEFT + x_dest, SCAN_OFFSET_TOP + y_dest),
            )
        )
        x_src, y_src = x_dest, y_dest

    path.close = [
        (SCAN_OFFSET_LEFT + width, SCAN_OFFSET_TOP + height),
        (SCAN_OFFSET_LEFT, SCAN_OFFSET_TOP + height),
    ]
    return path


def focus_index(x: float, widget_width: float, count: int) -> int | None:
    """The sample under pointer position ``x``, or None when outside the plot."""
    if count < 2:
        return None
    width = widget_width - SCAN_OFFSET_LEFT - SCAN_OFFSET_RIGHT
    if width <= 0:
        return None
    offset = x - 0.5 - SCAN_OFFSET_LEFT
    index = _round_half_away(offset / (width / float(count - 1)))
    return index if 0 <= index < count else None


def mark_position(freq: int, first: int, last: int, width: float) -> float:
    """Horizontal canvas position of a frequency mark."""
    if last == first:
        raise ValueError("scan range must not be empty")
    x = (freq - first) / float(last - first) * width
    return SCAN_OFFSET_LEFT + x