"""Chart data: a scrolling audio sample buffer, key navigation and demo series."""

from __future__ import annotations

import io
import math
import random
from enum import Enum
from typing import Callable

Point = tuple[float, float]

SAMPLE_COUNT = 2000
RESOLUTION = 4
SCROLL_STEP = 10

AUDIO_SAMPLE_RATE = 8000
AUDIO_Y_RANGE = (-1, 1)

AREA_CHART_TITLE = "Simple areachart example"
AREA_SERIES_NAME = "Batman"
AREA_PEN_COLOR = 0x059605
AREA_PEN_WIDTH = 3
AREA_GRADIENT = ((0.0, 0x3CC63C), (1.0, 0x26F626))
AREA_X_RANGE = (0, 20)
AREA_Y_RANGE = (0, 10)

ZOOM_CHART_TITLE = "Zoom in/out example"
ZOOM_POINT_COUNT = 500
ZOOM_AMPLITUDE = 100
ZOOM_NOISE_BOUND = 20

_AREA_UPPER: tuple[Point, ...] = (
    (1, 5), (3, 7), (7, 6), (9, 7), (12, 6), (16, 7), (18, 5),
)
_AREA_LOWER: tuple[Point, ...] = (
    (1, 3), (3, 4), (7, 3), (8, 2), (12, 3), (16, 4), (18, 3),
)


class SeriesBuffer:
    """A write-only sink that turns unsigned 8-bit audio into a scrolling series.

    Every ``resolution``-th byte written becomes one sample in the range
    [-1, 1). New samples enter at the right and push older ones left.
    """

    def __init__(
        self,
        on_update: Callable[[list[Point]], None] | None = None,
        *,
        sample_count: int = SAMPLE_COUNT,
        resolution: int = RESOLUTION,
    ) -> None:
        if sample_count <= 0 or resolution <= 0:
            raise ValueError("sample_count and resolution must be positive")
        self.sample_count = sample_count
        self.resolution = resolution
        self._on_update = on_update
        self._ys: list[float] = []

    @property
    def points(self) -> list[Point]:
        """The current series as (x, y) points; empty before the first write."""
        return [(float(x), y) for x, y in enumerate(self._ys)]

    def write(self, data: bytes) -> int:
        """Take in audio bytes; return how many bytes were consumed."""
        if not self._ys:
            self._ys = [0.0] * self.sample_count

        available = len(data) // self.resolution
        start = 0
        if available < self.sample_count:
            start = self.sample_count - available
            self._ys[:start] = self._ys[available:available + start]

        stop = (self.sample_count - start) * self.resolution
        self._ys[start:] = [(byte - 128) / 128 for byte in data[:stop:self.resolution]]

        if self._on_update is not None:
            self._on_update(self.points)
        return stop

    def read(self, size: int = -1) -> bytes:
        """Reading is not supported: the buffer is write-only."""
        raise io.UnsupportedOperation("series buffer is write-only")


class ChartCommand(Enum):
    """What a key press does to a zoomable chart."""

    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"

    @property
    def scroll(self) -> tuple[int, int]:
        """The (dx, dy) scroll amount; (0, 0) for zoom commands."""
        return _SCROLLS.get(self, (0, 0))


_SCROLLS = {
    ChartCommand.SCROLL_LEFT: (-SCROLL_STEP, 0),
    ChartCommand.SCROLL_RIGHT: (SCROLL_STEP, 0),
    ChartCommand.SCROLL_UP: (0, SCROLL_STEP),
    ChartCommand.SCROLL_DOWN: (0, -SCROLL_STEP),
}

_KEYS = {
    "+": ChartCommand.ZOOM_IN,
    "plus": ChartCommand.ZOOM_IN,
    "-": ChartCommand.ZOOM_OUT,
    "minus": ChartCommand.ZOOM_OUT,
    "left": ChartCommand.SCROLL_LEFT,
    "right": ChartCommand.SCROLL_RIGHT,
    "up": ChartCommand.SCROLL_UP,
    "down": ChartCommand.SCROLL_DOWN,
}


def key_command(key: str) -> ChartCommand | None:
    """Map a key name to a chart command, or None if the key is not handled."""
    return _KEYS.get(key.lower())


def area_chart_series() -> tuple[list[Point], list[Point]]:
    """The upper and lower boundary lines of the demo area chart."""
    return list(_AREA_UPPER), list(_AREA_LOWER)


def zoom_chart_series(rng: random.Random | None = None) -> list[Point]:
    """A noisy sine wave of 500 points for the zoom demo chart."""
    source = rng if rng is not None else random.Random()
    return [
        (
            float(i),
            math.sin(math.pi / 50 * i) * ZOOM_AMPLITUDE + source.randrange(ZOOM_NOISE_BOUND),
        )
        for i in range(ZOOM_POINT_COUNT)
    ]