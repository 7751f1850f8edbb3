"""Running average over a fixed window of recent values."""

from __future__ import annotations

from collections import deque


class MovingAverage:
    """Average of the last ``size`` values passed to :meth:`next`."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("window size must be at least 1")
        self.size = size
        self._window = deque(maxlen=size)
        self._sum = 0.0

    def next(self, value):
        """Add ``value`` to the window and return the current average."""
        if len(self._window) == self.size:
            self._sum -= self._window[0]
        self._window.append(value)
        self._sum += value
        return self._sum / len(self._window)