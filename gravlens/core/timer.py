"""
Таймер кадров: dt последнего кадра и FPS скользящим средним.
"""

import time
from collections import deque


class Timer:
    """Таймер с высоким разрешением и сглаженным FPS."""
    def __init__(self, window_size: int = 30):
        self._last = time.perf_counter()
        self._times = deque(maxlen=window_size)
        self.delta = 0.0
        self.fps = 0.0

    def tick(self) -> float:
        """Обновить таймер, вернуть dt в секундах."""
        now = time.perf_counter()
        self.delta = now - self._last
        self._last = now
        self._times.append(self.delta)
        avg = sum(self._times) / len(self._times)
        self.fps = 1.0 / avg if avg > 0.0 else 0.0
        return self.delta
