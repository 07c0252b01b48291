"""
Камера‑обскура в собственной (невращённой) системе координат.

forward = +Z, right = +X, up = +Y. Экран стоит на расстоянии
``screen_distance`` перед камерой, высота экрана выводится из
соотношения сторон сетки пикселей.
"""

from typing import Optional

import numpy as np


class PinholeCamera:
    """Генератор направлений лучей для сетки пикселей."""
    def __init__(self, screen_distance: float = 10.0, screen_width: float = 32.0):
        self.screen_distance = float(screen_distance)
        self.screen_width = float(screen_width)

    def screen_height(self, cols: int, rows: int) -> float:
        return self.screen_width * (rows / cols)

    def ray_directions(self, cols: int, rows: int, row_start: int = 0,
                       row_stop: Optional[int] = None) -> np.ndarray:
        """
        Нормализованные направления для строк [row_start, row_stop).

        Пиксель (j, i) смотрит в точку экрана
        ``origin + i·dx + (rows − 1 − j)·dy`` – строка 0 сверху.
        Возвращает массив формы (row_stop − row_start, cols, 3).
        """
        if row_stop is None:
            row_stop = rows
        sw = self.screen_width
        sh = self.screen_height(cols, rows)

        i = np.arange(cols, dtype=np.float64)
        j = np.arange(row_start, row_stop, dtype=np.float64)
        x = -sw * 0.5 + i * (sw / cols)
        y = -sh * 0.5 + (rows - 1 - j) * (sh / rows)

        dirs = np.empty((len(j), cols, 3), dtype=np.float64)
        dirs[..., 0] = x[np.newaxis, :]
        dirs[..., 1] = y[:, np.newaxis]
        dirs[..., 2] = self.screen_distance
        return dirs / np.linalg.norm(dirs, axis=-1, keepdims=True)

    def __repr__(self):
        return f"PinholeCamera(screen_distance={self.screen_distance}, screen_width={self.screen_width})"
