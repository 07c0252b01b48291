# gravlens/math/grid.py
"""
Двумерная сетка фиксированного размера с проверкой границ.

Используется и для карты искажений, и для RGBA‑буфера кадра: одна
непрерывная ndarray формы ``(rows, cols, *cell_shape)`` в порядке
row‑major. После создания размер не меняется.
"""

from typing import Tuple

import numpy as np


class Grid2D:
    """Сетка rows×cols; ячейка – скаляр или массив формы ``cell_shape``."""

    __slots__ = ("rows", "cols", "cell_shape", "_data")

    def __init__(self, rows: int, cols: int, cell_shape: Tuple[int, ...] = (),
                 dtype=np.float64, fill=0):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid2D needs positive size, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        self.cell_shape = tuple(cell_shape)
        self._data = np.full((self.rows, self.cols) + self.cell_shape,
                             fill, dtype=dtype)

    # -----------------------------------------------------------------
    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"cell ({row}, {col}) outside {self.rows}x{self.cols} grid"
            )

    def _check_rows(self, start: int, stop: int) -> None:
        if not (0 <= start <= stop <= self.rows):
            raise IndexError(
                f"rows [{start}, {stop}) outside grid of {self.rows} rows"
            )

    # -----------------------------------------------------------------
    def __getitem__(self, key):
        row, col = key
        self._check(row, col)
        return self._data[row, col]

    def __setitem__(self, key, value):
        row, col = key
        self._check(row, col)
        self._data[row, col] = value

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def array(self) -> np.ndarray:
        """Сам массив (не копия) – для векторизованных операций."""
        return self._data

    def row(self, r: int) -> np.ndarray:
        self._check_rows(r, r + 1)
        return self._data[r]

    def rows_view(self, start: int, stop: int) -> np.ndarray:
        self._check_rows(start, stop)
        return self._data[start:stop]

    def region(self, row: int, col: int, height: int, width: int) -> np.ndarray:
        """View прямоугольника; выход за границы – IndexError."""
        if height <= 0 or width <= 0:
            raise IndexError(f"empty region {height}x{width}")
        self._check(row, col)
        self._check(row + height - 1, col + width - 1)
        return self._data[row:row + height, col:col + width]

    def fill(self, value) -> None:
        self._data[...] = value

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def __repr__(self):
        return f"Grid2D({self.rows}x{self.cols}, cell={self.cell_shape}, dtype={self._data.dtype})"
