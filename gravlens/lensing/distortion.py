# gravlens/lensing/distortion.py
"""
Карта искажений – кэш результатов трассировки по пикселям.

Для каждого пикселя хранится, захвачен ли луч горизонтом, и (если нет)
направление ухода в *локальной* системе камеры. Карта не зависит от
ориентации камеры: вращение применяется при чтении.
"""

from dataclasses import dataclass

import numpy as np

from gravlens.math.grid import Grid2D
from gravlens.math.vec3 import Vec3


@dataclass(frozen=True)
class SimulationParameters:
    """Всё, от чего зависит карта. Любое изменение её инвалидирует."""
    rs: float = 4.0
    camera_distance: float = 150.0


@dataclass(frozen=True)
class DistortionMapEntry:
    hit: bool
    escape_direction: Vec3


class DistortionMap:
    """Фиксированная сетка width×height; перезаписывается на месте."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.hits = Grid2D(self.height, self.width, dtype=np.bool_, fill=False)
        self.directions = Grid2D(self.height, self.width, (3,), dtype=np.float64)

    def entry(self, row: int, col: int) -> DistortionMapEntry:
        return DistortionMapEntry(
            bool(self.hits[row, col]),
            Vec3.from_np(self.directions[row, col]),
        )

    def write_rows(self, start: int, hits: np.ndarray, directions: np.ndarray) -> None:
        stop = start + hits.shape[0]
        self.hits.rows_view(start, stop)[...] = hits
        self.directions.rows_view(start, stop)[...] = directions

    def hit_count(self) -> int:
        return int(np.count_nonzero(self.hits.array))

    def __repr__(self):
        return f"DistortionMap({self.width}x{self.height}, hits={self.hit_count()})"
