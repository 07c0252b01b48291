# gravlens/lensing/precompute.py
"""
Предвычисление карты искажений: одна геодезическая на пиксель.

Камера стоит на оси в точке (0, 0, −camera_distance) и смотрит на
начало координат. Интегрирование – RK4 с адаптивным шагом
(см. ``gravlens.physics.kernels``), не более ``max_steps`` шагов.
"""

import numpy as np

from gravlens.lensing.camera import PinholeCamera
from gravlens.lensing.distortion import DistortionMap, SimulationParameters
from gravlens.physics.constants import MAX_STEPS
from gravlens.physics.kernels import trace_bundle
from gravlens.utils.logger import logger


class DistortionPrecomputer:
    """Трассирует строки пикселей и записывает их в DistortionMap."""

    def __init__(self, width: int, height: int, camera: PinholeCamera = None,
                 max_steps: int = MAX_STEPS):
        self.width = int(width)
        self.height = int(height)
        self.camera = camera or PinholeCamera()
        self.max_steps = int(max_steps)

    @staticmethod
    def camera_origin(params: SimulationParameters) -> np.ndarray:
        return np.array([0.0, 0.0, -params.camera_distance], dtype=np.float64)

    def compute_rows(self, dist_map: DistortionMap, start: int, stop: int,
                     params: SimulationParameters) -> None:
        """Пересчитать строки [start, stop) для заданных параметров."""
        stop = min(stop, self.height)
        if start >= stop:
            return
        dirs = self.camera.ray_directions(self.width, self.height, start, stop)
        hits_out = np.zeros(dirs.shape[:2], dtype=np.bool_)
        dirs_out = np.zeros_like(dirs)
        trace_bundle(self.camera_origin(params), dirs, float(params.rs),
                     self.max_steps, hits_out, dirs_out)
        dist_map.write_rows(start, hits_out, dirs_out)

    def compute_all(self, dist_map: DistortionMap, params: SimulationParameters) -> None:
        """Полный проход за один вызов (headless‑режим, тесты)."""
        self.compute_rows(dist_map, 0, self.height, params)
        logger.debug(f"[Precompute] Full pass done: {dist_map.hit_count()} hit pixels")

    def new_map(self) -> DistortionMap:
        return DistortionMap(self.width, self.height)
