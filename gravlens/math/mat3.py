# gravlens/math/mat3.py
"""
Матрицы вращения 3×3 (углы в радианах).

Порядок для камеры: сначала pitch вокруг локальной горизонтальной оси X,
затем yaw вокруг вертикальной оси Y, т.е. ``R = Ry(yaw) @ Rx(pitch)``.
Один и тот же порядок используется и для основного вида, и для
вставки‑референса.
"""

import numpy as np
from math import sin, cos

from gravlens.math.vec3 import Vec3


class Mat3:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(3, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((3, 3))

    @staticmethod
    def rotate_x(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(3, dtype=np.float64)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat3(m)

    @staticmethod
    def rotate_y(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(3, dtype=np.float64)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat3(m)

    @staticmethod
    def from_yaw_pitch(yaw: float, pitch: float):
        return Mat3.rotate_y(yaw) @ Mat3.rotate_x(pitch)

    def apply(self, v: Vec3) -> Vec3:
        return Vec3.from_np(self.m @ v.as_np())

    def apply_many(self, vectors: np.ndarray) -> np.ndarray:
        """Вращает массив векторов формы (..., 3)."""
        return np.asarray(vectors, dtype=np.float64) @ self.m.T

    def __matmul__(self, other: "Mat3") -> "Mat3":
        return Mat3(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat3({self.m})"
