# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float64).

Значимый тип: все операции возвращают новый объект, исходный не меняется.
"""
import numpy as np
from typing import Tuple


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_np(cls, array) -> "Vec3":
        a = np.asarray(array, dtype=np.float64).reshape(3)
        return cls(a[0], a[1], a[2])

    # -------------------------------------------------
    # свойства (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v / scalar))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash(self.to_tuple())

    def __iter__(self):
        return iter(self.to_tuple())

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение."""
        return Vec3(*np.cross(self._v, other._v))

    def length_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.sqrt(self.length_squared()))

    def normalized(self) -> "Vec3":
        """Единичный вектор; для нулевого вектора – нулевой вектор."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def isclose(self, other: "Vec3", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=atol))

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float64."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
