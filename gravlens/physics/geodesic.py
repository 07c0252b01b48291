# gravlens/physics/geodesic.py
"""
Модель движения фотона в поле чёрной дыры.

Используется приближённое уравнение (в духе слабого поля)

    dx/dλ = p
    dp/dλ = −1.5 · rs · h² / r⁵ · x,     h = x × p

Это не точное решение уравнений поля: модель подобрана ради
устойчивости и скорости, и меняться в сторону «правильной» не должна.

Формула записана один раз, в ``photon_derivative`` над плоским массивом
``[x, y, z, px, py, pz]``. ``geodesic_derivative`` – та же функция для
``PhotonState``, а ``gravlens.physics.kernels`` компилирует её numba.
"""

import math
from dataclasses import dataclass

import numpy as np

from gravlens.math.vec3 import Vec3
from gravlens.physics.constants import (
    FIELD_COEFFICIENT,
    SINGULARITY_FACTOR,
    DEFAULT_STEP,
    NEAR_STEP,
    NEAR_RADIUS_FACTOR,
    CLOSE_STEP,
    CLOSE_RADIUS_FACTOR,
)


@dataclass(frozen=True)
class PhotonState:
    """Точка фазового пространства фотона: (position, momentum)."""
    position: Vec3
    momentum: Vec3

    def __add__(self, other: "PhotonState") -> "PhotonState":
        return PhotonState(self.position + other.position,
                           self.momentum + other.momentum)

    def __mul__(self, scalar: float) -> "PhotonState":
        return PhotonState(self.position * scalar, self.momentum * scalar)

    __rmul__ = __mul__

    def radius(self) -> float:
        return self.position.length()

    def angular_momentum_sq(self) -> float:
        """|x × p|² – сохраняется для центральной силы."""
        return self.position.cross(self.momentum).length_squared()

    def to_array(self) -> np.ndarray:
        return np.concatenate([self.position.as_np(), self.momentum.as_np()])

    @classmethod
    def from_array(cls, y) -> "PhotonState":
        return cls(Vec3.from_np(y[:3]), Vec3.from_np(y[3:6]))

    @classmethod
    def zero(cls) -> "PhotonState":
        return cls(Vec3(), Vec3())


def photon_derivative(y, t, rs):
    """
    Производная плоского состояния фотона. Чистая функция: rs передаётся явно.

    При r < 0.1·rs (и при r == 0, что возможно лишь для rs == 0)
    возвращается точный ноль – состояние «замерзает».
    """
    out = np.zeros(6)
    r2 = y[0] * y[0] + y[1] * y[1] + y[2] * y[2]
    r = math.sqrt(r2)
    if r < SINGULARITY_FACTOR * rs or r2 == 0.0:
        return out

    # h = x × p
    hx = y[1] * y[5] - y[2] * y[4]
    hy = y[2] * y[3] - y[0] * y[5]
    hz = y[0] * y[4] - y[1] * y[3]
    h2 = hx * hx + hy * hy + hz * hz

    factor = FIELD_COEFFICIENT * rs * h2 / (r2 * r2 * r)
    out[0] = y[3]
    out[1] = y[4]
    out[2] = y[5]
    out[3] = y[0] * factor
    out[4] = y[1] * factor
    out[5] = y[2] * factor
    return out


def geodesic_derivative(state: PhotonState, t: float, rs: float) -> PhotonState:
    """``photon_derivative`` для ``PhotonState``."""
    return PhotonState.from_array(photon_derivative(state.to_array(), t, rs))


def adaptive_step(r, rs):
    """Шаг интегрирования: мельче там, где кривизна больше."""
    if r < rs * CLOSE_RADIUS_FACTOR:
        return CLOSE_STEP
    if r < rs * NEAR_RADIUS_FACTOR:
        return NEAR_STEP
    return DEFAULT_STEP
