# -*- coding: utf-8 -*-
"""
gravlens/physics/kernels.py

Numba‑версии модели фотона и трассировщик пикселей.

Своих формул здесь нет: ``photon_derivative``, ``adaptive_step`` и
``rk4_step`` – это функции из ``gravlens.physics.geodesic`` и
``gravlens.physics.ode``, скомпилированные ``njit``. Состояние фотона –
плоский массив float64 длины 6: ``[x, y, z, px, py, pz]``.

API:
    photon_derivative(y, t, rs) -> ndarray(6)
    adaptive_step(r, rs) -> float
    rk4_step(y, t, dt, func, *args) -> ndarray(6)
    trace_bundle(origin, directions, rs, max_steps, hits_out, dirs_out)
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from gravlens.physics import geodesic, ode
from gravlens.physics.constants import CAPTURE_MARGIN, ESCAPE_RADIUS

_ESCAPE_R2 = ESCAPE_RADIUS * ESCAPE_RADIUS

photon_derivative = njit(cache=True)(geodesic.photon_derivative)
adaptive_step = njit(cache=True)(geodesic.adaptive_step)
# func передаётся аргументом, такие функции numba не кэширует на диск
rk4_step = njit(ode.rk4_step)


@njit
def trace_bundle(origin, directions, rs, max_steps, hits_out, dirs_out):
    """
    Трассирует по одному фотону на пиксель.

    Параметры
    ----------
    origin     : (3,) позиция камеры.
    directions : (rows, cols, 3) нормализованные направления лучей.
    rs         : радиус поля.
    max_steps  : предел шагов RK4 на пиксель.
    hits_out   : (rows, cols) bool – сюда пишем факт захвата.
    dirs_out   : (rows, cols, 3) – нормализованный конечный импульс
                 (для захваченных – нули).
    """
    rows = directions.shape[0]
    cols = directions.shape[1]
    capture_r = CAPTURE_MARGIN * rs
    capture_r2 = capture_r * capture_r
    y = np.empty(6)

    for j in range(rows):
        for i in range(cols):
            y[0] = origin[0]
            y[1] = origin[1]
            y[2] = origin[2]
            y[3] = directions[j, i, 0]
            y[4] = directions[j, i, 1]
            y[5] = directions[j, i, 2]

            hit = False
            t = 0.0
            for _ in range(max_steps):
                r = math.sqrt(y[0] * y[0] + y[1] * y[1] + y[2] * y[2])
                dt = adaptive_step(r, rs)
                y = rk4_step(y, t, dt, photon_derivative, rs)
                t += dt
                r2 = y[0] * y[0] + y[1] * y[1] + y[2] * y[2]
                if r2 < capture_r2:
                    hit = True
                    break
                if r2 > _ESCAPE_R2:
                    break

            hits_out[j, i] = hit
            n = math.sqrt(y[3] * y[3] + y[4] * y[4] + y[5] * y[5])
            if hit or n == 0.0:
                dirs_out[j, i, 0] = 0.0
                dirs_out[j, i, 1] = 0.0
                dirs_out[j, i, 2] = 0.0
            else:
                dirs_out[j, i, 0] = y[3] / n
                dirs_out[j, i, 1] = y[4] / n
                dirs_out[j, i, 2] = y[5] / n
