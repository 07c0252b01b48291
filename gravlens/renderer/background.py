# gravlens/renderer/background.py
"""
Цветовая модель фона: направление в мире → RGB (float, без клампа).

* Если загружено фоновое изображение – плоская проекция на экран,
  стоящий «за» чёрной дырой (направления с z ≤ 0 – чёрные).
* Иначе – процедурное звёздное небо: два слоя звёзд по сеточному хэшу
  и размытая полоса «Млечного пути» около плоскости y = 0.

Функции чистые: одинаковые (направление, фон) дают одинаковый цвет.
Всё векторизовано: принимается массив формы (..., 3).
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from gravlens.math.vec3 import Vec3

PROJECTION_SCALE = 0.15

SPACE_COLOR = np.array([0.02, 0.02, 0.05])

# (масштаб сетки, смещение, порог, цвет, яркость)
STAR_LAYERS = (
    (100.0, 0.0, 0.98, np.array([1.0, 1.0, 1.0]), 0.8),
    (50.0, 100.0, 0.99, np.array([0.8, 0.9, 1.0]), 1.5),
)

BAND_COLOR = np.array([0.1, 0.05, 0.2])
BAND_SHARPNESS = 10.0
BAND_NOISE_FREQUENCY = 5.0


class BackgroundImage:
    """RGBA8‑картинка фона, row‑major, width×height."""

    __slots__ = ("width", "height", "rgba")

    def __init__(self, width: int, height: int, rgba: bytes):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Background size must be positive, got {width}x{height}")
        data = bytes(rgba)
        if len(data) != width * height * 4:
            raise ValueError(
                f"Background buffer has {len(data)} bytes, expected {width * height * 4}"
            )
        self.width = width
        self.height = height
        self.rgba = data

    @property
    def pixels(self) -> np.ndarray:
        """Read‑only view формы (height, width, 4)."""
        return np.frombuffer(self.rgba, dtype=np.uint8).reshape(self.height, self.width, 4)

    @property
    def aspect(self) -> float:
        return self.height / self.width

    def __repr__(self):
        return f"BackgroundImage({self.width}x{self.height})"


def hash13(x, y, z):
    """Псевдослучайное значение в [0, 1) по координатам ячейки."""
    p = np.sin(x * 12.9898 + y * 78.233 + z * 37.719) * 43758.5453
    return p - np.floor(p)


def _project_image(d: np.ndarray, bg: BackgroundImage) -> np.ndarray:
    out = np.zeros(d.shape, dtype=np.float64)
    x, y, z = d[..., 0], d[..., 1], d[..., 2]
    front = z > 0.0
    safe_z = np.where(front, z, 1.0)

    u = 0.5 + (x / safe_z) * PROJECTION_SCALE * bg.aspect
    v = 0.5 - (y / safe_z) * PROJECTION_SCALE
    inside = front & (u >= 0.0) & (u <= 1.0) & (v >= 0.0) & (v <= 1.0)

    tx = np.clip((u[inside] * (bg.width - 1)).astype(np.int64), 0, bg.width - 1)
    ty = np.clip((v[inside] * (bg.height - 1)).astype(np.int64), 0, bg.height - 1)
    out[inside] = bg.pixels[ty, tx, :3] / 255.0
    return out


def _starfield(d: np.ndarray) -> np.ndarray:
    color = np.empty(d.shape, dtype=np.float64)
    color[...] = SPACE_COLOR

    for scale, offset, threshold, tint, brightness in STAR_LAYERS:
        cell = np.floor(d * scale + offset)
        h = hash13(cell[..., 0], cell[..., 1], cell[..., 2])
        intensity = np.where(h > threshold, (h - threshold) / (1.0 - threshold), 0.0)
        color += (intensity * brightness)[..., np.newaxis] * tint

    x, y, z = d[..., 0], d[..., 1], d[..., 2]
    band = np.exp(-BAND_SHARPNESS * y * y)
    noise = np.abs(np.sin(x * BAND_NOISE_FREQUENCY) * np.cos(z * BAND_NOISE_FREQUENCY))
    color += (band * (0.5 + 0.5 * noise))[..., np.newaxis] * BAND_COLOR
    return color


def shade_directions(directions, background: Optional[BackgroundImage] = None) -> np.ndarray:
    """Цвета для массива направлений формы (..., 3)."""
    d = np.asarray(directions, dtype=np.float64)
    flat = d.reshape(-1, 3)
    if background is not None:
        rgb = _project_image(flat, background)
    else:
        rgb = _starfield(flat)
    return rgb.reshape(d.shape)


class ColorModel:
    """Держит текущий фон; сама модель – ``shade_directions``."""
    def __init__(self, background: Optional[BackgroundImage] = None):
        self.background = background

    def shade(self, directions) -> np.ndarray:
        return shade_directions(directions, self.background)

    def color(self, direction: Vec3) -> Vec3:
        return Vec3.from_np(self.shade(direction.as_np()[np.newaxis, :])[0])
