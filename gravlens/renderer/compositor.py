# gravlens/renderer/compositor.py
"""
Сборка кадра из готовой карты искажений.

1️⃣ Основной вид: захваченные пиксели – чёрные, остальные –
   локальное направление ухода, повёрнутое текущей ориентацией камеры,
   → цветовая модель.
2️⃣ Вставка‑референс (без гравитации): уменьшенный широкоугольный вид
   с прямыми лучами, тот же поворот, белая рамка в 1 пиксель; рисуется
   поверх основного изображения в правом верхнем углу.
"""

import numpy as np
from PIL import Image

from gravlens.lensing.camera import PinholeCamera
from gravlens.math.grid import Grid2D
from gravlens.math.mat3 import Mat3
from gravlens.utils.logger import logger


class PixelBuffer(Grid2D):
    """RGBA8‑буфер кадра, row‑major, width×height."""

    __slots__ = ()

    def __init__(self, width: int, height: int):
        super().__init__(height, width, (4,), dtype=np.uint8)
        self.clear()

    @property
    def width(self) -> int:
        return self.cols

    @property
    def height(self) -> int:
        return self.rows

    def clear(self) -> None:
        """Чёрный непрозрачный кадр."""
        self.array[..., :3] = 0
        self.array[..., 3] = 255

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.array)


def to_rgb8(colors: np.ndarray) -> np.ndarray:
    return (255.99 * np.clip(colors, 0.0, 1.0)).astype(np.uint8)


class FrameCompositor:
    """Рисует основной вид и вставку в PixelBuffer."""

    def __init__(self, width: int, height: int, camera: PinholeCamera = None,
                 inset_scale: int = 4, inset_margin: int = 20):
        self.width = int(width)
        self.height = int(height)
        self.camera = camera or PinholeCamera()
        self.inset_scale = int(inset_scale)
        self.inset_margin = int(inset_margin)
        self._inset_warned = False

    # -----------------------------------------------------------------
    def inset_rect(self):
        """(x, y, w, h) вставки или None, если она не помещается."""
        w = self.width // self.inset_scale
        h = self.height // self.inset_scale
        x = self.width - w - self.inset_margin
        y = self.inset_margin
        if w < 3 or h < 3 or x < 0 or y + h > self.height:
            return None
        return x, y, w, h

    # -----------------------------------------------------------------
    def compose(self, ctx, buffer: PixelBuffer) -> bool:
        """Собрать кадр; False (буфер не тронут), если карта не готова."""
        if not ctx.precompute.is_ready:
            return False
        dmap = ctx.distortion_map
        if (buffer.width, buffer.height) != (self.width, self.height) or \
                (dmap.width, dmap.height) != (self.width, self.height):
            raise ValueError(
                f"Compositor is {self.width}x{self.height}, got buffer "
                f"{buffer.width}x{buffer.height} and map {dmap.width}x{dmap.height}"
            )

        rotation = ctx.orientation.rotation()
        world = rotation.apply_many(dmap.directions.array)
        rgb = ctx.color_model.shade(world)
        rgb[dmap.hits.array] = 0.0

        px = buffer.array
        px[..., :3] = to_rgb8(rgb)
        px[..., 3] = 255

        self._compose_inset(ctx, buffer, rotation)
        return True

    def _compose_inset(self, ctx, buffer: PixelBuffer, rotation: Mat3) -> None:
        rect = self.inset_rect()
        if rect is None:
            if not self._inset_warned:
                logger.debug(
                    f"[Compositor] Reference view does not fit into "
                    f"{self.width}x{self.height}, skipped"
                )
                self._inset_warned = True
            return
        x, y, w, h = rect

        local = self.camera.ray_directions(w, h)
        rgb = ctx.color_model.shade(rotation.apply_many(local))

        region = buffer.region(y, x, h, w)
        region[..., :3] = to_rgb8(rgb)
        region[0, :, :3] = 255
        region[-1, :, :3] = 255
        region[:, 0, :3] = 255
        region[:, -1, :3] = 255
        region[..., 3] = 255
