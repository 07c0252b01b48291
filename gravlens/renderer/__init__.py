"""
Цветовая модель, сборка кадра и презентеры.

``GLPresenter`` не экспортируется здесь: он тянет PyOpenGL и нужен
только оконному режиму (см. ``gravlens.engine``).
"""

from gravlens.renderer.background import (
    BackgroundImage, ColorModel, shade_directions
)
from gravlens.renderer.compositor import FrameCompositor, PixelBuffer
from gravlens.renderer.base_presenter import BasePresenter
from gravlens.renderer.image_presenter import ImagePresenter

__all__ = [
    "BackgroundImage",
    "ColorModel",
    "shade_directions",
    "FrameCompositor",
    "PixelBuffer",
    "BasePresenter",
    "ImagePresenter",
]
