"""
gravlens – визуализация гравитационного линзирования около
смоделированной чёрной дыры.

Лучи трассируются один раз на пиксель (карта искажений), а при
вращении камеры кэш только поворачивается – пересчёт нужен лишь при
смене параметров поля.

``Engine`` и ``Window`` не импортируются здесь, чтобы ядро работало
без glfw/PyOpenGL; берите их из ``gravlens.engine`` / ``gravlens.window``.
"""

from gravlens.utils import logger
from gravlens.math import Vec3, Mat3, Grid2D
from gravlens.physics import rk4_step, PhotonState, geodesic_derivative
from gravlens.lensing import (
    PinholeCamera,
    DistortionMap,
    DistortionMapEntry,
    SimulationParameters,
    DistortionPrecomputer,
    Phase,
    PrecomputeScheduler,
)
from gravlens.renderer import (
    BackgroundImage, ColorModel, shade_directions, FrameCompositor, PixelBuffer
)
from gravlens.core import CameraOrientation, SimulationContext, HostBridge

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Vec3",
    "Mat3",
    "Grid2D",
    "rk4_step",
    "PhotonState",
    "geodesic_derivative",
    "PinholeCamera",
    "DistortionMap",
    "DistortionMapEntry",
    "SimulationParameters",
    "DistortionPrecomputer",
    "Phase",
    "PrecomputeScheduler",
    "BackgroundImage",
    "ColorModel",
    "shade_directions",
    "FrameCompositor",
    "PixelBuffer",
    "CameraOrientation",
    "SimulationContext",
    "HostBridge",
]
