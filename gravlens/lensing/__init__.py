"""
Линзирование: камера‑обскура, карта искажений, предвычисление и
инкрементальный планировщик.
"""

from gravlens.lensing.camera import PinholeCamera
from gravlens.lensing.distortion import (
    DistortionMap, DistortionMapEntry, SimulationParameters
)
from gravlens.lensing.precompute import DistortionPrecomputer
from gravlens.lensing.scheduler import (
    Phase, PrecomputeState, PrecomputeScheduler, ProgressObserver
)

__all__ = [
    "PinholeCamera",
    "DistortionMap",
    "DistortionMapEntry",
    "SimulationParameters",
    "DistortionPrecomputer",
    "Phase",
    "PrecomputeState",
    "PrecomputeScheduler",
    "ProgressObserver",
]
