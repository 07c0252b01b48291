"""
Ядро хоста: контекст симуляции и мост к внешнему миру.

``InputManager`` (glfw) импортируется напрямую из ``gravlens.core.input``.
"""

from gravlens.core.context import (
    CameraOrientation, SimulationContext, HostBridge
)
from gravlens.core.timer import Timer

__all__ = ["CameraOrientation", "SimulationContext", "HostBridge", "Timer"]
