# gravlens/core/context.py
"""
Состояние симуляции и «мост» к хосту.

Всё изменяемое состояние (параметры поля, ориентация камеры, фон,
карта искажений, курсор предвычисления) собрано в одном явном объекте
``SimulationContext``; глобальных переменных нет. ``HostBridge`` –
единственная точка, через которую хост (окно, CLI, тесты) меняет это
состояние:

* смена rs или расстояния камеры → ``scheduler.reset`` (только если
  значение действительно изменилось);
* смена фона и вращение камеры карту не трогают.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from gravlens.lensing.distortion import DistortionMap, SimulationParameters
from gravlens.lensing.scheduler import PrecomputeScheduler, PrecomputeState
from gravlens.math.mat3 import Mat3
from gravlens.renderer.background import BackgroundImage, ColorModel
from gravlens.utils.logger import logger

DRAG_SENSITIVITY = 0.005
PITCH_LIMIT = 1.5


@dataclass
class CameraOrientation:
    """yaw/pitch в радианах; на валидность карты не влияет."""
    yaw: float = 0.0
    pitch: float = 0.0

    def set(self, yaw: float, pitch: float) -> None:
        self.yaw = yaw
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))

    def apply_drag(self, dx: float, dy: float) -> None:
        self.set(self.yaw - dx * DRAG_SENSITIVITY, self.pitch + dy * DRAG_SENSITIVITY)

    def rotation(self) -> Mat3:
        return Mat3.from_yaw_pitch(self.yaw, self.pitch)


class SimulationContext:
    """Единственный владелец изменяемого состояния симуляции."""

    def __init__(self, width: int, height: int,
                 params: Optional[SimulationParameters] = None,
                 background: Optional[BackgroundImage] = None):
        self.params = params or SimulationParameters()
        self.orientation = CameraOrientation()
        self.color_model = ColorModel(background)
        self.distortion_map = DistortionMap(width, height)
        self.precompute = PrecomputeState(height)

    @property
    def width(self) -> int:
        return self.distortion_map.width

    @property
    def height(self) -> int:
        return self.distortion_map.height


class HostBridge:
    """Сеттеры, которые вызывает хост; держит контекст и планировщик."""

    def __init__(self, ctx: SimulationContext, scheduler: PrecomputeScheduler):
        self.ctx = ctx
        self.scheduler = scheduler

    def start(self) -> None:
        self.scheduler.reset(self.ctx)

    # -----------------------------------------------------------------
    # параметры поля – инвалидируют карту
    # -----------------------------------------------------------------
    def set_field_strength(self, value: float) -> bool:
        value = float(value)
        if value == self.ctx.params.rs:
            return False
        self.ctx.params = replace(self.ctx.params, rs=value)
        logger.info(f"[HostBridge] rs -> {value}")
        self.scheduler.reset(self.ctx)
        return True

    def set_camera_distance(self, value: float) -> bool:
        value = float(value)
        if value == self.ctx.params.camera_distance:
            return False
        self.ctx.params = replace(self.ctx.params, camera_distance=value)
        logger.info(f"[HostBridge] camera distance -> {value}")
        self.scheduler.reset(self.ctx)
        return True

    # -----------------------------------------------------------------
    # фон и ориентация – карту не трогают
    # -----------------------------------------------------------------
    def set_background_image(self, width: int, height: int, rgba: bytes) -> None:
        self.ctx.color_model.background = BackgroundImage(width, height, rgba)
        logger.info(f"[HostBridge] Background image {width}x{height}")

    def clear_background_image(self) -> None:
        self.ctx.color_model.background = None

    def on_pointer_drag(self, dx: float, dy: float) -> None:
        self.ctx.orientation.apply_drag(dx, dy)

    def reset_orientation(self) -> None:
        self.ctx.orientation = CameraOrientation()

    # -----------------------------------------------------------------
    def progress(self) -> Tuple[float, bool]:
        state = self.ctx.precompute
        return state.percentage, state.is_ready
