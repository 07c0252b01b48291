# gravlens/lensing/scheduler.py
"""
Инкрементальный планировщик предвычисления.

Дорогой проход по всей карте размазывается по кадрам: за один ``tick``
обрабатывается не больше ``rows_per_tick`` строк, так что стоимость
тика ограничена rows_per_tick × width × max_steps.

Состояния::

    IDLE ──reset()──▶ COMPUTING ──(последняя строка)──▶ READY
                         ▲                                │
                         └──────────── reset() ◀──────────┘

``reset`` посреди прохода просто начинает с нулевой строки – уже
посчитанные строки не сохраняются. Пока идёт COMPUTING, карту читать
нельзя.
"""

import math
from enum import Enum, auto
from typing import Callable, Optional

from gravlens.lensing.precompute import DistortionPrecomputer
from gravlens.utils.logger import logger
from gravlens.utils.profiler import Profiler

# (percentage 0–100, ready)
ProgressObserver = Callable[[float, bool], None]


class Phase(Enum):
    IDLE = auto()
    COMPUTING = auto()
    READY = auto()


class PrecomputeState:
    """Курсор строки и фаза; живёт в SimulationContext."""
    def __init__(self, height: int):
        self.height = int(height)
        self.row_cursor = 0
        self.phase = Phase.IDLE

    @property
    def progress(self) -> float:
        return self.row_cursor / self.height

    @property
    def percentage(self) -> float:
        return self.progress * 100.0

    @property
    def is_ready(self) -> bool:
        return self.phase is Phase.READY

    def __repr__(self):
        return f"PrecomputeState({self.phase.name}, row={self.row_cursor}/{self.height})"


class PrecomputeScheduler:
    """Прогоняет DistortionPrecomputer по кускам, строка за строкой."""

    def __init__(self, precomputer: DistortionPrecomputer, rows_per_tick: int = 5,
                 observer: Optional[ProgressObserver] = None):
        if rows_per_tick <= 0:
            raise ValueError("rows_per_tick must be positive")
        self.precomputer = precomputer
        self.rows_per_tick = int(rows_per_tick)
        self.observer = observer

    def ticks_per_pass(self) -> int:
        return math.ceil(self.precomputer.height / self.rows_per_tick)

    def _notify(self, state: PrecomputeState) -> None:
        if self.observer is not None:
            self.observer(state.percentage, state.is_ready)

    # -----------------------------------------------------------------
    def reset(self, ctx) -> None:
        """Начать проход заново (вызывается при любой смене параметров)."""
        state = ctx.precompute
        if state.phase is Phase.COMPUTING and state.row_cursor > 0:
            logger.info(
                f"[Scheduler] Discarding {state.row_cursor} computed rows, restarting"
            )
        state.row_cursor = 0
        state.phase = Phase.COMPUTING
        logger.info(
            f"[Scheduler] Calculating... rs={ctx.params.rs}, "
            f"distance={ctx.params.camera_distance}"
        )
        self._notify(state)

    def tick(self, ctx) -> float:
        """Обработать очередную порцию строк; вернуть прогресс 0..1."""
        state = ctx.precompute
        if state.phase is not Phase.COMPUTING:
            return state.progress

        start = state.row_cursor
        stop = min(start + self.rows_per_tick, state.height)
        with Profiler(f"rows {start}-{stop}"):
            self.precomputer.compute_rows(ctx.distortion_map, start, stop, ctx.params)
        state.row_cursor = stop

        if state.row_cursor >= state.height:
            state.phase = Phase.READY
            logger.info(
                f"[Scheduler] Calculation finished ({ctx.distortion_map.hit_count()} hit pixels)"
            )
        self._notify(state)
        return state.progress

    def run_to_completion(self, ctx) -> int:
        """Крутить tick до READY; вернуть число тиков."""
        ticks = 0
        while ctx.precompute.phase is Phase.COMPUTING:
            self.tick(ctx)
            ticks += 1
        return ticks
