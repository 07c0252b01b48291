# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: маленькие контексты и планировщики,
чтобы полный проход предвычисления занимал доли секунды.
"""

import pytest

from gravlens.core.context import SimulationContext, HostBridge
from gravlens.lensing import (
    PinholeCamera, DistortionPrecomputer, PrecomputeScheduler, SimulationParameters
)


class ProgressRecorder:
    """Наблюдатель, который просто запоминает все уведомления."""
    def __init__(self):
        self.calls = []

    def __call__(self, percentage, ready):
        self.calls.append((percentage, ready))


@pytest.fixture
def recorder():
    return ProgressRecorder()


@pytest.fixture
def make_sim(recorder):
    """Фабрика (ctx, scheduler, bridge) для сетки width×height."""
    def _make(width=8, height=12, rs=4.0, distance=150.0, camera=None,
              rows_per_tick=5):
        camera = camera or PinholeCamera()
        ctx = SimulationContext(width, height, SimulationParameters(rs, distance))
        precomputer = DistortionPrecomputer(width, height, camera)
        scheduler = PrecomputeScheduler(precomputer, rows_per_tick, observer=recorder)
        return ctx, scheduler, HostBridge(ctx, scheduler)
    return _make
