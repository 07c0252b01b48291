# gravlens/physics/ode.py
"""
Метод Рунге‑Кутты 4‑го порядка.

Состояние – любой объект, поддерживающий ``x + y`` и ``x * float``
(Vec3, PhotonState, numpy‑массивы). Функция написана так, чтобы её
можно было скомпилировать numba (``gravlens.physics.kernels``): тогда
``func`` – тоже numba‑функция, а ``args`` – её дополнительные параметры.
"""

from typing import Callable, TypeVar

State = TypeVar("State")


def rk4_step(x: State, t: float, dt: float,
             func: Callable[..., State], *args) -> State:
    """Один шаг RK4 для dx/dt = func(x, t, *args); точность зависит только от dt."""
    k1 = func(x, t, *args)
    k2 = func(x + k1 * (dt * 0.5), t + dt * 0.5, *args)
    k3 = func(x + k2 * (dt * 0.5), t + dt * 0.5, *args)
    k4 = func(x + k3 * dt, t + dt, *args)
    return x + (k1 + k2 * 2.0 + k3 * 2.0 + k4) * (dt / 6.0)
