"""
Физика: интегратор RK4, модель фотона и numba‑ядра трассировки.
"""

from gravlens.physics.ode import rk4_step
from gravlens.physics.geodesic import PhotonState, geodesic_derivative, adaptive_step

__all__ = ["rk4_step", "PhotonState", "geodesic_derivative", "adaptive_step"]
