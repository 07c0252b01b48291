"""
Математический суб‑пакет: Vec3, Mat3, Grid2D.
"""

from gravlens.math.vec3 import Vec3
from gravlens.math.mat3 import Mat3
from gravlens.math.grid import Grid2D

__all__ = ["Vec3", "Mat3", "Grid2D"]
