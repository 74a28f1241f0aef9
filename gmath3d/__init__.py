"""
GMath3D – линейная алгебра для real‑time 3‑D рендера:
векторы 2/3/4, квадратные матрицы 2×2/3×3/4×4 и кватернионы (float32).
"""

from gmath3d.utils import logger
from gmath3d.math import (
    Vec2, Vec3, Vec4,
    Mat2, Mat3, Mat4,
    IDENTITY2, IDENTITY3, IDENTITY4,
    Quat,
    orientation_matrix, view_direction, projection_transform,
)
from gmath3d.multithread import TaskPool
from gmath3d.scene import Camera, Vertex, Triangle, Object

__version__ = "1.0.0"

__all__ = [
    "Vec2", "Vec3", "Vec4",
    "Mat2", "Mat3", "Mat4",
    "IDENTITY2", "IDENTITY3", "IDENTITY4",
    "Quat",
    "orientation_matrix", "view_direction", "projection_transform",
    "TaskPool",
    "Camera", "Vertex", "Triangle", "Object",
]
