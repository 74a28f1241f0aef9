"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Mat2, Mat3, Mat4, Quat.
"""

from gmath3d.math.vec2 import Vec2
from gmath3d.math.vec3 import Vec3
from gmath3d.math.vec4 import Vec4
from gmath3d.math.mat2 import Mat2, IDENTITY2
from gmath3d.math.mat3 import Mat3, IDENTITY3
from gmath3d.math.mat4 import Mat4, IDENTITY4
from gmath3d.math.quat import Quat
from gmath3d.math.view import orientation_matrix, view_direction, projection_transform

__all__ = [
    "Vec2", "Vec3", "Vec4",
    "Mat2", "Mat3", "Mat4",
    "IDENTITY2", "IDENTITY3", "IDENTITY4",
    "Quat",
    "orientation_matrix", "view_direction", "projection_transform",
]
