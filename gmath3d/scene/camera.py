"""
Камера с двумя углами обзора.

Хранит позицию и углы; матрица ориентации пересчитывается только при
изменении углов, а читается каждый кадр.
"""

from typing import Optional

from gmath3d.math.mat3 import Mat3
from gmath3d.math.vec3 import Vec3
from gmath3d.math.view import orientation_matrix, projection_transform, view_direction


class Camera:
    def __init__(self, position: Vec3 = None, angle_h: float = 0.0, angle_v: float = 0.0,
                 scale_factor: float = 1.0, depth_factor: float = 1.0, name="Camera"):
        self.name = name
        self.position = position if position is not None else Vec3()
        self.scale_factor = scale_factor
        self.depth_factor = depth_factor
        self._angle_h = float(angle_h)
        self._angle_v = float(angle_v)
        self._view: Optional[Mat3] = None

    @property
    def angles(self):
        return self._angle_h, self._angle_v

    def set_angles(self, angle_h: float, angle_v: float) -> None:
        self._angle_h = float(angle_h)
        self._angle_v = float(angle_v)
        self._view = None

    def turn(self, delta_h: float, delta_v: float) -> None:
        """Повернуть камеру на приращения углов (например, от мыши)."""
        self.set_angles(self._angle_h + delta_h, self._angle_v + delta_v)

    def direction(self) -> Vec3:
        return view_direction(self._angle_h, self._angle_v)

    def view_matrix(self) -> Mat3:
        if self._view is None:
            self._view = orientation_matrix(self._angle_h, self._angle_v)
        return self._view

    def transform(self) -> Mat3:
        """Матрица перспективного деления вдоль направления взгляда."""
        return projection_transform(self.direction())

    def to_camera_space(self, point: Vec3) -> Vec3:
        """Точка мира → координаты камеры (сдвиг + ориентация)."""
        return self.view_matrix() @ (point - self.position)
