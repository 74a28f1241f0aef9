# gmath3d/math/view.py
"""
Матрицы вида для камеры с двумя углами (горизонтальный h, вертикальный v).

Камера вызывает orientation_matrix() при изменении углов и читает
результат каждый кадр.
"""

from math import cos, sin

import numpy as np

from gmath3d.math.mat3 import Mat3
from gmath3d.math.vec3 import Vec3
from gmath3d.utils.logger import check_finite


def orientation_matrix(angle_h: float, angle_v: float) -> Mat3:
    ch, sh = cos(angle_h), sin(angle_h)
    cv, sv = cos(angle_v), sin(angle_v)
    return Mat3([
        ch, sh * sv, -sh * cv,
        0.0, cv, sv,
        sh, -ch * sv, ch * cv,
    ])


def view_direction(angle_h: float, angle_v: float) -> Vec3:
    """Единичный вектор направления взгляда."""
    return Vec3(
        cos(angle_h) * sin(angle_v),
        sin(angle_h),
        cos(angle_h) * cos(angle_v),
    )


def projection_transform(direction: Vec3) -> Mat3:
    """
    Перспективное деление вдоль `direction`:
        [[1, 0, -dx/dz], [0, 1, -dy/dz], [0, 0, 1/dz]]
    При dz == 0 результат содержит inf/NaN.
    """
    dx, dy, dz = direction.to_tuple()
    with np.errstate(divide="ignore", invalid="ignore"):
        dz = np.float64(dz)
        values = [
            1.0, 0.0, -dx / dz,
            0.0, 1.0, -dy / dz,
            0.0, 0.0, 1.0 / dz,
        ]
    check_finite(values, "projection_transform")
    return Mat3(values)
