# gmath3d/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (r, i, j, k) с поддержкой:
# - создания из оси/угла (радианы),
# - умножения (произведение Гамильтона, i·j = k),
# - сопряжения и нормализации,
# - преобразования в 3×3 матрицу,
# - вращения точки вокруг оси / вокруг произвольного центра.
# ---------------------------------------------------------------

from math import cos, sin
from typing import Tuple

import numpy as np

from gmath3d.math._vector import frozen_array
from gmath3d.math.mat3 import Mat3
from gmath3d.math.vec3 import Vec3
from gmath3d.utils.config import epsilon


def _as_vec3(value) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3.from_values(value)


class Quat:
    __slots__ = ("_q",)
    __array_ufunc__ = None

    def __init__(self, r=1.0, i=0.0, j=0.0, k=0.0):
        self._q = frozen_array([r, i, j, k])

    @property
    def r(self) -> float:
        return float(self._q[0])

    @property
    def i(self) -> float:
        return float(self._q[1])

    @property
    def j(self) -> float:
        return float(self._q[2])

    @property
    def k(self) -> float:
        return float(self._q[3])

    @staticmethod
    def from_axis_angle(axis, angle: float) -> "Quat":
        """axis – Vec3 или 3‑элементный iterable, angle – в радианах."""
        half = 0.5 * angle
        n = _as_vec3(axis).normalize() * sin(half)
        return Quat(cos(half), n.x, n.y, n.z)

    @staticmethod
    def from_point(point) -> "Quat":
        """Чистый кватернион (0, x, y, z)."""
        p = _as_vec3(point)
        return Quat(0.0, p.x, p.y, p.z)

    # -----------------------------------------------------------
    #  Алгебра
    # -----------------------------------------------------------
    def mul(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона (правая система: i·j = k)."""
        if not isinstance(other, Quat):
            raise TypeError(
                f"unsupported operand types for mul: 'Quat' and '{type(other).__name__}'"
            )
        r1, i1, j1, k1 = self._q.tolist()
        r2, i2, j2, k2 = other._q.tolist()
        return Quat(
            r1 * r2 - i1 * i2 - j1 * j2 - k1 * k2,
            r1 * i2 + i1 * r2 + j1 * k2 - k1 * j2,
            r1 * j2 - i1 * k2 + j1 * r2 + k1 * i2,
            r1 * k2 + i1 * j2 - j1 * i2 + k1 * r2,
        )

    def __mul__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return self.mul(other)

    def conjugate(self) -> "Quat":
        r, i, j, k = self._q.tolist()
        return Quat(r, -i, -j, -k)

    def norm(self) -> float:
        return float(np.linalg.norm(self._q))

    def normalized(self) -> "Quat":
        n = self.norm()
        with np.errstate(divide="ignore", invalid="ignore"):
            return Quat(*(self._q / np.float32(n)))

    def vector(self) -> Vec3:
        """Векторная часть (i, j, k)."""
        return Vec3._new(self._q[1:])

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def to_mat3(self) -> Mat3:
        """3×3 матрица вращения (для единичного кватерниона)."""
        w, x, y, z = self._q.tolist()
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Mat3([
            1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy),
            2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx),
            2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy),
        ])

    def rotate_vector(self, vec) -> Vec3:
        """Сэндвич q · p · q*, возвращается векторная часть."""
        res = self * Quat.from_point(vec) * self.conjugate()
        return res.vector()

    @staticmethod
    def rotate(point, axis, angle: float) -> Vec3:
        """Поворот точки на `angle` радиан вокруг оси `axis`, проходящей через начало координат."""
        return Quat.from_axis_angle(axis, angle).rotate_vector(point)

    @staticmethod
    def rotate_offset(point, axis, offset, angle: float) -> Vec3:
        """Поворот вокруг оси, проходящей через точку `offset`."""
        offset = _as_vec3(offset)
        return Quat.rotate(_as_vec3(point) - offset, axis, angle) + offset

    # -----------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __hash__(self) -> int:
        return hash(("Quat", self.to_tuple()))

    def isclose(self, other: "Quat", eps: float = None) -> bool:
        if not isinstance(other, Quat):
            raise TypeError(
                f"unsupported operand types for isclose: 'Quat' and '{type(other).__name__}'"
            )
        eps = epsilon() if eps is None else eps
        return bool(np.allclose(self._q, other._q, rtol=0.0, atol=eps))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._q.tolist())

    def as_np(self) -> np.ndarray:
        return self._q.copy()

    def __repr__(self):
        return f"Quat({self.r:.3f}, {self.i:.3f}, {self.j:.3f}, {self.k:.3f})"
