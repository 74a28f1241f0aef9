# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32, неизменяемый).
"""

import numpy as np

from gmath3d.math._vector import VectorBase, frozen_array


class Vec3(VectorBase):
    __slots__ = ()

    SIZE = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = frozen_array([x, y, z])

    # -------------------------------------------------
    # свойства (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # операции, которые есть только у Vec3
    # -------------------------------------------------
    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка)."""
        self._require_same(other, "cross")
        return Vec3._new(np.cross(self._v, other._v))

    def reflect(self, normal: "Vec3") -> "Vec3":
        """Отражение относительно плоскости с нормалью `normal` (нормаль не обязана быть единичной)."""
        self._require_same(normal, "reflect")
        with np.errstate(divide="ignore", invalid="ignore"):
            k = np.float32(2.0 * self.dot(normal)) / np.float32(normal.dot(normal))
        return self - normal * float(k)
