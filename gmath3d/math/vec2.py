# gmath3d/math/vec2.py
"""
2‑мерный вектор (float32).
"""

from gmath3d.math._vector import VectorBase, frozen_array


class Vec2(VectorBase):
    __slots__ = ()

    SIZE = 2

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = frozen_array([x, y])

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])
