# gmath3d/math/vec4.py
"""
4‑мерный вектор (float32). Полезен, например, для RGBA‑цветов
и однородных координат.
"""

from gmath3d.math._vector import VectorBase, frozen_array


class Vec4(VectorBase):
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ()

    SIZE = 4

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = frozen_array([x, y, z, w])

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])
