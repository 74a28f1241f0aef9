# gmath3d/math/mat3.py
"""
Матрица 3×3. Используется камерой (ориентация вида) и как минор для Mat4.
"""

from gmath3d.math._matrix import MatrixBase
from gmath3d.math.mat2 import Mat2
from gmath3d.math.vec3 import Vec3


class Mat3(MatrixBase):
    __slots__ = ()

    SIZE = 3
    VECTOR = Vec3
    SMALLER = Mat2

    def determinant(self) -> float:
        """Правило Саррюса: три прямые диагонали минус три обратные."""
        (a, b, c), (d, e, f), (g, h, i) = self._rows()
        return (a * e * i + b * f * g + c * d * h
                - c * e * g - b * d * i - a * f * h)

    def inverse(self) -> "Mat3":
        """Транспонированная матрица алгебраических дополнений / det."""
        (a, b, c), (d, e, f), (g, h, i) = self._rows()
        cofactors = [
            [e * i - f * h, -(d * i - f * g), d * h - e * g],
            [-(b * i - c * h), a * i - c * g, -(a * h - b * g)],
            [b * f - c * e, -(a * f - c * d), a * e - b * d],
        ]
        adjugate = [list(col) for col in zip(*cofactors)]
        return Mat3._from_adjugate(adjugate, self.determinant())


IDENTITY3 = Mat3.identity()
