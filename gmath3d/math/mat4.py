# gmath3d/math/mat4.py
"""
Матрица 4×4. Определитель и обратная матрица считаются разложением
по алгебраическим дополнениям через миноры 3×3.
"""

import numpy as np

from gmath3d.math._matrix import MatrixBase
from gmath3d.math.mat3 import Mat3
from gmath3d.math.vec4 import Vec4


class Mat4(MatrixBase):
    __slots__ = ()

    SIZE = 4
    VECTOR = Vec4
    SMALLER = Mat3

    def determinant(self) -> float:
        """Разложение Лапласа по первому столбцу, знаки +, −, +, −."""
        column = self._m[:, 0].tolist()
        return sum(
            (-1) ** row * column[row] * self.minor(row, 0).determinant()
            for row in range(4)
        )

    def cofactor(self, row: int, col: int) -> float:
        return (-1) ** (row + col) * self.minor(row, col).determinant()

    def inverse(self) -> "Mat4":
        cofactors = np.array(
            [[self.cofactor(r, c) for c in range(4)] for r in range(4)],
            dtype=np.float64,
        )
        return Mat4._from_adjugate(cofactors.T, self.determinant())


IDENTITY4 = Mat4.identity()
