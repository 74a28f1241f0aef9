# gmath3d/math/mat2.py
from gmath3d.math._matrix import MatrixBase
from gmath3d.math.vec2 import Vec2


class Mat2(MatrixBase):
    __slots__ = ()

    SIZE = 2
    VECTOR = Vec2

    def determinant(self) -> float:
        (a, b), (c, d) = self._rows()
        return a * d - b * c

    def inverse(self) -> "Mat2":
        """Диагональ меняется местами, внедиагональные – со знаком минус, всё / det."""
        (a, b), (c, d) = self._rows()
        return Mat2._from_adjugate([[d, -b], [-c, a]], self.determinant())


IDENTITY2 = Mat2.identity()
