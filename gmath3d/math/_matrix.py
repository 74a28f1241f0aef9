# gmath3d/math/_matrix.py
"""
Общая часть квадратных матриц Mat2/Mat3/Mat4.

Хранение – неизменяемый ndarray float32 формы (SIZE, SIZE), row‑major.
Конструктор принимает плоский список из SIZE² чисел (строка за строкой)
или вложенный список; без аргументов – единичная матрица.
"""

import numbers
from typing import List, Tuple

import numpy as np

from gmath3d.math._vector import frozen_array, is_scalar
from gmath3d.utils.config import epsilon
from gmath3d.utils.logger import logger


class MatrixBase:
    __slots__ = ("_m",)
    __array_ufunc__ = None

    SIZE = 0
    VECTOR = None       # тип вектора той же размерности
    SMALLER = None      # тип матрицы‑минора

    def __init__(self, array=None):
        if array is None:
            self._m = frozen_array(np.identity(self.SIZE))
            return
        values = np.asarray(array, dtype=np.float64)
        if values.size != self.SIZE * self.SIZE:
            raise ValueError(
                f"{type(self).__name__} expects {self.SIZE * self.SIZE} components, "
                f"got {values.size}"
            )
        self._m = frozen_array(values, (self.SIZE, self.SIZE))

    @classmethod
    def _new(cls, array) -> "MatrixBase":
        obj = object.__new__(cls)
        obj._m = frozen_array(array, (cls.SIZE, cls.SIZE))
        return obj

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_values(cls, values):
        """Заполнение по строкам: values[(r‑1)·K + (c‑1)] → элемент (r, c)."""
        return cls(list(values))

    @classmethod
    def _from_adjugate(cls, adjugate, determinant: float):
        """adj / det. Вырожденная матрица даёт inf/NaN, без исключения."""
        if determinant == 0.0:
            logger.debug(f"[{cls.__name__}] inverse() of a singular matrix")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            inv = np.asarray(adjugate, dtype=np.float64) / np.float64(determinant)
        return cls._new(inv)

    def _rows(self) -> List[List[float]]:
        # float64‑копия для замкнутых формул
        return self._m.tolist()

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def _require_same(self, other, op: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"unsupported operand types for {op}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def add(self, other):
        self._require_same(other, "add")
        return self._new(self._m + other._m)

    def sub(self, other):
        self._require_same(other, "sub")
        return self._new(self._m - other._m)

    def scale(self, scalar: float):
        if not is_scalar(scalar):
            raise TypeError(f"{type(self).__name__} can only be scaled by a real number")
        return self._new(self._m * np.float32(scalar))

    def div(self, scalar: float):
        if not is_scalar(scalar):
            raise TypeError(f"{type(self).__name__} can only be divided by a real number")
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._new(self._m / np.float32(scalar))

    def neg(self):
        return self._new(-self._m)

    def mul(self, other):
        """
        Матрица × матрица того же размера → матрица;
        матрица × вектор той же размерности → вектор.
        Остальные сочетания – TypeError.
        """
        if type(other) is type(self):
            return self._new(self._m @ other._m)
        if type(other) is self.VECTOR:
            return self.VECTOR._new(self._m @ other._v)
        raise TypeError(
            f"unsupported operand types for mul: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def pow(self, exponent: int):
        """
        Целая неотрицательная степень. pow(0) – единичная матрица.
        Возведение в квадрат по двоичному разложению показателя.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise TypeError(f"exponent must be a non-negative int, got {exponent!r}")
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")

        result = self.identity()
        base = self
        exponent = int(exponent)
        while exponent:
            if exponent & 1:
                result = result.mul(base)
            exponent >>= 1
            if exponent:
                base = base.mul(base)
        return result

    def transpose(self):
        return self._new(self._m.T)

    def minor(self, row: int, col: int):
        """Подматрица без строки `row` и столбца `col` (индексы с нуля)."""
        if self.SMALLER is None:
            raise TypeError(f"{type(self).__name__} has no matrix minors")
        sub = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return self.SMALLER._new(sub)

    def determinant(self) -> float:
        raise NotImplementedError

    def inverse(self):
        raise NotImplementedError

    # операторы
    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return self.div(scalar)

    def __matmul__(self, other):
        if type(other) is not type(self) and type(other) is not self.VECTOR:
            return NotImplemented
        return self.mul(other)

    def __neg__(self):
        return self.neg()

    def __pow__(self, exponent):
        return self.pow(exponent)

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_flat()))

    def isclose(self, other, eps: float = None) -> bool:
        self._require_same(other, "isclose")
        eps = epsilon() if eps is None else eps
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=eps))

    # -----------------------------------------------------------------
    # доступ и приведение типов
    # -----------------------------------------------------------------
    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return float(self._m[row, col])

    def to_list(self) -> List[List[float]]:
        return self._m.tolist()

    def to_tuple(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(tuple(row) for row in self._m.tolist())

    def to_flat(self) -> Tuple[float, ...]:
        """Плоский кортеж по строкам – вход для from_values()."""
        return tuple(self._m.ravel().tolist())

    def as_np(self) -> np.ndarray:
        return self._m.copy()

    def to_bytes(self) -> bytes:
        """Упакованные little‑endian float32, строка за строкой."""
        return self._m.astype("<f4").tobytes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m.tolist()})"

    def __str__(self) -> str:
        return "\n".join("   ".join(f"{c:g}" for c in row) for row in self._m.tolist())
