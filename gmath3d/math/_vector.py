# gmath3d/math/_vector.py
"""
Общая часть векторов Vec2/Vec3/Vec4.

Компоненты хранятся в неизменяемом ndarray float32 в объявленном порядке,
поэтому `to_bytes()` можно сразу отдавать в GPU‑буфер.
"""

import numbers
from typing import Iterable, List, Tuple

import numpy as np

from gmath3d.utils.config import epsilon
from gmath3d.utils.logger import logger


def frozen_array(values, shape=None) -> np.ndarray:
    """float32‑копия `values`, закрытая на запись."""
    with np.errstate(over="ignore"):
        arr = np.array(values, dtype=np.float32)
    if shape is not None:
        arr = arr.reshape(shape)
    arr.flags.writeable = False
    return arr


def is_scalar(value) -> bool:
    return isinstance(value, numbers.Real)


class VectorBase:
    """Вектор фиксированной длины SIZE (float32, неизменяемый)."""

    __slots__ = ("_v",)

    # numpy‑скаляр слева от оператора отдаёт управление __rmul__
    __array_ufunc__ = None

    SIZE = 0

    @classmethod
    def _new(cls, array) -> "VectorBase":
        obj = object.__new__(cls)
        obj._v = frozen_array(array)
        return obj

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "VectorBase":
        """Позиционное заполнение: values[0] → первая компонента и т.д."""
        values = list(values)
        if len(values) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} expects {cls.SIZE} components, got {len(values)}"
            )
        return cls(*values)

    # -----------------------------------------------------------------
    # арифметика (операции возвращают новый объект)
    # -----------------------------------------------------------------
    def _require_same(self, other, op: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"unsupported operand types for {op}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def add(self, other):
        self._require_same(other, "add")
        return self._new(self._v + other._v)

    def sub(self, other):
        self._require_same(other, "sub")
        return self._new(self._v - other._v)

    def scale(self, scalar: float):
        if not is_scalar(scalar):
            raise TypeError(f"{type(self).__name__} can only be scaled by a real number")
        return self._new(self._v * np.float32(scalar))

    def div(self, scalar: float):
        """Деление на скаляр; деление на 0 даёт inf/NaN, а не исключение."""
        if not is_scalar(scalar):
            raise TypeError(f"{type(self).__name__} can only be divided by a real number")
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._new(self._v / np.float32(scalar))

    def neg(self):
        return self._new(-self._v)

    def dot(self, other) -> float:
        """Скалярное произведение."""
        self._require_same(other, "dot")
        return float(np.dot(self._v, other._v))

    def magnitude(self) -> float:
        """Евклидова длина."""
        return float(np.linalg.norm(self._v))

    def normalize(self):
        """Вектор, делённый на свою длину. Для нулевого вектора – NaN."""
        n = self.magnitude()
        if n == 0.0:
            logger.debug(f"[{type(self).__name__}] normalize() of a zero vector")
        return self.div(n)

    # операторы – тонкая обёртка над именованными методами
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

    def __neg__(self):
        return self.neg()

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_tuple()))

    def isclose(self, other, eps: float = None) -> bool:
        """Покомпонентное сравнение с допуском (по умолчанию math.epsilon)."""
        self._require_same(other, "isclose")
        eps = epsilon() if eps is None else eps
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=eps))

    # -----------------------------------------------------------------
    # доступ к компонентам и приведение типов
    # -----------------------------------------------------------------
    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __iter__(self):
        return iter(self._v.tolist())

    def __len__(self) -> int:
        return self.SIZE

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self._v.tolist())

    def to_list(self) -> List[float]:
        return self._v.tolist()

    def as_np(self) -> np.ndarray:
        """Копия ndarray (float32)."""
        return self._v.copy()

    def to_bytes(self) -> bytes:
        """Упакованные little‑endian float32 в объявленном порядке."""
        return self._v.astype("<f4").tobytes()

    def __repr__(self) -> str:
        body = ", ".join(f"{c:.3f}" for c in self._v.tolist())
        return f"{type(self).__name__}({body})"
