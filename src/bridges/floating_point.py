"""
Floating Point Bridge — float как поле

Real — подкласс float, объявляющий Field и AbsoluteValueDecomposable:
- zero = 0.0, one = 1.0
- unit: None для нуля (включая -0.0), иначе Unit(x, 1/x)
- арифметика возвращает Real (а не float), чтобы результат оставался в иерархии

Численный анализ НЕ выполняется: нет толерантных сравнений, нет контроля
переполнения; поведение IEEE 754 наследуется от float как есть.
"""

from typing import Optional

from src.core.algebra.rings import Field
from src.core.algebra.sign import AbsoluteValueDecomposable, Signum
from src.core.domain.witnesses import Unit, is_invertible_witness


class Real(float, Field, AbsoluteValueDecomposable):
    """
    Вещественное число с конформностью к Field.

    Examples:
        >>> Real(4.0).reciprocal().unwrap()
        Real(0.25)
        >>> Real(0.0).unit is None
        True
    """

    # -------------------------------------------------------------------------
    # Identities
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Real":
        return cls(0.0)

    @classmethod
    def one(cls) -> "Real":
        return cls(1.0)

    # -------------------------------------------------------------------------
    # Additive
    # -------------------------------------------------------------------------

    def __add__(self, other) -> "Real":
        return Real(float(self) + float(other))

    __radd__ = __add__

    def __neg__(self) -> "Real":
        return Real(-float(self))

    def __sub__(self, other) -> "Real":
        return Real(float(self) - float(other))

    def __rsub__(self, other) -> "Real":
        return Real(float(other) - float(self))

    # -------------------------------------------------------------------------
    # Multiplicative
    # -------------------------------------------------------------------------

    def __mul__(self, other) -> "Real":
        return Real(float(self) * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Real":
        if is_invertible_witness(other):
            return self * other.reciprocal
        # ZeroDivisionError для нуля — поведение float
        return Real(float(self) / float(other))

    def __rtruediv__(self, other) -> "Real":
        return Real(float(other) / float(self))

    @property
    def unit(self) -> Optional[Unit["Real"]]:
        if self.is_zero:
            return None
        return Unit.unchecked(self, Real(1.0 / float(self)))

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    @property
    def signum(self) -> Signum:
        if self.is_zero:
            return Signum.ZERO
        return Signum.NEGATIVE if self < 0.0 else Signum.POSITIVE

    @property
    def flipped_sign(self) -> "Real":
        return -self

    @property
    def absolute(self) -> "Real":
        return Real(abs(float(self)))

    def __repr__(self) -> str:
        return f"Real({float(self)!r})"
