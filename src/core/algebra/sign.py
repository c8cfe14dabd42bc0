"""
Sign — знак и разложение на знак/модуль

- Signum: NEGATIVE (-1) / ZERO (0) / POSITIVE (+1)
- Signed: элемент со знаком и операцией смены знака
- AbsoluteValueDecomposable: Signed + модуль (absolute)
"""

from abc import ABC, abstractmethod
from enum import Enum
from functools import reduce
from typing import Iterable, List, TypeVar

T = TypeVar("T", bound="AbsoluteValueDecomposable")


# =============================================================================
# SIGNUM
# =============================================================================


class Signum(int, Enum):
    """Знак элемента"""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @property
    def flipped(self) -> "Signum":
        return Signum(-self.value)


def _multiply_signs(partial: Signum, next_sign: Signum) -> Signum:
    return Signum(partial.value * next_sign.value)


def signum_product(signs: Iterable[Signum]) -> Signum:
    """
    Знак произведения.

    Пустое произведение → POSITIVE (единица для знака), любой ZERO → ZERO.

    Examples:
        >>> signum_product([Signum.NEGATIVE, Signum.NEGATIVE, Signum.POSITIVE])
        <Signum.POSITIVE: 1>
        >>> signum_product([])
        <Signum.POSITIVE: 1>
    """
    return reduce(_multiply_signs, signs, Signum.POSITIVE)


# =============================================================================
# CONTRACTS
# =============================================================================


class Signed(ABC):
    """Элемент со знаком; унарный минус выводится из flipped_sign."""

    @property
    @abstractmethod
    def signum(self) -> Signum:
        """Знак элемента."""

    @property
    @abstractmethod
    def flipped_sign(self):
        """Элемент с противоположным знаком."""

    def __neg__(self):
        return self.flipped_sign

    @property
    def is_positive(self) -> bool:
        return self.signum is Signum.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.signum is Signum.NEGATIVE

    @property
    def is_sign_zero(self) -> bool:
        return self.signum is Signum.ZERO


class AbsoluteValueDecomposable(Signed):
    """Элемент, раскладываемый на знак и модуль."""

    @property
    @abstractmethod
    def absolute(self):
        """Модуль элемента."""


def absolutes(values: Iterable[T]) -> List[T]:
    """Модули всех элементов (порядок сохраняется)."""
    return [value.absolute for value in values]
