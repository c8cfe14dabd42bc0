"""
Multiplicative Structures — мультипликативная иерархия способностей

Зеркало аддитивной иерархии:
- MultiplicativeCombinable: тип поставляет только `__mul__`
- MultiplicativeFoldable:   тип поставляет только classmethod `product_of(first, rest)`
- MultiplicativeSemigroup → MultiplicativeMonoid (+ HasOne)

Обратимость:
- MultiplicativeGroup: тотальный reciprocal и тотальный `/`
  (только для типов, чьё множество-носитель исключает необратимые элементы)
- MultiplicativeMonoidWithUnits: частичный reciprocal через Unit-свидетель
    reciprocal()        → Ok(value) | Err(ReciprocalUnavailable)
    divided_by(other)   → Ok(value) | Err(DivisionByNonUnit)
    divided_by_unit(w)  → value (тотально: делитель уже доказанно обратим)

Деление на свидетель (`a / unit`) доступно любому мультипликативному типу.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

from src.core.algebra.dispatch import FoldOperation, derived, resolve_fold
from src.core.algebra.identities import HasOne
from src.core.domain.errors import DivisionByNonUnit, ReciprocalUnavailable
from src.core.domain.non_empty import split_first
from src.core.domain.result import Err, Ok, Result
from src.core.domain.witnesses import (
    MultiplicativeInvertible,
    Unit,
    divide_by_witness,
    is_invertible_witness,
)


def _divide_by_witness_operator(self, other):
    if is_invertible_witness(other):
        return divide_by_witness(self, other)
    return NotImplemented


# =============================================================================
# MINIMAL CONTRACTS
# =============================================================================


class MultiplicativeCombinable(ABC):
    """Бинарный контракт: попарное умножение."""

    @abstractmethod
    def __mul__(self, other):
        """a * b"""

    @classmethod
    @derived
    def product_of(cls, first, rest: Iterable):
        return resolve_product(cls)(first, rest)

    __truediv__ = _divide_by_witness_operator


class MultiplicativeFoldable(ABC):
    """Fold-контракт: прямое n-арное произведение `first * rest...`."""

    @classmethod
    @abstractmethod
    def product_of(cls, first, rest: Iterable):
        """Произведение first и всех элементов rest."""

    @derived
    def __mul__(self, other):
        return resolve_product(type(self))(self, (other,))

    __truediv__ = _divide_by_witness_operator


# =============================================================================
# ALGEBRAIC TOWER
# =============================================================================


class MultiplicativeSemigroup(MultiplicativeCombinable, MultiplicativeFoldable):
    """
    Полугруппа по умножению: конформный тип переопределяет `__mul__`, `product_of` или оба.

    Тип без обеих операций создаётся; TypeError возникает при первом использовании.
    """

    @derived
    def __mul__(self, other):
        return resolve_product(type(self))(self, (other,))

    @classmethod
    @derived
    def product_of(cls, first, rest: Iterable):
        return resolve_product(cls)(first, rest)

    @classmethod
    def product_values(cls, first, second, *rest):
        """Vararg-форма: T.product_values(a, b, c, ...)."""
        return resolve_product(cls)(first, (second, *rest))


class MultiplicativeMonoid(MultiplicativeSemigroup, HasOne):
    """Моноид по умножению: полугруппа + one."""

    @classmethod
    def product_all(cls, values: Iterable):
        """
        Произведение возможно-пустой последовательности.

        Returns:
            one для пустого входа, иначе свёртка по правилу выбора
        """
        split = split_first(values)
        if split is None:
            return cls.one()
        first, rest = split
        return resolve_product(cls)(first, rest)


class MultiplicativeGroup(MultiplicativeMonoid):
    """
    Группа по умножению: у КАЖДОГО элемента есть обратный.

    Корректна только для типов, чей носитель исключает ноль
    (например, мультипликативная группа поля).
    """

    @property
    @abstractmethod
    def reciprocal(self):
        """Обратный элемент (тотально)."""

    def __truediv__(self, other):
        # Работает и для элементов группы, и для Unit-свидетелей
        return self * other.reciprocal


class MultiplicativeMonoidWithUnits(MultiplicativeMonoid):
    """
    Моноид, где обратимы лишь некоторые элементы (units).

    Единственная примитивная операция — `unit`: свидетель или None.
    Тип сам решает, какие элементы обратимы (например, только {1, 3} mod 4).
    """

    @property
    @abstractmethod
    def unit(self) -> Optional[Unit[Any]]:
        """Unit-свидетель элемента или None, если элемент не обратим."""

    def reciprocal(self, context: Optional[str] = None) -> Result[Any, ReciprocalUnavailable]:
        """
        Частичный обратный элемент.

        Args:
            context: Диагностический текст для ошибки (опционально)

        Returns:
            Ok(reciprocal) или Err(ReciprocalUnavailable(context))
        """
        unit = self.unit
        if unit is None:
            return Err(ReciprocalUnavailable(context))
        return Ok(unit.reciprocal)

    def divided_by(self, other, context: Optional[str] = None) -> Result[Any, DivisionByNonUnit]:
        """
        Частичное деление: self * other.reciprocal.

        Returns:
            Ok(quotient) или Err(DivisionByNonUnit(context)), если у other нет свидетеля
        """
        denominator = other.unit
        if denominator is None:
            return Err(DivisionByNonUnit(context))
        return Ok(self * denominator.reciprocal)

    def divided_by_unit(self, witness: MultiplicativeInvertible[Any]):
        """Тотальное деление на доказанно обратимый элемент."""
        return divide_by_witness(self, witness)


# =============================================================================
# COMMUTATIVITY MARKERS
# =============================================================================


class MultiplicativeCommutativeSemigroup(MultiplicativeSemigroup):
    """Маркер: a * b == b * a."""


class MultiplicativeCommutativeMonoid(MultiplicativeMonoid, MultiplicativeCommutativeSemigroup):
    pass


class MultiplicativeCommutativeGroup(MultiplicativeGroup, MultiplicativeCommutativeMonoid):
    pass


class MultiplicativeCommutativeMonoidWithUnits(
    MultiplicativeMonoidWithUnits, MultiplicativeCommutativeMonoid
):
    pass


# =============================================================================
# DISPATCH
# =============================================================================


MULTIPLICATIVE_FOLD = FoldOperation(
    name="multiplicative",
    binary="__mul__",
    witness="product_of",
    combine=operator.mul,
    contract=MultiplicativeFoldable,
)


def resolve_product(cls: type) -> Callable[[Any, Iterable[Any]], Any]:
    """Свёртка произведения (first, rest) -> value для класса элементов."""
    return resolve_fold(cls, MULTIPLICATIVE_FOLD)
