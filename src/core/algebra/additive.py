"""
Additive Structures — аддитивная иерархия способностей

Минимальные контракты:
- AdditiveCombinable: тип поставляет только `__add__`
  → sum_of выводится левой свёрткой `+` от первого элемента
- AdditiveFoldable:   тип поставляет только classmethod `sum_of(first, rest)`
  → `__add__` выводится как sum_of(a, (b,))

Башня:
    AdditiveSemigroup  = Combinable + Foldable (достаточно одного из двух)
    AdditiveMonoid     = Semigroup + HasZero (sum_all: пустой вход → zero)
    AdditiveGroup      = Monoid + `__neg__` (`a - b = a + (-b)`)
    AdditiveCommutativeMonoid, AdditiveAbelianGroup — чистые маркеры

ВАЖНО: если тип поставляет И `__add__`, И `sum_of`, они обязаны согласоваться.
Библиотека законы не проверяет: несогласованная пара — ошибка конформного
типа, дающая неожиданный, но детерминированный результат (все точки входа
свёрток идут через sum_of).
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, TypeVar

from src.core.algebra.dispatch import FoldOperation, derived, resolve_fold
from src.core.algebra.identities import HasZero
from src.core.domain.non_empty import split_first

T = TypeVar("T")


# =============================================================================
# MINIMAL CONTRACTS
# =============================================================================


class AdditiveCombinable(ABC):
    """Бинарный контракт: попарное сложение."""

    @abstractmethod
    def __add__(self, other):
        """a + b"""

    @classmethod
    @derived
    def sum_of(cls, first, rest: Iterable):
        return resolve_sum(cls)(first, rest)


class AdditiveFoldable(ABC):
    """
    Fold-контракт: прямая n-арная сумма `first + rest...`.

    rest может быть однопроходным итератором: свидетель обязан пройти его
    один раз и не материализовать.
    """

    @classmethod
    @abstractmethod
    def sum_of(cls, first, rest: Iterable):
        """Сумма first и всех элементов rest."""

    @derived
    def __add__(self, other):
        return resolve_sum(type(self))(self, (other,))


# =============================================================================
# ALGEBRAIC TOWER
# =============================================================================


class AdditiveSemigroup(AdditiveCombinable, AdditiveFoldable):
    """
    Полугруппа по сложению: ассоциативный `+`, нейтральный элемент не нужен.

    Конформный тип переопределяет `__add__`, `sum_of` или оба.

    Обе операции здесь конкретные (@derived): тип без обеих операций
    создаётся, а TypeError возникает при первом использовании (выбор свёртки
    в dispatch). При создании такой тип отсекают только одноконтрактные
    AdditiveCombinable и AdditiveFoldable.
    """

    @derived
    def __add__(self, other):
        return resolve_sum(type(self))(self, (other,))

    @classmethod
    @derived
    def sum_of(cls, first, rest: Iterable):
        return resolve_sum(cls)(first, rest)

    @classmethod
    def sum_values(cls, first, second, *rest):
        """
        Vararg-форма: T.sum_values(a, b, c, ...).

        Идёт через тот же выбор свёртки, что и остальные точки входа.
        """
        return resolve_sum(cls)(first, (second, *rest))


class AdditiveMonoid(AdditiveSemigroup, HasZero):
    """Моноид по сложению: полугруппа + zero."""

    @classmethod
    def sum_all(cls, values: Iterable):
        """
        Сумма возможно-пустой последовательности.

        Returns:
            zero для пустого входа, иначе свёртка по правилу выбора
        """
        split = split_first(values)
        if split is None:
            return cls.zero()
        first, rest = split
        return resolve_sum(cls)(first, rest)


class AdditiveCommutativeMonoid(AdditiveMonoid):
    """Маркер: a + b == b + a."""


class AdditiveGroup(AdditiveMonoid):
    """Группа по сложению: у каждого элемента есть противоположный."""

    @abstractmethod
    def __neg__(self):
        """-a"""

    def __sub__(self, other):
        return self + (-other)


class AdditiveAbelianGroup(AdditiveGroup, AdditiveCommutativeMonoid):
    """Абелева группа по сложению (маркер коммутативности)."""


# =============================================================================
# DISPATCH
# =============================================================================


ADDITIVE_FOLD = FoldOperation(
    name="additive",
    binary="__add__",
    witness="sum_of",
    combine=operator.add,
    contract=AdditiveFoldable,
)


def resolve_sum(cls: type) -> Callable[[Any, Iterable[Any]], Any]:
    """Свёртка суммы (first, rest) -> value для класса элементов."""
    return resolve_fold(cls, ADDITIVE_FOLD)
