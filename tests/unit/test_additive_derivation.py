"""
Тесты аддитивной иерархии: вывод операций и законы

Проверяемые инварианты:
1. Только `+` → sum_of выводится левой свёрткой: sum(a, [b, c]) == (a + b) + c
2. Только sum_of → `+` выводится как sum_of(a, (b,))
3. Группа: a - b == a + (-b)
4. Законы нейтрального и противоположного (проверяются на fixtures)
5. Тип без `+` и без sum_of → TypeError при использовании
"""

from dataclasses import dataclass

import pytest

from src.core.algebra import (
    AdditiveCombinable,
    AdditiveFoldable,
    AdditiveSemigroup,
)
from src.core.domain import NonEmptySequence
from src.core.folds import sum_non_empty
from tests.unit.fixtures import DoublePair, Mod4, SumPrimitive


@dataclass(frozen=True)
class Word(AdditiveCombinable):
    """Только бинарный контракт (конкатенация, некоммутативна)."""

    text: str

    def __add__(self, other: "Word") -> "Word":
        return Word(self.text + other.text)


@dataclass(frozen=True)
class Tally(AdditiveFoldable):
    """Только fold-контракт."""

    count: int

    @classmethod
    def sum_of(cls, first: "Tally", rest) -> "Tally":
        return cls(first.count + sum(t.count for t in rest))


@dataclass(frozen=True)
class Hollow(AdditiveSemigroup):
    """Объявляет полугруппу, но не поставляет ни одной операции."""

    raw: int


class TestSumDerivedFromBinaryPlus:
    """Вывод n-арной суммы из `+`."""

    def test_non_empty_sum_matches_left_fold(self) -> None:
        values = NonEmptySequence(DoublePair(1, 2), [DoublePair(3, 4), DoublePair(5, 6)])
        assert sum_non_empty(values) == DoublePair(9, 12)
        assert DoublePair.sum_of(values.head, values.tail) == DoublePair(9, 12)

    def test_left_fold_order(self) -> None:
        """Порядок свёртки — слева направо от первого элемента."""
        values = NonEmptySequence(Word("a"), [Word("b"), Word("c")])
        assert sum_non_empty(values) == (Word("a") + Word("b")) + Word("c")
        assert sum_non_empty(values) == Word("abc")

    def test_combinable_only_gets_sum_of(self) -> None:
        """Тип только с бинарным контрактом получает sum_of."""
        assert Word.sum_of(Word("x"), iter([Word("y")])) == Word("xy")

    def test_vararg_sum(self) -> None:
        assert DoublePair.sum_values(DoublePair(1, 2), DoublePair(3, 4), DoublePair(5, 6)) == DoublePair(9, 12)
        assert DoublePair.sum_values(DoublePair(1, 2), DoublePair(3, 4)) == DoublePair(4, 6)


class TestPlusDerivedFromSumWitness:
    """Вывод `+` из fold-свидетеля."""

    def test_plus_from_sum_primitive(self) -> None:
        assert SumPrimitive(2) + SumPrimitive(3) == SumPrimitive(5)

    def test_foldable_only_gets_plus(self) -> None:
        """Тип только с fold-контрактом получает `+`."""
        assert Tally(2) + Tally(5) == Tally(7)

    def test_plus_equals_two_element_witness(self) -> None:
        """a + b == sum_of(a, [b])."""
        a, b = SumPrimitive(4), SumPrimitive(9)
        assert a + b == SumPrimitive.sum_of(a, [b])


class TestMissingOperations:
    """Тип без операций — ошибка программирования конформного типа."""

    def test_combinable_without_plus_cannot_instantiate(self) -> None:
        """ABC запрещает экземпляр бинарного контракта без `__add__`."""

        class Broken(AdditiveCombinable):
            pass

        with pytest.raises(TypeError):
            Broken()

    def test_semigroup_without_operations_instantiates(self) -> None:
        """Полугруппа поставляет конкретные @derived умолчания: создание проходит."""
        assert Hollow(1).raw == 1

    def test_semigroup_without_operations_raises_on_use(self) -> None:
        with pytest.raises(TypeError, match="must supply either __add__"):
            Hollow(1) + Hollow(2)

        with pytest.raises(TypeError, match="sum_of"):
            Hollow.sum_of(Hollow(1), [])


class TestAdditiveLaws:
    """Законы (предполагаются библиотекой, проверяются на fixtures)."""

    def test_associativity_identity_inverse_subtraction(self) -> None:
        a = DoublePair(2, -3)
        b = DoublePair(-5, 7)
        c = DoublePair(11, 13)

        assert (a + b) + c == a + (b + c)
        assert a + DoublePair.zero() == a
        assert DoublePair.zero() + a == a
        assert a + (-a) == DoublePair.zero()
        assert a - b == a + (-b)

    def test_is_zero(self) -> None:
        assert DoublePair.zero().is_zero
        assert not DoublePair(0, 1).is_zero

    def test_modular_group(self) -> None:
        assert Mod4(3) + Mod4(2) == Mod4(1)
        assert -Mod4(1) == Mod4(3)
        assert Mod4(1) - Mod4(2) == Mod4(3)
        assert Mod4(2) + Mod4(2) == Mod4.zero()
