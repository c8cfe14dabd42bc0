"""
Тестовые типы-значения для проверки иерархии способностей.

- DoublePair        — бимодуль над Real (только `+`, sum выводится)
- WrappedDouble     — частично обратимый моноид (ноль не обратим), со знаком
- SumPrimitive      — только fold-свидетель sum_of (`+` выводится)
- ProductPrimitive  — только fold-свидетель product_of (`*` выводится)
- Mod4              — вычеты по модулю 4: обратимы только {1, 3}
- BiasedSum         — `+` И sum_of со смещением +1000 (проверка предпочтения свидетеля)
- BiasedProduct     — `*` И product_of со смещением +100
- MaxSemigroup      — полугруппа без нейтрального элемента
- WrappedDoubleWitness — пользовательский свидетель обратимости
- Zmod5             — вычеты по модулю 5 с полем `value` (не свидетель)
"""

from dataclasses import dataclass
from typing import Any

from src.core.algebra import (
    AbsoluteValueDecomposable,
    AdditiveAbelianGroup,
    AdditiveGroup,
    AdditiveMonoid,
    AdditiveSemigroup,
    Bimodule,
    HasOne,
    MultiplicativeCommutativeMonoidWithUnits,
    MultiplicativeMonoid,
    MultiplicativeMonoidWithUnits,
    Signum,
)
from src.core.domain import Unit


@dataclass(frozen=True)
class DoublePair(Bimodule, HasOne):
    first: float
    second: float

    @classmethod
    def zero(cls) -> "DoublePair":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "DoublePair":
        return cls(1.0, 1.0)

    def __add__(self, other: "DoublePair") -> "DoublePair":
        return DoublePair(self.first + other.first, self.second + other.second)

    def __neg__(self) -> "DoublePair":
        return DoublePair(-self.first, -self.second)

    def left_scaled(self, scalar: Any) -> "DoublePair":
        return DoublePair(self.first * scalar, self.second * scalar)

    def right_scaled(self, scalar: Any) -> "DoublePair":
        return DoublePair(self.first * scalar, self.second * scalar)


@dataclass(frozen=True)
class WrappedDouble(AdditiveGroup, MultiplicativeMonoidWithUnits, AbsoluteValueDecomposable):
    raw: float

    @classmethod
    def zero(cls) -> "WrappedDouble":
        return cls(0.0)

    @classmethod
    def one(cls) -> "WrappedDouble":
        return cls(1.0)

    def __add__(self, other: "WrappedDouble") -> "WrappedDouble":
        return WrappedDouble(self.raw + other.raw)

    def __neg__(self) -> "WrappedDouble":
        return WrappedDouble(-self.raw)

    def __mul__(self, other: "WrappedDouble") -> "WrappedDouble":
        return WrappedDouble(self.raw * other.raw)

    @property
    def unit(self):
        if self.is_zero:
            return None
        return Unit.unchecked(self, WrappedDouble(1 / self.raw))

    @property
    def signum(self) -> Signum:
        if self.raw == 0:
            return Signum.ZERO
        return Signum.NEGATIVE if self.raw < 0 else Signum.POSITIVE

    @property
    def flipped_sign(self) -> "WrappedDouble":
        return WrappedDouble(-self.raw)

    @property
    def absolute(self) -> "WrappedDouble":
        return WrappedDouble(abs(self.raw))


@dataclass(frozen=True)
class SumPrimitive(AdditiveMonoid):
    raw: int

    @classmethod
    def zero(cls) -> "SumPrimitive":
        return cls(0)

    @classmethod
    def sum_of(cls, first: "SumPrimitive", rest) -> "SumPrimitive":
        total = first.raw
        for value in rest:
            total += value.raw
        return cls(total)


@dataclass(frozen=True)
class ProductPrimitive(MultiplicativeMonoid):
    raw: int

    @classmethod
    def one(cls) -> "ProductPrimitive":
        return cls(1)

    @classmethod
    def product_of(cls, first: "ProductPrimitive", rest) -> "ProductPrimitive":
        total = first.raw
        for value in rest:
            total *= value.raw
        return cls(total)


@dataclass(frozen=True)
class Mod4(AdditiveAbelianGroup, MultiplicativeCommutativeMonoidWithUnits):
    raw: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", self.raw % 4)

    @classmethod
    def zero(cls) -> "Mod4":
        return cls(0)

    @classmethod
    def one(cls) -> "Mod4":
        return cls(1)

    def __add__(self, other: "Mod4") -> "Mod4":
        return Mod4(self.raw + other.raw)

    def __neg__(self) -> "Mod4":
        return Mod4(-self.raw)

    def __mul__(self, other: "Mod4") -> "Mod4":
        return Mod4(self.raw * other.raw)

    @property
    def unit(self):
        if self.raw in (1, 3):
            # 1 * 1 = 1, 3 * 3 = 9 = 1 (mod 4)
            return Unit.unchecked(self, Mod4(self.raw))
        return None


@dataclass(frozen=True)
class BiasedSum(AdditiveMonoid):
    raw: int

    @classmethod
    def zero(cls) -> "BiasedSum":
        return cls(0)

    def __add__(self, other: "BiasedSum") -> "BiasedSum":
        return BiasedSum(self.raw + other.raw)

    @classmethod
    def sum_of(cls, first: "BiasedSum", rest) -> "BiasedSum":
        return cls(first.raw + sum(value.raw for value in rest) + 1_000)


@dataclass(frozen=True)
class BiasedProduct(MultiplicativeMonoid):
    raw: int

    @classmethod
    def one(cls) -> "BiasedProduct":
        return cls(1)

    def __mul__(self, other: "BiasedProduct") -> "BiasedProduct":
        return BiasedProduct(self.raw * other.raw)

    @classmethod
    def product_of(cls, first: "BiasedProduct", rest) -> "BiasedProduct":
        total = first.raw
        for value in rest:
            total *= value.raw
        return cls(total + 100)


@dataclass(frozen=True)
class MaxSemigroup(AdditiveSemigroup):
    raw: int

    def __add__(self, other: "MaxSemigroup") -> "MaxSemigroup":
        return MaxSemigroup(max(self.raw, other.raw))


@dataclass(frozen=True)
class WrappedDoubleWitness:
    value: WrappedDouble
    reciprocal: WrappedDouble


@dataclass(frozen=True)
class Zmod5(AdditiveAbelianGroup, MultiplicativeCommutativeMonoidWithUnits):
    """Поле вычетов по модулю 5; поле названо `value`, как у свидетеля."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % 5)

    @classmethod
    def zero(cls) -> "Zmod5":
        return cls(0)

    @classmethod
    def one(cls) -> "Zmod5":
        return cls(1)

    def __add__(self, other: "Zmod5") -> "Zmod5":
        return Zmod5(self.value + other.value)

    def __neg__(self) -> "Zmod5":
        return Zmod5(-self.value)

    def __mul__(self, other: "Zmod5") -> "Zmod5":
        return Zmod5(self.value * other.value)

    @property
    def unit(self):
        if self.value == 0:
            return None
        return Unit.unchecked(self, Zmod5(pow(self.value, -1, 5)))
