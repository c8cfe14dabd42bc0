"""
Modules — скалярное действие и линейные комбинации

- LeftModule:  s · v  (left_scaled)
- RightModule: v · s  (right_scaled)
- Bimodule:    оба действия

Линейные комбинации сворачиваются через выбор суммы модульного типа
(свидетель sum_of предпочитается повторному `+`).

Деление на скаляр частичное: scaled_down(s) требует Unit-свидетель у s
(скаляр — элемент MultiplicativeMonoidWithUnits), иначе Err(DivisionByNonUnit).
"""

from abc import abstractmethod
from typing import Any, Iterable, NamedTuple, Optional, Tuple

from src.core.algebra.additive import AdditiveGroup, resolve_sum
from src.core.domain.errors import DivisionByNonUnit
from src.core.domain.non_empty import NonEmptySequence, split_first
from src.core.domain.result import Err, Ok, Result
from src.core.domain.witnesses import MultiplicativeInvertible


class WeightedTerm(NamedTuple):
    """Слагаемое взвешенной суммы: weight · value."""

    weight: Any
    value: Any


# =============================================================================
# LEFT MODULE
# =============================================================================


class LeftModule(AdditiveGroup):
    """Левый модуль над кольцом скаляров."""

    @abstractmethod
    def left_scaled(self, scalar):
        """scalar · self"""

    def scaled_down(self, scalar, context: Optional[str] = None) -> Result[Any, DivisionByNonUnit]:
        """
        Деление на скаляр: reciprocal(scalar) · self.

        Returns:
            Ok(value) или Err(DivisionByNonUnit(context)), если скаляр не обратим
        """
        unit = scalar.unit
        if unit is None:
            return Err(DivisionByNonUnit(context))
        return Ok(self.left_scaled(unit.reciprocal))

    def scaled_down_by_unit(self, witness: MultiplicativeInvertible[Any]):
        """Тотальное деление на доказанно обратимый скаляр."""
        return self.left_scaled(witness.reciprocal)

    @classmethod
    def scaled_one(cls, scalar):
        """scalar · one (тип должен поставлять HasOne)."""
        return cls.one().left_scaled(scalar)

    @classmethod
    def linear_combination(cls, terms: NonEmptySequence[Tuple[Any, Any]]):
        """
        Σ scalar_i · value_i по непустой последовательности пар (scalar, value).

        Тотальна: terms содержит хотя бы одно слагаемое.
        """
        head_scalar, head_value = terms.head
        scaled = (value.left_scaled(scalar) for scalar, value in terms.tail)
        return resolve_sum(cls)(head_value.left_scaled(head_scalar), scaled)

    @classmethod
    def linear_combination_of(cls, terms: Iterable[Tuple[Any, Any]]) -> Optional[Any]:
        """То же для произвольного iterable: None для пустого входа."""
        split = split_first(value.left_scaled(scalar) for scalar, value in terms)
        if split is None:
            return None
        first, rest = split
        return resolve_sum(cls)(first, rest)

    @classmethod
    def weighted_sum(cls, terms: NonEmptySequence[WeightedTerm]):
        """Σ weight_i · value_i по WeightedTerm."""
        return cls.linear_combination(terms)


# =============================================================================
# RIGHT MODULE
# =============================================================================


class RightModule(AdditiveGroup):
    """Правый модуль над кольцом скаляров."""

    @abstractmethod
    def right_scaled(self, scalar):
        """self · scalar"""

    def right_scaled_down(
        self, scalar, context: Optional[str] = None
    ) -> Result[Any, DivisionByNonUnit]:
        unit = scalar.unit
        if unit is None:
            return Err(DivisionByNonUnit(context))
        return Ok(self.right_scaled(unit.reciprocal))

    def right_scaled_down_by_unit(self, witness: MultiplicativeInvertible[Any]):
        return self.right_scaled(witness.reciprocal)

    @classmethod
    def right_scaled_one(cls, scalar):
        return cls.one().right_scaled(scalar)

    @classmethod
    def right_linear_combination(cls, terms: NonEmptySequence[Tuple[Any, Any]]):
        """Σ value_i · scalar_i по непустой последовательности пар (value, scalar)."""
        head_value, head_scalar = terms.head
        scaled = (value.right_scaled(scalar) for value, scalar in terms.tail)
        return resolve_sum(cls)(head_value.right_scaled(head_scalar), scaled)

    @classmethod
    def right_linear_combination_of(cls, terms: Iterable[Tuple[Any, Any]]) -> Optional[Any]:
        split = split_first(value.right_scaled(scalar) for value, scalar in terms)
        if split is None:
            return None
        first, rest = split
        return resolve_sum(cls)(first, rest)


class Bimodule(LeftModule, RightModule):
    """Маркер: левое и правое действия совместимы."""
