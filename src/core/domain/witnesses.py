"""
Witnesses — доказательные объекты обратимости и ненулевости

- MultiplicativeInvertible: протокол свидетеля (value + reciprocal)
- Unit: конкретный свидетель, пара (value, reciprocal)
- NonZero: значение, доказанно отличное от нуля

NonZero СЛАБЕЕ Unit: исключение нуля не означает обратимости
(например, 2 mod 4 ненулевой, но не обратим).

ВАЖНО: Unit НЕ проверяет, что value * reciprocal == one. Это граница доверия:
инвариант обеспечивает тот, кто создаёт свидетель (unchecked конструктор
или `unit` lookup конформного типа).
"""

import inspect
from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# =============================================================================
# INVERTIBLE WITNESS PROTOCOL
# =============================================================================


@runtime_checkable
class MultiplicativeInvertible(Protocol[T_co]):
    """Доказательство того, что value мультипликативно обратим."""

    @property
    def value(self) -> T_co: ...

    @property
    def reciprocal(self) -> T_co: ...


def is_invertible_witness(candidate: Any) -> bool:
    """
    Является ли объект свидетелем обратимости (а не элементом алгебры).

    Структурной проверки протокола недостаточно: у элементов
    MultiplicativeMonoidWithUnits `reciprocal` — метод, и элемент с полем
    `value` формально удовлетворяет протоколу. У свидетеля `reciprocal` —
    данные (поле или property), не вызываемый метод класса.

    Examples:
        >>> is_invertible_witness(Unit.unchecked(4.0, 0.25))
        True
        >>> is_invertible_witness(4.0)
        False
    """
    if not isinstance(candidate, MultiplicativeInvertible):
        return False
    return not callable(inspect.getattr_static(type(candidate), "reciprocal", None))


def divide_by_witness(dividend: Any, witness: MultiplicativeInvertible[Any]) -> Any:
    """
    Тотальное деление на заранее доказанно обратимый элемент.

    Returns:
        dividend * witness.reciprocal
    """
    return dividend * witness.reciprocal


# =============================================================================
# UNIT
# =============================================================================


@dataclass(frozen=True)
class Unit(Generic[T]):
    """
    Свидетель обратимости: значение и его заранее вычисленный обратный.

    Равенство и хэш структурные по обоим полям (если T их поддерживает).

    Examples:
        >>> Unit.unchecked(4.0, 0.25).reciprocal
        0.25
    """

    value: T
    reciprocal: T

    @classmethod
    def unchecked(cls, value: T, reciprocal: T) -> "Unit[T]":
        """Построение без проверки (доверенный вызывающий, например bridge)."""
        return cls(value, reciprocal)

    @classmethod
    def of(cls, value: Any) -> Optional["Unit[Any]"]:
        """
        Запрос свидетеля у собственного контракта частичной обратимости.

        Args:
            value: Элемент типа с `unit` lookup (MultiplicativeMonoidWithUnits)

        Returns:
            Unit или None, если элемент не обратим
        """
        return value.unit


# =============================================================================
# NON-ZERO
# =============================================================================


@dataclass(frozen=True)
class NonZero(Generic[T]):
    """
    Значение, доказанно отличное от аддитивной единицы (zero).

    Прямой конструктор проверяет инвариант и бросает ValueError;
    NonZero.of() возвращает None для нуля.
    """

    value: T

    def __post_init__(self) -> None:
        if self.value.is_zero:
            raise ValueError(f"NonZero cannot wrap the zero element {self.value!r}")

    @classmethod
    def of(cls, value: T) -> Optional["NonZero[T]"]:
        """
        Args:
            value: Элемент типа с HasZero (zero + is_zero)

        Returns:
            NonZero или None, если value равен zero
        """
        if value.is_zero:
            return None
        return cls(value)

    @property
    def unit(self) -> Optional[Unit[T]]:
        """
        Перенаправление на `unit` lookup обёрнутого значения.

        Raises:
            TypeError: Если тип значения не поддерживает частичную обратимость
        """
        if not hasattr(type(self.value), "unit"):
            raise TypeError(
                f"{type(self.value).__name__} does not support partial invertibility"
            )
        return self.value.unit
