"""
AlgebraErrors — таксономия ошибок частичных операций

Три листовых вида ошибок (все ожидаемые и восстанавливаемые, возвращаются
как значения внутри Err, не бросаются):
- ReciprocalUnavailable — у элемента нет мультипликативного обратного
- DivisionByNonUnit     — делитель не является unit
- EmptyCollection       — операции нужен >= 1 элемент, получено 0

Каждая ошибка — immutable Pydantic модель с опциональным context (строка
для диагностики). Равенство и хэш структурные: совпадают вид и context.

AlgebraError — закрытое tagged union над тремя видами (discriminator "kind")
для вызывающего кода, которому нужна одна точка обработки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_algebra_error тотальна и никогда не теряет context
2. map_to_algebra_error не трогает Ok
3. Маппинг односторонний: лист → AlgebraError
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, Field

from src.core.domain.result import Result

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class AlgebraErrorKind(str, Enum):
    """Вид ошибки алгебры"""

    RECIPROCAL_UNAVAILABLE = "reciprocal_unavailable"
    DIVISION_BY_NON_UNIT = "division_by_non_unit"
    EMPTY_COLLECTION = "empty_collection"


# =============================================================================
# LEAF ERRORS
# =============================================================================


class LeafAlgebraError(BaseModel):
    """
    Базовый класс листовых ошибок.

    Принимает context позиционно: EmptyCollection("pnl batch").
    """

    context: Optional[str] = Field(
        default=None, description="Свободный текст для диагностики (опционально)"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, context: Optional[str] = None, **data: Any) -> None:
        super().__init__(context=context, **data)

    def as_algebra_error(self) -> "AlgebraError":
        """Поднятие в общий тип AlgebraError (тотально)."""
        return AlgebraError(error=self)


class ReciprocalUnavailable(LeafAlgebraError):
    """reciprocal() вызван у элемента без Unit-свидетеля."""

    kind: Literal["reciprocal_unavailable"] = Field(
        default="reciprocal_unavailable", description="Дискриминатор вида ошибки"
    )


class DivisionByNonUnit(LeafAlgebraError):
    """Деление на элемент без Unit-свидетеля."""

    kind: Literal["division_by_non_unit"] = Field(
        default="division_by_non_unit", description="Дискриминатор вида ошибки"
    )


class EmptyCollection(LeafAlgebraError):
    """Свёртка пустой последовательности там, где нет нейтрального элемента."""

    kind: Literal["empty_collection"] = Field(
        default="empty_collection", description="Дискриминатор вида ошибки"
    )


AnyLeafError = Annotated[
    Union[ReciprocalUnavailable, DivisionByNonUnit, EmptyCollection],
    Field(discriminator="kind"),
]


# =============================================================================
# UMBRELLA ERROR
# =============================================================================


class AlgebraError(BaseModel):
    """
    Общая ошибка алгебры: ровно одна листовая ошибка, помеченная видом.

    Examples:
        >>> error = EmptyCollection("e").as_algebra_error()
        >>> error.kind is AlgebraErrorKind.EMPTY_COLLECTION, error.context
        (True, 'e')
    """

    error: AnyLeafError = Field(..., description="Исходная листовая ошибка")

    model_config = {"frozen": True}  # Immutable

    @property
    def kind(self) -> AlgebraErrorKind:
        return AlgebraErrorKind(self.error.kind)

    @property
    def context(self) -> Optional[str]:
        return self.error.context


# =============================================================================
# MAPPING
# =============================================================================


def to_algebra_error(error: LeafAlgebraError) -> AlgebraError:
    """
    Конверсия листовой ошибки в AlgebraError.

    Args:
        error: ReciprocalUnavailable / DivisionByNonUnit / EmptyCollection

    Returns:
        AlgebraError с тем же видом и context

    Raises:
        TypeError: Если error не является листовой ошибкой алгебры
    """
    if not isinstance(error, LeafAlgebraError):
        raise TypeError(f"Expected a leaf algebra error, got {type(error).__name__}")
    return error.as_algebra_error()


def map_to_algebra_error(result: Result[T, LeafAlgebraError]) -> Result[T, AlgebraError]:
    """
    Перевод Result с листовой ошибкой в Result с AlgebraError.

    Ok проходит без изменений (тот же объект).
    """
    return result.map_err(to_algebra_error)
