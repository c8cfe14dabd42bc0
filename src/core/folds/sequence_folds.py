"""
Sequence Folds — точки входа sum/product над коллекциями

Три класса точек входа:
1. NonEmptySequence → значение (тотально)
     sum_non_empty, product_non_empty, map_and_sum_non_empty, map_and_product_non_empty
2. Произвольный iterable, только полугруппа → Result[T, EmptyCollection]
     sum_result, product_result, map_and_sum_result, map_and_product_result
3. Произвольный iterable, моноид → значение (zero/one для пустого входа)
     sum_all, product_all, map_and_sum, map_and_product

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все точки входа выбирают свёртку через dispatch (resolve_sum/resolve_product):
   тип с fold-свидетелем ВСЕГДА сворачивается свидетелем
2. Свёртка однопроходная: вход не материализуется, transform применяется лениво
3. Класс элементов — тип первого элемента (для пустого входа моноида
   передаётся явно через element_type)
"""

from typing import Callable, Iterable, Optional, Type, TypeVar

from src.core.algebra.additive import AdditiveMonoid, resolve_sum
from src.core.algebra.multiplicative import MultiplicativeMonoid, resolve_product
from src.core.domain.errors import EmptyCollection
from src.core.domain.non_empty import NonEmptySequence, split_first
from src.core.domain.result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# NON-EMPTY SEQUENCE (TOTAL)
# =============================================================================


def sum_non_empty(values: NonEmptySequence[T]) -> T:
    """
    Сумма непустой последовательности (тотально).

    tail — view поверх буфера, без копирования.

    Examples:
        >>> sum_non_empty(NonEmptySequence(1, [2, 3]))
        6
    """
    head = values.head
    return resolve_sum(type(head))(head, values.tail)


def product_non_empty(values: NonEmptySequence[T]) -> T:
    """Произведение непустой последовательности (тотально)."""
    head = values.head
    return resolve_product(type(head))(head, values.tail)


def map_and_sum_non_empty(values: NonEmptySequence[U], transform: Callable[[U], T]) -> T:
    """Σ transform(v): transform применяется лениво, по одному элементу."""
    first = transform(values.head)
    return resolve_sum(type(first))(first, map(transform, values.tail))


def map_and_product_non_empty(values: NonEmptySequence[U], transform: Callable[[U], T]) -> T:
    """Π transform(v) по непустой последовательности."""
    first = transform(values.head)
    return resolve_product(type(first))(first, map(transform, values.tail))


# =============================================================================
# SEMIGROUP TIER (RESULT)
# =============================================================================


def sum_result(values: Iterable[T], context: Optional[str] = None) -> Result[T, EmptyCollection]:
    """
    Сумма возможно-пустой последовательности без нейтрального элемента.

    Args:
        values: Любой iterable (однопроходный допустим)
        context: Диагностический текст для ошибки пустого входа

    Returns:
        Ok(sum) или Err(EmptyCollection(context)) для пустого входа

    Examples:
        >>> sum_result([1, 2, 3])
        Ok(value=6)
        >>> sum_result([]).is_err()
        True
    """
    split = split_first(values)
    if split is None:
        return Err(EmptyCollection(context))
    first, rest = split
    return Ok(resolve_sum(type(first))(first, rest))


def product_result(values: Iterable[T], context: Optional[str] = None) -> Result[T, EmptyCollection]:
    """Произведение возможно-пустой последовательности; Err(EmptyCollection) для пустого входа."""
    split = split_first(values)
    if split is None:
        return Err(EmptyCollection(context))
    first, rest = split
    return Ok(resolve_product(type(first))(first, rest))


def map_and_sum_result(
    values: Iterable[U], transform: Callable[[U], T], context: Optional[str] = None
) -> Result[T, EmptyCollection]:
    return sum_result(map(transform, values), context)


def map_and_product_result(
    values: Iterable[U], transform: Callable[[U], T], context: Optional[str] = None
) -> Result[T, EmptyCollection]:
    return product_result(map(transform, values), context)


# =============================================================================
# MONOID TIER (IDENTITY FOR EMPTY)
# =============================================================================


def _require_subclass(element_type: type, capability: type) -> None:
    if not (isinstance(element_type, type) and issubclass(element_type, capability)):
        raise TypeError(
            f"{getattr(element_type, '__qualname__', element_type)!s} "
            f"is not a {capability.__name__}"
        )


def sum_all(values: Iterable[T], element_type: Type[T]) -> T:
    """
    Сумма над моноидом: zero для пустого входа.

    Args:
        values: Любой iterable элементов element_type
        element_type: Класс-моноид (нужен для zero при пустом входе)

    Raises:
        TypeError: Если element_type не AdditiveMonoid
    """
    _require_subclass(element_type, AdditiveMonoid)
    return element_type.sum_all(values)


def product_all(values: Iterable[T], element_type: Type[T]) -> T:
    """Произведение над моноидом: one для пустого входа."""
    _require_subclass(element_type, MultiplicativeMonoid)
    return element_type.product_all(values)


def map_and_sum(values: Iterable[U], transform: Callable[[U], T], element_type: Type[T]) -> T:
    return sum_all(map(transform, values), element_type)


def map_and_product(values: Iterable[U], transform: Callable[[U], T], element_type: Type[T]) -> T:
    return product_all(map(transform, values), element_type)
