"""
Result — типизированный результат частичных операций

Частичные операции (reciprocal, divided_by, свёртки возможно-пустых
последовательностей) НЕ бросают exception: они возвращают Ok(value) или
Err(error), где error — значение из таксономии ошибок алгебры.

Поддерживается структурное сопоставление:

    match x.reciprocal():
        case Ok(value): ...
        case Err(error): ...

Единственный путь с exception — явный unwrap() у Err (ResultUnwrapError).
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ResultUnwrapError(Exception):
    """
    unwrap() вызван у Err (или unwrap_err() у Ok).

    Атрибут `error` хранит исходное значение ошибки (для Err) либо None.
    """

    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error


# =============================================================================
# OK / ERR
# =============================================================================


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Успешный результат."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise ResultUnwrapError(f"unwrap_err() called on Ok({self.value!r})")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, transform: Callable[[T], U]) -> "Ok[U]":
        return Ok(transform(self.value))

    def map_err(self, transform: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def and_then(self, transform: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        return transform(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Неуспешный результат с типизированной ошибкой."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise ResultUnwrapError(f"unwrap() called on Err({self.error!r})", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, transform: Callable[[Any], Any]) -> "Err[E]":
        return self

    def map_err(self, transform: Callable[[E], F]) -> "Err[F]":
        return Err(transform(self.error))

    def and_then(self, transform: Callable[[Any], Any]) -> "Err[E]":
        return self


Result = Union[Ok[T], Err[E]]
