"""
NonEmptySequence — упорядоченная последовательность с гарантией len >= 1

Фундамент для всех тотальных свёрток (sum/product): свёртка непустой
последовательности всегда возвращает значение, без ветки ошибки.

Хранение:
- один кортеж-буфер (head + tail), неизменяемый после построения
- head — O(1) доступ к элементу 0
- tail — SequenceView поверх того же буфера (zero-copy, без копирования)
- to_sequence() — возвращает сам буфер без копирования

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(seq) >= 1 всегда
2. Ни одна операция не может создать пустой экземпляр
3. Построение из произвольного iterable возвращает None для пустого входа
   (не exception)
4. Нет методов мутации: map создаёт новый экземпляр
"""

from itertools import islice
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    overload,
)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


# =============================================================================
# SPLIT FIRST
# =============================================================================


def split_first(values: Iterable[T]) -> Optional[Tuple[T, Iterator[T]]]:
    """
    Отделение первого элемента от остатка без материализации.

    Остаток возвращается как исходный итератор (однопроходный), что позволяет
    свёрткам работать потоково с O(1) дополнительной памятью.

    Args:
        values: Любой iterable (в том числе генератор)

    Returns:
        (first, rest_iterator) или None, если вход пуст

    Examples:
        >>> first, rest = split_first([1, 2, 3])
        >>> first, list(rest)
        (1, [2, 3])
        >>> split_first([]) is None
        True
    """
    iterator = iter(values)
    for first in iterator:
        return first, iterator
    return None


# =============================================================================
# SEQUENCE VIEW
# =============================================================================


class SequenceView(Sequence[T]):
    """
    Невладеющее окно [start, stop) поверх неизменяемого буфера.

    Используется как tail у NonEmptySequence: данные не копируются,
    view разделяет хранилище с исходной последовательностью.
    """

    __slots__ = ("_buffer", "_start", "_stop")

    def __init__(self, buffer: Tuple[T, ...], start: int = 0, stop: Optional[int] = None):
        if stop is None:
            stop = len(buffer)
        if not 0 <= start <= stop <= len(buffer):
            raise ValueError(
                f"Invalid view bounds [{start}, {stop}) for buffer of length {len(buffer)}"
            )
        self._buffer = buffer
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        positions = range(self._start, self._stop)
        if isinstance(index, slice):
            window = positions[index]
            if window.step == 1:
                return SequenceView(self._buffer, window.start, max(window.start, window.stop))
            return tuple(self._buffer[i] for i in window)
        try:
            return self._buffer[positions[index]]
        except IndexError:
            raise IndexError(f"SequenceView index {index} out of range") from None

    def __iter__(self) -> Iterator[T]:
        return islice(self._buffer, self._start, self._stop)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, bytes)) or not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"


# =============================================================================
# NON-EMPTY SEQUENCE
# =============================================================================


class NonEmptySequence(Sequence[T]):
    """
    Неизменяемая последовательность, содержащая хотя бы один элемент.

    Построение:
    - NonEmptySequence(head, tail) — явный head + tail (тотально)
    - NonEmptySequence.from_iterable(values) — None для пустого входа

    Examples:
        >>> values = NonEmptySequence(1, [2, 3])
        >>> values.head, list(values.tail), len(values)
        (1, [2, 3], 3)
        >>> NonEmptySequence.from_iterable([]) is None
        True
    """

    __slots__ = ("_storage",)

    def __init__(self, head: T, tail: Iterable[T] = ()):
        object.__setattr__(self, "_storage", (head, *tail))

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Optional["NonEmptySequence[T]"]:
        """
        Построение из произвольного iterable.

        Args:
            values: Исходные элементы (материализуются один раз)

        Returns:
            NonEmptySequence или None, если values пуст
        """
        storage = tuple(values)
        if not storage:
            return None
        return cls._from_storage(storage)

    @classmethod
    def _from_storage(cls, storage: Tuple[T, ...]) -> "NonEmptySequence[T]":
        # Вызывающий гарантирует непустой storage
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_storage", storage)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def head(self) -> T:
        """Первый элемент, O(1)."""
        return self._storage[0]

    @property
    def tail(self) -> SequenceView[T]:
        """Остальные элементы: view поверх того же буфера."""
        return SequenceView(self._storage, 1)

    def to_sequence(self) -> Tuple[T, ...]:
        """Базовый буфер, без копирования."""
        return self._storage

    def __len__(self) -> int:
        return len(self._storage)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[T, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._storage[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def map(self, transform: Callable[[T], U]) -> "NonEmptySequence[U]":
        """
        Поэлементное преобразование.

        Непустота сохраняется по построению: результат имеет ту же длину.
        """
        return NonEmptySequence._from_storage(tuple(map(transform, self._storage)))

    def reduce(
        self,
        function: Callable[[R, T], R],
        initial_transform: Optional[Callable[[T], R]] = None,
    ) -> R:
        """
        Тотальная свёртка слева.

        Args:
            function: Шаг свёртки (partial, element) -> partial
            initial_transform: Преобразование head в начальное значение
                (default: head как есть)

        Returns:
            function(...function(initial_transform(head), tail[0])..., tail[-1])

        Examples:
            >>> NonEmptySequence(1, [2, 3]).reduce(lambda a, b: a + b)
            6
            >>> NonEmptySequence("a", ["b"]).reduce(lambda a, b: a + [b], lambda h: [h])
            ['a', 'b']
        """
        accumulator = self.head if initial_transform is None else initial_transform(self.head)
        for element in self.tail:
            accumulator = function(accumulator, element)
        return accumulator

    # -------------------------------------------------------------------------
    # Equality / hashing
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonEmptySequence):
            return self._storage == other._storage
        return NotImplemented

    def __hash__(self) -> int:
        return hash((NonEmptySequence, self._storage))

    def __repr__(self) -> str:
        head, *tail = self._storage
        return f"NonEmptySequence({head!r}, {tail!r})"

    def __reduce__(self):
        return (NonEmptySequence._from_storage, (self._storage,))
