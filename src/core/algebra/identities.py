"""
Identities — маркеры нейтральных элементов

- HasZero: аддитивная единица (zero) + проверка is_zero
- HasOne:  мультипликативная единица (one) + проверка is_one

Проверки по умолчанию сравнивают с нейтральным элементом через ==.
"""

from abc import ABC, abstractmethod


class HasZero(ABC):
    """Аддитивная единица (0)."""

    @classmethod
    @abstractmethod
    def zero(cls):
        """Нейтральный элемент сложения."""

    @property
    def is_zero(self) -> bool:
        return self == type(self).zero()


class HasOne(ABC):
    """Мультипликативная единица (1)."""

    @classmethod
    @abstractmethod
    def one(cls):
        """Нейтральный элемент умножения."""

    @property
    def is_one(self) -> bool:
        return self == type(self).one()
