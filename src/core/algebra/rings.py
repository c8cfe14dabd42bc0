"""
Rings — составные маркеры колец и полей

Не добавляют операций: позволяют downstream-коду требовать набор
способностей одним типом.

    Ring         = AdditiveAbelianGroup + MultiplicativeMonoid
    DivisionRing = Ring + MultiplicativeMonoidWithUnits (ноль не обратим)
    Field        = DivisionRing + коммутативность умножения

Дистрибутивность предполагается, не проверяется.
"""

from src.core.algebra.additive import AdditiveAbelianGroup
from src.core.algebra.multiplicative import (
    MultiplicativeCommutativeMonoidWithUnits,
    MultiplicativeMonoid,
    MultiplicativeMonoidWithUnits,
)


class Ring(AdditiveAbelianGroup, MultiplicativeMonoid):
    """Кольцо с единицей."""


class DivisionRing(Ring, MultiplicativeMonoidWithUnits):
    """Тело: все ненулевые элементы обратимы (через Unit-свидетель)."""


class Field(DivisionRing, MultiplicativeCommutativeMonoidWithUnits):
    """Поле: коммутативное тело."""
