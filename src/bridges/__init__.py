"""Bridges — адаптеры встроенных типов Python к иерархии способностей.

- floating_point: Real (float) как Field + AbsoluteValueDecomposable
"""

from .floating_point import Real

__all__ = [
    "Real",
]
