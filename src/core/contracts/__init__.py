"""
Contract Validation Module

Валидация сериализованных ошибок алгебры против JSON Schema.
"""

from .validators import (
    AlgebraErrorContract,
    dump_algebra_error,
    load_algebra_error,
    validate_algebra_error_payload,
)

__all__ = [
    # Classes
    "AlgebraErrorContract",
    # Functions
    "dump_algebra_error",
    "load_algebra_error",
    "validate_algebra_error_payload",
]
