"""
Domain value objects.

Immutable building blocks with no dependency on the capability hierarchy:
NonEmptySequence, Result, the algebra error taxonomy and invertibility witnesses.
"""

from src.core.domain.errors import (
    AlgebraError,
    AlgebraErrorKind,
    AnyLeafError,
    DivisionByNonUnit,
    EmptyCollection,
    LeafAlgebraError,
    ReciprocalUnavailable,
    map_to_algebra_error,
    to_algebra_error,
)
from src.core.domain.non_empty import NonEmptySequence, SequenceView, split_first
from src.core.domain.result import Err, Ok, Result, ResultUnwrapError
from src.core.domain.witnesses import (
    MultiplicativeInvertible,
    NonZero,
    Unit,
    divide_by_witness,
    is_invertible_witness,
)

__all__ = [
    # NonEmptySequence
    "NonEmptySequence",
    "SequenceView",
    "split_first",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultUnwrapError",
    # Errors
    "AlgebraErrorKind",
    "LeafAlgebraError",
    "ReciprocalUnavailable",
    "DivisionByNonUnit",
    "EmptyCollection",
    "AnyLeafError",
    "AlgebraError",
    "to_algebra_error",
    "map_to_algebra_error",
    # Witnesses
    "MultiplicativeInvertible",
    "Unit",
    "NonZero",
    "divide_by_witness",
    "is_invertible_witness",
]
