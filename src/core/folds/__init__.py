"""
Collection folds — sum/product entry points over NonEmptySequence and iterables.

Every entry point routes through the fold dispatch table, so a type that supplies
a fold witness is always folded by that witness.
"""

from src.core.folds.sequence_folds import (
    map_and_product,
    map_and_product_non_empty,
    map_and_product_result,
    map_and_sum,
    map_and_sum_non_empty,
    map_and_sum_result,
    product_all,
    product_non_empty,
    product_result,
    sum_all,
    sum_non_empty,
    sum_result,
)

__all__ = [
    # NonEmptySequence (total)
    "sum_non_empty",
    "product_non_empty",
    "map_and_sum_non_empty",
    "map_and_product_non_empty",
    # Semigroup tier (Result)
    "sum_result",
    "product_result",
    "map_and_sum_result",
    "map_and_product_result",
    # Monoid tier (identity for empty)
    "sum_all",
    "product_all",
    "map_and_sum",
    "map_and_product",
]
