"""
Core algebra — иерархия способностей

Контракты (аддитивные и мультипликативные), выбор n-арной свёртки,
кольца/поля, знак и модули.
"""

# Dispatch
from src.core.algebra.dispatch import (
    DERIVED_MARKER,
    FoldOperation,
    FoldTier,
    derived,
    fold_tier,
    resolve_fold,
    supplies,
)

# Identities
from src.core.algebra.identities import HasOne, HasZero

# Additive
from src.core.algebra.additive import (
    ADDITIVE_FOLD,
    AdditiveAbelianGroup,
    AdditiveCombinable,
    AdditiveCommutativeMonoid,
    AdditiveFoldable,
    AdditiveGroup,
    AdditiveMonoid,
    AdditiveSemigroup,
    resolve_sum,
)

# Multiplicative
from src.core.algebra.multiplicative import (
    MULTIPLICATIVE_FOLD,
    MultiplicativeCombinable,
    MultiplicativeCommutativeGroup,
    MultiplicativeCommutativeMonoid,
    MultiplicativeCommutativeMonoidWithUnits,
    MultiplicativeCommutativeSemigroup,
    MultiplicativeFoldable,
    MultiplicativeGroup,
    MultiplicativeMonoid,
    MultiplicativeMonoidWithUnits,
    MultiplicativeSemigroup,
    resolve_product,
)

# Rings
from src.core.algebra.rings import DivisionRing, Field, Ring

# Sign
from src.core.algebra.sign import (
    AbsoluteValueDecomposable,
    Signed,
    Signum,
    absolutes,
    signum_product,
)

# Modules
from src.core.algebra.modules import Bimodule, LeftModule, RightModule, WeightedTerm

__all__ = [
    # Dispatch
    "DERIVED_MARKER",
    "FoldOperation",
    "FoldTier",
    "derived",
    "fold_tier",
    "resolve_fold",
    "supplies",
    # Identities
    "HasZero",
    "HasOne",
    # Additive
    "ADDITIVE_FOLD",
    "AdditiveCombinable",
    "AdditiveFoldable",
    "AdditiveSemigroup",
    "AdditiveMonoid",
    "AdditiveCommutativeMonoid",
    "AdditiveGroup",
    "AdditiveAbelianGroup",
    "resolve_sum",
    # Multiplicative
    "MULTIPLICATIVE_FOLD",
    "MultiplicativeCombinable",
    "MultiplicativeFoldable",
    "MultiplicativeSemigroup",
    "MultiplicativeMonoid",
    "MultiplicativeGroup",
    "MultiplicativeMonoidWithUnits",
    "MultiplicativeCommutativeSemigroup",
    "MultiplicativeCommutativeMonoid",
    "MultiplicativeCommutativeGroup",
    "MultiplicativeCommutativeMonoidWithUnits",
    "resolve_product",
    # Rings
    "Ring",
    "DivisionRing",
    "Field",
    # Sign
    "Signum",
    "Signed",
    "AbsoluteValueDecomposable",
    "absolutes",
    "signum_product",
    # Modules
    "LeftModule",
    "RightModule",
    "Bimodule",
    "WeightedTerm",
]
