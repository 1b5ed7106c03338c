"""
Domain models and value objects.

Contains the Fraction32 exact fixed-width rational value type.
"""

from src.core.domain.fraction import (
    DENOMINATOR_MAX,
    NEG_ONE,
    NUMERATOR_MAX,
    NUMERATOR_MIN,
    ONE,
    ZERO,
    Fraction32,
    FractionContractViolation,
    FractionDivisionByZero,
    FractionOverflow,
    ParseErrorKind,
    ParseFractionError,
)

__all__ = [
    # Ranges
    "NUMERATOR_MIN",
    "NUMERATOR_MAX",
    "DENOMINATOR_MAX",
    # Model
    "Fraction32",
    "ZERO",
    "ONE",
    "NEG_ONE",
    # Exceptions
    "FractionContractViolation",
    "FractionOverflow",
    "FractionDivisionByZero",
    "ParseErrorKind",
    "ParseFractionError",
]
