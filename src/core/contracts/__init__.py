"""
Contract Validation Module

Модуль для валидации JSON контрактов fraction32.
"""

from .validators import (
    ContractValidator,
    FractionValidator,
    SchemaLoader,
    load_fraction,
    validate_fraction,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    # Functions
    "validate_fraction",
    "load_fraction",
]
