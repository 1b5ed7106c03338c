"""
Core math modules для fraction32

Целочисленное ядро фиксированной разрядности: НОД, НОК, проверки u16/i16.
"""

# Integer Kernel
from src.core.math.integer_kernel import (
    # Width constants
    I16_MAX,
    I16_MIN,
    U16_BITS,
    U16_MAX,
    # Exceptions
    FixedWidthOverflow,
    # Width checks
    fits_i16,
    fits_u16,
    require_u16,
    trailing_zeros,
    try_i16,
    # GCD / LCM
    gcd,
    lcm,
)

__all__ = [
    # Integer Kernel — Width constants
    "I16_MAX",
    "I16_MIN",
    "U16_BITS",
    "U16_MAX",
    # Integer Kernel — Exceptions
    "FixedWidthOverflow",
    # Integer Kernel — Width checks
    "fits_i16",
    "fits_u16",
    "require_u16",
    "trailing_zeros",
    "try_i16",
    # Integer Kernel — GCD / LCM
    "gcd",
    "lcm",
]
