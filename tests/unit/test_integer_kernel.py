"""
Тесты для модуля Integer Kernel

Проверяет:
1. Бинарный НОД (Stein) против эталонного math.gcd
2. Свойства НОД: симметрия, нейтральность нуля
3. НОК и его связь с НОД
4. Переполнение НОК за пределы u16
5. Проверки разрядности и валидацию аргументов
"""

import math

import pytest

from src.core.math.integer_kernel import (
    I16_MAX,
    I16_MIN,
    U16_BITS,
    U16_MAX,
    FixedWidthOverflow,
    fits_i16,
    fits_u16,
    gcd,
    lcm,
    trailing_zeros,
    try_i16,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestWidthConstants:
    """Тесты констант разрядности"""

    def test_u16_bounds(self) -> None:
        assert U16_BITS == 16
        assert U16_MAX == 65535

    def test_i16_bounds(self) -> None:
        assert I16_MIN == -32768
        assert I16_MAX == 32767


# =============================================================================
# ТЕСТЫ TRAILING ZEROS
# =============================================================================


class TestTrailingZeros:
    """Тесты для trailing_zeros"""

    @pytest.mark.parametrize(
        "value, expected",
        [(1, 0), (2, 1), (12, 2), (40, 3), (32768, 15), (65535, 0)],
    )
    def test_known_values(self, value: int, expected: int) -> None:
        assert trailing_zeros(value) == expected

    def test_zero_returns_width(self) -> None:
        """Для нуля возвращается полная ширина слова"""
        assert trailing_zeros(0) == 16


# =============================================================================
# ТЕСТЫ НОД
# =============================================================================


class TestGcd:
    """Тесты для gcd"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (12, 18, 6),
            (48, 180, 12),
            (17, 5, 1),
            (65535, 255, 255),
            (32768, 65535, 1),
            (32768, 49152, 16384),
            (65535, 65535, 65535),
        ],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        assert gcd(a, b) == expected

    def test_zero_operand_returns_other(self) -> None:
        """gcd(a, 0) == a и gcd(0, b) == b"""
        assert gcd(42, 0) == 42
        assert gcd(0, 42) == 42
        assert gcd(65535, 0) == 65535

    def test_both_zero(self) -> None:
        assert gcd(0, 0) == 0

    def test_symmetry(self) -> None:
        """gcd(a, b) == gcd(b, a)"""
        for a in range(0, 100, 7):
            for b in range(0, 300, 11):
                assert gcd(a, b) == gcd(b, a)

    def test_matches_reference_small_range(self) -> None:
        """Совпадение с math.gcd на полном квадрате малых значений"""
        for a in range(0, 130):
            for b in range(0, 130):
                assert gcd(a, b) == math.gcd(a, b)

    def test_matches_reference_large_values(self) -> None:
        """Совпадение с math.gcd около верхней границы u16"""
        for a in range(65000, 65536, 37):
            for b in range(30000, 33000, 113):
                assert gcd(a, b) == math.gcd(a, b)

    def test_negative_input_raises(self) -> None:
        with pytest.raises(ValueError, match="must be in 0..65535"):
            gcd(-1, 2)

    def test_input_above_u16_raises(self) -> None:
        with pytest.raises(ValueError, match="must be in 0..65535"):
            gcd(1, 65536)

    def test_non_int_raises(self) -> None:
        with pytest.raises(TypeError, match="must be an int"):
            gcd(1.5, 2)  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="must be an int"):
            gcd(True, 2)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ НОК
# =============================================================================


class TestLcm:
    """Тесты для lcm"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(4, 6, 12), (3, 5, 15), (256, 256, 256), (255, 257, 65535), (1, 32767, 32767)],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        assert lcm(a, b) == expected

    def test_zero_operand(self) -> None:
        """НОК с нулём равен нулю"""
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0
        assert lcm(0, 0) == 0

    def test_lcm_times_gcd_equals_product(self) -> None:
        """lcm(a, b) * gcd(a, b) == a * b, когда произведение помещается в u16"""
        for a in range(1, 256, 3):
            for b in range(1, 256, 5):
                if a * b <= U16_MAX:
                    assert lcm(a, b) * gcd(a, b) == a * b

    def test_overflow_raises(self) -> None:
        """НОК больше 65535 — FixedWidthOverflow, без wraparound"""
        with pytest.raises(FixedWidthOverflow, match="does not fit in 16 bits"):
            lcm(256, 257)

        with pytest.raises(FixedWidthOverflow):
            lcm(32767, 32765)

    def test_large_product_with_large_gcd_fits(self) -> None:
        """Произведение больше u16, но сам НОК помещается"""
        assert lcm(32768, 16384) == 32768


# =============================================================================
# ТЕСТЫ ПРОВЕРОК РАЗРЯДНОСТИ
# =============================================================================


class TestWidthChecks:
    """Тесты для fits_u16 / fits_i16 / try_i16"""

    def test_fits_u16(self) -> None:
        assert fits_u16(0)
        assert fits_u16(65535)
        assert not fits_u16(-1)
        assert not fits_u16(65536)

    def test_fits_i16(self) -> None:
        assert fits_i16(-32768)
        assert fits_i16(32767)
        assert not fits_i16(-32769)
        assert not fits_i16(32768)

    def test_try_i16(self) -> None:
        assert try_i16(-32768) == -32768
        assert try_i16(0) == 0
        assert try_i16(32768) is None
        assert try_i16(65535) is None
