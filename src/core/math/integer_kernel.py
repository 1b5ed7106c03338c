"""
Integer Kernel — GCD / LCM над 16-битными беззнаковыми величинами

Модуль содержит целочисленное ядро для точной рациональной арифметики:
- Бинарный алгоритм НОД (Stein's algorithm): только вычитание и сдвиги
- НОК, выведенный из НОД
- Проверки попадания значения в фиксированную разрядность (u16 / i16)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все входы gcd/lcm лежат в диапазоне u16 (0..65535)
2. Результат никогда не выходит за u16 молча (FixedWidthOverflow)
3. Все операции детерминированы, без аллокаций и побочных эффектов
"""

from typing import Final, Optional

# =============================================================================
# РАЗРЯДНОСТЬ
# =============================================================================

U16_BITS: Final[int] = 16
U16_MAX: Final[int] = 0xFFFF

I16_MIN: Final[int] = -0x8000
I16_MAX: Final[int] = 0x7FFF


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FixedWidthOverflow(Exception):
    """
    Значение не помещается в рабочую разрядность.

    Молчаливое переполнение (wraparound) запрещено: оно разрушило бы
    точность результата.
    """

    pass


# =============================================================================
# ПРОВЕРКИ РАЗРЯДНОСТИ
# =============================================================================


def fits_u16(value: int) -> bool:
    """True если value помещается в u16 (0..65535)."""
    return 0 <= value <= U16_MAX


def fits_i16(value: int) -> bool:
    """True если value помещается в i16 (-32768..32767)."""
    return I16_MIN <= value <= I16_MAX


def try_i16(value: int) -> Optional[int]:
    """
    Checked-сужение до i16.

    Returns:
        value если помещается в i16, иначе None
    """
    if fits_i16(value):
        return value
    return None


def require_u16(value: int, name: str) -> int:
    """
    Валидация беззнакового 16-битного аргумента.

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне диапазона u16
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not fits_u16(value):
        raise ValueError(f"{name} must be in 0..{U16_MAX}, got {value}")

    return value


def trailing_zeros(value: int) -> int:
    """
    Количество младших нулевых битов u16.

    Для нуля возвращает U16_BITS.

    Examples:
        >>> trailing_zeros(12)
        2
        >>> trailing_zeros(0)
        16
    """
    if value == 0:
        return U16_BITS
    return (value & -value).bit_length() - 1


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по бинарному алгоритму (Stein).

    Не использует деление: только вычитание и сдвиги.

    Алгоритм:
        1. Если один из операндов 0 — вернуть a | b
        2. shift = trailing_zeros(a | b) — общая степень двойки
        3. Убрать все множители 2 из каждого операнда
        4. Пока a != b: вычесть меньшее из большего, убрать множители 2
        5. Вернуть a << shift

    Args:
        a: Первый операнд (u16)
        b: Второй операнд (u16)

    Returns:
        НОД(a, b) в диапазоне u16; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(7, 0)
        7
        >>> gcd(0, 0)
        0
    """
    require_u16(a, "a")
    require_u16(b, "b")

    if a == 0 or b == 0:
        return a | b

    shift = trailing_zeros(a | b)

    a >>= trailing_zeros(a)
    b >>= trailing_zeros(b)

    while a != b:
        if a > b:
            a -= b
            a >>= trailing_zeros(a)
        else:
            b -= a
            b >>= trailing_zeros(b)

    return a << shift


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: a * b / gcd(a, b).

    Если один из операндов 0 — результат 0 (в том числе lcm(0, 0)).

    Args:
        a: Первый операнд (u16)
        b: Второй операнд (u16)

    Returns:
        НОК(a, b) в диапазоне u16

    Raises:
        FixedWidthOverflow: Если НОК не помещается в u16

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(300, 301)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FixedWidthOverflow: ...
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0

    result = a // divisor * b

    if not fits_u16(result):
        raise FixedWidthOverflow(
            f"lcm({a}, {b}) = {result} does not fit in {U16_BITS} bits"
        )

    return result
