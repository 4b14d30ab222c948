"""
Integer Safeguards — безопасные целочисленные примитивы

Модуль эмулирует беззнаковый 64-битный домен поверх int произвольной точности:
- Валидация аргументов (тип int, диапазон [0, U64_MAX])
- Checked-умножение: переполнение u64 → None, а не "обёрнутое" значение
- Точный целочисленный квадратный корень
- Деление с усечением к нулю (в отличие от floor-деления //)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результаты никогда не выходят за U64_MAX молча
2. bool не принимается как целое число
3. Все операции детерминированы и не используют float
"""

import math

from utilkit.config import U64_MAX

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_unsigned(value: int, name: str) -> None:
    """
    Валидация, что значение является целым из беззнакового 64-битного диапазона.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value < 0 или value > U64_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} must be <= {U64_MAX}, got {value}")


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_mul(a: int, b: int, limit: int = U64_MAX) -> int | None:
    """
    Умножение с проверкой переполнения.

    Args:
        a: Первый множитель (>= 0)
        b: Второй множитель (>= 0)
        limit: Максимально представимое значение (default: U64_MAX)

    Returns:
        a * b, либо None если произведение больше limit

    Examples:
        >>> checked_mul(6, 7)
        42
        >>> checked_mul(2**63, 2) is None
        True
    """
    product = a * b
    if product > limit:
        return None
    return product


def integer_sqrt(n: int) -> int:
    """
    Точный floor(sqrt(n)) без float.

    Примечание: int(math.sqrt(n)) теряет точность около полных квадратов
    больше 2**52, поэтому используется math.isqrt.
    """
    return math.isqrt(n)


def truncating_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // округляет к минус бесконечности (-8 // 7 == -2),
    здесь результат симметричен по знаку (-8 → -1).

    Raises:
        ZeroDivisionError: Если denominator == 0
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
