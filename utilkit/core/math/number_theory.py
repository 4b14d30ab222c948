"""
Number Theory — factorial, GCD, primality

Чистая целочисленная математика в беззнаковом 64-битном домене, без I/O.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. factorial(n) для n > FACTORIAL_MAX_N → None (нет представимого результата)
2. gcd коммутативен, gcd(0, 0) == 0
3. is_prime возвращает bool, никогда не бросает exception для валидного n
"""

from utilkit.config import FACTORIAL_MAX_N
from utilkit.core.math.integer_safeguards import (
    checked_mul,
    integer_sqrt,
    validate_unsigned,
)


def factorial(n: int) -> int | None:
    """
    Факториал n! в пределах u64.

    Граница FACTORIAL_MAX_N = 20 сама по себе исключает переполнение, но каждое
    умножение дополнительно проверяется через checked_mul, чтобы контракт
    сохранялся при изменении границы.

    Args:
        n: Неотрицательное целое

    Returns:
        n!, либо None если результат не помещается в u64

    Raises:
        TypeError / ValueError: Если n вне беззнакового 64-битного домена

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
        >>> factorial(21) is None
        True
    """
    validate_unsigned(n, "n")

    if n > FACTORIAL_MAX_N:
        return None

    result = 1
    for i in range(2, n + 1):
        result = checked_mul(result, i)
        if result is None:
            return None
    return result


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    validate_unsigned(a, "a")
    validate_unsigned(b, "b")

    # Остаток строго убывает, цикл всегда завершается
    while b != 0:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    """
    Проверка простоты пробным делением.

    0 и 1 не простые, 2 простое, чётные > 2 составные. Нечётные кандидаты
    проверяются делением на нечётные делители от 3 до isqrt(n) включительно.

    Examples:
        >>> is_prime(2)
        True
        >>> is_prime(17)
        True
        >>> is_prime(1)
        False
    """
    validate_unsigned(n, "n")

    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    limit = integer_sqrt(n)
    for divisor in range(3, limit + 1, 2):
        if n % divisor == 0:
            return False
    return True
