"""
String Ops — палиндромы, подсчёт символов, разворот строки

Все операции работают по code points (str), а не по байтам UTF-8.

Ограничение is_palindrome: поддерживаются символы, у которых lower() даёт
ровно один символ. Для символов с многосимвольной свёрткой регистра
(например, "İ" → "i̇") берётся только первый code point результата.
"""


def _require_str(value: str, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _lower_single(ch: str) -> str:
    # one-to-one: лишние code points многосимвольной свёртки отбрасываются
    return ch.lower()[0]


def is_palindrome(s: str) -> bool:
    """
    Проверка палиндрома без учёта регистра и не-алфавитно-цифровых символов.

    Examples:
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
        >>> is_palindrome("hello")
        False
        >>> is_palindrome("")
        True
    """
    _require_str(s, "s")
    cleaned = [_lower_single(ch) for ch in s if ch.isalnum()]
    return cleaned == cleaned[::-1]


def count_char(s: str, target: str) -> int:
    """
    Количество вхождений символа target в s (с учётом регистра).

    Args:
        s: Строка для поиска
        target: Ровно один символ (code point)

    Raises:
        ValueError: Если target не один символ
    """
    _require_str(s, "s")
    _require_str(target, "target")
    if len(target) != 1:
        raise ValueError(f"target must be a single character, got {target!r}")
    return s.count(target)


def reverse_string(s: str) -> str:
    """Разворот строки по code points: reverse_string("café") == "éfac"."""
    _require_str(s, "s")
    return s[::-1]
