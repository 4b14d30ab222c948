"""
Date Ops — разбор, валидация, форматирование и разница дат

Примитив даты — datetime.date (пролептический григорианский календарь,
валидация високосных лет в конструкторе и strptime).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse_date пробует форматы строго в порядке PARSE_PRIORITY, первый успех побеждает
2. Ошибка parse_date относится к первому формату (YYYY-MM-DD)
3. validate_date_format / format_date не бросают exception для неизвестного формата
4. date_difference: все поля имеют знак дельты в днях, years без учёта високосных лет
"""

import logging
from datetime import date, datetime

from utilkit.core.dates.formats import (
    DATE_PATTERNS,
    MONTH_NAMES,
    PARSE_PRIORITY,
    DateFormat,
    resolve_format,
)
from utilkit.core.domain.date_difference import DateDifference
from utilkit.exceptions import DateParseError, InvalidDateError

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def make_date(year: int, month: int, day: int) -> date:
    """
    Явное создание даты с валидацией.

    Raises:
        InvalidDateError: Если комбинация не существует (например, 2023-02-29)
    """
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(year, month, day, str(e)) from e


def _as_date(value: date, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"{name} must be a date, got {type(value).__name__}")
    return value


def _strptime(text: str, fmt: DateFormat) -> date:
    # ValueError от strptime пробрасывается вызывающему
    pattern = DATE_PATTERNS[fmt].parse_pattern
    if pattern is None:
        raise ValueError(f"{fmt.value} is an output-only format")
    return datetime.strptime(text, pattern).date()


# =============================================================================
# РАЗБОР И ВАЛИДАЦИЯ
# =============================================================================


def parse_date(text: str) -> date:
    """
    Разбор даты по форматам в фиксированном порядке.

    Порядок: YYYY-MM-DD, DD/MM/YYYY, MM/DD/YYYY. Неоднозначные строки
    ("03/04/2024") всегда читаются как DD/MM/YYYY. Для однозначного разбора
    сначала проверьте формат через validate_date_format.

    Args:
        text: Строка с датой (пробелы по краям не обрезаются)

    Returns:
        Первая успешная интерпретация

    Raises:
        DateParseError: Если ни один формат не подошёл (причина — от YYYY-MM-DD)

    Examples:
        >>> parse_date("2024-12-25")
        datetime.date(2024, 12, 25)
        >>> parse_date("25/12/2024")
        datetime.date(2024, 12, 25)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    first_error: ValueError | None = None
    for fmt in PARSE_PRIORITY:
        try:
            parsed = _strptime(text, fmt)
        except ValueError as e:
            if first_error is None:
                first_error = e
            continue
        logger.debug("Parsed %r as %s", text, fmt.value, extra={"format_name": fmt.value})
        return parsed

    first_format = PARSE_PRIORITY[0]
    raise DateParseError(text, first_format.value, str(first_error)) from first_error


def validate_date_format(text: str, format_name: str) -> bool:
    """
    Проверка, что text — валидная дата в формате format_name.

    Неизвестный формат и формат только на вывод дают False.

    Examples:
        >>> validate_date_format("25/12/2024", "DD/MM/YYYY")
        True
        >>> validate_date_format("2023-02-29", "YYYY-MM-DD")
        False
        >>> validate_date_format("2024-12-25", "unknown")
        False
    """
    fmt = resolve_format(format_name)
    if fmt is None or DATE_PATTERNS[fmt].parse_pattern is None:
        return False
    if not isinstance(text, str):
        return False

    try:
        _strptime(text, fmt)
    except ValueError:
        return False
    return True


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_date(value: date, format_name: str) -> str | None:
    """
    Форматирование даты.

    Args:
        value: Дата
        format_name: Одно из DD/MM/YYYY, YYYY-MM-DD, MM/DD/YYYY, Month DD, YYYY

    Returns:
        Строка, либо None для неизвестного формата

    Examples:
        >>> format_date(date(2024, 12, 25), "Month DD, YYYY")
        'December 25, 2024'
        >>> format_date(date(2024, 12, 25), "DD.MM.YYYY") is None
        True
    """
    value = _as_date(value, "value")
    fmt = resolve_format(format_name)
    if fmt is None:
        return None

    return DATE_PATTERNS[fmt].render.format(
        year=value.year,
        month=value.month,
        day=value.day,
        month_name=MONTH_NAMES[value.month - 1],
    )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def date_difference(date1: date, date2: date) -> DateDifference:
    """
    Разница date2 - date1 в днях, неделях и (приближённо) годах.

    Examples:
        >>> date_difference(date(2024, 1, 1), date(2024, 12, 31))
        DateDifference(days=365, weeks=52, years=1)
    """
    d1 = _as_date(date1, "date1")
    d2 = _as_date(date2, "date2")
    return DateDifference.from_days((d2 - d1).days)
