"""
Date Formats — закрытый набор форматов дат

Таблица DATE_PATTERNS неизменяема (MappingProxyType), регистрация новых
форматов во время выполнения не поддерживается.

Рендеринг не зависит от locale процесса: названия месяцев берутся из
фиксированной английской таблицы, год дополняется нулями до 4 цифр.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class DateFormat(str, Enum):
    """Именованный формат даты"""

    DMY_SLASH = "DD/MM/YYYY"
    ISO = "YYYY-MM-DD"
    MDY_SLASH = "MM/DD/YYYY"
    LONG_ENGLISH = "Month DD, YYYY"  # только вывод


@dataclass(frozen=True)
class DatePattern:
    """
    Дескриптор формата.

    parse_pattern: шаблон strptime, None для форматов только на вывод
    render: шаблон str.format с полями year, month, day, month_name
    """

    parse_pattern: str | None
    render: str


MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DATE_PATTERNS: Final[Mapping[DateFormat, DatePattern]] = MappingProxyType(
    {
        DateFormat.DMY_SLASH: DatePattern("%d/%m/%Y", "{day:02d}/{month:02d}/{year:04d}"),
        DateFormat.ISO: DatePattern("%Y-%m-%d", "{year:04d}-{month:02d}-{day:02d}"),
        DateFormat.MDY_SLASH: DatePattern("%m/%d/%Y", "{month:02d}/{day:02d}/{year:04d}"),
        DateFormat.LONG_ENGLISH: DatePattern(None, "{month_name} {day:02d}, {year:04d}"),
    }
)

# Порядок попыток parse_date. DD/MM/YYYY раньше MM/DD/YYYY: неоднозначные
# строки вроде "03/04/2024" читаются как 3 апреля.
PARSE_PRIORITY: Final[tuple[DateFormat, ...]] = (
    DateFormat.ISO,
    DateFormat.DMY_SLASH,
    DateFormat.MDY_SLASH,
)


def resolve_format(name: str | DateFormat) -> DateFormat | None:
    """
    Имя формата → DateFormat.

    Returns:
        DateFormat, либо None для неизвестного имени
    """
    if isinstance(name, DateFormat):
        return name
    try:
        return DateFormat(name)
    except ValueError:
        return None


def supported_formats(parse_only: bool = False) -> tuple[str, ...]:
    """Имена поддерживаемых форматов (parse_only=True — только разбираемые)."""
    return tuple(
        fmt.value
        for fmt, pattern in DATE_PATTERNS.items()
        if not parse_only or pattern.parse_pattern is not None
    )
