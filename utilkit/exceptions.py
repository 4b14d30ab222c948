"""
Exceptions — иерархия ошибок utilkit

Три класса исходов никогда не смешиваются:
1. Отсутствие результата (factorial overflow, неизвестный формат в format_date) → None
2. Некорректный ввод (parse_date) → DateParseError / InvalidDateError
3. Ошибка ресурса (storage) → StorageError с причиной от ОС

Ожидаемые ветки (например, "число не простое") exception не используют.
"""

import os


class UtilkitError(Exception):
    """Базовый класс для всех ошибок utilkit."""

    pass


# =============================================================================
# CALENDAR
# =============================================================================


class DateParseError(UtilkitError, ValueError):
    """
    Текст не удалось интерпретировать как дату ни в одном из форматов.

    Attributes:
        text: Исходная строка
        format_name: Формат, к которому относится сообщение об ошибке
        reason: Описание причины (сообщение strptime)
    """

    def __init__(self, text: str, format_name: str, reason: str):
        self.text = text
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} as {format_name}: {reason}")


class InvalidDateError(UtilkitError, ValueError):
    """Комбинация (year, month, day) не является валидной датой."""

    def __init__(self, year: int, month: int, day: int, reason: str):
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        super().__init__(f"Invalid date {year}-{month}-{day}: {reason}")


# =============================================================================
# STORAGE
# =============================================================================


class StorageError(UtilkitError):
    """
    Ошибка файловой операции.

    Всегда создаётся через `raise ... from exc`, поэтому исходный OSError /
    UnicodeDecodeError доступен в __cause__.

    Attributes:
        operation: "read" | "write" | "append"
        path: Путь, к которому обращалась операция
        reason: Причина от ОС (strerror) или описание ошибки декодирования
    """

    def __init__(self, operation: str, path: str | os.PathLike, reason: str):
        self.operation = operation
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"{operation} failed for {self.path!r}: {reason}")
