"""
Configuration — константы и конфигурация utilkit

Все лимиты зафиксированы как Final-константы; настраивается только логирование
(через переменные окружения UTILKIT_LOG_LEVEL / UTILKIT_LOG_FORMAT).
"""

import os
from dataclasses import dataclass, field
from typing import Final

# =============================================================================
# ЧИСЛОВЫЕ ЛИМИТЫ
# =============================================================================

# Верхняя граница беззнакового 64-битного диапазона
U64_MAX: Final[int] = 2**64 - 1

# 20! = 2432902008176640000 помещается в u64, 21! уже нет
FACTORIAL_MAX_N: Final[int] = 20

# =============================================================================
# КАЛЕНДАРЬ
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7

# Грубая аппроксимация: високосные годы не учитываются
DAYS_PER_YEAR_APPROX: Final[int] = 365

# =============================================================================
# STORAGE
# =============================================================================

FILE_ENCODING: Final[str] = "utf-8"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL_DEFAULT: Final[str] = "INFO"
LOG_FORMAT_DEFAULT: Final[str] = "text"
LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")


@dataclass(frozen=True)
class ToolkitConfig:
    """Снимок конфигурации utilkit."""

    file_encoding: str = FILE_ENCODING
    factorial_max_n: int = FACTORIAL_MAX_N
    log_level: str = LOG_LEVEL_DEFAULT
    log_format: str = LOG_FORMAT_DEFAULT
    log_formats: tuple[str, ...] = field(default=LOG_FORMATS, repr=False)

    def __post_init__(self) -> None:
        if self.log_format not in self.log_formats:
            raise ValueError(
                f"log_format must be one of {self.log_formats}, got {self.log_format!r}"
            )

    @classmethod
    def from_env(cls) -> "ToolkitConfig":
        """
        Конфигурация из переменных окружения.

        Returns:
            ToolkitConfig с log_level/log_format из окружения (или дефолты)

        Raises:
            ValueError: Если UTILKIT_LOG_FORMAT не из LOG_FORMATS
        """
        return cls(
            log_level=os.getenv("UTILKIT_LOG_LEVEL", LOG_LEVEL_DEFAULT).upper(),
            log_format=os.getenv("UTILKIT_LOG_FORMAT", LOG_FORMAT_DEFAULT).lower(),
        )
