"""
Logging setup для приложений, использующих utilkit.

Библиотека сама обработчики не добавляет (только NullHandler в utilkit/__init__),
setup_logging вызывается приложением один раз при старте.
"""

import json
import logging
from datetime import datetime, timezone

from utilkit.config import ToolkitConfig

# Дополнительные поля, которые модули передают через extra=
_EXTRA_FIELDS = ("operation", "path", "chars", "format_name", "reason")


class JSONFormatter(logging.Formatter):
    """Форматирование записей лога в JSON (одна строка на запись)."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    logger_name: str = "utilkit",
) -> logging.Handler:
    """
    Настройка логирования utilkit.

    Args:
        level: Уровень ("DEBUG", "INFO", ...); None → из ToolkitConfig.from_env()
        fmt: "text" или "json"; None → из ToolkitConfig.from_env()
        logger_name: Логгер, к которому подключается обработчик

    Returns:
        Добавленный обработчик (чтобы вызывающий мог его снять)
    """
    config = ToolkitConfig.from_env()
    level = (level or config.log_level).upper()
    fmt = fmt or config.log_format
    if fmt not in config.log_formats:
        raise ValueError(f"fmt must be one of {config.log_formats}, got {fmt!r}")

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))
    return handler
