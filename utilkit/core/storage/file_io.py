"""
File I/O — чтение, перезапись и дозапись текстовых файлов (UTF-8)

Чтение идёт с newline="", запись в бинарном режиме, поэтому содержимое
сохраняется байт-в-байт (без трансляции \\r\\n). Дескриптор живёт только
в пределах одного вызова.

Текст кодируется в UTF-8 до открытия файла: если content не кодируется,
существующий файл не усекается и не изменяется.

Блокировок нет: конкурентные писатели в один путь должны синхронизироваться
сами. Ошибки не повторяются автоматически и не подавляются, каждая
оборачивается в StorageError с причиной от ОС.
"""

import logging
import os

from utilkit.config import FILE_ENCODING
from utilkit.core.domain.file_operation import FileOperation, FileOperationKind
from utilkit.exceptions import StorageError

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike

READ_OPERATION = "read"


def _fail(operation: str, path: PathLike, exc: Exception) -> StorageError:
    if isinstance(exc, UnicodeDecodeError):
        reason = f"invalid UTF-8 at byte {exc.start}: {exc.reason}"
    elif isinstance(exc, UnicodeEncodeError):
        reason = f"cannot encode character at index {exc.start}: {exc.reason}"
    elif isinstance(exc, OSError) and exc.strerror:
        reason = exc.strerror
    else:
        reason = str(exc)

    error = StorageError(operation, path, reason)
    logger.warning(
        "File %s failed for %s: %s",
        operation,
        error.path,
        reason,
        extra={"operation": operation, "path": error.path, "reason": reason},
    )
    return error


def _write(path: PathLike, content: str, kind: FileOperationKind, mode: str) -> FileOperation:
    if not isinstance(content, str):
        raise TypeError(f"content must be a str, got {type(content).__name__}")

    # Кодирование до open(): режим "wb" усекает файл сразу при открытии
    try:
        data = content.encode(FILE_ENCODING)
    except UnicodeEncodeError as e:
        raise _fail(kind.value, path, e) from e

    try:
        with open(path, mode) as f:
            f.write(data)
    except OSError as e:
        raise _fail(kind.value, path, e) from e

    result = FileOperation(operation=kind, path=os.fspath(path), chars=len(content))
    logger.debug(
        "File %s: %d chars to %s",
        kind.value,
        result.chars,
        result.path,
        extra={"operation": kind.value, "path": result.path, "chars": result.chars},
    )
    return result


def read_file(path: PathLike) -> str:
    """
    Чтение всего файла как UTF-8 текста.

    Args:
        path: Путь к файлу

    Returns:
        Содержимое файла

    Raises:
        StorageError: Файл не существует, не читается, является каталогом
            или содержит невалидный UTF-8
    """
    try:
        with open(path, "r", encoding=FILE_ENCODING, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise _fail(READ_OPERATION, path, e) from e

    logger.debug(
        "File read: %d chars from %s",
        len(content),
        os.fspath(path),
        extra={"operation": READ_OPERATION, "path": os.fspath(path), "chars": len(content)},
    )
    return content


def write_file(path: PathLike, content: str) -> FileOperation:
    """
    Запись content в файл: создаёт файл или полностью заменяет содержимое.

    Атомарность обеспечивается только файловой системой. Если content
    не кодируется в UTF-8, файл остаётся нетронутым.

    Raises:
        StorageError: Каталог не существует, недоступен для записи,
            или content не кодируется в UTF-8
    """
    return _write(path, content, FileOperationKind.WRITE, "wb")


def append_to_file(path: PathLike, content: str) -> FileOperation:
    """
    Дозапись content в конец файла (файл создаётся, если отсутствует).

    Существующие байты не изменяются.

    Raises:
        StorageError: Те же условия, что и для write_file
    """
    return _write(path, content, FileOperationKind.APPEND, "ab")
