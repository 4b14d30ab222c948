"""
FileOperation — запись об успешной файловой операции

Возвращается из write_file / append_to_file. Файловых дескрипторов или
буферов не хранит, только метаданные вызова.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from utilkit.core.contracts import validate_contract


class FileOperationKind(str, Enum):
    """Тип файловой операции"""

    WRITE = "write"
    APPEND = "append"


class FileOperation(BaseModel):
    """Результат write/append."""

    operation: FileOperationKind = Field(..., description="Тип операции")
    path: str = Field(..., min_length=1, description="Путь к файлу")
    chars: int = Field(..., ge=0, description="Количество записанных символов")

    contract_name: ClassVar[str] = "file_operation"

    model_config = {"frozen": True}

    def to_contract(self) -> dict[str, Any]:
        """Сериализация с проверкой по контракту file_operation."""
        return validate_contract(self.contract_name, self.model_dump(mode="json"))
