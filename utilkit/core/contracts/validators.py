"""
Contract Validation — проверка сериализованных результатов по JSON Schema

Каждая доменная модель знает имя своего контракта (contract_name) и
проверяет себя в to_contract(), поэтому наружу не выходит dict, не
соответствующий схеме.

Схемы лежат в schema/ внутри пакета. Валидатор для схемы создаётся один
раз: схема проходит meta-validation (Draft 2020-12) и кэшируется по пути.
"""

import json
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Кэш: путь к файлу схемы → готовый валидатор
_VALIDATORS: dict[Path, Draft202012Validator] = {}


def available_contracts(schema_dir: Path = SCHEMA_DIR) -> tuple[str, ...]:
    """Имена контрактов, для которых есть схема."""
    return tuple(sorted(p.stem for p in schema_dir.glob("*.json")))


def load_validator(name: str, schema_dir: Path = SCHEMA_DIR) -> Draft202012Validator:
    """
    Валидатор для контракта name.

    Raises:
        FileNotFoundError: Если схемы нет
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{name}.json"
    cached = _VALIDATORS.get(schema_path)
    if cached is not None:
        return cached

    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e

    validator = Draft202012Validator(schema)
    _VALIDATORS[schema_path] = validator
    return validator


def validate_contract(name: str, data: dict[str, Any]) -> dict[str, Any]:
    """
    Проверка data по контракту name.

    Returns:
        data без изменений (для использования в return)

    Raises:
        jsonschema.ValidationError: Если data не соответствует схеме
    """
    load_validator(name).validate(data)
    return data


def contract_errors(name: str, data: dict[str, Any]) -> list[str]:
    """Сообщения всех нарушений контракта (пустой список — data валидна)."""
    return sorted(error.message for error in load_validator(name).iter_errors(data))
