"""
Contract Validation Module

JSON Schema контракты сериализованных моделей utilkit.
"""

from .validators import (
    SCHEMA_DIR,
    available_contracts,
    contract_errors,
    load_validator,
    validate_contract,
)

__all__ = [
    "SCHEMA_DIR",
    "available_contracts",
    "contract_errors",
    "load_validator",
    "validate_contract",
]
