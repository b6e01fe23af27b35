"""
Contract Validation Module

Проверка wire-представления (JSON) обёрток и моделей с обёртками
по JSON Schema, сгенерированной pydantic.
"""

from cslist.core.contracts.validators import (
    WireContractValidator,
    validate_wire,
    wire_schema,
)

__all__ = [
    "WireContractValidator",
    "wire_schema",
    "validate_wire",
]
