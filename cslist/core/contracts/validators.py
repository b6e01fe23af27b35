"""
JSON Schema Wire Contract Validators

Модуль для валидации wire-данных (JSON) согласно JSON Schema, которую
pydantic генерирует для обёрток CS/CSArray и моделей, их содержащих.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Контракт обёртки: {"type": "string"} — список всегда передаётся одной
строкой, JSON-массив на месте обёртки не соответствует схеме.
"""

from typing import Any, Dict, Iterator, Literal

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from cslist.core.serde import adapter_for


JsonSchemaMode = Literal["validation", "serialization"]


# =============================================================================
# SCHEMA
# =============================================================================


def wire_schema(wire_type: Any, mode: JsonSchemaMode = "serialization") -> Dict[str, Any]:
    """
    JSON Schema wire-представления.

    Args:
        wire_type: Класс обёртки (CS[U32], CSArray[int, 3]) или pydantic-модель
        mode: "serialization" — форма выходных данных, "validation" — входных

    Returns:
        JSON Schema как dict

    Raises:
        ValueError: Если сгенерированная схема невалидна (meta-validation)
    """
    schema = adapter_for(wire_type).json_schema(mode=mode)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for {wire_type!r}: {e}")

    return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class WireContractValidator:
    """
    Валидатор wire-данных против JSON Schema типа.

    Схема строится один раз при создании; обёртки в ней — строки,
    поэтому любой JSON-массив на их месте даёт ошибку.
    """

    def __init__(self, wire_type: Any, mode: JsonSchemaMode = "serialization"):
        """
        Строит схему для wire_type и проверяет её (meta-validation).

        Args:
            wire_type: Класс обёртки или pydantic-модель
            mode: Режим генерации схемы
        """
        self.wire_type = wire_type
        self.schema = wire_schema(wire_type, mode)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Проверка wire-payload (например, model_dump(mode="json")).

        Raises:
            ValidationError: Первое нарушение контракта (путь до поля в e.path)
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """True, если payload соответствует wire-контракту."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Все нарушения контракта в payload.

        Yields:
            ValidationError по одной на каждое поле с неверной формой
        """
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_wire(wire_type: Any, data: Any) -> None:
    """
    Валидация wire-данных для типа.

    Args:
        wire_type: Класс обёртки или pydantic-модель
        data: JSON-совместимые данные (например, model.model_dump(mode="json"))

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    WireContractValidator(wire_type).validate(data)
