"""
Serde — интеграция обёрток с pydantic v2

На wire обёртка всегда одна JSON-строка ("1,2,3"), никогда не JSON-массив.

Десериализация:
- JSON: допускается только строка (strict), далее cls.parse
- Python: экземпляр того же параметризованного класса проходит как есть,
  иначе только строка
- Любой другой примитив (число, массив, объект, bool, null) — ошибка
  "comma_separated_list_type" без попыток приведения

Сериализация (python и json режимы): отформатированная строка.
"""

import logging
from functools import lru_cache
from typing import Any, Final

from pydantic import TypeAdapter
from pydantic_core import PydanticCustomError, core_schema

from cslist.core.errors import CommaSeparatedError


logger = logging.getLogger(__name__)

# Описание ожидаемой формы в диагностике (используется дословно)
EXPECTING: Final[str] = "comma separated list"

# Тип ошибки pydantic для неразбираемого содержимого строки
ERROR_TYPE: Final[str] = "comma_separated_list"

# Тип ошибки pydantic для не-строковой формы на wire
SHAPE_ERROR_TYPE: Final[str] = "comma_separated_list_type"


# =============================================================================
# CORE SCHEMA
# =============================================================================


def build_core_schema(cls: type) -> core_schema.CoreSchema:
    """
    Core schema для класса обёртки (CS[T] или CSArray[T, N]).

    Args:
        cls: Параметризованный класс обёртки с classmethod parse

    Returns:
        json_or_python schema со строковой сериализацией
    """

    def validate_text(text: str) -> Any:
        try:
            return cls.parse(text)
        except CommaSeparatedError as e:
            logger.debug("rejected %s value %r: %s", cls.__name__, text, e)
            raise PydanticCustomError(
                ERROR_TYPE,
                "Invalid comma separated list: {reason}",
                {"reason": str(e)},
            ) from e

    def from_text() -> core_schema.CoreSchema:
        return core_schema.chain_schema(
            [
                core_schema.custom_error_schema(
                    core_schema.str_schema(strict=True),
                    custom_error_type=SHAPE_ERROR_TYPE,
                    custom_error_message="Input should be a {expected}",
                    custom_error_context={"expected": EXPECTING},
                ),
                core_schema.no_info_plain_validator_function(validate_text),
            ]
        )

    return core_schema.json_or_python_schema(
        json_schema=from_text(),
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_text()]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _format_value,
            info_arg=False,
            return_schema=core_schema.str_schema(),
        ),
    )


def _format_value(value: Any) -> str:
    return value.format()


def describe_json_schema(json_schema: dict[str, Any], description: str) -> dict[str, Any]:
    """Дополняет строковую JSON Schema описанием формы списка."""
    json_schema["description"] = description
    return json_schema


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def adapter_for(wire_type: Any) -> TypeAdapter:
    """Кэшированный TypeAdapter для типа обёртки или модели."""
    return TypeAdapter(wire_type)


def dumps(value: Any) -> str:
    """
    Сериализация обёртки в JSON-текст.

    Examples:
        >>> dumps(CS[int]([1, 2, 3]))
        '"1,2,3"'
    """
    return adapter_for(type(value)).dump_json(value).decode("utf-8")


def loads(wire_type: Any, payload: str | bytes) -> Any:
    """
    Десериализация JSON-текста в обёртку.

    Args:
        wire_type: Параметризованный класс обёртки (например, CS[U32])
        payload: JSON-текст, ожидается строковый литерал

    Raises:
        pydantic.ValidationError: Неверная форма или неразбираемый элемент
    """
    return adapter_for(wire_type).validate_json(payload)
