"""
ElementCodec — контракт типа элемента

Тип элемента T должен уметь:
- разбираться из строки с типизированной ошибкой
- отображаться в строку (тотальная функция)
- (для фиксированного варианта) иметь значение по умолчанию

Разбор и отображение делегируются pydantic TypeAdapter, поэтому элементом
может быть любой тип, который понимает pydantic: int, float, bool, str,
Decimal, Enum, datetime, Annotated[...] с ограничениями и т.д.
"""

import json
from enum import Enum
from typing import Annotated, Any, Generic, TypeVar, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from cslist.core.errors import ElementParseError


T = TypeVar("T")


def _base_type(element_type: Any) -> Any:
    """Снимает Annotated[...] до базового типа."""
    while get_origin(element_type) is Annotated:
        element_type = get_args(element_type)[0]
    return element_type


def type_name(element_type: Any) -> str:
    """Короткое имя типа элемента для repr и диагностики."""
    base = _base_type(element_type)
    return getattr(base, "__name__", None) or repr(base)


class ElementCodec(Generic[T]):
    """
    Разбор, отображение и значение по умолчанию одного элемента.

    Args:
        element_type: Тип элемента (любой тип, поддерживаемый pydantic)
    """

    def __init__(self, element_type: Any):
        self.element_type = element_type
        self.type_name = type_name(element_type)
        self._adapter: TypeAdapter[T] = TypeAdapter(element_type)

    def parse(self, token: str) -> T:
        """
        Разбор одного непустого токена.

        Raises:
            ElementParseError: Если токен не является валидным значением типа
        """
        try:
            return self._adapter.validate_strings(token)
        except ValidationError as e:
            raise ElementParseError(token, self.element_type, e) from e

    def format(self, value: T) -> str:
        """
        Каноническое текстовое представление элемента.

        JSON-строки используются как есть (Enum, Decimal, datetime),
        остальные скаляры рендерятся через json.dumps (1 -> "1", True -> "true").
        """
        dumped = self._adapter.dump_python(value, mode="json")
        if isinstance(dumped, str):
            return dumped
        return json.dumps(dumped)

    def default(self) -> T:
        """
        Значение по умолчанию: вызов базового типа без аргументов.

        Raises:
            TypeError: Если у типа нет значения по умолчанию
        """
        base = _base_type(self.element_type)
        if not isinstance(base, type) or issubclass(base, Enum):
            raise TypeError(f"element type {self.type_name} has no default value")
        try:
            return base()
        except TypeError as e:
            raise TypeError(f"element type {self.type_name} has no default value") from e

    def has_default(self) -> bool:
        try:
            self.default()
        except TypeError:
            return False
        return True

    def __repr__(self) -> str:
        return f"ElementCodec({self.type_name})"
