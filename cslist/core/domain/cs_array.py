"""
CSArray — список фиксированной длины N, сериализуемый как comma-separated строка

Отличия от CS:
- Длина N задаётся подпиской (CSArray[int, 3]) и проверяется в рантайме
- parse заполняет слоты по порядку: недостающие хвостовые слоты остаются
  значением по умолчанию, лишние токены молча игнорируются и НЕ разбираются
- format всегда рендерит ровно N элементов

    >>> CSArray[int, 3].parse("1,")
    CSArray[int, 3]((1, 0, 0))
    >>> CSArray[int, 3].parse("1,2,3,4,5")
    CSArray[int, 3]((1, 2, 3))

StrictCSArray — тот же контракт, но несовпадение количества токенов с N
является ошибкой (LengthMismatchError).
"""

from collections.abc import Sequence
from typing import Any, ClassVar, Iterable, Iterator

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from cslist.core.domain._params import parametrize
from cslist.core.elements import ElementCodec, type_name
from cslist.core.errors import LengthMismatchError
from cslist.core.grammar import iter_tokens, join_tokens, split_tokens
from cslist.core.serde import EXPECTING, build_core_schema, describe_json_schema


# Маркер отсутствующего значения по умолчанию
_MISSING: Any = object()


class CSArray(Sequence):
    """
    Список ровно из N элементов с comma-separated wire-представлением.

    Неизменяемый value type: хранит tuple, хешируется. Равны только экземпляры
    одного параметризованного класса с поэлементно равным содержимым.
    """

    element_type: ClassVar[Any] = None
    length: ClassVar[int | None] = None
    codec: ClassVar[ElementCodec | None] = None
    strict: ClassVar[bool] = False
    _fill: ClassVar[Any] = _MISSING

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] | None = None):
        length = self._require_length()
        if items is None:
            items = (self._default_value(),) * length
        items = tuple(items)
        if len(items) != length:
            raise LengthMismatchError(length, len(items))
        self._items: tuple[Any, ...] = items

    def __class_getitem__(cls, params: Any) -> type["CSArray"]:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError(
                f"{cls.__name__}[...] expects an element type and a length, "
                f"e.g. {cls.__name__}[int, 3]"
            )
        element_type, length = params
        return cls.of(element_type, length)

    @classmethod
    def of(cls, element_type: Any, length: int, *, default: Any = _MISSING) -> type["CSArray"]:
        """
        Параметризованный класс фиксированной длины.

        Args:
            element_type: Тип элемента
            length: Длина N (неотрицательный int)
            default: Значение для незаполненных слотов; по умолчанию
                берётся значение по умолчанию типа элемента (0, "", ...)

        Raises:
            TypeError: Если length не int
            ValueError: Если length < 0
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"length must be an int, got {type(length).__name__}")
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        def build() -> dict[str, Any]:
            codec = ElementCodec(element_type)
            fill = default
            if fill is _MISSING and codec.has_default():
                fill = codec.default()
            return {
                "element_type": element_type,
                "length": length,
                "codec": codec,
                "_fill": fill,
            }

        name = f"{_origin_name(cls)}[{type_name(element_type)}, {length}]"
        key = (element_type, length, type(default), default)
        return parametrize(cls, name, key, build)

    @classmethod
    def default(cls) -> "CSArray":
        """N копий значения по умолчанию типа элемента."""
        return cls()

    @classmethod
    def _require_length(cls) -> int:
        if cls.length is None:
            raise TypeError(
                f"{cls.__name__} must be parametrized with an element type and a length"
            )
        return cls.length

    @classmethod
    def _default_value(cls) -> Any:
        if cls._fill is _MISSING:
            raise TypeError(
                f"element type {cls.codec.type_name} has no default value; "
                f"pass default= to {_origin_name(cls)}.of()"
            )
        return cls._fill

    # =========================================================================
    # TEXT
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "CSArray":
        """
        Разбор comma-separated строки в N слотов.

        Токены сопоставляются слотам по порядку до исчерпания любой из сторон:
        - токенов меньше N: хвостовые слоты = значение по умолчанию
        - токенов больше N: лишние игнорируются без разбора и без ошибки
        В strict-режиме несовпадение количества — LengthMismatchError.

        Raises:
            ElementParseError: Неразбираемый токен среди первых N
            LengthMismatchError: Только для StrictCSArray
            TypeError: Если text не строка или (в нестрогом режиме)
                у типа элемента нет значения по умолчанию
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        length = cls._require_length()

        if cls.strict:
            tokens = split_tokens(text)
            if len(tokens) != length:
                raise LengthMismatchError(length, len(tokens))
            return cls(cls.codec.parse(token) for token in tokens)

        slots = [cls._default_value()] * length
        # zip исчерпывает range первым, поэтому лишние токены не читаются
        for index, token in zip(range(length), iter_tokens(text)):
            slots[index] = cls.codec.parse(token)
        return cls(slots)

    def format(self) -> str:
        """Comma-separated представление всех N элементов."""
        return join_tokens(self.codec.format(value) for value in self._items)

    def __str__(self) -> str:
        return self.format()

    # =========================================================================
    # ACCESS
    # =========================================================================

    def to_inner(self) -> tuple[Any, ...]:
        """Хранимый tuple по ссылке."""
        return self._items

    def into_inner(self) -> list[Any]:
        """Собственная копия элементов (list длины N)."""
        return list(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CSArray):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        cls._require_length()
        return build_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler.resolve_ref_schema(handler(schema))
        return describe_json_schema(
            json_schema, f"{EXPECTING} of {cls.length} {cls.codec.type_name}"
        )


class StrictCSArray(CSArray):
    """CSArray, отвергающий строки с количеством элементов, отличным от N."""

    strict = True


def _origin_name(cls: type) -> str:
    return cls.__name__.split("[", 1)[0]
