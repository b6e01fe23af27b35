"""
CS — список переменной длины, сериализуемый как comma-separated строка

В памяти ведёт себя как обычный изменяемый список, на wire — одна строка:

    >>> CS[int].parse(",,1,,,2,,")
    CS[int]([1, 2])
    >>> str(CS[int]([1, 2, 3]))
    '1,2,3'

Тип элемента задаётся подпиской; голый CS — это CS[str].
"""

from collections.abc import MutableSequence
from typing import Any, ClassVar, Iterable, Iterator

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from cslist.core.domain._params import parametrize
from cslist.core.elements import ElementCodec, type_name
from cslist.core.grammar import iter_tokens, join_tokens
from cslist.core.serde import EXPECTING, build_core_schema, describe_json_schema


class CS(MutableSequence):
    """
    Список переменной длины с comma-separated wire-представлением.

    Инварианты:
    - Порядок элементов сохраняется, дедупликации нет
    - parse отбрасывает пустые токены до разбора элементов
    - format никогда не выдаёт ведущую/хвостовую запятую
    """

    element_type: ClassVar[Any] = str
    codec: ClassVar[ElementCodec] = ElementCodec(str)

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        self._items: list[Any] = list(items)

    def __class_getitem__(cls, element_type: Any) -> type["CS"]:
        if isinstance(element_type, tuple):
            raise TypeError(f"{cls.__name__}[...] takes a single element type")
        return parametrize(
            cls,
            f"{_origin_name(cls)}[{type_name(element_type)}]",
            (element_type,),
            lambda: {"element_type": element_type, "codec": ElementCodec(element_type)},
        )

    # =========================================================================
    # TEXT
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "CS":
        """
        Разбор comma-separated строки.

        Args:
            text: Входная строка ("" и ",,,," дают пустой список)

        Returns:
            Экземпляр cls с элементами в исходном порядке

        Raises:
            ElementParseError: Первый неразбираемый элемент прерывает разбор
            TypeError: Если text не строка
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls(cls.codec.parse(token) for token in iter_tokens(text))

    def format(self) -> str:
        """Comma-separated представление (пустой список -> "")."""
        return join_tokens(self.codec.format(value) for value in self._items)

    def __str__(self) -> str:
        return self.format()

    # =========================================================================
    # ACCESS
    # =========================================================================

    def to_inner(self) -> list[Any]:
        """Внутренний список по ссылке (изменения видны в обёртке)."""
        return self._items

    def into_inner(self) -> list[Any]:
        """Собственная копия элементов."""
        return list(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CS):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return build_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler.resolve_ref_schema(handler(schema))
        return describe_json_schema(json_schema, f"{EXPECTING} of {cls.codec.type_name}")


def _origin_name(cls: type) -> str:
    return cls.__name__.split("[", 1)[0]
