"""
Параметризация обёрток по подписке: CS[int], CSArray[int, 3].

Каждая подписка порождает подкласс с атрибутами класса (element_type,
length, ...). Подкласс кэшируется, поэтому CS[int] is CS[int].

Annotated-типы и нехешируемые параметры (default=[...]) входят в ключ кэша
через repr: FieldInfo хешируется по идентичности, а два одинаково записанных
CS[Annotated[int, Field(ge=0)]] должны давать один и тот же класс.
"""

from typing import Annotated, Any, Callable, get_origin


_CACHE: dict[tuple[Any, ...], type] = {}


def parametrize(
    base: type, name: str, key: tuple[Any, ...], build: Callable[[], dict[str, Any]]
) -> type:
    """
    Возвращает (кэшированный) подкласс base.

    Args:
        base: Класс, от которого наследуется параметризованный вариант
        name: Имя нового класса (например, "CS[int]")
        key: Параметры подписки
        build: Фабрика атрибутов класса, вызывается только при промахе кэша
    """
    cache_key = (base, *(_cache_part(part) for part in key))
    try:
        return _CACHE[cache_key]
    except KeyError:
        cls = _make(base, name, build())
        _CACHE[cache_key] = cls
        return cls


def _cache_part(part: Any) -> Any:
    if get_origin(part) is Annotated:
        return (Annotated, repr(part))
    try:
        hash(part)
    except TypeError:
        return (type(part), repr(part))
    return part


def _make(base: type, name: str, namespace: dict[str, Any]) -> type:
    namespace = {"__module__": base.__module__, "__qualname__": name, **namespace}
    return type(name, (base,), namespace)
