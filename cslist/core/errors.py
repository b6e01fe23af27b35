"""
Errors — таксономия ошибок разбора

Два вида ошибок:
1. ElementParseError — непустой токен не разбирается в тип элемента
2. Неверная форма на wire (не строка) — ошибка pydantic с типом
   "comma_separated_list_type", отдельного класса для неё нет

LengthMismatchError используется фиксированным вариантом: при конструировании
из последовательности неверной длины и в strict-режиме разбора.
"""

from typing import Any

from pydantic import ValidationError


class CommaSeparatedError(ValueError):
    """Базовый класс ошибок cslist"""


class ElementParseError(CommaSeparatedError):
    """
    Токен не удалось разобрать в тип элемента.

    Attributes:
        token: Исходная подстрока
        element_type: Тип элемента, в который выполнялся разбор
        cause: Исходная ошибка парсера элемента
    """

    def __init__(self, token: str, element_type: Any, cause: Exception):
        self.token = token
        self.element_type = element_type
        self.cause = cause
        super().__init__(f"invalid element {token!r}: {describe_error(cause)}")


class LengthMismatchError(CommaSeparatedError):
    """Количество элементов не совпадает с длиной фиксированного списка"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected exactly {expected} elements, got {actual}")


def describe_error(exc: Exception) -> str:
    """
    Текстовое описание ошибки парсера элемента.

    Для pydantic.ValidationError склеивает сообщения всех ошибок,
    без location (у одиночного элемента она пустая).
    """
    if isinstance(exc, ValidationError):
        return "; ".join(error["msg"] for error in exc.errors())
    return str(exc)
