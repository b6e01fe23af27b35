"""
Целочисленные типы элементов с фиксированной разрядностью.

Annotated-алиасы с границами: отрицательное значение для U32 — ошибка
разбора элемента, а не молчаливое приведение.

Строковый токен должен быть целочисленным литералом: необязательный знак
и ASCII-цифры. Пробелы, дробная часть ("1.0") и подчёркивания ("1_000"),
которые pydantic в lax-режиме принимает, здесь — ошибка.
Беззнаковые типы допускают только "+".
"""

import re
from typing import Annotated, Final

from pydantic import BeforeValidator, Field


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

U8_MAX: Final[int] = 2**8 - 1
U16_MAX: Final[int] = 2**16 - 1
U32_MAX: Final[int] = 2**32 - 1
U64_MAX: Final[int] = 2**64 - 1

I8_MIN: Final[int] = -(2**7)
I8_MAX: Final[int] = 2**7 - 1
I16_MIN: Final[int] = -(2**15)
I16_MAX: Final[int] = 2**15 - 1
I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================

_UNSIGNED_LITERAL: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")
_SIGNED_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _literal_check(pattern: re.Pattern[str]):
    def check(value):
        if isinstance(value, str) and not pattern.fullmatch(value):
            raise ValueError(f"invalid digit found in string {value!r}")
        return value

    return check


_unsigned = BeforeValidator(_literal_check(_UNSIGNED_LITERAL))
_signed = BeforeValidator(_literal_check(_SIGNED_LITERAL))


# =============================================================================
# ТИПЫ
# =============================================================================

U8 = Annotated[int, Field(ge=0, le=U8_MAX), _unsigned]
U16 = Annotated[int, Field(ge=0, le=U16_MAX), _unsigned]
U32 = Annotated[int, Field(ge=0, le=U32_MAX), _unsigned]
U64 = Annotated[int, Field(ge=0, le=U64_MAX), _unsigned]

I8 = Annotated[int, Field(ge=I8_MIN, le=I8_MAX), _signed]
I16 = Annotated[int, Field(ge=I16_MIN, le=I16_MAX), _signed]
I32 = Annotated[int, Field(ge=I32_MIN, le=I32_MAX), _signed]
I64 = Annotated[int, Field(ge=I64_MIN, le=I64_MAX), _signed]
