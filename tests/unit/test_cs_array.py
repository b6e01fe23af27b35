"""
Тесты для CSArray / StrictCSArray — списков фиксированной длины

Проверяет:
1. Заполнение недостающих слотов значением по умолчанию
2. Молчаливое отбрасывание лишних токенов (без их разбора)
3. Ошибки разбора элементов среди первых N
4. Форматирование ровно N элементов
5. Инвариант длины при конструировании
6. Strict-режим: несовпадение количества — ошибка
"""

from enum import Enum
from typing import Annotated

import pytest
from pydantic import Field

from cslist import U32, CSArray, ElementParseError, LengthMismatchError, StrictCSArray


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


def cs(length: int):
    return CSArray[U32, length]


# =============================================================================
# ТЕСТЫ РАЗБОРА
# =============================================================================


class TestParse:
    """Тесты для CSArray.parse"""

    @pytest.mark.parametrize(
        "text,length,expected",
        [
            ("", 0, ()),
            (",,,,", 0, ()),
            ("1", 1, (1,)),
            (",1", 1, (1,)),
            ("1,", 1, (1,)),
            (",,,1,", 1, (1,)),
            ("1,2", 2, (1, 2)),
            ("1,2,3,4,5", 5, (1, 2, 3, 4, 5)),
            ("1,,,,,2", 2, (1, 2)),
            (",,,1,,,,,2,,,,,", 2, (1, 2)),
        ],
    )
    def test_parse_exact(self, text: str, length: int, expected: tuple) -> None:
        assert cs(length).parse(text).to_inner() == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", (0, 0, 0)),
            (",,,,", (0, 0, 0)),
            ("1,", (1, 0, 0)),
            (",,7,,8", (7, 8, 0)),
        ],
    )
    def test_fill_with_default(self, text: str, expected: tuple) -> None:
        """k < N: k элементов + (N - k) значений по умолчанию"""
        assert cs(3).parse(text).to_inner() == expected

    def test_truncate_excess(self) -> None:
        """k > N: берутся первые N, остальные игнорируются"""
        assert cs(3).parse("1,2,3,4,5").to_inner() == (1, 2, 3)

    @pytest.mark.parametrize("text", ["1,2,a", "1,2,-1", "1,2,3,x,y,-5"])
    def test_excess_not_validated(self, text: str) -> None:
        """Лишние токены не разбираются, даже если они невалидны"""
        assert cs(2).parse(text).to_inner() == (1, 2)

    @pytest.mark.parametrize(
        "text,length",
        [("-1", 1), ("1,a,", 2), ("a", 3), ("1,2,a", 3), (",,a,,", 1)],
    )
    def test_parse_err(self, text: str, length: int) -> None:
        """Ошибка элемента среди первых N прерывает разбор"""
        with pytest.raises(ElementParseError):
            cs(length).parse(text)

    def test_non_string_input(self) -> None:
        with pytest.raises(TypeError):
            cs(2).parse(None)


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormat:
    """Тесты для CSArray.format"""

    @pytest.mark.parametrize(
        "values,expected",
        [
            ((), ""),
            ((1,), "1"),
            ((1, 2), "1,2"),
            ((1, 2, 3, 4, 5), "1,2,3,4,5"),
        ],
    )
    def test_to_string(self, values: tuple, expected: str) -> None:
        assert str(cs(len(values))(values)) == expected

    def test_defaults_are_rendered(self) -> None:
        """Всегда ровно N элементов, включая значения по умолчанию"""
        assert str(cs(3).parse("1")) == "1,0,0"
        assert str(cs(4)()) == "0,0,0,0"

    def test_round_trip_fixed_point(self) -> None:
        """format(parse(format(v))) == format(v)"""
        formatted = cs(3)((9, 8, 7)).format()
        assert cs(3).parse(formatted).format() == formatted


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ И ДОСТУПА
# =============================================================================


class TestConstruction:
    """Тесты инварианта длины и значения по умолчанию"""

    def test_default(self) -> None:
        assert cs(3).default() == cs(3)((0, 0, 0))
        assert cs(3)() == cs(3).default()

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(LengthMismatchError) as exc_info:
            cs(3)((1, 2))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_no_default_element(self) -> None:
        """Тип без значения по умолчанию: нет default и нестрогого разбора"""
        array = CSArray[Color, 2]
        with pytest.raises(TypeError, match="no default value"):
            array()
        with pytest.raises(TypeError, match="no default value"):
            array.parse("red")
        assert str(array((Color.RED, Color.BLUE))) == "red,blue"

    def test_explicit_default(self) -> None:
        array = CSArray.of(Color, 3, default=Color.RED)
        assert array.parse("blue").to_inner() == (Color.BLUE, Color.RED, Color.RED)

    def test_unparametrized(self) -> None:
        with pytest.raises(TypeError):
            CSArray()
        with pytest.raises(TypeError):
            CSArray.parse("1,2")

    @pytest.mark.parametrize("params", [int, (int,), (int, 3, 4)])
    def test_bad_subscription(self, params) -> None:
        with pytest.raises(TypeError):
            CSArray[params]

    def test_bad_length(self) -> None:
        with pytest.raises(TypeError):
            CSArray[int, "3"]
        with pytest.raises(TypeError):
            CSArray[int, True]
        with pytest.raises(ValueError):
            CSArray[int, -1]


class TestAccess:
    """Тесты доступа к элементам"""

    def test_to_inner_and_into_inner(self) -> None:
        array = cs(3).parse("1,2,3")
        assert array.to_inner() == (1, 2, 3)
        assert array.into_inner() == [1, 2, 3]
        assert array.to_inner() is array.to_inner()

    def test_sequence_api(self) -> None:
        array = cs(3).parse("4,5")
        assert len(array) == 3
        assert array[0] == 4
        assert array[-1] == 0
        assert list(array) == [4, 5, 0]
        assert 5 in array

    def test_no_resizing(self) -> None:
        array = cs(2).parse("1,2")
        assert not hasattr(array, "append")
        with pytest.raises(TypeError):
            array[0] = 5

    def test_equality_and_hash(self) -> None:
        assert cs(2)((1, 2)) == cs(2)((1, 2))
        assert cs(2)((1, 2)) != cs(2)((2, 1))
        assert hash(cs(2)((1, 2))) == hash(cs(2)((1, 2)))
        assert cs(2)((1, 2)) != (1, 2)

    def test_other_parametrization_not_equal(self) -> None:
        assert CSArray[int, 1]((1,)) != CSArray[str, 1]((1,))
        assert CSArray[int, 2]((1, 2)) != cs(2)((1, 2))
        assert StrictCSArray[U32, 2]((1, 2)) != cs(2)((1, 2))

    def test_repr(self) -> None:
        assert repr(CSArray[int, 3].parse("1,")) == "CSArray[int, 3]((1, 0, 0))"

    def test_cached(self) -> None:
        assert CSArray[int, 3] is CSArray[int, 3]
        assert CSArray[U32, 3] is CSArray[U32, 3]
        assert CSArray[int, 3] is not CSArray[int, 4]
        assert CSArray[int, 3].length == 3

    def test_inline_annotated_cached(self) -> None:
        first = CSArray[Annotated[int, Field(ge=0)], 2]
        assert first is CSArray[Annotated[int, Field(ge=0)], 2]
        assert first is not StrictCSArray[Annotated[int, Field(ge=0)], 2]

    def test_unhashable_default_cached(self) -> None:
        first = CSArray.of(list, 2, default=[1])
        assert first is CSArray.of(list, 2, default=[1])
        assert first is not CSArray.of(list, 2, default=[2])


# =============================================================================
# ТЕСТЫ STRICT-РЕЖИМА
# =============================================================================


class TestStrict:
    """Тесты для StrictCSArray"""

    def test_exact_count(self) -> None:
        assert StrictCSArray[U32, 3].parse(",1,2,,3,").to_inner() == (1, 2, 3)

    @pytest.mark.parametrize("text,actual", [("1,2", 2), ("1,2,3,4", 4), ("", 0)])
    def test_count_mismatch(self, text: str, actual: int) -> None:
        with pytest.raises(LengthMismatchError) as exc_info:
            StrictCSArray[U32, 3].parse(text)
        assert exc_info.value.actual == actual

    def test_element_error(self) -> None:
        with pytest.raises(ElementParseError):
            StrictCSArray[U32, 2].parse("1,a")

    def test_no_default_needed(self) -> None:
        array = StrictCSArray[Color, 2].parse("blue,red")
        assert array.to_inner() == (Color.BLUE, Color.RED)

    def test_lenient_unchanged(self) -> None:
        """Нестрогий вариант сохраняет молчаливое поведение"""
        assert CSArray[U32, 3].parse("1,2").to_inner() == (1, 2, 0)
        assert StrictCSArray[U32, 3] is not CSArray[U32, 3]
        assert issubclass(StrictCSArray[U32, 3], CSArray)
