"""
Тесты для модуля Grammar

Проверяет:
1. Отбрасывание пустых токенов (ведущие, хвостовые, двойные запятые)
2. Сохранение порядка токенов
3. Склейку без ведущих/хвостовых запятых
"""

import pytest

from cslist.core.grammar import SEPARATOR, iter_tokens, join_tokens, split_tokens


# =============================================================================
# ТЕСТЫ ТОКЕНИЗАЦИИ
# =============================================================================


class TestSplitTokens:
    """Тесты для split_tokens / iter_tokens"""

    @pytest.mark.parametrize("text", ["", ",", ",,,,", ",,,,,,,,,,"])
    def test_only_commas_yield_nothing(self, text: str) -> None:
        """Пустая строка и строки из одних запятых дают 0 токенов"""
        assert split_tokens(text) == []

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", ["1"]),
            (",1", ["1"]),
            ("1,", ["1"]),
            (",,,1,", ["1"]),
            ("1,2", ["1", "2"]),
            ("1,,,,,2", ["1", "2"]),
            (",,,1,,,,,2,,,,,", ["1", "2"]),
            ("c,a,b,a", ["c", "a", "b", "a"]),
        ],
    )
    def test_empty_tokens_dropped(self, text: str, expected: list[str]) -> None:
        """Пустые токены отбрасываются, порядок и дубликаты сохраняются"""
        assert split_tokens(text) == expected

    def test_whitespace_is_not_empty(self) -> None:
        """Пробелы — непустой токен, обрезки нет"""
        assert split_tokens(" , 1") == [" ", " 1"]

    def test_iter_tokens_is_lazy(self) -> None:
        """iter_tokens отдаёт токены по одному"""
        tokens = iter_tokens("a,,b,c")
        assert next(tokens) == "a"
        assert next(tokens) == "b"
        assert list(tokens) == ["c"]


# =============================================================================
# ТЕСТЫ СКЛЕЙКИ
# =============================================================================


class TestJoinTokens:
    """Тесты для join_tokens"""

    def test_separator_is_comma(self) -> None:
        assert SEPARATOR == ","

    @pytest.mark.parametrize(
        "tokens,expected",
        [
            ([], ""),
            (["1"], "1"),
            (["1", "2"], "1,2"),
            (["1", "2", "3", "4", "5"], "1,2,3,4,5"),
        ],
    )
    def test_join(self, tokens: list[str], expected: str) -> None:
        """Одна запятая между элементами, без ведущей и хвостовой"""
        assert join_tokens(tokens) == expected

    def test_join_accepts_generator(self) -> None:
        assert join_tokens(str(i) for i in range(3)) == "0,1,2"
