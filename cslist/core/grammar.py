"""
Grammar — токенизация и склейка comma-separated строки

Грамматика wire-представления:

    list        := "" | element ("," element)*
    element     := любая непустая подстрока между запятыми
    empty-token := "" (ведущая/хвостовая/двойная запятая) — всегда отбрасывается

Экранирования нет: запятая внутри элемента не поддерживается.
"""

from typing import Final, Iterable, Iterator


# Единственный допустимый разделитель (не настраивается)
SEPARATOR: Final[str] = ","


def iter_tokens(text: str) -> Iterator[str]:
    """
    Ленивый итератор по непустым токенам строки.

    Пустые токены отбрасываются до разбора элементов, поэтому
    "", ",,,," и ",1," дают соответственно 0, 0 и 1 токен.

    Args:
        text: Входная строка

    Yields:
        Непустые подстроки в исходном порядке слева направо
    """
    for token in text.split(SEPARATOR):
        if token:
            yield token


def split_tokens(text: str) -> list[str]:
    """Жадная версия iter_tokens."""
    return list(iter_tokens(text))


def join_tokens(tokens: Iterable[str]) -> str:
    """
    Склейка отрендеренных элементов через одну запятую.

    Examples:
        >>> join_tokens([])
        ''
        >>> join_tokens(["1", "2", "3"])
        '1,2,3'
    """
    return SEPARATOR.join(tokens)
