"""
Transform — Преобразования строк

Все функции чистые: возвращают новую строку, входные данные не меняются.

Политика ошибок:
- Добавление/удаление аффиксов: если аффикс отсутствует (или уже есть),
  возвращается исходная строка без изменений
- left/right: None/пустая строка или длина вне [0, len] → InvalidArgumentError
"""

import re
from enum import IntEnum
from typing import Final, Iterator

import regex

from src.core.text.conversion import get_empty_string_if_null
from src.core.text.errors import InvalidArgumentError
from src.core.text.predicates import ends_with_ignore_case, starts_with_ignore_case


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Маркер обрезки truncate()
ELLIPSIS: Final[str] = "..."

LINE_FEED_EDGES_PATTERN: Final[re.Pattern] = re.compile(r"^[\r\n]+|[\r\n]+$")

# Расширенный кластер графем
GRAPHEME_PATTERN: Final[regex.Pattern] = regex.compile(r"\X")


class SlashDirection(IntEnum):
    """Направление замены слэшей для reverse_slash."""

    TO_BACKSLASH = 0
    TO_FORWARD_SLASH = 1


# =============================================================================
# РЕГИСТР И ПОРЯДОК
# =============================================================================


def capitalize(value: str) -> str:
    """
    Первая буква в верхнем регистре, остальные — в нижнем.

    Examples:
        >>> capitalize("hELLO")
        'Hello'
        >>> capitalize("")
        ''
    """
    if not value:
        return value
    return value[0].upper() + value[1:].lower()


def to_text_elements(value: str | None) -> Iterator[str]:
    """
    Итератор по текстовым элементам: расширенным кластерам графем Unicode
    (UAX #29). Комбинируемые знаки, модификаторы эмодзи, ZWJ-последовательности,
    флаги и CR LF остаются одним элементом (например "e" + U+0301).

    Raises:
        InvalidArgumentError: Если value равен None
    """
    if value is None:
        raise InvalidArgumentError("value", "value is None")
    return iter(GRAPHEME_PATTERN.findall(value))


def reverse(value: str, by_text_elements: bool = False) -> str:
    """
    Разворот строки.

    Args:
        value: Исходная строка
        by_text_elements: Разворачивать по текстовым элементам, сохраняя
            кластеры графем целыми

    Returns:
        Развёрнутая строка
    """
    if by_text_elements:
        return "".join(reversed(list(to_text_elements(value))))
    return value[::-1]


def truncate(value: str | None, max_length: int) -> str:
    """
    Обрезка строки с добавлением "...".

    Returns:
        - "" если value None/пустая или max_length <= 0
        - первые max_length символов + "..." если строка длиннее
        - исходная строка иначе

    Examples:
        >>> truncate("Hello World", 5)
        'Hello...'
        >>> truncate("Hi", 5)
        'Hi'
    """
    if not value or max_length <= 0:
        return ""
    if len(value) > max_length:
        return value[:max_length] + ELLIPSIS
    return value


# =============================================================================
# ПРЕФИКСЫ И СУФФИКСЫ
# =============================================================================


def _has_prefix(value: str, prefix: str, ignore_case: bool) -> bool:
    return starts_with_ignore_case(value, prefix) if ignore_case else value.startswith(prefix)


def _has_suffix(value: str, suffix: str, ignore_case: bool) -> bool:
    return ends_with_ignore_case(value, suffix) if ignore_case else value.endswith(suffix)


def remove_prefix(value: str | None, prefix: str, ignore_case: bool = True) -> str | None:
    """
    Удаление префикса, если он есть; иначе исходная строка.

    Examples:
        >>> remove_prefix("berbahaya", "ber")
        'bahaya'
    """
    if value and _has_prefix(value, prefix, ignore_case):
        return value[len(prefix):]
    return value


def remove_suffix(value: str | None, suffix: str, ignore_case: bool = True) -> str | None:
    """
    Удаление суффикса, если он есть; иначе исходная строка.

    Examples:
        >>> remove_suffix("masakan", "an")
        'masak'
        >>> remove_suffix("masakan", "xyz")
        'masakan'
    """
    if value and _has_suffix(value, suffix, ignore_case):
        return value[: len(value) - len(suffix)]
    return value


def append_prefix_if_missing(value: str | None, prefix: str, ignore_case: bool = True) -> str | None:
    """
    Добавление префикса, если строка с него ещё не начинается (идемпотентно).

    None/пустая строка возвращается без изменений.
    """
    if not value or _has_prefix(value, prefix, ignore_case):
        return value
    return prefix + value


def append_suffix_if_missing(value: str | None, suffix: str, ignore_case: bool = True) -> str | None:
    """
    Добавление суффикса, если строка им ещё не заканчивается (идемпотентно).

    Examples:
        >>> append_suffix_if_missing("report", ".txt")
        'report.txt'
        >>> append_suffix_if_missing("report.TXT", ".txt")
        'report.TXT'
    """
    if not value or _has_suffix(value, suffix, ignore_case):
        return value
    return value + suffix


# =============================================================================
# ПОДСТРОКИ
# =============================================================================


def _validate_substring_args(value: str | None, length: int) -> str:
    if not value:
        raise InvalidArgumentError("value", "value is None or empty")
    if length < 0 or length > len(value):
        raise InvalidArgumentError(
            "length", "length cannot be higher than total string length or less than 0"
        )
    return value


def left(value: str | None, length: int) -> str:
    """
    Первые length символов.

    Raises:
        InvalidArgumentError: value None/пустая, length < 0 или length > len(value)
    """
    value = _validate_substring_args(value, length)
    return value[:length]


def right(value: str | None, length: int) -> str:
    """
    Последние length символов.

    Raises:
        InvalidArgumentError: value None/пустая, length < 0 или length > len(value)
    """
    value = _validate_substring_args(value, length)
    return value[len(value) - length:]


def first_character(value: str | None) -> str | None:
    return value[0] if value else None


def last_character(value: str | None) -> str | None:
    return value[-1] if value else None


# =============================================================================
# ЗАМЕНЫ И ФОРМАТИРОВАНИЕ
# =============================================================================


def remove_chars(value: str, *chars: str) -> str:
    """
    Удаление всех указанных символов.

    Examples:
        >>> remove_chars("Friends", "F", "r", "i", "s")
        'end'
    """
    excluded = set(chars)
    return "".join(ch for ch in value if ch not in excluded)


def reverse_slash(value: str, direction: int) -> str:
    """
    Замена слэшей.

    Args:
        value: Исходная строка
        direction: SlashDirection.TO_BACKSLASH ("/" → "\\") или
            SlashDirection.TO_FORWARD_SLASH ("\\" → "/"); иное значение — без изменений
    """
    if direction == SlashDirection.TO_BACKSLASH:
        return value.replace("/", "\\")
    if direction == SlashDirection.TO_FORWARD_SLASH:
        return value.replace("\\", "/")
    return value


def replace_line_feeds(value: str) -> str:
    """Удаление переводов строк (CR/LF) в начале и в конце строки."""
    return LINE_FEED_EDGES_PATTERN.sub("", value)


def parse_string_to_csv(value: str | None) -> str:
    """
    Экранирование значения для CSV.

    Значение обрезается по краям, None считается пустой строкой,
    внутренние кавычки удваиваются: a"b → "a""b".

    Examples:
        >>> parse_string_to_csv(" a,b ")
        '"a,b"'
        >>> parse_string_to_csv(None)
        '""'
    """
    return '"' + get_empty_string_if_null(value).replace('"', '""') + '"'


def count_occurrences(value: str, pattern: str) -> int:
    """Количество совпадений regex-паттерна без учёта регистра."""
    return len(re.findall(pattern, value, re.IGNORECASE))


def format_with(value: str, *args, **kwargs) -> str:
    """
    Составное форматирование: "{0} of {1}".

    Raises:
        IndexError / KeyError: Если плейсхолдер ссылается на отсутствующий аргумент
    """
    return value.format(*args, **kwargs)


# =============================================================================
# РАЗМЕРЫ
# =============================================================================


def get_byte_size(value: str | None, encoding: str | None) -> int:
    """
    Размер строки в байтах в заданной кодировке.

    Raises:
        InvalidArgumentError: Если value или encoding равен None
        LookupError: Неизвестная кодировка
    """
    if value is None:
        raise InvalidArgumentError("value", "value is None")
    if encoding is None:
        raise InvalidArgumentError("encoding", "encoding is None")
    return len(value.encode(encoding))


def get_length(value: str | None) -> int | None:
    return None if value is None else len(value)
