"""
Predicates — Предикаты валидации строк

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Предикаты возвращают bool и не бросают исключений
2. None и пустая строка — "не валидно" (False)
3. Исключения: starts_with_ignore_case / ends_with_ignore_case бросают
   InvalidArgumentError, если любой из операндов None
4. Границы длины включительные с обеих сторон
"""

import re
from datetime import datetime
from typing import Final

from src.core.text.conversion import INT32_MAX, INT32_MIN, parse_invariant_number
from src.core.text.errors import InvalidArgumentError


# =============================================================================
# БИЗНЕС-ПАРАМЕТРЫ
# =============================================================================

# Нижняя граница года для бизнес-дат (is_date_time с min_year)
MIN_BUSINESS_YEAR: Final[int] = 1946


# =============================================================================
# ПАТТЕРНЫ
# =============================================================================

EMAIL_PATTERN: Final[re.Pattern] = re.compile(
    r"^[a-zA-Z][\w.-]*[a-zA-Z0-9]@[a-zA-Z0-9][\w.-]*[a-zA-Z0-9]\.[a-zA-Z][a-zA-Z.]*[a-zA-Z]$"
)

_OCTET: Final[str] = r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)"

# Необязательная схема ("http://"), 4 октета 0-255, необязательный порт
IPV4_PATTERN: Final[re.Pattern] = re.compile(
    r"(?:^|\s)([a-z]{3,6}(?=://))?(://)?"
    rf"({_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET})"
    r"(?::(\d{2,5}))?(?:\s|$)",
    re.ASCII,
)


# =============================================================================
# ЧИСЛОВЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_numeric(value: str | None) -> bool:
    """
    Проверка, является ли строка числом с плавающей точкой (инвариантный парсинг).

    Examples:
        >>> is_numeric("-1,234.5e2")
        True
        >>> is_numeric("12a")
        False
    """
    return parse_invariant_number(value) is not None


def is_integer(value: str | None) -> bool:
    """
    Проверка, является ли строка целым числом в диапазоне int32.

    Допускает запись с нулевой дробной частью и экспонентой ("1.0", "1e3").
    """
    number = parse_invariant_number(value)
    if number is None or not number.is_finite():
        return False
    return INT32_MIN <= number <= INT32_MAX and number == number.to_integral_value()


# =============================================================================
# СИМВОЛЬНЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_alpha(value: str | None) -> bool:
    """
    Только буквы (пробелы игнорируются).

    None, пустая строка и строка из одних пробелов → False.
    """
    if not value:
        return False
    letters = value.strip().replace(" ", "")
    return bool(letters) and all(ch.isalpha() for ch in letters)


def is_alpha_numeric(value: str | None) -> bool:
    """
    Только буквы и десятичные цифры (пробелы игнорируются).

    None, пустая строка и строка из одних пробелов → False.
    """
    if not value:
        return False
    chars = value.strip().replace(" ", "")
    return bool(chars) and all(ch.isalpha() or ch.isdecimal() for ch in chars)


def is_email_address(value: str | None) -> bool:
    """Проверка формы local@domain.tld."""
    if not value:
        return False
    return EMAIL_PATTERN.match(value) is not None


def is_valid_ipv4(value: str | None) -> bool:
    """
    Проверка IPv4 адреса по паттерну.

    Схема ("http://") и порт (":8080") допускаются. Адрес не канонизируется:
    результат — только факт совпадения с паттерном.

    Examples:
        >>> is_valid_ipv4("64.233.161.147")
        True
        >>> is_valid_ipv4("64.233.161.1470")
        False
    """
    if not value:
        return False
    return IPV4_PATTERN.search(value) is not None


# =============================================================================
# ДАТЫ
# =============================================================================


def is_date_time(value: str | None, date_format: str, min_year: int | None = None) -> bool:
    """
    Проверка, парсится ли строка как дата строго по формату.

    Args:
        value: Строка с датой
        date_format: Формат strptime (например "%d/%m/%Y %H:%M:%S")
        min_year: Минимальный допустимый год (например MIN_BUSINESS_YEAR).
            None — без ограничения

    Returns:
        True если строка соответствует формату и год >= min_year
    """
    if not value or not date_format:
        return False
    try:
        parsed = datetime.strptime(value, date_format)
    except ValueError:
        return False
    return min_year is None or parsed.year >= min_year


# =============================================================================
# ДЛИНА
# =============================================================================


def is_min_length(value: str | None, min_length: int) -> bool:
    """len(value) >= min_length; None → False. Пробелы по краям учитываются."""
    return value is not None and len(value) >= min_length


def is_max_length(value: str | None, max_length: int) -> bool:
    """len(value) <= max_length; None → False. Пробелы по краям учитываются."""
    return value is not None and len(value) <= max_length


def is_length(value: str | None, min_length: int, max_length: int) -> bool:
    """min_length <= len(value) <= max_length; None → False."""
    return value is not None and min_length <= len(value) <= max_length


# =============================================================================
# ПРЕФИКСЫ И СУФФИКСЫ
# =============================================================================


def starts_with_ignore_case(value: str | None, prefix: str | None) -> bool:
    """
    Проверка префикса без учёта регистра.

    Raises:
        InvalidArgumentError: Если value или prefix равен None
    """
    if value is None:
        raise InvalidArgumentError("value", "value parameter is None")
    if prefix is None:
        raise InvalidArgumentError("prefix", "prefix parameter is None")
    if len(value) < len(prefix):
        return False
    # Сравниваем срез той же длины, чтобы remove_prefix мог резать по len(prefix)
    return value[: len(prefix)].casefold() == prefix.casefold()


def ends_with_ignore_case(value: str | None, suffix: str | None) -> bool:
    """
    Проверка суффикса без учёта регистра.

    Raises:
        InvalidArgumentError: Если value или suffix равен None
    """
    if value is None:
        raise InvalidArgumentError("value", "value parameter is None")
    if suffix is None:
        raise InvalidArgumentError("suffix", "suffix parameter is None")
    if len(value) < len(suffix):
        return False
    return value[len(value) - len(suffix):].casefold() == suffix.casefold()


def does_not_start_with(value: str | None, prefix: str | None) -> bool:
    """True если value не начинается с prefix (с учётом регистра); None → True."""
    return value is None or prefix is None or not value.startswith(prefix)


def does_not_end_with(value: str | None, suffix: str | None) -> bool:
    """True если value не заканчивается на suffix (с учётом регистра); None → True."""
    return value is None or suffix is None or not value.endswith(suffix)


def is_null(value: str | None) -> bool:
    return value is None
