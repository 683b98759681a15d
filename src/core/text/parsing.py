"""
Parsing — Структурный парсинг строк

- Query string → dict параметров
- JSON → плоский dict / JsonValue (tagged variant) / объявленный тип (pydantic)
- JSON → LIKE-параметры поиска для SQL

Политика ошибок:
- query_string_to_dictionary не бросает: невалидный ввод → {}
- JSON функции: None/пустая строка → InvalidArgumentError,
  синтаксически битый JSON → json.JSONDecodeError,
  нарушение контракта → InvalidArgumentError
"""

import json
import logging
from typing import Any, Final, TypeVar

from pydantic import TypeAdapter

from src.core.contracts import FLAT_JSON_OBJECT, QUERY_PARAMETERS, ContractViolation, check_contract
from src.core.text.errors import InvalidArgumentError
from src.core.text.json_value import JsonValue

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUERY_MARKER: Final[str] = "?"
PAIR_SEPARATOR: Final[str] = "&"
KEY_VALUE_SEPARATOR: Final[str] = "="


# =============================================================================
# QUERY STRING
# =============================================================================


def query_string_to_dictionary(value: str | None) -> dict[str, str]:
    """
    Разбор query string в словарь.

    Берётся часть после первого '?', делится по '&', каждая пара — по первому '='.
    Ключи приводятся к нижнему регистру и очищаются от пробелов по краям,
    значения возвращаются как есть (без URL-декодирования). Пары с пустым
    ключом пропускаются, при повторе ключа побеждает последнее значение.

    Returns:
        dict параметров; {} если строка пустая, без '?' или без '='

    Examples:
        >>> query_string_to_dictionary("?name=ferret&field1=value1")
        {'name': 'ferret', 'field1': 'value1'}
        >>> query_string_to_dictionary("name=ferret")
        {}
    """
    if value is None or not value.strip():
        return {}
    if QUERY_MARKER not in value:
        return {}

    query = value.split(QUERY_MARKER, 1)[1]
    if KEY_VALUE_SEPARATOR not in query:
        return {}

    result: dict[str, str] = {}
    for pair in query.split(PAIR_SEPARATOR):
        key, _, raw_value = pair.partition(KEY_VALUE_SEPARATOR)
        key = key.strip().lower()
        if not key:
            continue
        result[key] = raw_value
    return result


# =============================================================================
# JSON
# =============================================================================


def _require_json_text(value: str | None) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError("value", "JSON text is None or empty")
    return value


def json_to_dictionary(value: str | None) -> dict[str, Any]:
    """
    JSON объект без вложенности → dict.

    Для документов с вложенными объектами/массивами используйте
    json_to_value или json_to_object.

    Raises:
        InvalidArgumentError: value None/пустая, или документ не плоский объект
        json.JSONDecodeError: Синтаксически невалидный JSON
    """
    data = json.loads(_require_json_text(value))
    try:
        check_contract(FLAT_JSON_OBJECT, data)
    except ContractViolation as e:
        raise InvalidArgumentError(
            "value",
            "expected a flat JSON object, use json_to_value for nested documents: "
            + "; ".join(e.errors),
        ) from e
    return data


def json_to_value(value: str | None) -> JsonValue:
    """
    Любой JSON документ → JsonValue.

    Raises:
        InvalidArgumentError: value None/пустая
        json.JSONDecodeError: Синтаксически невалидный JSON
    """
    return JsonValue.from_python(json.loads(_require_json_text(value)))


def json_to_object(value: str | None, target_type: type[T]) -> T:
    """
    JSON → экземпляр объявленного типа (pydantic модель, dataclass, TypedDict, builtin).

    Args:
        value: JSON текст
        target_type: Целевой тип

    Returns:
        Провалидированный экземпляр target_type

    Raises:
        InvalidArgumentError: value None/пустая
        pydantic.ValidationError: JSON невалиден или не соответствует типу
    """
    return TypeAdapter(target_type).validate_json(_require_json_text(value))


# =============================================================================
# SQL LIKE ПАРАМЕТРЫ
# =============================================================================


def create_parameters(value: str | None, use_or: bool) -> str:
    """
    Построение условий поиска "key like 'value%'" из плоского JSON объекта.

    Значения очищаются от пробелов по краям, одинарные кавычки удваиваются.
    Ключи обязаны быть идентификаторами (контракт query_parameters).

    Args:
        value: JSON объект {"name": "jo", "city": "Lon"}
        use_or: Соединять условия через "or" (иначе "and")

    Returns:
        "name like 'jo%' or city like 'Lon%'"; "" для пустого ввода или пустого объекта

    Raises:
        InvalidArgumentError: Объект нарушает контракт query_parameters
        json.JSONDecodeError: Синтаксически невалидный JSON
    """
    if not value:
        return ""

    data = json.loads(value)
    try:
        check_contract(QUERY_PARAMETERS, data)
    except ContractViolation as e:
        raise InvalidArgumentError("value", "invalid search parameters: " + "; ".join(e.errors)) from e

    conditions = [
        "{} like '{}%'".format(key, raw.strip().replace("'", "''"))
        for key, raw in data.items()
    ]
    joiner = " or " if use_or else " and "
    logger.debug("create_parameters: built %d condition(s)", len(conditions))
    return joiner.join(conditions)
