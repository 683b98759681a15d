"""
JsonValue — Tagged variant для произвольного JSON документа

Каждое значение несёт тег JsonKind (NULL/BOOL/NUMBER/STRING/ARRAY/OBJECT).
Доступ к полям явный: отсутствующий ключ или индекс → JsonLookupError,
обращение к значению не того вида → JsonKindError.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator


class JsonKind(str, Enum):
    """Вид JSON значения"""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class JsonLookupError(LookupError):
    """Ключ или индекс отсутствует в JSON значении."""
    pass


class JsonKindError(TypeError):
    """Операция не применима к JSON значению данного вида."""

    def __init__(self, expected: JsonKind, actual: JsonKind):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected JSON {expected.value}, got {actual.value}")


@dataclass(frozen=True)
class JsonValue:
    """
    Неизменяемое JSON значение.

    Для ARRAY `raw` — tuple[JsonValue, ...], для OBJECT — MappingProxyType
    поверх dict[str, JsonValue], для остальных видов — соответствующий
    примитив Python. Значения хэшируемы, равные документы дают равный hash.
    """

    kind: JsonKind
    raw: Any = None

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_python(cls, data: Any) -> "JsonValue":
        """
        Построение из результата json.loads.

        Raises:
            TypeError: Если data содержит не-JSON типы
        """
        if data is None:
            return cls(JsonKind.NULL)
        # bool проверяется раньше int: bool — подкласс int
        if isinstance(data, bool):
            return cls(JsonKind.BOOL, data)
        if isinstance(data, (int, float)):
            return cls(JsonKind.NUMBER, data)
        if isinstance(data, str):
            return cls(JsonKind.STRING, data)
        if isinstance(data, (list, tuple)):
            return cls(JsonKind.ARRAY, tuple(cls.from_python(item) for item in data))
        if isinstance(data, dict):
            fields = {str(k): cls.from_python(v) for k, v in data.items()}
            return cls(JsonKind.OBJECT, MappingProxyType(fields))
        raise TypeError(f"unsupported JSON type: {type(data).__name__}")

    def to_python(self) -> Any:
        """Обратное преобразование в dict/list/примитивы."""
        if self.kind is JsonKind.ARRAY:
            return [item.to_python() for item in self.raw]
        if self.kind is JsonKind.OBJECT:
            return {k: v.to_python() for k, v in self.raw.items()}
        return self.raw

    def __hash__(self) -> int:
        # MappingProxyType не хэшируется, порядок ключей на равенство не влияет
        if self.kind is JsonKind.OBJECT:
            return hash((self.kind, frozenset(self.raw.items())))
        return hash((self.kind, self.raw))

    # -------------------------------------------------------------------------
    # Навигация
    # -------------------------------------------------------------------------

    def _require(self, kind: JsonKind) -> None:
        if self.kind is not kind:
            raise JsonKindError(kind, self.kind)

    def get(self, key: str) -> "JsonValue":
        """
        Поле объекта.

        Raises:
            JsonKindError: Значение не OBJECT
            JsonLookupError: Ключ отсутствует
        """
        self._require(JsonKind.OBJECT)
        try:
            return self.raw[key]
        except KeyError:
            raise JsonLookupError(f"key {key!r} not found") from None

    def at(self, index: int) -> "JsonValue":
        """
        Элемент массива.

        Raises:
            JsonKindError: Значение не ARRAY
            JsonLookupError: Индекс вне границ
        """
        self._require(JsonKind.ARRAY)
        try:
            return self.raw[index]
        except IndexError:
            raise JsonLookupError(f"index {index} out of range") from None

    def path(self, *steps: str | int) -> "JsonValue":
        """Последовательный спуск: value.path("user", "roles", 0)."""
        current = self
        for step in steps:
            current = current.at(step) if isinstance(step, int) else current.get(step)
        return current

    def has(self, key: str) -> bool:
        return self.kind is JsonKind.OBJECT and key in self.raw

    def keys(self) -> list[str]:
        self._require(JsonKind.OBJECT)
        return list(self.raw)

    def __iter__(self) -> Iterator["JsonValue"]:
        self._require(JsonKind.ARRAY)
        return iter(self.raw)

    def size(self) -> int:
        """Количество элементов ARRAY или полей OBJECT."""
        if self.kind in (JsonKind.ARRAY, JsonKind.OBJECT):
            return len(self.raw)
        raise JsonKindError(JsonKind.ARRAY, self.kind)

    # -------------------------------------------------------------------------
    # Типизированные аксессоры
    # -------------------------------------------------------------------------

    @property
    def is_null(self) -> bool:
        return self.kind is JsonKind.NULL

    def as_bool(self) -> bool:
        self._require(JsonKind.BOOL)
        return self.raw

    def as_number(self) -> int | float:
        self._require(JsonKind.NUMBER)
        return self.raw

    def as_str(self) -> str:
        self._require(JsonKind.STRING)
        return self.raw
