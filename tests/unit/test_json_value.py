"""
Тесты для JsonValue (tagged variant)

Проверяет:
1. Тегирование всех видов JSON значений
2. Явные ошибки на отсутствующих ключах/индексах
3. Ошибки вида при неприменимых операциях
4. Обратное преобразование to_python
"""

import pytest

from src.core.text.json_value import JsonKind, JsonKindError, JsonLookupError, JsonValue


@pytest.fixture
def document() -> JsonValue:
    """Вложенный документ с родителем и детьми."""
    return JsonValue.from_python(
        {
            "name": "Ann",
            "active": True,
            "score": 9.5,
            "spouse": None,
            "children": [{"name": "Bob", "age": 7}, {"name": "Eve", "age": 4}],
        }
    )


class TestFromPython:
    """Тесты для JsonValue.from_python"""

    def test_kinds(self, document: JsonValue) -> None:
        assert document.kind is JsonKind.OBJECT
        assert document.get("name").kind is JsonKind.STRING
        assert document.get("active").kind is JsonKind.BOOL
        assert document.get("score").kind is JsonKind.NUMBER
        assert document.get("spouse").kind is JsonKind.NULL
        assert document.get("children").kind is JsonKind.ARRAY

    def test_bool_is_not_number(self) -> None:
        assert JsonValue.from_python(True).kind is JsonKind.BOOL
        assert JsonValue.from_python(1).kind is JsonKind.NUMBER

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="unsupported JSON type"):
            JsonValue.from_python({1, 2})

    def test_round_trip_to_python(self, document: JsonValue) -> None:
        assert document.to_python()["children"][1] == {"name": "Eve", "age": 4}


class TestNavigation:
    """Тесты для get / at / path / has / keys"""

    def test_path(self, document: JsonValue) -> None:
        assert document.path("children", 0, "name").as_str() == "Bob"
        assert document.path("children", 1, "age").as_number() == 4

    def test_missing_key_raises(self, document: JsonValue) -> None:
        with pytest.raises(JsonLookupError, match="'nickname'"):
            document.get("nickname")

    def test_missing_index_raises(self, document: JsonValue) -> None:
        with pytest.raises(JsonLookupError, match="index 5"):
            document.get("children").at(5)

    def test_has_and_keys(self, document: JsonValue) -> None:
        assert document.has("spouse") is True
        assert document.has("nickname") is False
        assert document.keys() == ["name", "active", "score", "spouse", "children"]

    def test_iteration_and_size(self, document: JsonValue) -> None:
        children = document.get("children")
        assert [c.get("name").as_str() for c in children] == ["Bob", "Eve"]
        assert children.size() == 2
        assert document.size() == 5


class TestKindErrors:
    """Тесты для ошибок вида"""

    def test_get_on_array(self, document: JsonValue) -> None:
        with pytest.raises(JsonKindError) as exc_info:
            document.get("children").get("name")
        assert exc_info.value.expected is JsonKind.OBJECT
        assert exc_info.value.actual is JsonKind.ARRAY

    def test_typed_accessor_mismatch(self, document: JsonValue) -> None:
        with pytest.raises(JsonKindError):
            document.get("name").as_number()
        with pytest.raises(JsonKindError):
            document.get("spouse").as_str()

    def test_size_of_scalar(self, document: JsonValue) -> None:
        with pytest.raises(JsonKindError):
            document.get("name").size()


class TestImmutability:
    """Тесты для неизменяемости и хэширования"""

    def test_object_fields_read_only(self, document: JsonValue) -> None:
        with pytest.raises(TypeError):
            document.raw["name"] = JsonValue.from_python("Eve")
        assert document.get("name").as_str() == "Ann"

    def test_source_dict_not_shared(self) -> None:
        source = {"a": 1}
        value = JsonValue.from_python(source)
        source["a"] = 2
        assert value.get("a").as_number() == 1

    def test_hashable(self, document: JsonValue) -> None:
        twin = JsonValue.from_python(document.to_python())
        assert twin == document
        assert hash(twin) == hash(document)
        assert len({document, twin}) == 1

    def test_key_order_does_not_affect_equality(self) -> None:
        first = JsonValue.from_python({"a": 1, "b": [True, None]})
        second = JsonValue.from_python({"b": [True, None], "a": 1})
        assert first == second
        assert hash(first) == hash(second)

    def test_different_values_differ(self) -> None:
        assert JsonValue.from_python({"a": 1}) != JsonValue.from_python({"a": 2})
        assert JsonValue.from_python(True) != JsonValue.from_python(1)
