"""
Контракты входных JSON документов

Схемы лежат в каталоге schema/ рядом с модулем, по одной на контракт:
- flat_json_object.json — одноуровневый объект со скалярными значениями
- query_parameters.json — объект для построения LIKE-параметров поиска

Валидатор строится один раз на схему и переиспользуется. Нарушение
контракта → ContractViolation со списком всех найденных ошибок.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

FLAT_JSON_OBJECT: Final[str] = "flat_json_object"
QUERY_PARAMETERS: Final[str] = "query_parameters"


class ContractViolation(ValueError):
    """
    Документ не соответствует контракту.

    Attributes:
        schema_name: Имя нарушенного контракта
        errors: Сообщения вида "$.key: причина", отсортированные по пути
    """

    def __init__(self, schema_name: str, errors: list[str]):
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(f"{schema_name}: " + "; ".join(errors))


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Чтение схемы с проверкой её против мета-схемы draft 2020-12.

    Raises:
        FileNotFoundError: Файла {schema_name}.json нет в schema_dir
        ValueError: Файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Валидатор встроенного контракта, кэшируется на время жизни процесса."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# ПРОВЕРКА
# =============================================================================


def contract_errors(schema_name: str, data: Any) -> list[str]:
    """
    Все нарушения контракта, пустой список для валидного документа.

    Examples:
        >>> contract_errors("flat_json_object", {"a": [1]})
        ["$.a: [1] is not of type 'string', 'number', 'boolean', 'null'"]
    """
    errors = sorted(get_validator(schema_name).iter_errors(data), key=lambda e: e.json_path)
    return [f"{error.json_path}: {error.message}" for error in errors]


def check_contract(schema_name: str, data: Any) -> None:
    """
    Raises:
        ContractViolation: Документ нарушает контракт
    """
    errors = contract_errors(schema_name, data)
    if errors:
        raise ContractViolation(schema_name, errors)
