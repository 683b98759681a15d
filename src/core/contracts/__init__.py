"""
Contract Validation Module

JSON Schema контракты для входных документов.
"""

from .validators import (
    FLAT_JSON_OBJECT,
    QUERY_PARAMETERS,
    SCHEMA_DIR,
    ContractViolation,
    check_contract,
    contract_errors,
    get_validator,
    load_schema,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "FLAT_JSON_OBJECT",
    "QUERY_PARAMETERS",
    # Errors
    "ContractViolation",
    # Functions
    "load_schema",
    "get_validator",
    "contract_errors",
    "check_contract",
]
