"""
Core text modules

Независимые строковые утилиты: конверсия, предикаты, преобразования,
структурный парсинг, криптография.
"""

# Errors
from src.core.text.errors import (
    ConversionError,
    DecryptionError,
    InvalidArgumentError,
)

# Conversion
from src.core.text.conversion import (
    get_default_if_empty,
    get_empty_string_if_null,
    get_null_if_empty_string,
    parse_invariant_integer,
    parse_invariant_number,
    split_to,
    to_boolean,
    to_decimal,
    to_enum,
    to_int16,
    to_int32,
    to_int64,
)

# Predicates
from src.core.text.predicates import (
    MIN_BUSINESS_YEAR,
    does_not_end_with,
    does_not_start_with,
    ends_with_ignore_case,
    is_alpha,
    is_alpha_numeric,
    is_date_time,
    is_email_address,
    is_integer,
    is_length,
    is_max_length,
    is_min_length,
    is_null,
    is_numeric,
    is_valid_ipv4,
    starts_with_ignore_case,
)

# Transform
from src.core.text.transform import (
    ELLIPSIS,
    SlashDirection,
    append_prefix_if_missing,
    append_suffix_if_missing,
    capitalize,
    count_occurrences,
    first_character,
    format_with,
    get_byte_size,
    get_length,
    last_character,
    left,
    parse_string_to_csv,
    remove_chars,
    remove_prefix,
    remove_suffix,
    replace_line_feeds,
    reverse,
    reverse_slash,
    right,
    to_text_elements,
    truncate,
)

# Parsing
from src.core.text.json_value import JsonKind, JsonKindError, JsonLookupError, JsonValue
from src.core.text.parsing import (
    create_parameters,
    json_to_dictionary,
    json_to_object,
    json_to_value,
    query_string_to_dictionary,
)

# Crypto
from src.core.text.crypto import (
    SymmetricKey,
    create_hash_sha256,
    create_hash_sha512,
    decrypt,
    encrypt,
    generate_key,
    to_bytes,
)

__all__ = [
    # Errors
    "ConversionError",
    "DecryptionError",
    "InvalidArgumentError",
    # Conversion
    "get_default_if_empty",
    "get_empty_string_if_null",
    "get_null_if_empty_string",
    "parse_invariant_integer",
    "parse_invariant_number",
    "split_to",
    "to_boolean",
    "to_decimal",
    "to_enum",
    "to_int16",
    "to_int32",
    "to_int64",
    # Predicates — Constants
    "MIN_BUSINESS_YEAR",
    # Predicates — Functions
    "does_not_end_with",
    "does_not_start_with",
    "ends_with_ignore_case",
    "is_alpha",
    "is_alpha_numeric",
    "is_date_time",
    "is_email_address",
    "is_integer",
    "is_length",
    "is_max_length",
    "is_min_length",
    "is_null",
    "is_numeric",
    "is_valid_ipv4",
    "starts_with_ignore_case",
    # Transform — Constants
    "ELLIPSIS",
    # Transform — Types
    "SlashDirection",
    # Transform — Functions
    "append_prefix_if_missing",
    "append_suffix_if_missing",
    "capitalize",
    "count_occurrences",
    "first_character",
    "format_with",
    "get_byte_size",
    "get_length",
    "last_character",
    "left",
    "parse_string_to_csv",
    "remove_chars",
    "remove_prefix",
    "remove_suffix",
    "replace_line_feeds",
    "reverse",
    "reverse_slash",
    "right",
    "to_text_elements",
    "truncate",
    # Parsing — Types
    "JsonKind",
    "JsonKindError",
    "JsonLookupError",
    "JsonValue",
    # Parsing — Functions
    "create_parameters",
    "json_to_dictionary",
    "json_to_object",
    "json_to_value",
    "query_string_to_dictionary",
    # Crypto — Types
    "SymmetricKey",
    # Crypto — Functions
    "create_hash_sha256",
    "create_hash_sha512",
    "decrypt",
    "encrypt",
    "generate_key",
    "to_bytes",
]
