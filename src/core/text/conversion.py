"""
Conversion — Конверсия строк в примитивные типы

Политика ошибок (lenient):
- Числовые конверсии НИКОГДА не бросают: при неудаче возвращается нулевое
  значение типа (0 / Decimal(0))
- to_enum НИКОГДА не бросает на неизвестном имени: возвращается default
- to_boolean — исключение: пустой ввод и неизвестный токен → InvalidArgumentError
- split_to — конверсия всей последовательности атомарна: любой битый
  сегмент → ConversionError

Парсинг инвариантный (не зависит от локали):
- Целые: пробелы по краям, необязательный знак, ASCII цифры
- Decimal: знак, группы тысяч через ',', десятичная точка '.'
"""

import logging
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Final, TypeVar

from src.core.text.errors import ConversionError, InvalidArgumentError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


# =============================================================================
# ДИАПАЗОНЫ ТИПОВ
# =============================================================================

INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Предел 96-битной мантиссы decimal (±79228162514264337593543950335)
DECIMAL_MAX: Final[Decimal] = Decimal(2**96 - 1)

# Стиль числа для to_decimal: знак спереди или после числа, без скобок и экспоненты
DECIMAL_NUMBER_STYLE: Final[dict[str, bool]] = {
    "allow_exponent": False,
    "allow_parentheses": False,
    "allow_trailing_sign": True,
}

# Токены булевой конверсии (после lower() + strip())
TRUE_TOKENS: Final[frozenset[str]] = frozenset({"true", "t", "yes", "y"})
FALSE_TOKENS: Final[frozenset[str]] = frozenset({"false", "f", "no", "n"})

# Спец-значения float в инвариантной культуре
SPECIAL_FLOAT_TOKENS: Final[dict[str, Decimal]] = {
    "NaN": Decimal("NaN"),
    "Infinity": Decimal("Infinity"),
    "-Infinity": Decimal("-Infinity"),
}


# =============================================================================
# ПАТТЕРНЫ
# =============================================================================

INTEGER_PATTERN: Final[re.Pattern] = re.compile(r"\s*([+-]?[0-9]+)\s*")

NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"""
    (?P<open>\()?
    (?P<sign>[+-])?
    (?P<int>[0-9]{1,3}(?:,[0-9]{3})+|[0-9]*)
    (?:\.(?P<frac>[0-9]*))?
    (?:[eE](?P<exp>[+-]?[0-9]+))?
    (?P<trailing>[+-])?
    (?P<close>\))?
    """,
    re.VERBOSE,
)


# =============================================================================
# ИНВАРИАНТНЫЙ ПАРСИНГ
# =============================================================================


def parse_invariant_integer(value: str | None) -> int | None:
    """
    Парсинг целого в инвариантной культуре.

    Args:
        value: Строка (может быть None)

    Returns:
        int или None, если строка не является целым числом
    """
    if value is None:
        return None
    match = INTEGER_PATTERN.fullmatch(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_invariant_number(
    value: str | None,
    allow_exponent: bool = True,
    allow_parentheses: bool = True,
    allow_trailing_sign: bool = False,
) -> Decimal | None:
    """
    Парсинг числа в инвариантной культуре.

    Поддерживает:
    - Пробелы по краям
    - Знак или отрицание через скобки (если allow_parentheses): "(12.5)" → -12.5
    - Знак после числа (если allow_trailing_sign): "12.5-" → -12.5
    - Группы тысяч: "1,234,567.89"
    - Экспоненту (если allow_exponent): "1.5e3"
    - Спец-значения NaN / Infinity / -Infinity (только если allow_exponent)

    Args:
        value: Строка (может быть None)
        allow_exponent: Разрешить экспоненциальную запись и спец-значения
        allow_parentheses: Разрешить отрицание через скобки
        allow_trailing_sign: Разрешить знак после числа

    Returns:
        Decimal или None, если строка не является числом

    Examples:
        >>> parse_invariant_number("1,234.5")
        Decimal('1234.5')
        >>> parse_invariant_number("(3)")
        Decimal('-3')
        >>> parse_invariant_number("1.2.3") is None
        True
    """
    if value is None:
        return None

    text = value.strip()
    if allow_exponent and text in SPECIAL_FLOAT_TOKENS:
        return SPECIAL_FLOAT_TOKENS[text]

    match = NUMBER_PATTERN.fullmatch(text)
    if match is None:
        return None

    int_part = match.group("int")
    frac_part = match.group("frac") or ""
    exp_part = match.group("exp")

    # Хотя бы одна цифра обязательна: "", ".", "+" не являются числами
    if not int_part and not frac_part:
        return None
    if exp_part is not None and not allow_exponent:
        return None

    has_open = match.group("open") is not None
    has_close = match.group("close") is not None
    if has_open != has_close or (has_open and not allow_parentheses):
        return None

    sign = match.group("sign")
    trailing = match.group("trailing")
    if trailing and not allow_trailing_sign:
        return None
    # Допустим только один способ задать знак
    if sum(map(bool, (has_open, sign, trailing))) > 1:
        return None

    negative = has_open or "-" in (sign, trailing)

    # Строим литерал целиком: Decimal(str) точен, арифметика округляет до precision контекста
    literal = ("-" if negative else "") + (int_part.replace(",", "") or "0")
    if frac_part:
        literal += "." + frac_part
    if exp_part is not None:
        literal += "e" + exp_part
    return Decimal(literal)


# =============================================================================
# ЧИСЛОВЫЕ КОНВЕРСИИ (lenient, без исключений)
# =============================================================================


def _to_bounded_int(value: str | None, min_value: int, max_value: int, name: str) -> int:
    number = parse_invariant_integer(value)
    if number is None or not (min_value <= number <= max_value):
        logger.debug("%s: unparsable or out of range input, falling back to 0", name)
        return 0
    return number


def to_int16(value: str | None) -> int:
    """
    Конверсия в 16-битное знаковое целое.

    Returns:
        Число, либо 0 если строка None, не целое или вне [-32768, 32767]
    """
    return _to_bounded_int(value, INT16_MIN, INT16_MAX, "to_int16")


def to_int32(value: str | None) -> int:
    """
    Конверсия в 32-битное знаковое целое.

    Returns:
        Число, либо 0 если строка None, не целое или вне диапазона int32
    """
    return _to_bounded_int(value, INT32_MIN, INT32_MAX, "to_int32")


def to_int64(value: str | None) -> int:
    """
    Конверсия в 64-битное знаковое целое.

    Returns:
        Число, либо 0 если строка None, не целое или вне диапазона int64
    """
    return _to_bounded_int(value, INT64_MIN, INT64_MAX, "to_int64")


def to_decimal(value: str | None) -> Decimal:
    """
    Конверсия в Decimal: знак впереди или после числа, без скобок
    и без экспоненты.

    Args:
        value: Строка вида "-1,234.50"

    Returns:
        Decimal, либо Decimal(0) если строка не число или вне диапазона decimal

    Examples:
        >>> to_decimal("1,000.25")
        Decimal('1000.25')
        >>> to_decimal("3-")
        Decimal('-3')
        >>> to_decimal("abc")
        Decimal('0')
    """
    number = parse_invariant_number(value, **DECIMAL_NUMBER_STYLE)
    if number is None or number.copy_abs() > DECIMAL_MAX:
        logger.debug("to_decimal: unparsable or out of range input, falling back to 0")
        return Decimal(0)
    return number


# =============================================================================
# BOOLEAN (строгая политика)
# =============================================================================


def to_boolean(value: str | None) -> bool:
    """
    Конверсия строки в bool.

    Допустимые токены (регистр и пробелы по краям не важны):
    - True:  true, t, yes, y
    - False: false, f, no, n

    Args:
        value: Строка

    Returns:
        Булев эквивалент

    Raises:
        InvalidArgumentError: Если строка None, пустая, из пробелов,
            или токен не распознан
    """
    if value is None or not value.strip():
        raise InvalidArgumentError("value", "value must be a non-empty boolean token")

    token = value.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False

    raise InvalidArgumentError("value", f"Invalid boolean: {value!r}")


# =============================================================================
# ENUM
# =============================================================================


def to_enum(value: str | None, enum_type: type[E], default: E | None = None) -> E | None:
    """
    Конверсия строки в член Enum.

    Порядок сопоставления:
    1. Имя члена без учёта регистра
    2. Строковое значение члена без учёта регистра
    3. Целое значение члена ("2" → член со значением 2)

    Args:
        value: Имя или значение члена
        enum_type: Класс Enum
        default: Возвращается, если совпадение не найдено

    Returns:
        Член enum_type или default

    Raises:
        InvalidArgumentError: Если enum_type не является подклассом Enum
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise InvalidArgumentError("enum_type", "enum_type must be an Enum subclass")

    if value is None or not value.strip():
        return default

    token = value.strip().casefold()

    for name, member in enum_type.__members__.items():
        if name.casefold() == token:
            return member

    for member in enum_type:
        if isinstance(member.value, str) and member.value.casefold() == token:
            return member

    number = parse_invariant_integer(value)
    if number is not None:
        try:
            return enum_type(number)
        except ValueError:
            pass

    logger.debug("to_enum: no %s member matches input, returning default", enum_type.__name__)
    return default


# =============================================================================
# TYPED SPLIT
# =============================================================================


def _convert_int(segment: str) -> int:
    number = parse_invariant_integer(segment)
    if number is None:
        raise ConversionError(segment, int)
    return number


def _convert_float(segment: str) -> float:
    number = parse_invariant_number(segment)
    if number is None:
        raise ConversionError(segment, float)
    return float(number)


def _convert_decimal(segment: str) -> Decimal:
    number = parse_invariant_number(segment, **DECIMAL_NUMBER_STYLE)
    if number is None:
        raise ConversionError(segment, Decimal)
    return number


def _convert_bool(segment: str) -> bool:
    try:
        return to_boolean(segment)
    except InvalidArgumentError as e:
        raise ConversionError(segment, bool) from e


# Замкнутый набор поддерживаемых целевых типов
SPLIT_CONVERTERS: Final[dict[type, Callable[[str], Any]]] = {
    str: str,
    int: _convert_int,
    float: _convert_float,
    Decimal: _convert_decimal,
    bool: _convert_bool,
}


def split_to(
    value: str | None,
    target: type,
    *separators: str,
    remove_empty: bool = False,
) -> list[Any]:
    """
    Разбиение строки по символам-разделителям с конверсией каждого сегмента.

    Args:
        value: Исходная строка
        target: Целевой тип из {str, int, float, Decimal, bool}
        *separators: Односимвольные разделители; без них — любой пробельный символ
        remove_empty: Отбрасывать пустые сегменты

    Returns:
        Список сконвертированных значений в исходном порядке

    Raises:
        InvalidArgumentError: value None, target не поддерживается,
            разделитель не одиночный символ
        ConversionError: Хотя бы один сегмент не конвертируется

    Examples:
        >>> split_to("1,2,3", int, ",")
        [1, 2, 3]
        >>> split_to("a;;b", str, ";", remove_empty=True)
        ['a', 'b']
    """
    if value is None:
        raise InvalidArgumentError("value", "value is None")

    converter = SPLIT_CONVERTERS.get(target)
    if converter is None:
        supported = ", ".join(t.__name__ for t in SPLIT_CONVERTERS)
        raise InvalidArgumentError(
            "target", f"unsupported target type {target!r}, expected one of: {supported}"
        )

    for separator in separators:
        if not isinstance(separator, str) or len(separator) != 1:
            raise InvalidArgumentError("separator", f"separator must be a single character, got {separator!r}")

    if separators:
        splitter = "[" + "".join(re.escape(s) for s in separators) + "]"
    else:
        splitter = r"\s"

    segments = re.split(splitter, value)
    if remove_empty:
        segments = [s for s in segments if s]

    return [converter(s) for s in segments]


# =============================================================================
# NULL/EMPTY ХЕЛПЕРЫ
# =============================================================================


def get_empty_string_if_null(value: str | None) -> str:
    """None → "", иначе строка без пробелов по краям."""
    return value.strip() if value is not None else ""


def get_null_if_empty_string(value: str | None) -> str | None:
    """None/пустая/из пробелов → None, иначе строка без пробелов по краям."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def get_default_if_empty(value: str | None, default: str | None) -> str | None:
    """
    Значение по умолчанию для пустой строки.

    Returns:
        value без пробелов по краям, либо default если value None/пустая/из пробелов
    """
    stripped = get_null_if_empty_string(value)
    return stripped if stripped is not None else default
