import re
from datetime import datetime, time
from typing import Callable

from dateutil import parser as date_parser

from csvpsql.canonical.types import Nullability, PrimitiveType


# parse(text) -> datetime, raising ValueError / OverflowError on failure
DateParser = Callable[[str], datetime]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
# int64 never has more than 19 significant digits
INT64_MAX_DIGITS = 19

BOOLEAN_TOKENS = ("true", "false")

INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
FLOAT_PATTERN = re.compile(
    r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?$"
    r"|^[+-]?(?:inf|infinity|nan)$"
)

MIDNIGHT = time(0, 0, 0)


def parse_datetime(value: str) -> datetime:
    """
    Default date parser: python-dateutil's permissive parser.
    """
    return date_parser.parse(value)


def _is_boolean(value: str) -> bool:
    return value in BOOLEAN_TOKENS


def _is_integer(value: str) -> bool:
    """
    Check if value is a signed integer that fits in 64 bits.
    """
    if not INTEGER_PATTERN.fullmatch(value):
        return False
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > INT64_MAX_DIGITS:
        return False
    number = -int(digits) if value.startswith("-") else int(digits)
    return INT64_MIN <= number <= INT64_MAX


def _is_float(value: str) -> bool:
    """
    Check if value is a decimal or scientific-notation number.
    """
    if not FLOAT_PATTERN.fullmatch(value):
        return False
    try:
        float(value)
        return True
    except ValueError:
        return False


def _classify_datetime(value: str, parse: DateParser) -> PrimitiveType:
    """
    DATE when the parsed time-of-day is midnight, TIMESTAMP otherwise.

    An explicit 00:00:00 in the text still yields DATE.
    """
    try:
        parsed = parse(value)
    except (ValueError, OverflowError):
        return PrimitiveType.TEXT

    if parsed.time() == MIDNIGHT:
        return PrimitiveType.DATE
    return PrimitiveType.TIMESTAMP


def classify_type(field: str, parse: DateParser = parse_datetime) -> PrimitiveType:
    """
    Classify a single field.

    Checks run in a fixed order and the first match wins:
    empty -> UNKNOWN, true/false -> BOOLEAN, int64 -> INTEGER,
    float -> FLOATING_POINT, date/time -> DATE or TIMESTAMP,
    anything else -> TEXT.
    """
    value = field.lower()

    if not value:
        return PrimitiveType.UNKNOWN

    if _is_boolean(value):
        return PrimitiveType.BOOLEAN

    if _is_integer(value):
        return PrimitiveType.INTEGER

    if _is_float(value):
        return PrimitiveType.FLOATING_POINT

    return _classify_datetime(value, parse)


def classify_constraint(field: str, null_sentinel: str = "") -> Nullability:
    """
    NULLABLE when the field is exactly the null sentinel.
    """
    if field == null_sentinel:
        return Nullability.NULLABLE
    return Nullability.NOT_NULL
