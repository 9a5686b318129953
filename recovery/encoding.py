# ----- encoding.py -----
import operator
import string
import config
from recovery.errors import InvalidBase, InvalidDigit

ALPHABET = string.digits + string.ascii_lowercase
DIGIT_VALUES = {char: value for value, char in enumerate(ALPHABET)}
DIGIT_VALUES.update({char.upper(): value for char, value in list(DIGIT_VALUES.items())})


def parse_integer(value, error, what="value") -> int:
    """
    Exact integer from an int, an integer-valued float (JSON "3.0") or
    the textual form of an integer. Fractional, infinite and NaN numbers
    and booleans raise `error` instead of being truncated.
    """
    if isinstance(value, bool):
        raise error(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise error(f"{what} must be an integer, got {value!r}")
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise error(f"{what} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise error(f"{what} must be an integer, got {value!r}")


def _check_base(base) -> int:
    base = parse_integer(base, InvalidBase, "Base")
    if not config.Config.MIN_BASE <= base <= config.Config.MAX_BASE:
        raise InvalidBase(
            f"Base {base} outside supported range "
            f"{config.Config.MIN_BASE}-{config.Config.MAX_BASE}"
        )
    return base


def decode_value(base, digits: str) -> int:
    """Decode a digit string written in `base` into an exact integer.

    `base` may be an int or its textual form as found in share records
    ("16"). Digits are case-insensitive.
    """
    base = _check_base(base)
    if not digits:
        raise InvalidDigit("Empty digit string")

    result = 0
    for position, char in enumerate(digits):
        digit = DIGIT_VALUES.get(char)
        if digit is None or digit >= base:
            raise InvalidDigit(
                f"Invalid digit {char!r} at position {position} for base {base}"
            )
        result = result * base + digit
    return result


def encode_value(value: int, base) -> str:
    """Canonical lowercase digits of a non-negative integer in `base`"""
    base = _check_base(base)
    if value < 0:
        raise ValueError("Cannot encode a negative value")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(ALPHABET[digit])
    return "".join(reversed(digits))
