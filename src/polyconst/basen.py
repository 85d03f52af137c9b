"""Base-N string <-> arbitrary-precision integer conversion.

Digits are 0-9 then a-z (case-insensitive), so bases 2..36 are supported.
Values are accumulated digit by digit with Python int (Horner's method over
the digit string), never via float, and without the interpreter's
str->int digit-count limit.
"""

from polyconst.defaults import DIGITS, MIN_BASE, MAX_BASE
from polyconst.errors import InvalidBaseError, InvalidDigitError

_DIGIT_VALUE = {c: i for i, c in enumerate(DIGITS)}


def check_base(base: int) -> int:
    """Validate base is an int in [MIN_BASE, MAX_BASE]. Returns it unchanged."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"Base must be an integer, got {base!r}")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBaseError(
            f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def parse_base(text) -> int:
    """Parse a base given as decimal text (e.g. "16") and validate its range."""
    if isinstance(text, bool):
        raise InvalidBaseError(f"Base must be an integer, got {text!r}")
    if isinstance(text, int):
        return check_base(text)
    if not isinstance(text, str) or not text.isascii() or not text.isdigit():
        raise InvalidBaseError(f"Base must be a decimal integer, got {text!r}")
    return check_base(decode(text, 10))


def decode(value: str, base: int) -> int:
    """Decode a base-N digit string into an integer.

    Args:
        value: Digit string, optionally prefixed by a single '+' or '-'.
        base: Radix in [2, 36].

    Returns:
        The decoded signed integer.

    Raises:
        InvalidBaseError: base out of range.
        InvalidDigitError: empty digit string or a character that is not
            a digit of `base`.
    """
    check_base(base)
    if not isinstance(value, str):
        raise InvalidDigitError(f"Value must be a string, got {value!r}")

    sign = 1
    digits = value
    if digits[:1] in ("+", "-"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits:
        raise InvalidDigitError(f"No digits in {value!r}")

    offset = len(value) - len(digits)
    result = 0
    for pos, ch in enumerate(digits):
        d = _DIGIT_VALUE.get(ch.lower())
        if d is None or d >= base:
            raise InvalidDigitError(
                f"Invalid digit {ch!r} at position {pos + offset} "
                f"for base {base} in {value!r}")
        result = result * base + d
    return sign * result


def encode(n: int, base: int) -> str:
    """Canonical lowercase base-N representation of n ('-' prefix if negative)."""
    check_base(base)
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while n:
        n, d = divmod(n, base)
        out.append(DIGITS[d])
    return sign + "".join(reversed(out))


def to_decimal(n: int) -> str:
    """Decimal text of n with no digit-count limit (str(n) caps at 4300 digits)."""
    return encode(n, 10)
