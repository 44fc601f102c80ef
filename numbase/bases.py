"""Conversion of numbers between any two bases from 2 to 36."""

from .validation import InvalidInputError, split_sign

_MIN_BASE = 2
_MAX_BASE = 36


def _check_base(base):
    if not _MIN_BASE <= base <= _MAX_BASE:
        raise InvalidInputError(
            f"invalid base {base}: must be from {_MIN_BASE} to {_MAX_BASE}"
        )


def char_to_value(char):
    """Return the digit value of ``char``: 0-9, then A-Z (either case) as 10-35."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    raise InvalidInputError(f"invalid digit: {char!r}")


def value_to_char(value):
    """Return the upper-case digit character for a value from 0 to 35."""
    if not 0 <= value < _MAX_BASE:
        raise InvalidInputError(f"digit value out of range: {value}")
    if value < 10:
        return chr(ord("0") + value)
    return chr(ord("A") + value - 10)


def to_decimal(num, base_from):
    """Return the integer written by ``num`` in ``base_from``.

    Raises InvalidInputError for a base outside 2-36 or a digit too large
    for the base.
    """
    _check_base(base_from)
    negative, digits = split_sign(num)
    decimal = 0
    for char in digits:
        digit = char_to_value(char)
        if digit >= base_from:
            raise InvalidInputError(f"digit {char!r} is not valid in base {base_from}")
        decimal = decimal * base_from + digit
    return -decimal if negative else decimal


def from_decimal(decimal, base_to):
    """Return ``decimal`` written in ``base_to``, with a leading '-' when negative."""
    _check_base(base_to)
    if decimal == 0:
        return "0"
    sign = "-" if decimal < 0 else ""
    remaining = abs(decimal)
    digits = []
    while remaining > 0:
        remaining, rest = divmod(remaining, base_to)
        digits.append(value_to_char(rest))
    return sign + "".join(reversed(digits))


def convert_base(num, base_from, base_to):
    """Return ``num`` converted from ``base_from`` to ``base_to``."""
    return from_decimal(to_decimal(num, base_from), base_to)