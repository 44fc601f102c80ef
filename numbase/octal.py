"""Conversions between decimal integers and octal strings."""

from .validation import InvalidInputError, is_octal, split_sign


def dec_to_oct(n):
    """Return the octal digits of ``n``, with a leading '-' when negative."""
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    return sign + format(abs(n), "o")


def oct_to_dec(text):
    """Return the integer written in octal by ``text``.

    Raises InvalidInputError for anything but 0-7 digits after an optional '-'.
    """
    if not is_octal(text):
        raise InvalidInputError(f"invalid octal value: {text!r}")
    negative, digits = split_sign(text)
    if not digits:
        raise InvalidInputError(f"invalid octal value: {text!r}")
    value = int(digits, 8)
    return -value if negative else value