"""Conversions between decimal integers and binary strings."""

from .validation import InvalidInputError, is_binary, split_sign


def dec_to_bin(n):
    """Return the binary digits of ``n``, with a leading '-' when negative."""
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    return sign + format(abs(n), "b")


def bin_to_dec(text):
    """Return the integer written in binary by ``text``.

    Raises InvalidInputError for anything but 0/1 digits after an optional '-'.
    """
    if not is_binary(text):
        raise InvalidInputError(f"invalid binary value: {text!r}")
    negative, digits = split_sign(text)
    if not digits:
        raise InvalidInputError(f"invalid binary value: {text!r}")
    value = int(digits, 2)
    return -value if negative else value