"""Conversions between decimal integers and hexadecimal strings."""

from .validation import normalize_hexadecimal, split_sign


def dec_to_hex(n):
    """Return the upper-case hex digits of ``n``, with a leading '-' when negative."""
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    return sign + format(abs(n), "X")


def hex_to_dec(text):
    """Return the integer written in hexadecimal by ``text``.

    Letters may be in either case; an empty digit string reads as zero.
    Raises InvalidInputError for characters outside 0-9 and A-F.
    """
    negative, digits = split_sign(normalize_hexadecimal(text))
    value = int(digits, 16) if digits else 0
    return -value if negative else value