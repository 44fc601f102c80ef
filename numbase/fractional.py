"""Conversions between fractional decimals and fractional binary strings."""

from .binary import dec_to_bin
from .validation import InvalidInputError, is_fractional_binary, split_sign


def binfrac_to_dec(text):
    """Return the value written by a binary string that may hold one point.

    A missing point reads as a whole number. Raises InvalidInputError for
    characters other than 0, 1 and '.', a '-' anywhere but first, or more
    than one point.
    """
    if not is_fractional_binary(text) or text.count(".") > 1:
        raise InvalidInputError(f"invalid fractional binary value: {text!r}")
    negative, digits = split_sign(text)
    whole, _, fraction = digits.partition(".")
    value = float(int(whole, 2)) if whole else 0.0
    value += sum(
        int(digit) / 2**place for place, digit in enumerate(fraction, start=1)
    )
    return -value if negative else value


def decfrac_to_bin(value, bits):
    """Return ``value`` in binary with at most ``bits`` digits after the point.

    Digits stop early once the fraction runs out. The point is always
    written, even when no fraction digits follow it.
    """
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole = int(value)
    fraction = value - whole
    digits = []
    for _ in range(max(bits, 0)):
        if fraction == 0:
            break
        fraction *= 2
        digit = int(fraction)
        digits.append(str(digit))
        fraction -= digit
    return f"{sign}{dec_to_bin(whole)}.{''.join(digits)}"