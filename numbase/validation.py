"""Input checks shared by the number-base converters."""

_BINARY_DIGITS = frozenset("01")
_FRACTIONAL_BINARY_DIGITS = frozenset("01.")
_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset("0123456789ABCDEF")
_HEX_UPPER = str.maketrans("abcdef", "ABCDEF")


class InvalidInputError(ValueError):
    """Raised when a textual number does not fit its expected format."""


def split_sign(text):
    """Split one leading minus sign off ``text``.

    Returns a ``(negative, digits)`` pair.
    """
    if text.startswith("-"):
        return True, text[1:]
    return False, text


def _only_signed_digits(text, allowed):
    """True when every character is allowed, with '-' accepted only first."""
    return all(
        ch in allowed or (ch == "-" and position == 0)
        for position, ch in enumerate(text)
    )


def is_ipv4_shape(text):
    """True when ``text`` holds exactly three dots, like a dotted quad."""
    return text.count(".") == 3


def is_binary(text):
    """True when ``text`` holds only 0 and 1, with an optional leading '-'."""
    return _only_signed_digits(text, _BINARY_DIGITS)


def is_fractional_binary(text):
    """True when ``text`` holds only 0, 1 and '.', with an optional leading '-'."""
    return _only_signed_digits(text, _FRACTIONAL_BINARY_DIGITS)


def normalize_hexadecimal(text):
    """Return ``text`` with its hex letters in upper case.

    One leading '-' is kept. Raises InvalidInputError when anything other
    than 0-9, a-f or A-F follows it.
    """
    negative, digits = split_sign(text)
    digits = digits.translate(_HEX_UPPER)
    if not all(ch in _HEX_DIGITS for ch in digits):
        raise InvalidInputError(f"invalid hexadecimal value: {text!r}")
    return "-" + digits if negative else digits


def is_octal(text):
    """True when ``text`` holds only 0-7, with an optional leading '-'."""
    return _only_signed_digits(text, _OCTAL_DIGITS)