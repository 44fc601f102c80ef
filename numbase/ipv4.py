"""Conversions between dotted IPv4 addresses and dotted binary octets."""

from .binary import bin_to_dec
from .validation import InvalidInputError, is_ipv4_shape


def to_fixed_width(num, bits):
    """Return ``num`` in binary, padded on the left with zeros to ``bits`` digits."""
    if num < 0:
        raise ValueError(f"cannot write a negative number in fixed width: {num}")
    digits = format(num, "b") if num > 0 else ""
    return digits.zfill(bits)


def _octet(part, address):
    try:
        value = int(part)
    except ValueError:
        raise InvalidInputError(f"invalid IPv4 address: {address!r}") from None
    if not 0 <= value <= 255:
        raise InvalidInputError(f"invalid IPv4 address: {address!r}")
    return value


def ipv4_to_bin(address):
    """Return each octet of a dotted IPv4 address as eight binary digits.

    Raises InvalidInputError unless there are four parts, each from 0 to 255.
    """
    if not is_ipv4_shape(address):
        raise InvalidInputError(f"invalid IPv4 address: {address!r}")
    return ".".join(
        to_fixed_width(_octet(part, address), 8) for part in address.split(".")
    )


def bin_to_ipv4(bits):
    """Return the dotted decimal address for four dotted binary parts.

    Raises InvalidInputError unless there are four parts of binary digits.
    """
    if not is_ipv4_shape(bits):
        raise InvalidInputError(f"invalid binary address: {bits!r}")
    return ".".join(str(bin_to_dec(part)) for part in bits.split("."))