"""Conversions between binary, octal, decimal, hexadecimal, fractional binary, IPv4 and bases 2 to 36."""

__version__ = "0.1.0"
__all__ = ["bases", "binary", "cli", "fractional", "hexadecimal", "ipv4", "octal", "validation"]