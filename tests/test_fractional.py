import pytest

from numbase.binary import bin_to_dec, dec_to_bin
from numbase.fractional import binfrac_to_dec, decfrac_to_bin
from numbase.validation import InvalidInputError


def test_half_to_binary():
    assert decfrac_to_bin(0.5, 8) == "0.1"


def test_binary_half_to_decimal():
    assert binfrac_to_dec("0.1") == 0.5


@pytest.mark.parametrize("text", ["101", "1", "0", "1101"])
def test_no_point_reads_as_whole_number(text):
    assert binfrac_to_dec(text) == float(bin_to_dec(text))


@pytest.mark.parametrize("value", [5.75, 2.625, 0.125, 12.5, -3.25, 7.0])
def test_round_trip(value):
    assert binfrac_to_dec(decfrac_to_bin(value, 16)) == value


@pytest.mark.parametrize("value", [5.75, 3.0, 9.875])
def test_zero_bits_gives_only_whole_part(value):
    assert decfrac_to_bin(value, 0) == dec_to_bin(int(value)) + "."


@pytest.mark.parametrize("bits", [1, 3, 5, 10])
def test_fraction_digits_limited_by_bits(bits):
    result = decfrac_to_bin(0.1, bits)
    _, _, fraction = result.partition(".")
    assert len(fraction) == bits


def test_negative_text_negates_value():
    assert binfrac_to_dec("-110.01") == -binfrac_to_dec("110.01")


def test_negative_value_has_sign():
    result = decfrac_to_bin(-5.75, 8)
    assert result == "-" + decfrac_to_bin(5.75, 8)


@pytest.mark.parametrize("text", ["10.2", "1-0", "1.0.1", "abc"])
def test_invalid_input_raises(text):
    with pytest.raises(InvalidInputError):
        binfrac_to_dec(text)