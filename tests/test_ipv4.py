import pytest

from numbase.binary import dec_to_bin
from numbase.ipv4 import bin_to_ipv4, ipv4_to_bin, to_fixed_width
from numbase.validation import InvalidInputError


def test_all_ones_address():
    assert ipv4_to_bin("255.255.255.255") == "11111111.11111111.11111111.11111111"


def test_all_zero_address():
    assert ipv4_to_bin("0.0.0.0") == "00000000.00000000.00000000.00000000"


def test_fixed_width_of_zero():
    assert to_fixed_width(0, 4) == "0000"


@pytest.mark.parametrize("num", [1, 5, 77, 200, 255])
def test_fixed_width_pads_to_width(num):
    result = to_fixed_width(num, 8)
    assert len(result) == 8
    assert int(result, 2) == num


def test_fixed_width_never_truncates():
    assert to_fixed_width(300, 8) == dec_to_bin(300)


def test_fixed_width_rejects_negative():
    with pytest.raises(ValueError):
        to_fixed_width(-1, 8)


@pytest.mark.parametrize("address", ["192.168.0.1", "10.0.0.255", "172.16.254.3"])
def test_round_trip(address):
    assert bin_to_ipv4(ipv4_to_bin(address)) == address


@pytest.mark.parametrize("address", ["192.168.0.1", "8.8.4.4"])
def test_octets_are_eight_bits_of_each_part(address):
    octets = ipv4_to_bin(address).split(".")
    assert [len(octet) for octet in octets] == [8, 8, 8, 8]
    assert [int(octet, 2) for octet in octets] == [int(p) for p in address.split(".")]


def test_binary_parts_need_not_be_padded():
    assert bin_to_ipv4("1.10.11.100") == ".".join(
        str(int(part, 2)) for part in ["1", "10", "11", "100"]
    )


@pytest.mark.parametrize(
    "address",
    ["1.2.3", "1.2.3.4.5", "256.0.0.1", "1.2.3.256", "a.b.c.d", "1..2.3"],
)
def test_invalid_address_raises(address):
    with pytest.raises(InvalidInputError):
        ipv4_to_bin(address)


@pytest.mark.parametrize("bits", ["1.0.1", "102.1.1.1", "1.1.1.1.1", "1..1.1"])
def test_invalid_binary_address_raises(bits):
    with pytest.raises(InvalidInputError):
        bin_to_ipv4(bits)