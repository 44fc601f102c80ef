# numbase

Conversions between number bases, as a library and as an interactive menu.

## What it converts

- decimal ⇄ binary: `numbase.binary.dec_to_bin`, `numbase.binary.bin_to_dec`
- decimal ⇄ octal: `numbase.octal.dec_to_oct`, `numbase.octal.oct_to_dec`
- decimal ⇄ hexadecimal: `numbase.hexadecimal.dec_to_hex`,
  `numbase.hexadecimal.hex_to_dec` (letters in either case on input,
  upper case on output)
- fractional binary ⇄ fractional decimal: `numbase.fractional.binfrac_to_dec`,
  `numbase.fractional.decfrac_to_bin`
- dotted IPv4 address ⇄ dotted binary octets: `numbase.ipv4.ipv4_to_bin`,
  `numbase.ipv4.bin_to_ipv4`, with `numbase.ipv4.to_fixed_width` for
  zero-padded binary
- any base from 2 to 36 to any other: `numbase.bases.convert_base`, built on
  `to_decimal`, `from_decimal`, `char_to_value` and `value_to_char`

The decimal, binary, octal, hexadecimal, fractional and base-to-base
conversions accept a leading `-` and keep it in the result. Input that does
not fit its format raises `numbase.validation.InvalidInputError`, a subclass
of `ValueError`: a digit not allowed in the base, a `-` anywhere but first,
a base outside 2–36, an IPv4 address without exactly four parts or with a
part outside 0–255.

## Library use

```python
from numbase.binary import dec_to_bin, bin_to_dec
from numbase.hexadecimal import hex_to_dec
from numbase.bases import convert_base
from numbase.fractional import decfrac_to_bin
from numbase.ipv4 import ipv4_to_bin

dec_to_bin(10)                   # "1010"
bin_to_dec("-1010")              # -10
hex_to_dec("ff")                 # 255
convert_base("255", 10, 16)      # "FF"
decfrac_to_bin(2.5, 4)           # "10.1"
ipv4_to_bin("192.168.0.1")       # "11000000.10101000.00000000.00000001"
```

`decfrac_to_bin(value, bits)` writes at most `bits` digits after the point,
fewer when the fraction runs out, and always writes the point.
`binfrac_to_dec` reads a string with at most one point; with none it reads a
whole number.

## Command line

Installing the package provides the `numbase` command:

```
numbase
```

It prints a numbered menu, reads a choice and the values that conversion
needs from standard input (separated by any whitespace), and prints
`Resultado: ` followed by the result. Invalid input is reported as
`Resultado: ERRO: ...` instead of stopping the program. A number that cannot
be read counts as zero. Option `0` leaves without converting; any other
unknown choice prints `Opcao invalida!`. One conversion is done per run.

`numbase.cli.main(argv)` can also be called with a list of answers in place
of standard input, for example `main(["7", "ff", "16", "2"])`.

## Running the tests

```
pip install -e .[test]
pytest
```