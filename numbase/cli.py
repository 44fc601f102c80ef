"""Interactive menu for the number-base converters."""

import sys
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .bases import convert_base
from .binary import bin_to_dec, dec_to_bin
from .fractional import binfrac_to_dec, decfrac_to_bin
from .hexadecimal import dec_to_hex, hex_to_dec
from .ipv4 import bin_to_ipv4, ipv4_to_bin
from .octal import dec_to_oct, oct_to_dec
from .validation import InvalidInputError

MENU = (
    "===== MENU DE CONVERSAO =====",
    "1. Decimal para Binario",
    "2. Binario para Decimal",
    "3. Decimal para Octal",
    "4. Octal para Decimal",
    "5. Decimal para Hexadecimal",
    "6. Hexadecimal para Decimal",
    "7. Base N para Base M",
    "8. Binario Fracionario para Decimal Fracionario",
    "9. Decimal Fracionario para Binario Fracionario",
    "10. IPV4 para Binario",
    "11. Binario para IPV4",
    "0. Sair",
    "Escolha uma opcao:",
)


def _stream_tokens(stream):
    for line in stream:
        yield from line.split()


class _Input:
    """Whitespace-separated answers; failed or missing numbers read as zero."""

    def __init__(self, tokens):
        self._tokens = iter(tokens)

    def text(self):
        return next(self._tokens, "")

    def integer(self):
        try:
            return int(self.text())
        except ValueError:
            return 0

    def real(self):
        try:
            return float(self.text())
        except ValueError:
            return 0.0


@dataclass(frozen=True)
class _Field:
    prompt: Optional[str]
    read: Callable[[_Input], object]


@dataclass(frozen=True)
class _Option:
    title: str
    fields: Tuple[_Field, ...]
    action: Callable[..., object]


_INT = (_Field(None, _Input.integer),)
_TEXT = (_Field(None, _Input.text),)

_OPTIONS = {
    1: _Option("Decimal para Binario: ", _INT, dec_to_bin),
    2: _Option("Binario para Decimal: ", _TEXT, bin_to_dec),
    3: _Option("Decimal para Octal: ", _INT, dec_to_oct),
    4: _Option("Octal para Decimal: ", _TEXT, oct_to_dec),
    5: _Option("Decimal para Hexadecimal: ", _INT, dec_to_hex),
    6: _Option("Hexadecimal para Decimal: ", _TEXT, hex_to_dec),
    7: _Option(
        "Conversao Geral, base N para M: ",
        (
            _Field("Digite o valor que quer converter: ", _Input.text),
            _Field("Digite a base N: ", _Input.integer),
            _Field("Digite a base M: ", _Input.integer),
        ),
        convert_base,
    ),
    8: _Option(
        "Binario Fracionario para Decimal: ",
        _TEXT,
        lambda text: format(binfrac_to_dec(text), "g"),
    ),
    9: _Option(
        "Decimal Fracionario para Binario Fracionario: ",
        (
            _Field(None, _Input.real),
            _Field("Precisao de Bits: ", _Input.integer),
        ),
        decfrac_to_bin,
    ),
    10: _Option("IPV4 para Binario: ", _TEXT, ipv4_to_bin),
    11: _Option("Binario para IPV4: ", _TEXT, bin_to_ipv4),
}


def _run(option, answers):
    print(option.title)
    values = []
    for field in option.fields:
        if field.prompt is not None:
            print(field.prompt)
        values.append(field.read(answers))
    try:
        result = option.action(*values)
    except InvalidInputError as exc:
        result = f"ERRO: {exc}"
    print(f"Resultado: {result}")


def main(argv=None):
    """Show the menu, run one conversion and return the exit status.

    Answers come from ``argv`` when given, otherwise from standard input.
    """
    answers = _Input(_stream_tokens(sys.stdin) if argv is None else argv)
    for line in MENU:
        print(line)
    choice = answers.integer()
    option = _OPTIONS.get(choice)
    if option is not None:
        _run(option, answers)
    elif choice == 0:
        print("Saindo...")
    else:
        print("Opcao invalida!")
    return 0


if __name__ == "__main__":
    sys.exit(main())