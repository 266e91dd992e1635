"""Text helpers and the interactive console used to read validated input."""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

MAX = 80
"""Size of a text buffer: a text holds at most ``MAX - 1`` characters."""

_ENCODING = "latin-1"


def is_numeric(text: str) -> bool:
    """Return True if *text* is an optional ``-`` followed by at least one digit."""
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all("0" <= ch <= "9" for ch in digits)


def to_number(text: str) -> int:
    """Convert a numeric text into an integer.

    Raises ValueError if *text* is not numeric in the sense of :func:`is_numeric`.
    """
    if not is_numeric(text):
        raise ValueError(f"not a number: {text!r}")
    return int(text)


def is_zero(text: str) -> bool:
    """Return True if the numeric *text* denotes zero."""
    return to_number(text) == 0


def contains_digits(text: str) -> bool:
    """Return True if any character of *text* is a decimal digit."""
    return any("0" <= ch <= "9" for ch in text)


def clip(text: str) -> str:
    """Truncate *text* to the longest length a text buffer can hold."""
    return text[: MAX - 1]


def concat(first: str, second: str) -> str:
    """Join two texts, truncating the result to the buffer limit."""
    return clip(first + second)


def write_cstring(text: str, stream: BinaryIO) -> None:
    """Write *text* to a binary stream followed by a terminating NUL byte."""
    stream.write(text.encode(_ENCODING) + b"\0")


def read_cstring(stream: BinaryIO) -> str:
    """Read bytes up to a NUL byte or end of stream and return them as text."""
    data = bytearray()
    while True:
        byte = stream.read(1)
        if not byte or byte == b"\0":
            break
        data += byte
    return data.decode(_ENCODING)


class Console:
    """Line-oriented prompt reader with the program's validation loops."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write *text* to the output stream."""
        self._stdout.write(text)
        flush = getattr(self._stdout, "flush", None)
        if flush is not None:
            flush()

    def read_line(self) -> str:
        """Read one line without its newline, clipped to the buffer limit.

        Raises EOFError when the input is exhausted.
        """
        line = self._stdin.readline()
        if line == "":
            raise EOFError("no more input")
        if line.endswith("\n"):
            line = line[:-1]
        return clip(line)

    def read_int(self) -> int:
        """Read a line and return the integer at its start.

        Raises ValueError if the line does not start with an integer.
        """
        tokens = self.read_line().split()
        if not tokens:
            raise ValueError("expected an integer")
        return int(tokens[0])

    def read_cedula(self) -> int:
        """Prompt until a non-zero numeric identity number is entered."""
        while True:
            self.write("\t[ SIS ]: Ingrese cedula sin puntos ni guiones: ")
            text = self.read_line()
            if not is_numeric(text):
                self.write("\t[ ERROR ]: Entrada invalida.\n")
                self.write("\t[ INFO ]: Solo se admiten digitos (0...9). Intente nuevamente.\n")
            elif is_zero(text):
                self.write("\t[ ERROR ]: Cedula invalida.\n")
                self.write("\t[ INFO ]: Este campo no puede ser cero. Intente nuevamente.\n")
            else:
                return to_number(text)

    def read_name(self, field: str) -> str:
        """Prompt for *field* until a non-empty text without digits is entered."""
        while True:
            self.write(f"\t[ SIS ]: Ingrese {field}: ")
            text = self.read_line()
            if contains_digits(text):
                self.write("\t[ ERROR ]: Entrada invalida.\n")
                self.write(
                    "\t[ INFO ]: Solo se admiten caracteres no numericos. Intente nuevamente.\n"
                )
            elif not text:
                self.write("\t[ ERROR ]: Entrada invalida.\n")
                self.write("\t[ INFO ]: Este campo no puede estar vacio. Intente nuevamente.\n")
            else:
                return text

    def read_bool(self) -> bool:
        """Prompt until 1 (true) or 0 (false) is entered."""
        while True:
            self.write("\nIngrese VERDADERO o FALSO (1/0): ")
            try:
                value = self.read_int()
            except ValueError:
                value = None
            if value == 0:
                return False
            if value == 1:
                return True
            self.write("El dato ingresado es invalido, intente nuevamente")