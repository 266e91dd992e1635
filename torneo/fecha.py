"""Calendar dates as entered and compared by the tournament system."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from torneo.textinput import Console

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@total_ordering
@dataclass(frozen=True)
class Fecha:
    """A day, month and year; ordered chronologically."""

    dia: int
    mes: int
    ano: int

    def _key(self) -> tuple[int, int, int]:
        return (self.ano, self.mes, self.dia)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fecha):
            return NotImplemented
        return self._key() < other._key()

    def is_valid(self) -> bool:
        """Return True if the day exists in the given month and year."""
        if not 1 <= self.mes <= 12:
            return False
        if self.mes == 2:
            last = 29 if is_leap_year(self.ano) else 28
        elif self.mes in _THIRTY_DAY_MONTHS:
            last = 30
        else:
            last = 31
        return 1 <= self.dia <= last

    def format(self) -> str:
        """Return the date as ``dia / mes / ano``."""
        return f"{self.dia} / {self.mes} / {self.ano}"


def parse_fecha(text: str) -> Fecha:
    """Parse ``DD MM AAAA`` into a Fecha without checking validity.

    Raises ValueError if the text does not hold three integers.
    """
    parts = text.split()
    if len(parts) != 3:
        raise ValueError(f"expected 'DD MM AAAA', got {text!r}")
    dia, mes, ano = (int(part) for part in parts)
    return Fecha(dia, mes, ano)


def order_dates(first: Fecha, second: Fecha) -> tuple[Fecha, Fecha]:
    """Return the two dates with the earlier one first."""
    if second < first:
        return second, first
    return first, second


def read_fecha(console: Console) -> Fecha:
    """Prompt on *console* until a valid date is entered."""
    while True:
        console.write("\t[ SIS ]:Ingrese la fecha (Formato DD MM AAAA): ")
        try:
            fecha = parse_fecha(console.read_line())
        except ValueError:
            fecha = None
        if fecha is not None and fecha.is_valid():
            return fecha
        console.write(
            "\t[ ERROR ]: El valor de fecha ingresado es invalido, "
            "por favor intente nuevamente.\n"
        )