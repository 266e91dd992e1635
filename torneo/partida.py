"""A single game between two players and the prompt that records it."""

from __future__ import annotations

from dataclasses import dataclass

from torneo.textinput import Console


@dataclass(frozen=True)
class Partida:
    """A numbered game; the winner must be one of the two players."""

    numero: int
    cedula_jugador1: int
    cedula_jugador2: int
    cedula_vencedor: int

    def __post_init__(self) -> None:
        if self.cedula_vencedor not in (self.cedula_jugador1, self.cedula_jugador2):
            raise ValueError("the winner must be one of the two players")

    def involves(self, cedula: int) -> bool:
        """Return True if *cedula* played in this game."""
        return cedula in (self.cedula_jugador1, self.cedula_jugador2)

    def describe(self) -> str:
        """Return the game's data as the report lines shown to the user."""
        return (
            f"\t[ RES ]: Numero de partida: {self.numero}\n"
            f"\t[ RES ]: Cedula del jugador 1: {self.cedula_jugador1}\n"
            f"\t[ RES ]: Cedula del jugador 2: {self.cedula_jugador2}\n"
            f"\t[ RES ]: Cedula del ganador: {self.cedula_vencedor}\n\n"
        )


def load_partida(console: Console, cedula1: int, cedula2: int, numero: int) -> Partida:
    """Prompt for the winner until it is one of the two players."""
    while True:
        console.write("\t[ SIS ]: Ingrese la Cedula del Jugador Ganador:\n")
        vencedor = console.read_cedula()
        if vencedor in (cedula1, cedula2):
            return Partida(numero, cedula1, cedula2, vencedor)
        console.write(
            "\t[ ERROR ]: Cedula del ganador invalida. "
            "Debe ser la cedula de uno de los jugadores.\n"
        )