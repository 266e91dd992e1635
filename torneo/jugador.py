"""Tournament players and the prompt that registers one."""

from __future__ import annotations

from dataclasses import dataclass

from torneo.fecha import Fecha, read_fecha
from torneo.textinput import Console


@dataclass
class Jugador:
    """A registered player with their game counters."""

    cedula: int
    fecha_nacimiento: Fecha
    numero: int
    nombre: str
    apellido: str
    departamento: str
    partidas_disputadas: int = 0
    partidas_ganadas: int = 0

    def record_played(self) -> None:
        """Count one more game played."""
        self.partidas_disputadas += 1

    def record_win(self) -> None:
        """Count one more game won."""
        self.partidas_ganadas += 1

    def describe(self) -> str:
        """Return the player's data as the report lines shown to the user."""
        return (
            f"\t[ RES ]: Cedula jugador: {self.cedula}\n"
            f"\t[ RES ]: Fecha: {self.fecha_nacimiento.format()}\n"
            f"\t[ RES ]: Numero jugador: {self.numero}\n"
            f"\t[ RES ]: Nombre: {self.nombre}\n"
            f"\t[ RES ]: Apellido: {self.apellido}\n"
            f"\t[ RES ]: Departamento: {self.departamento}\n"
            f"\t[ RES ]: Partidas disputadas: {self.partidas_disputadas}\n"
            f"\t[ RES ]: Partidas ganadas: {self.partidas_ganadas}\n"
        )


def load_jugador(console: Console, cedula: int, numero: int) -> Jugador:
    """Prompt for a new player's data; the counters start at zero."""
    console.write("\t[ SIS ]: Fecha de nacimiento del jugador:\n")
    fecha = read_fecha(console)
    nombre = console.read_name("nombre")
    apellido = console.read_name("apellido")
    departamento = console.read_name("departamento")
    return Jugador(
        cedula=cedula,
        fecha_nacimiento=fecha,
        numero=numero,
        nombre=nombre,
        apellido=apellido,
        departamento=departamento,
    )