import io

import pytest

from torneo.fecha import Fecha
from torneo.jugador import Jugador, load_jugador
from torneo.textinput import Console


def make_jugador():
    return Jugador(
        cedula=12345678,
        fecha_nacimiento=Fecha(15, 3, 1990),
        numero=1,
        nombre="Ana",
        apellido="Perez",
        departamento="Salto",
    )


def console_for(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_counters_start_at_zero_and_increment():
    jugador = make_jugador()
    assert (jugador.partidas_disputadas, jugador.partidas_ganadas) == (0, 0)
    jugador.record_played()
    jugador.record_played()
    jugador.record_win()
    assert jugador.partidas_disputadas == 2
    assert jugador.partidas_ganadas == 1


def test_describe_lists_every_field():
    text = make_jugador().describe()
    assert "\t[ RES ]: Cedula jugador: 12345678\n" in text
    assert "\t[ RES ]: Fecha: 15 / 3 / 1990\n" in text
    assert "\t[ RES ]: Numero jugador: 1\n" in text
    assert "\t[ RES ]: Nombre: Ana\n" in text
    assert "\t[ RES ]: Apellido: Perez\n" in text
    assert "\t[ RES ]: Departamento: Salto\n" in text
    assert text.endswith("\t[ RES ]: Partidas ganadas: 0\n")


def test_load_jugador_reads_fields():
    console, _ = console_for("15 3 1990\nAna\nPerez\nMontevideo\n")
    jugador = load_jugador(console, 555, 2)
    assert jugador == Jugador(555, Fecha(15, 3, 1990), 2, "Ana", "Perez", "Montevideo")


def test_load_jugador_retries_invalid_input():
    console, out = console_for("31 2 2001\n15 3 1990\nAn4\nAna\n\nPerez\nSalto\n")
    jugador = load_jugador(console, 7, 3)
    assert jugador.fecha_nacimiento == Fecha(15, 3, 1990)
    assert jugador.nombre == "Ana"
    assert jugador.apellido == "Perez"
    assert jugador.departamento == "Salto"
    written = out.getvalue()
    assert "Solo se admiten caracteres no numericos" in written
    assert "Este campo no puede estar vacio" in written


def test_load_jugador_runs_out_of_input():
    console, _ = console_for("15 3 1990\nAna\n")
    with pytest.raises(EOFError):
        load_jugador(console, 7, 3)