"""Interactive main menu of the tournament system."""

from __future__ import annotations

import argparse
from typing import Callable

from torneo.sistema import Sistema, TournamentError
from torneo.textinput import Console

_TITLES = {
    1: "REGISTRAR JUGADOR",
    2: "JUGADORES DEL SISTEMA",
    3: "DATOS DEL JUGADOR",
    4: "REGISTRAR PARTIDA",
    5: "PARTIDAS DEL SISTEMA",
    6: "JUGADORES POR FECHA",
    7: "MISMA SUBDIVISION",
    8: "TORNEO COMPLETO",
}

_BANNER = (
    "\n\n\t ___  ___                 \n"
    "\t|  \\/  |                 \n"
    "\t| .  . | ___ _ __  _   _ \n"
    "\t| |\\/| |/ _ \\ '_ \\| | | |\n"
    "\t| |  | |  __/ | | | |_| |\n"
    "\t\\_|  |_/\\___|_| |_|\\__,_|\n"
    "\t                         \n"
    "\tObligatorio de programacion III\n"
)

_FAREWELL = (
    "\t               _ _           \n"
    "\t     /\\      | (_)          \n"
    "\t    /  \\   __| |_  ___  ___ \n"
    "\t   / /\\ \\ / _` | |/ _ \\/ __|\n"
    "\t  / ____ \\ (_| | | (_) \\__ \\ \n"
    "\t /_/    \\_\\__,_|_|\\___/|___/ \n"
)

_MENU = (
    "\n\t1. Registrar jugador.\n"
    "\t2. Listar todos los jugadores.\n"
    "\t3. Listar datos del jugador por cedula.\n"
    "\t4. Registrar partida.\n"
    "\t5. Listar todas las partidas\n"
    "\t6. Cant. jugadores por fecha.\n"
    "\t7. Misma subdivision.\n"
    "\t8. Torneo Completo?.\n"
    "\t0. SALIR\n"
    "\tIngrese una opcion: "
)

_PAUSE = "Presione Enter para continuar . . . "


def menu_title(option: int | None) -> str:
    """Return the underlined heading shown for a menu option, or '' if it has none."""
    title = _TITLES.get(option) if option is not None else None
    if title is None:
        return ""
    return f"\n\t{title}\n\t{'-' * len(title)}\n"


def banner() -> str:
    """Return the title art shown above the main menu."""
    return _BANNER


def farewell() -> str:
    """Return the art shown when the program ends."""
    return _FAREWELL


def _read_option(console: Console) -> int | None:
    console.write(banner())
    console.write(_MENU)
    try:
        return console.read_int()
    except ValueError:
        return None


def _two_cedulas(console: Console, first_prompt: str) -> tuple[int, int]:
    console.write(first_prompt)
    cedula1 = console.read_cedula()
    console.write("\t[ SIS ]: Ingrese la cedula del jugador 2:\n")
    cedula2 = console.read_cedula()
    return cedula1, cedula2


def _actions(console: Console, sistema: Sistema) -> dict[int, Callable[[], object]]:
    def register_player() -> None:
        sistema.register_player(console.read_cedula())

    def show_player() -> None:
        sistema.show_player(console.read_cedula())

    def register_game() -> None:
        cedula1, cedula2 = _two_cedulas(
            console, "\t[ SIS ]:Ingrese la cedula del jugador 1:\n"
        )
        sistema.register_game(cedula1, cedula2)

    def same_subdivision() -> None:
        cedula1, cedula2 = _two_cedulas(
            console, "\t[ SIS ]: Ingrese la cedula del jugador 1:\n"
        )
        sistema.same_subdivision(cedula1, cedula2)

    return {
        1: register_player,
        2: sistema.list_players,
        3: show_player,
        4: register_game,
        5: sistema.list_games,
        6: sistema.players_by_date,
        7: same_subdivision,
        8: sistema.tournament_status,
    }


def run(console: Console | None = None, sistema: Sistema | None = None) -> None:
    """Show the main menu and carry out options until 0 is chosen or input ends."""
    console = console if console is not None else Console()
    sistema = sistema if sistema is not None else Sistema(console)
    actions = _actions(console, sistema)
    try:
        while True:
            option = _read_option(console)
            console.write(menu_title(option))
            if option == 0:
                break
            action = actions.get(option) if option is not None else None
            if action is None:
                console.write("\t[ ERROR ]: Opcion invalida, intente nuevamente.\n")
            else:
                try:
                    action()
                except TournamentError as error:
                    console.write(f"\t[ ERROR ]: {error.message}\n")
                    if error.tip:
                        console.write(f"\t[ TIP ]: {error.tip}\n")
            console.write("\t" + _PAUSE)
            console.read_line()
    except EOFError:
        console.write("\n")
    console.write(farewell())


def main(argv: list[str] | None = None) -> int:
    """Start the interactive tournament menu."""
    parser = argparse.ArgumentParser(
        prog="torneo", description="Gestion interactiva de un torneo de jugadores."
    )
    parser.parse_args(argv)
    console = Console()
    run(console, Sistema(console))
    return 0