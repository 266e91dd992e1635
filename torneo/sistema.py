"""Tournament operations offered by the main menu."""

from __future__ import annotations

from torneo.fecha import read_fecha
from torneo.grafo import N, Torneo
from torneo.jugador import Jugador, load_jugador
from torneo.jugadores import BirthCounts, Jugadores
from torneo.partida import Partida, load_partida
from torneo.partidas import PartidasJugadas
from torneo.textinput import Console


class TournamentError(Exception):
    """An operation the tournament rules do not allow; *tip* suggests what to do."""

    def __init__(self, message: str, tip: str | None = None):
        super().__init__(message)
        self.message = message
        self.tip = tip


class Sistema:
    """Players, games and the game graph of one tournament."""

    def __init__(self, console: Console | None = None, size: int = N):
        self.console = console if console is not None else Console()
        self.size = size
        self.jugadores = Jugadores(size)
        self.partidas = PartidasJugadas()
        self.torneo = Torneo(size)

    def _require_member(self, cedula: int) -> None:
        if cedula not in self.jugadores:
            raise TournamentError(f"El jugador con cedula {cedula} no existe en el sistema.")

    def _vertices(self, cedula1: int, cedula2: int) -> tuple[int, int]:
        # Player numbers start at 1, graph vertices at 0.
        return (
            self.jugadores.get(cedula1).numero - 1,
            self.jugadores.get(cedula2).numero - 1,
        )

    def register_player(self, cedula: int) -> Jugador:
        """Prompt for a new player's data and add them."""
        if cedula in self.jugadores:
            raise TournamentError(
                f"El jugador con la cedula {cedula} ya fue ingresado en el sistema."
            )
        if not self.jugadores.has_room():
            raise TournamentError(
                "No se pueden registrar mas jugadores, el sistema esta lleno.",
                "Digite la opción 8 en el menu principal, podra ver los resultados.",
            )
        jugador = load_jugador(self.console, cedula, self.jugadores.next_number())
        self.jugadores.add(jugador)
        self.console.write(
            f"\t[ INFO ]: Jugador con cedula {cedula} registrado exitosamente.\n"
        )
        return jugador

    def list_players(self) -> list[Jugador]:
        """Show every player and return them."""
        jugadores = list(self.jugadores)
        if not jugadores:
            self.console.write("\t[ INFO ]: No hay jugadores registrados en el sistema.\n")
            self.console.write(
                "\t[ TIP ]: Digite la opción 1 en el menu principal, "
                "para registrar participantes.\n"
            )
        for jugador in jugadores:
            self.console.write(jugador.describe() + "\n")
        return jugadores

    def show_player(self, cedula: int) -> Jugador:
        """Show a player's data and the games they took part in."""
        self._require_member(cedula)
        jugador = self.jugadores.get(cedula)
        self.console.write(jugador.describe())
        if jugador.partidas_disputadas == 0:
            self.console.write("\t[ INFO ]: El jugador no ha disputado ninguna partida.\n")
        else:
            self.console.write("\t[ RES ]: Partidas disputadas por el jugador:\n")
            for partida in self.partidas.involving(cedula):
                self.console.write(partida.describe())
        return jugador

    def register_game(self, cedula1: int, cedula2: int) -> Partida:
        """Prompt for the winner of a new game between two players and record it."""
        if cedula1 == cedula2:
            raise TournamentError(
                "No se puede registrar una partida entre el mismo jugador."
            )
        self._require_member(cedula1)
        self._require_member(cedula2)
        u, v = self._vertices(cedula1, cedula2)
        if self.torneo.has_edge(u, v):
            raise TournamentError(
                f"Ya se registro una partida entre {cedula1} y {cedula2} en este torneo."
            )
        for cedula, vertex in ((cedula1, u), (cedula2, v)):
            if not self.torneo.has_vertex(vertex):
                raise TournamentError(
                    f"El jugador con cedula {cedula} no tiene lugar en el torneo."
                )

        partida = load_partida(self.console, cedula1, cedula2, self.partidas.next_number())
        self.partidas.append(partida)

        jugador1 = self.jugadores.get(cedula1)
        jugador2 = self.jugadores.get(cedula2)
        jugador1.record_played()
        jugador2.record_played()
        (jugador1 if partida.cedula_vencedor == cedula1 else jugador2).record_win()
        self.jugadores.update(jugador1)
        self.jugadores.update(jugador2)

        self.torneo.add_edge(u, v)
        self.console.write(
            "\t[ INFO ]: Partida registrada exitosamente entre los jugadores "
            f"con cedula {cedula1} y {cedula2}.\n"
        )
        return partida

    def list_games(self) -> list[Partida]:
        """Show every game played and return them."""
        partidas = list(self.partidas)
        if not partidas:
            self.console.write("\t[ INFO ]: No hay partidas registradas en el sistema.\n")
        else:
            self.console.write("\t[ RES ]: Partidas jugadas en el torneo:\n")
            for partida in partidas:
                self.console.write(partida.describe())
        return partidas

    def players_by_date(self) -> BirthCounts:
        """Prompt for a date and show how many players were born before, on and after it."""
        fecha = read_fecha(self.console)
        counts = self.jugadores.count_born(fecha)
        self.console.write(
            f"\t[ RES ]: Cantidad de jugadores nacidos antes de la fecha: {counts.antes}\n"
            f"\t[ RES ]: Cantidad de jugadores nacidos durante la fecha: {counts.durante}\n"
            f"\t[ RES ]: Cantidad de jugadores nacidos despues de la fecha: {counts.despues}\n"
        )
        return counts

    def same_subdivision(self, cedula1: int, cedula2: int) -> bool:
        """Tell whether a chain of games links two players."""
        if cedula1 == cedula2:
            raise TournamentError("Ha insgresado dos veces el mismo jugador.")
        self._require_member(cedula1)
        self._require_member(cedula2)
        u, v = self._vertices(cedula1, cedula2)
        same = self.torneo.has_edge(u, v) or self.torneo.connected(u, v)
        if same:
            self.console.write(
                "\t[ INFO ]: Los jugadores forman parte de la misma subdivision.\n"
            )
        else:
            self.console.write(
                "\t[ INFO ]: Los jugadores NO forman parte de la misma subdivision.\n"
            )
        return same

    def tournament_status(self) -> list[Jugador]:
        """Show the winners once every pair has played; return them, or [] before that."""
        if not self.torneo.is_complete():
            self.console.write("\t[ INFO ]: El torneo aun no ha concluido.\n")
            registered = len(self.jugadores)
            if registered < self.size:
                self.console.write(
                    "\t[ INFO ]: Aun quedan jugadores por ser registrados "
                    f"( {registered} / {self.size} ).\n"
                )
                self.console.write(
                    "\t[ TIP ]: Digite la opcion 1 en el menu principal, "
                    "para registrar participantes.\n"
                )
            return []
        max_wins = self.jugadores.max_wins()
        self.console.write(
            "\t[ RES ]: Jugadores con la mayor cantidad de partidas ganadas "
            f"({max_wins}):\n"
        )
        winners = self.jugadores.winners(max_wins)
        for jugador in winners:
            self.console.write(jugador.describe())
        return winners