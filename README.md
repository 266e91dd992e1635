# torneo

A console program for running a small round-robin tournament. It keeps a
register of players, records the games played between them and who won each,
and reports on the state of the tournament. All prompts and messages are in
Spanish.

The tournament is sized for three players by default.

## Installing

    pip install .

## Running

    torneo

The command takes no options besides `--help`. It shows the main menu:

1. Register a player: identity number, date of birth, name, surname and
   department. Players are numbered 1, 2, 3, ... in the order they are
   registered.
2. List all players.
3. Show one player's details and the games they took part in.
4. Record a game between two players and who won it. Two players may meet only
   once, and the winner must be one of them.
5. List all games in the order they were recorded.
6. Count players born before, on and after a given date.
7. Tell whether two players are in the same subdivision, meaning a chain of
   games already played links them.
8. Show whether the tournament is complete (every pair of players has met)
   and, once it is, the players with the most wins.
0. Quit.

After each option the program waits for Enter before showing the menu again.
It also ends when the input runs out.

Input is checked and asked for again until it is acceptable:

- Identity numbers are digits only, without dots or dashes, and may not be zero.
- Names, surnames and departments may not be empty or contain digits.
- Dates are entered as `DD MM AAAA` and must exist in the calendar, leap years
  included.
- Lines longer than 79 characters are cut to that length.

Operations the rules do not allow (a duplicate identity number, an unknown
player, a game between a player and themselves, a repeated pairing) print an
`[ ERROR ]` message, sometimes followed by a `[ TIP ]`, and return to the menu.

## Using it from Python

The pieces behind the menu can be used directly:

- `torneo.textinput` — `Console(stdin, stdout)` prompts and reads validated
  input (`read_line`, `read_int`, `read_cedula`, `read_name`, `read_bool`) on
  any pair of text streams. Helpers: `is_numeric`, `to_number`, `is_zero`,
  `contains_digits`, `clip`, `concat`, and `write_cstring` / `read_cstring`
  for NUL-terminated text on binary streams.
- `torneo.fecha` — `Fecha(dia, mes, ano)`, a frozen, chronologically ordered
  date with `is_valid()` and `format()`; `parse_fecha`, `order_dates`,
  `is_leap_year` and `read_fecha(console)`.
- `torneo.jugador` — `Jugador`, a player with `record_played()`,
  `record_win()` and `describe()`; `load_jugador(console, cedula, numero)`.
- `torneo.jugadores` — `Jugadores`, the player register, a small hash table
  keyed by identity number. It supports `in`, `len` and iteration, plus
  `add`, `get` (returns a copy), `update`, `remove`, `count_born`,
  `next_number`, `max_wins`, `winners` and `has_room`.
- `torneo.partida` — `Partida`, a frozen game record that rejects a winner who
  did not play; `involves()`, `describe()`, and
  `load_partida(console, cedula1, cedula2, numero)`.
- `torneo.partidas` — `PartidasJugadas`, the games in recorded order, with
  `append`, `push_front`, `first`, `pop_first`, `kth` (1-based), `involving`
  and `next_number`.
- `torneo.grafo` — `Torneo`, the graph of who has played whom: `has_vertex`,
  `has_edge`, `add_edge`, `degree`, `connected` and `is_complete`.
- `torneo.sistema` — `Sistema(console, size)` ties them together; each menu
  operation is a method (`register_player`, `list_players`, `show_player`,
  `register_game`, `list_games`, `players_by_date`, `same_subdivision`,
  `tournament_status`) that writes its report to the console, returns its
  result, and raises `TournamentError` (with `message` and an optional `tip`)
  when the operation is not allowed.
- `torneo.cli` — `run(console, sistema)` drives the menu; `menu_title`,
  `banner` and `farewell` return the texts it shows; `main(argv)` is the
  `torneo` command.

## What it does not do

Everything lives in memory: players and games are lost when the program ends,
and there is no way to save or load a tournament. The register accepts one
player more than the tournament size, but a player numbered beyond that size
has no place in the game graph, so games with them are refused.

## Tests

    pip install .[test]
    pytest