import pytest

from torneo.partida import Partida
from torneo.partidas import PartidasJugadas


def _games():
    return [Partida(1, 10, 11, 10), Partida(2, 11, 12, 12), Partida(3, 10, 12, 12)]


def test_empty_collection():
    partidas = PartidasJugadas()
    assert len(partidas) == 0
    assert list(partidas) == []
    assert partidas.next_number() == 1


def test_append_keeps_order():
    partidas = PartidasJugadas()
    games = _games()
    for game in games:
        partidas.append(game)
    assert list(partidas) == games
    assert len(partidas) == 3


def test_push_front_puts_game_first():
    partidas = PartidasJugadas()
    a, b, _ = _games()
    partidas.append(a)
    partidas.push_front(b)
    assert partidas.first() == b
    assert list(partidas) == [b, a]


def test_first_and_pop_first_on_empty_raise():
    partidas = PartidasJugadas()
    with pytest.raises(IndexError):
        partidas.first()
    with pytest.raises(IndexError):
        partidas.pop_first()


def test_pop_first_removes_in_order():
    partidas = PartidasJugadas()
    games = _games()
    for game in games:
        partidas.append(game)
    assert partidas.pop_first() == games[0]
    assert list(partidas) == games[1:]
    partidas.pop_first()
    partidas.pop_first()
    assert len(partidas) == 0
    assert partidas.next_number() == 1


def test_kth_is_one_based():
    partidas = PartidasJugadas()
    games = _games()
    for game in games:
        partidas.append(game)
    assert [partidas.kth(k) for k in (1, 2, 3)] == games


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_out_of_range(k):
    partidas = PartidasJugadas()
    for game in _games():
        partidas.append(game)
    with pytest.raises(IndexError):
        partidas.kth(k)


def test_involving_filters_by_player():
    partidas = PartidasJugadas()
    games = _games()
    for game in games:
        partidas.append(game)
    assert partidas.involving(10) == [games[0], games[2]]
    assert partidas.involving(11) == [games[0], games[1]]
    assert partidas.involving(99) == []


def test_next_number_follows_last_game():
    partidas = PartidasJugadas()
    for game in _games():
        partidas.append(game)
    assert partidas.next_number() == partidas.kth(len(partidas)).numero + 1