import pytest

from torneo.grafo import Torneo


def test_vertices_in_range():
    t = Torneo(3)
    assert [t.has_vertex(v) for v in (-1, 0, 1, 2, 3)] == [False, True, True, True, False]


def test_new_tournament_has_no_edges():
    t = Torneo(3)
    assert not any(t.has_edge(u, v) for u in range(3) for v in range(3))
    assert [t.degree(v) for v in range(3)] == [0, 0, 0]


def test_add_edge_is_symmetric():
    t = Torneo(3)
    t.add_edge(0, 2)
    assert t.has_edge(0, 2)
    assert t.has_edge(2, 0)
    assert not t.has_edge(0, 1)
    assert t.degree(0) == 1
    assert t.degree(2) == 1
    assert t.degree(1) == 0


def test_has_edge_with_unknown_vertex_is_false():
    t = Torneo(3)
    t.add_edge(0, 1)
    assert not t.has_edge(0, 5)
    assert not t.has_edge(-1, 0)


def test_add_edge_rejects_unknown_vertex():
    t = Torneo(3)
    with pytest.raises(ValueError):
        t.add_edge(0, 3)


def test_degree_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        Torneo(3).degree(3)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Torneo(0)


def test_connected_through_chain():
    t = Torneo(4)
    t.add_edge(0, 1)
    t.add_edge(1, 2)
    assert t.connected(0, 2)
    assert t.connected(2, 0)
    assert not t.connected(0, 3)


def test_vertex_connected_to_itself():
    assert Torneo(3).connected(1, 1)


def test_connected_with_unknown_vertex_is_false():
    t = Torneo(3)
    assert not t.connected(0, 7)


def test_is_complete():
    t = Torneo(3)
    assert not t.is_complete()
    t.add_edge(0, 1)
    t.add_edge(1, 2)
    assert not t.is_complete()
    t.add_edge(2, 0)
    assert t.is_complete()


def test_single_player_tournament_is_complete():
    assert Torneo(1).is_complete()