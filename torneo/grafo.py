"""Undirected graph of the games played between tournament players."""

from __future__ import annotations

N = 3
"""Default number of players in a tournament."""


class Torneo:
    """Players are vertices ``0 .. size - 1``; a game joins two of them."""

    def __init__(self, size: int = N):
        if size < 1:
            raise ValueError("a tournament needs at least one player")
        self._size = size
        self._adjacent: list[set[int]] = [set() for _ in range(size)]

    def has_vertex(self, v: int) -> bool:
        """Return True if *v* is a player of this tournament."""
        return 0 <= v < self._size

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if *u* and *v* are players who have played each other."""
        return self.has_vertex(u) and self.has_vertex(v) and v in self._adjacent[u]

    def add_edge(self, u: int, v: int) -> None:
        """Record a game between *u* and *v*; raises ValueError for unknown vertices."""
        if not (self.has_vertex(u) and self.has_vertex(v)):
            raise ValueError(f"vertices {u} and {v} must be in 0..{self._size - 1}")
        self._adjacent[u].add(v)
        self._adjacent[v].add(u)

    def degree(self, v: int) -> int:
        """Return how many players *v* has played; raises ValueError for unknown vertices."""
        if not self.has_vertex(v):
            raise ValueError(f"vertex {v} must be in 0..{self._size - 1}")
        return len(self._adjacent[v])

    def connected(self, u: int, v: int) -> bool:
        """Return True if a chain of games links *u* to *v*."""
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        visited = {u}
        pending = [u]
        while pending:
            current = pending.pop()
            if current == v:
                return True
            for neighbour in self._adjacent[current] - visited:
                visited.add(neighbour)
                pending.append(neighbour)
        return False

    def is_complete(self) -> bool:
        """Return True once every pair of players has played each other."""
        return all(
            self.has_edge(i, j)
            for i in range(self._size)
            for j in range(i + 1, self._size)
        )