"""Ordered record of the games played in the tournament."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from torneo.partida import Partida


class PartidasJugadas:
    """Games in the order they were recorded, oldest first."""

    def __init__(self) -> None:
        self._games: deque[Partida] = deque()

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[Partida]:
        return iter(self._games)

    def push_front(self, partida: Partida) -> None:
        """Insert *partida* before every other game."""
        self._games.appendleft(partida)

    def append(self, partida: Partida) -> None:
        """Insert *partida* after every other game."""
        self._games.append(partida)

    def first(self) -> Partida:
        """Return the first game; raises IndexError when empty."""
        if not self._games:
            raise IndexError("no games recorded")
        return self._games[0]

    def pop_first(self) -> Partida:
        """Remove and return the first game; raises IndexError when empty."""
        if not self._games:
            raise IndexError("no games recorded")
        return self._games.popleft()

    def kth(self, k: int) -> Partida:
        """Return the game at 1-based position *k*; raises IndexError if out of range."""
        if not 1 <= k <= len(self._games):
            raise IndexError(f"no game at position {k}")
        return self._games[k - 1]

    def involving(self, cedula: int) -> list[Partida]:
        """Return the games in which *cedula* took part, in order."""
        return [partida for partida in self._games if partida.involves(cedula)]

    def next_number(self) -> int:
        """Return one more than the last game's number, or 1 when empty."""
        if not self._games:
            return 1
        return self._games[-1].numero + 1