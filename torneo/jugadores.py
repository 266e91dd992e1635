"""Hashed collection of the tournament's players, keyed by identity number."""

from __future__ import annotations

import dataclasses
from collections import deque
from typing import Iterator, NamedTuple

from torneo.fecha import Fecha
from torneo.jugador import Jugador

B = 3
"""Default number of buckets, which is also the number of players expected."""


class BirthCounts(NamedTuple):
    """Players born before, on and after a reference date."""

    antes: int
    durante: int
    despues: int


class Jugadores:
    """Players spread over buckets by ``cedula % buckets``, newest first in each."""

    def __init__(self, buckets: int = B):
        if buckets < 1:
            raise ValueError("at least one bucket is required")
        self._size = buckets
        self._buckets: list[deque[Jugador]] = [deque() for _ in range(buckets)]

    def bucket_of(self, cedula: int) -> int:
        """Return the index of the bucket that holds *cedula*."""
        return cedula % self._size

    def _find(self, cedula: int) -> tuple[deque[Jugador], int]:
        bucket = self._buckets[self.bucket_of(cedula)]
        for position, jugador in enumerate(bucket):
            if jugador.cedula == cedula:
                return bucket, position
        raise KeyError(cedula)

    def __contains__(self, cedula: object) -> bool:
        if not isinstance(cedula, int):
            return False
        return any(j.cedula == cedula for j in self._buckets[self.bucket_of(cedula)])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Jugador]:
        for bucket in self._buckets:
            yield from bucket

    def add(self, jugador: Jugador) -> None:
        """Insert a new player; raises ValueError if the cedula is already present."""
        if jugador.cedula in self:
            raise ValueError(f"player {jugador.cedula} already registered")
        self._buckets[self.bucket_of(jugador.cedula)].appendleft(jugador)

    def get(self, cedula: int) -> Jugador:
        """Return a copy of the player; raises KeyError if absent."""
        bucket, position = self._find(cedula)
        return dataclasses.replace(bucket[position])

    def update(self, jugador: Jugador) -> None:
        """Replace the stored player with the same cedula; raises KeyError if absent."""
        bucket, position = self._find(jugador.cedula)
        bucket[position] = jugador

    def remove(self, cedula: int) -> None:
        """Delete the player; raises KeyError if absent."""
        bucket, position = self._find(cedula)
        del bucket[position]

    def count_born(self, fecha: Fecha) -> BirthCounts:
        """Count players born before, on and after *fecha*."""
        antes = durante = despues = 0
        for jugador in self:
            if jugador.fecha_nacimiento < fecha:
                antes += 1
            elif jugador.fecha_nacimiento == fecha:
                durante += 1
            else:
                despues += 1
        return BirthCounts(antes, durante, despues)

    def next_number(self) -> int:
        """Return one more than the highest player number, or 1 when empty."""
        return max((j.numero for j in self), default=0) + 1

    def max_wins(self) -> int:
        """Return the highest number of games won by any player, or 0."""
        return max((j.partidas_ganadas for j in self), default=0)

    def winners(self, max_wins: int) -> list[Jugador]:
        """Return the players who won exactly *max_wins* games."""
        return [j for j in self if j.partidas_ganadas == max_wins]

    def has_room(self) -> bool:
        """Return True while the player count does not exceed the bucket count."""
        return len(self) <= self._size