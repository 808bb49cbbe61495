from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Neighbor:
    to: str
    distance: float


def is_valid_distance(distance: object) -> bool:
    if isinstance(distance, bool) or not isinstance(distance, (int, float)):
        return False
    return math.isfinite(distance) and distance >= 0


class CityGraph:
    """
    Undirected weighted graph of cities, distances in km.

    Adjacency is kept per city in insertion order; parallel edges are allowed.
    """

    def __init__(self) -> None:
        self._adj: dict[str, list[Neighbor]] = {}

    def __contains__(self, city: object) -> bool:
        return city in self._adj

    @property
    def cities(self) -> list[str]:
        return list(self._adj)

    def add_city(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Invalid city name")
        self._adj.setdefault(name, [])

    def add_edge(self, from_city: str, to_city: str, distance_km: float) -> None:
        if from_city not in self._adj or to_city not in self._adj:
            raise ValueError("Unknown city")
        if not is_valid_distance(distance_km):
            raise ValueError("Invalid distance")
        self._adj[from_city].append(Neighbor(to=to_city, distance=distance_km))
        self._adj[to_city].append(Neighbor(to=from_city, distance=distance_km))

    def neighbors(self, city: str) -> list[Neighbor]:
        if city not in self._adj:
            raise ValueError("Unknown city")
        return list(self._adj[city])
