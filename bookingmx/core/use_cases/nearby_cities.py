from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from bookingmx.core.entities.city_graph import CityGraph, is_valid_distance

DEFAULT_MAX_DISTANCE_KM = 250.0

SAMPLE_CITIES: tuple[str, ...] = (
    "Guadalajara",
    "Tlaquepaque",
    "Zapopan",
    "Tepatitlán",
    "Lagos de Moreno",
    "Tala",
    "Tequila",
)

SAMPLE_EDGES: tuple[dict[str, Any], ...] = (
    {"from": "Guadalajara", "to": "Zapopan", "distance": 12},
    {"from": "Guadalajara", "to": "Tlaquepaque", "distance": 10},
    {"from": "Guadalajara", "to": "Tepatitlán", "distance": 78},
    {"from": "Guadalajara", "to": "Tequila", "distance": 60},
    {"from": "Zapopan", "to": "Tala", "distance": 35},
    {"from": "Tepatitlán", "to": "Lagos de Moreno", "distance": 85},
)


@dataclass(frozen=True, slots=True)
class GraphValidationResult:
    ok: bool
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class NearbyCityDTO:
    city: str
    distance: float


def validate_graph_data(cities: Any, edges: Any) -> GraphValidationResult:
    """
    Check raw city/edge data before building a graph. Reports the first problem found.
    """
    if not isinstance(cities, (list, tuple)) or not isinstance(edges, (list, tuple)):
        return GraphValidationResult(ok=False, reason="cities/edges must be arrays")

    for city in cities:
        if not isinstance(city, str) or not city.strip():
            return GraphValidationResult(ok=False, reason="invalid city entry")

    known = set(cities)
    if len(known) != len(cities):
        return GraphValidationResult(ok=False, reason="duplicate cities")

    for edge in edges:
        edge = edge if isinstance(edge, dict) else {}
        if edge.get("from") not in known or edge.get("to") not in known:
            return GraphValidationResult(ok=False, reason="edge references unknown city")
        if not is_valid_distance(edge.get("distance")):
            return GraphValidationResult(ok=False, reason="invalid distance")

    return GraphValidationResult(ok=True)


def build_graph(cities: Sequence[str], edges: Sequence[dict[str, Any]]) -> CityGraph:
    graph = CityGraph()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        graph.add_edge(edge["from"], edge["to"], edge["distance"])
    return graph


class GetNearbyCitiesUseCase:
    """
    Cities directly connected to a destination within a maximum distance, nearest first.
    """

    def __init__(self, *, graph: CityGraph | None) -> None:
        self._graph = graph

    def execute(self, *, destination: str, max_distance_km: float = DEFAULT_MAX_DISTANCE_KM) -> list[NearbyCityDTO]:
        if self._graph is None or destination not in self._graph:
            return []

        nearby = [n for n in self._graph.neighbors(destination) if n.distance <= max_distance_km]
        nearby.sort(key=lambda n: n.distance)
        return [NearbyCityDTO(city=n.to, distance=n.distance) for n in nearby]
