"""
Ordenação de voos pontuados
"""
from typing import Iterable, List

from ..domain.models import ScoredFlightRecord


def sort_flights_by_score(scored_flights: Iterable[ScoredFlightRecord]) -> List[ScoredFlightRecord]:
    """Nova lista, menor score primeiro; empates mantêm a ordem de entrada"""
    return sorted(scored_flights, key=lambda f: f.score)
