"""
Filtro de voos pela janela de partida
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence, Tuple

from ..domain.errors import MalformedTimestampError
from ..domain.models import FlightRecord
from ..domain.rules import parse_timestamp


@dataclass
class FilterResult:
    """Voos aceitos (na ordem original) e voos rejeitados por dados inválidos"""

    accepted: List[FlightRecord] = field(default_factory=list)
    rejected: List[Tuple[FlightRecord, MalformedTimestampError]] = field(default_factory=list)


def filter_flights_by_departure_range(
    flights: Sequence[FlightRecord],
    min_acceptable_departure_datetime: datetime,
    max_acceptable_departure_datetime: datetime,
) -> FilterResult:
    """
    Mantém os voos com min <= partida <= max (janela inclusiva).

    Voos com partida ou chegada ilegíveis não são comparados: vão para
    ``rejected`` para que quem chama possa reportá-los.
    """
    result = FilterResult()

    for flight in flights:
        try:
            departure = parse_timestamp(flight.departure_time)
            parse_timestamp(flight.arrival_time)
        except MalformedTimestampError as e:
            result.rejected.append((flight, e))
            continue

        if min_acceptable_departure_datetime <= departure <= max_acceptable_departure_datetime:
            result.accepted.append(flight)

    return result
