"""
Serviço de pontuação de voos
"""
import asyncio
import logging
import math
from typing import List, Sequence

from ..domain.errors import DistanceLookupError
from ..domain.models import FlightRecord, ScoredFlightRecord
from ..domain.rules import calc_flight_duration_hours, is_managed_by_preferred_carrier
from .interfaces import DistanceProviderInterface, ScoringServiceInterface

logger = logging.getLogger(__name__)

PREFERRED_CARRIER_DISCOUNT = 0.9


class FlightScoringService(ScoringServiceInterface):
    """
    Pontua voos por duração, afinidade de companhia e distância.

    score = duração_horas * (0.9 se companhia preferida senão 1.0) + distância_milhas

    Score menor significa voo mais desejável.
    """

    def __init__(self, distance_provider: DistanceProviderInterface, lookup_timeout: float = 5.0):
        self._distance_provider = distance_provider
        self._lookup_timeout = lookup_timeout

    async def score_flights(
        self, flights: Sequence[FlightRecord], preferred_carrier_name: str
    ) -> List[ScoredFlightRecord]:
        """Um ScoredFlightRecord por voo, na mesma ordem da entrada"""
        if not flights:
            return []

        # Consultas de distância em paralelo; gather preserva a ordem
        distance_tasks = [self._lookup_distance(f.origin, f.destination) for f in flights]
        distances = await asyncio.gather(*distance_tasks, return_exceptions=True)

        scored_flights = []
        for flight, distance in zip(flights, distances):
            if isinstance(distance, BaseException):
                raise distance
            score = self._calculate_score(flight, preferred_carrier_name, distance)
            scored_flights.append(ScoredFlightRecord.from_flight(flight, score))

        return scored_flights

    def _calculate_score(self, flight: FlightRecord, preferred_carrier_name: str, distance_miles: float) -> float:
        """Calcula score individual do voo"""
        duration_hours = calc_flight_duration_hours(flight.departure_time, flight.arrival_time)
        if duration_hours < 0:
            logger.warning(
                "Flight %s %s arrives before it departs (%s -> %s)",
                flight.carrier, flight.route_summary, flight.departure_time, flight.arrival_time,
            )

        carrier_factor = (
            PREFERRED_CARRIER_DISCOUNT
            if is_managed_by_preferred_carrier(flight.carrier, preferred_carrier_name)
            else 1.0
        )
        return duration_hours * carrier_factor + distance_miles

    async def _lookup_distance(self, origin: str, destination: str) -> float:
        """Consulta o provedor de distância com timeout"""
        try:
            distance = await asyncio.wait_for(
                self._distance_provider.get_distance(origin, destination),
                timeout=self._lookup_timeout,
            )
        except asyncio.TimeoutError:
            raise DistanceLookupError(
                origin, destination, f"timed out after {self._lookup_timeout}s"
            ) from None

        if not math.isfinite(distance):
            raise DistanceLookupError(origin, destination, f"non-finite distance {distance}")
        if distance < 0:
            raise DistanceLookupError(origin, destination, f"negative distance {distance}")
        return float(distance)
