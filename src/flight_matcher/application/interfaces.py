"""
Interfaces/Contratos para Application Layer
"""
from abc import ABC, abstractmethod
from typing import List, Protocol

from ..domain.models import FlightRecord, ScoredFlightRecord


class FlightSourceInterface(Protocol):
    """Interface para fontes da lista de voos candidatos"""
    name: str

    async def fetch_flights(self) -> List[FlightRecord]:
        """Busca e interpreta a lista de voos; falhas viram FlightSourceError"""
        ...


class DistanceProviderInterface(ABC):
    """Interface para cálculo de distância entre aeroportos"""

    @abstractmethod
    async def get_distance(self, origin: str, destination: str) -> float:
        """Distância não-negativa (milhas) ou DistanceLookupError"""
        pass


class ScoringServiceInterface(ABC):
    """Interface para serviço de pontuação de voos"""

    @abstractmethod
    async def score_flights(
        self, flights: List[FlightRecord], preferred_carrier_name: str
    ) -> List[ScoredFlightRecord]:
        """Pontua cada voo, preservando quantidade e ordem"""
        pass
