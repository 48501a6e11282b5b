"""
Factory para criar instâncias configuradas dos serviços
"""
from typing import Optional

from ..application.interfaces import DistanceProviderInterface, FlightSourceInterface
from ..application.scoring import FlightScoringService
from ..application.services import MatchingFlightsService
from .config import Config
from .distance.constant import ConstantDistanceProvider
from .distance.great_circle import GreatCircleDistanceProvider
from .providers.http_flight_source import HttpFlightSource


class MatchingFlightsServiceFactory:
    """Factory para criar o serviço de matching configurado"""

    @staticmethod
    def create(
        config: Optional[Config] = None,
        flight_source: Optional[FlightSourceInterface] = None,
        distance_provider: Optional[DistanceProviderInterface] = None,
    ) -> MatchingFlightsService:
        """Cria uma instância completa do serviço de matching"""
        if config is None:
            config = Config.from_env()

        if flight_source is None:
            flight_source = HttpFlightSource(config)

        if distance_provider is None:
            distance_provider = MatchingFlightsServiceFactory._create_distance_provider(config)

        scoring_service = FlightScoringService(
            distance_provider, lookup_timeout=config.DISTANCE_LOOKUP_TIMEOUT
        )

        return MatchingFlightsService(flight_source=flight_source, scoring_service=scoring_service)

    @staticmethod
    def _create_distance_provider(config: Config) -> DistanceProviderInterface:
        """Cria o provedor de distância escolhido em DISTANCE_PROVIDER"""
        if config.DISTANCE_PROVIDER == "great_circle":
            return GreatCircleDistanceProvider()
        return ConstantDistanceProvider()
