"""
Application Services - Caso de uso principal: voos compatíveis com as restrições
"""
import logging
from enum import Enum
from typing import Any, Mapping

from ..domain.errors import DistanceLookupError, FlightSourceError, WrongArgsError
from ..domain.models import MatchStatus, ResultEnvelope
from .filters import filter_flights_by_departure_range
from .interfaces import FlightSourceInterface, ScoringServiceInterface
from .sorting import sort_flights_by_score
from .validation import validate_constraints

logger = logging.getLogger(__name__)


class MatchingStage(str, Enum):
    """Etapas do pipeline de matching"""
    VALIDATING = "VALIDATING"
    FETCHING = "FETCHING"
    FILTERING = "FILTERING"
    SCORING = "SCORING"
    SORTING = "SORTING"
    DONE = "DONE"


class MatchingFlightsService:
    """Serviço principal de busca de voos compatíveis"""

    def __init__(self, flight_source: FlightSourceInterface, scoring_service: ScoringServiceInterface):
        self._flight_source = flight_source
        self._scoring_service = scoring_service

    async def get_matching_flights(self, raw_constraints: Mapping[str, Any]) -> ResultEnvelope:
        """
        Executa validação, busca, filtro, pontuação e ordenação.

        Nunca lança erros de domínio: toda falha vira um ResultEnvelope com
        o status correspondente, registrado no log junto com a entrada.
        """
        stage = MatchingStage.VALIDATING
        try:
            constraints = validate_constraints(raw_constraints)

            stage = MatchingStage.FETCHING
            all_flights = await self._flight_source.fetch_flights()

            stage = MatchingStage.FILTERING
            filtered = filter_flights_by_departure_range(
                all_flights,
                constraints.min_acceptable_departure_datetime,
                constraints.max_acceptable_departure_datetime,
            )
            for flight, error in filtered.rejected:
                logger.warning(
                    "Skipping flight %s %s: %s", flight.carrier, flight.route_summary, error.desc
                )

            stage = MatchingStage.SCORING
            scored_flights = await self._scoring_service.score_flights(
                filtered.accepted, constraints.preferred_carrier_name
            )

            stage = MatchingStage.SORTING
            sorted_flights = sort_flights_by_score(scored_flights)

            stage = MatchingStage.DONE
            logger.info(
                "Matched %d of %d flights (%d rejected as malformed)",
                len(sorted_flights), len(all_flights), len(filtered.rejected),
            )
            return ResultEnvelope.ok(sorted_flights)

        except WrongArgsError as e:
            logger.info("Rejected constraints %s: %s", dict(raw_constraints), e.desc)
            return ResultEnvelope.error(MatchStatus.WRONG_ARGS, e.desc)

        except (FlightSourceError, DistanceLookupError) as e:
            logger.error(
                "%s failed during %s for constraints %s: %s",
                e.kind, stage.value, dict(raw_constraints), e.desc,
            )
            return ResultEnvelope.error(MatchStatus.UPSTREAM_ERROR, e.desc)

        except Exception:
            logger.exception(
                "Unexpected error during %s for constraints %s", stage.value, dict(raw_constraints)
            )
            return ResultEnvelope.error(MatchStatus.INTERNAL_ERROR)
