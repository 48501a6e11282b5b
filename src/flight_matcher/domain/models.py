"""
Domain Models - Entidades de negócio puras
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FlightRecord(BaseModel):
    """Voo candidato, tal como vem da fonte de dados"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Timestamps ficam crus: um valor ilegível exclui só este voo, no filtro
    departure_time: Any = Field(None, alias="departureTime", description="ISO datetime partida")
    arrival_time: Any = Field(None, alias="arrivalTime", description="ISO datetime chegada")
    carrier: str
    origin: str = Field(..., description="Código IATA origem")
    destination: str = Field(..., description="Código IATA destino")

    @property
    def route_summary(self) -> str:
        """Resumo da rota"""
        return f"{self.origin} → {self.destination}"


class ScoredFlightRecord(FlightRecord):
    """Voo candidato com score (menor é melhor)"""

    score: float

    @classmethod
    def from_flight(cls, flight: FlightRecord, score: float) -> "ScoredFlightRecord":
        return cls(**flight.model_dump(), score=score)


class MatchConstraints(BaseModel):
    """Restrições do passageiro, já validadas"""
    model_config = ConfigDict(frozen=True)

    max_acceptable_flight_duration_hours: int = Field(..., gt=0)
    min_acceptable_departure_datetime: datetime
    max_acceptable_departure_datetime: datetime
    preferred_carrier_name: str = ""

    @model_validator(mode="after")
    def _check_departure_window(self) -> "MatchConstraints":
        if self.min_acceptable_departure_datetime > self.max_acceptable_departure_datetime:
            raise ValueError("departure window start must not be after its end")
        return self


class MatchStatus(str, Enum):
    """Estados possíveis do envelope de resposta"""
    OK = "OK"
    WRONG_ARGS = "WRONG_ARGS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


class ResultEnvelope(BaseModel):
    """Resultado de uma busca: lista de voos (OK) ou descrição do erro"""
    model_config = ConfigDict(frozen=True)

    status: MatchStatus
    flights: Optional[List[ScoredFlightRecord]] = None
    desc: Optional[str] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "ResultEnvelope":
        if self.status is MatchStatus.OK:
            if self.flights is None or self.desc is not None:
                raise ValueError("OK envelope carries flights and no desc")
        elif self.flights is not None:
            raise ValueError(f"{self.status.value} envelope must not carry flights")
        return self

    @classmethod
    def ok(cls, flights: List[ScoredFlightRecord]) -> "ResultEnvelope":
        return cls(status=MatchStatus.OK, flights=list(flights))

    @classmethod
    def error(cls, status: MatchStatus, desc: Optional[str] = None) -> "ResultEnvelope":
        return cls(status=status, desc=desc)

    @property
    def is_ok(self) -> bool:
        return self.status is MatchStatus.OK

    def to_response(self) -> Dict[str, Any]:
        """Serializa para o formato JSON exposto na API"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
