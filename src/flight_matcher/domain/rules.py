"""
Regras puras de negócio: timestamps, duração de voo e afinidade de companhia
"""
from datetime import datetime, timedelta, timezone
from typing import Union

from .errors import MalformedTimestampError

TimestampLike = Union[str, datetime]

_ONE_HOUR = timedelta(hours=1)


def parse_timestamp(value: TimestampLike) -> datetime:
    """Converte um timestamp ISO-8601 em datetime com fuso (UTC se ausente)"""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise MalformedTimestampError(value) from None
    else:
        raise MalformedTimestampError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def calc_flight_duration_hours(departure_time: TimestampLike, arrival_time: TimestampLike) -> int:
    """
    Duração do voo em horas inteiras, truncada em direção a zero.

    Se a chegada for anterior à partida o resultado é negativo; cabe a
    quem chama decidir se isso é um problema de qualidade dos dados.
    """
    departure = parse_timestamp(departure_time)
    arrival = parse_timestamp(arrival_time)
    return int((arrival - departure) / _ONE_HOUR)


def is_managed_by_preferred_carrier(carrier: str, preferred_carrier_name: str) -> bool:
    """Comparação exata (sensível a maiúsculas) com a companhia preferida"""
    if not preferred_carrier_name:
        return False
    return carrier == preferred_carrier_name
