"""
Validação das restrições do passageiro antes de qualquer I/O
"""
from datetime import datetime
from typing import Any, Mapping

from pydantic import ValidationError

from ..domain.errors import MalformedTimestampError, WrongArgsError
from ..domain.models import MatchConstraints
from ..domain.rules import parse_timestamp

MAX_DURATION_DESC = ".max_acceptable_flight_duration_hours should be a positive int"


def validate_constraints(raw: Mapping[str, Any]) -> MatchConstraints:
    """Constrói MatchConstraints a partir de entrada não tipada ou lança WrongArgsError"""
    max_duration = _parse_positive_int(raw.get("max_acceptable_flight_duration_hours"))
    if max_duration is None:
        raise WrongArgsError(MAX_DURATION_DESC)

    min_departure = _parse_datetime_field(raw, "min_acceptable_departure_datetime")
    max_departure = _parse_datetime_field(raw, "max_acceptable_departure_datetime")
    if min_departure > max_departure:
        raise WrongArgsError(
            ".min_acceptable_departure_datetime should not be after "
            ".max_acceptable_departure_datetime"
        )

    carrier = raw.get("preferred_carrier_name")
    if carrier is None:
        carrier = ""
    elif not isinstance(carrier, str):
        raise WrongArgsError(".preferred_carrier_name should be a string")

    try:
        return MatchConstraints(
            max_acceptable_flight_duration_hours=max_duration,
            min_acceptable_departure_datetime=min_departure,
            max_acceptable_departure_datetime=max_departure,
            preferred_carrier_name=carrier,
        )
    except ValidationError as e:
        raise WrongArgsError(str(e)) from e


def _parse_positive_int(value: Any):
    # bool é subclasse de int, mas True não é uma duração
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdecimal():
        number = int(value.strip())
    else:
        return None
    return number if number > 0 else None


def _parse_datetime_field(raw: Mapping[str, Any], field: str) -> datetime:
    value = raw.get(field)
    if value is None or value == "":
        raise WrongArgsError(f".{field} is required")
    try:
        return parse_timestamp(value)
    except MalformedTimestampError:
        raise WrongArgsError(f".{field} should be an ISO-8601 datetime") from None
