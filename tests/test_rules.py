"""Testes das regras puras: timestamps, duração e afinidade de companhia."""

from datetime import datetime, timedelta, timezone

import pytest

from flight_matcher.domain.errors import MalformedTimestampError
from flight_matcher.domain.rules import (
    calc_flight_duration_hours,
    is_managed_by_preferred_carrier,
    parse_timestamp,
)


class TestParseTimestamp:
    """Testes de parse_timestamp."""

    def test_z_suffix_is_utc(self) -> None:
        parsed = parse_timestamp("2024-01-01T10:00:00Z")
        assert parsed == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_offset_is_kept(self) -> None:
        parsed = parse_timestamp("2024-01-01T10:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)

    def test_naive_is_treated_as_utc(self) -> None:
        parsed = parse_timestamp("2024-01-01T10:00:00")
        assert parsed.tzinfo is timezone.utc

    @pytest.mark.parametrize("value", ["20240101T100000Z", "2024-01-01T10:00:00.0Z", "2024-01-01T10:00:00.000000+00:00"])
    def test_accepted_iso_variants(self, value) -> None:
        assert parse_timestamp(value) == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_datetime_passthrough(self) -> None:
        value = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert parse_timestamp(value) == value

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-45T00:00:00Z", None, 1704067200])
    def test_malformed_raises(self, value) -> None:
        with pytest.raises(MalformedTimestampError) as exc_info:
            parse_timestamp(value)
        assert exc_info.value.kind == "MALFORMED_TIMESTAMP"


class TestCalcFlightDurationHours:
    """Testes de calc_flight_duration_hours."""

    def test_truncates_not_rounds(self) -> None:
        """2h59 de voo contam como 2 horas."""
        assert calc_flight_duration_hours("2024-01-01T00:00:00Z", "2024-01-01T02:59:00Z") == 2

    def test_exact_hours(self) -> None:
        assert calc_flight_duration_hours("2024-01-01T00:00:00Z", "2024-01-01T05:00:00Z") == 5

    def test_under_one_hour_is_zero(self) -> None:
        assert calc_flight_duration_hours("2024-01-01T00:00:00Z", "2024-01-01T00:59:59Z") == 0

    def test_negative_duration_truncates_toward_zero(self) -> None:
        """Chegada antes da partida dá duração negativa, truncada para zero."""
        assert calc_flight_duration_hours("2024-01-01T03:00:00Z", "2024-01-01T00:30:00Z") == -2

    def test_mixed_offsets(self) -> None:
        assert calc_flight_duration_hours("2024-01-01T10:00:00+01:00", "2024-01-01T12:00:00Z") == 3

    def test_malformed_arrival_raises(self) -> None:
        with pytest.raises(MalformedTimestampError):
            calc_flight_duration_hours("2024-01-01T00:00:00Z", "soon")


class TestIsManagedByPreferredCarrier:
    """Testes de is_managed_by_preferred_carrier."""

    def test_exact_match(self) -> None:
        assert is_managed_by_preferred_carrier("TAP", "TAP") is True

    def test_case_sensitive(self) -> None:
        assert is_managed_by_preferred_carrier("TAP", "tap") is False

    def test_no_partial_match(self) -> None:
        assert is_managed_by_preferred_carrier("TAP Air Portugal", "TAP") is False

    def test_no_whitespace_normalization(self) -> None:
        assert is_managed_by_preferred_carrier("TAP", "TAP ") is False

    def test_empty_preference_never_matches(self) -> None:
        assert is_managed_by_preferred_carrier("", "") is False
        assert is_managed_by_preferred_carrier("TAP", "") is False
