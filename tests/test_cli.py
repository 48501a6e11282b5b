"""Testes da interface de linha de comando."""

import io

import pytest

from rich.console import Console

from fakes import FakeFlightSource, TableDistanceProvider
from flight_matcher.application.scoring import FlightScoringService
from flight_matcher.application.services import MatchingFlightsService
from flight_matcher.domain.errors import FlightSourceError
from flight_matcher.presentation.cli import FlightMatcherCLI

ARGS = [
    "--max-duration", "12",
    "--min-departure", "2024-01-01T00:00:00Z",
    "--max-departure", "2024-01-31T23:59:59Z",
    "--carrier", "TP",
]


def _make_cli(flights, distances, error=None):
    output = io.StringIO()
    console = Console(file=output, width=160, force_terminal=False)
    service = MatchingFlightsService(
        FakeFlightSource(flights, error=error),
        FlightScoringService(TableDistanceProvider(distances)),
    )
    return FlightMatcherCLI(service=service, console=console), output


class TestFlightMatcherCLI:
    """Testes de FlightMatcherCLI.run."""

    def test_prints_table_of_matches(self, fixture_flights, fixture_distances) -> None:
        cli, output = _make_cli(fixture_flights, fixture_distances)

        exit_code = cli.run(ARGS)

        text = output.getvalue()
        assert exit_code == 0
        assert "Voos compatíveis (2 de 2)" in text
        assert "104.5" in text
        assert "203.0" in text
        assert text.index("104.5") < text.index("203.0")

    def test_limit(self, fixture_flights, fixture_distances) -> None:
        cli, output = _make_cli(fixture_flights, fixture_distances)

        cli.run(ARGS + ["--limit", "1"])

        text = output.getvalue()
        assert "(1 de 2)" in text
        assert "203.0" not in text

    def test_wrong_args(self, fixture_flights, fixture_distances) -> None:
        cli, output = _make_cli(fixture_flights, fixture_distances)
        args = list(ARGS)
        args[1] = "abc"

        exit_code = cli.run(args)

        assert exit_code == 1
        assert "WRONG_ARGS" in output.getvalue()

    def test_no_results(self, fixture_distances) -> None:
        cli, output = _make_cli([], fixture_distances)

        exit_code = cli.run(ARGS)

        assert exit_code == 0
        assert "Sem Resultados" in output.getvalue()

    def test_upstream_error(self, fixture_distances) -> None:
        cli, output = _make_cli([], fixture_distances, error=FlightSourceError("gist unreachable"))

        exit_code = cli.run(ARGS)

        assert exit_code == 1
        assert "UPSTREAM_ERROR" in output.getvalue()
        assert "gist unreachable" in output.getvalue()

    @pytest.mark.parametrize("limit", ["0", "-1", "abc"])
    def test_limit_must_be_positive(self, fixture_flights, fixture_distances, limit) -> None:
        cli, output = _make_cli(fixture_flights, fixture_distances)

        with pytest.raises(SystemExit) as exc_info:
            cli.run(ARGS + ["--limit", limit])

        assert exc_info.value.code == 2
        assert output.getvalue() == ""
