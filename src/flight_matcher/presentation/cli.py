"""
Interface de linha de comando
"""
import argparse
import asyncio
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..application.services import MatchingFlightsService
from ..domain.models import ResultEnvelope
from ..infrastructure.config import Config
from ..infrastructure.factory import MatchingFlightsServiceFactory
from ..infrastructure.logging_setup import configure_logging


def _positive_int(value: str) -> int:
    """Tipo argparse para inteiros maiores que zero"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class FlightMatcherCLI:
    """Interface CLI para o FlightMatcher"""

    def __init__(self, service: Optional[MatchingFlightsService] = None, console: Optional[Console] = None):
        self.console = console or Console()
        self._service = service

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Executa a interface CLI; retorna o código de saída"""
        args = self._parse_arguments(argv)

        if self._service is None:
            config = Config.from_env()
            configure_logging(config.LOG_LEVEL)
            self._service = MatchingFlightsServiceFactory.create(config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task("Buscando voos compatíveis...", total=None)

            result = asyncio.run(self._service.get_matching_flights(self._build_constraints(args)))

            progress.update(task, description="Busca concluída!")

        self._display_result(result, args.limit)
        return 0 if result.is_ok else 1

    def _parse_arguments(self, argv: Optional[List[str]]) -> argparse.Namespace:
        """Configura e processa argumentos da linha de comando"""
        parser = argparse.ArgumentParser(
            description="FlightMatcher - Voos compatíveis com as restrições do passageiro",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Exemplos de uso:
  flight-matcher --max-duration 12 --min-departure 2024-01-01T00:00:00Z --max-departure 2024-01-31T23:59:59Z
  flight-matcher --max-duration 8 --min-departure 2024-02-01 --max-departure 2024-02-02 --carrier TAP
            """
        )

        parser.add_argument("--max-duration", required=True,
                          help="Duração máxima aceitável do voo, em horas (inteiro positivo)")
        parser.add_argument("--min-departure", required=True,
                          help="Início da janela de partida (ISO-8601)")
        parser.add_argument("--max-departure", required=True,
                          help="Fim da janela de partida (ISO-8601)")
        parser.add_argument("--carrier", default="",
                          help="Companhia aérea preferida (comparação exata)")
        parser.add_argument("--limit", type=_positive_int, default=20,
                          help="Limite de voos exibidos (padrão: 20)")

        return parser.parse_args(argv)

    def _build_constraints(self, args: argparse.Namespace) -> dict:
        """Constrói as restrições (ainda não validadas) a partir dos argumentos"""
        return {
            "max_acceptable_flight_duration_hours": args.max_duration,
            "min_acceptable_departure_datetime": args.min_departure,
            "max_acceptable_departure_datetime": args.max_departure,
            "preferred_carrier_name": args.carrier,
        }

    def _display_result(self, result: ResultEnvelope, limit: int):
        """Exibe o resultado da busca"""
        if not result.is_ok:
            self.console.print(
                Panel.fit(
                    f"[red]{escape(result.desc or 'Erro inesperado')}[/red]",
                    title=result.status.value,
                    border_style="red",
                )
            )
            return

        if not result.flights:
            self.console.print(
                Panel.fit(
                    "[yellow]Nenhum voo encontrado dentro da janela de partida.[/yellow]",
                    title="Sem Resultados",
                    border_style="yellow",
                )
            )
            return

        limited_flights = result.flights[:limit]

        table = Table(show_lines=True, title=f"Voos compatíveis ({len(limited_flights)} de {len(result.flights)})")
        table.add_column("#", justify="right")
        table.add_column("Companhia", style="bold cyan")
        table.add_column("Rota", style="yellow")
        table.add_column("Partida")
        table.add_column("Chegada")
        table.add_column("Score", style="bold green", justify="right")

        for index, flight in enumerate(limited_flights, start=1):
            table.add_row(
                str(index),
                flight.carrier,
                flight.route_summary,
                flight.departure_time,
                flight.arrival_time,
                f"{flight.score:.1f}",
            )

        self.console.print(table)


def main():
    """Função principal"""
    cli = FlightMatcherCLI()
    raise SystemExit(cli.run())


if __name__ == "__main__":
    main()
