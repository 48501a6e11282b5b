"""Configuração do pytest e fixtures compartilhadas."""

import sys
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

# Garante src no path quando os testes rodam sem o pacote instalado
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from flight_matcher.domain.models import FlightRecord  # noqa: E402


@pytest.fixture
def fixture_flights() -> List[FlightRecord]:
    """Lista fixa com voos dentro e fora da janela de janeiro de 2024."""
    return [
        FlightRecord(
            departureTime="2024-01-10T08:00:00Z",
            arrivalTime="2024-01-10T13:00:00Z",
            carrier="TP",
            origin="LIS",
            destination="LHR",
        ),
        FlightRecord(
            departureTime="2024-01-12T09:30:00Z",
            arrivalTime="2024-01-12T12:30:00Z",
            carrier="BA",
            origin="LHR",
            destination="JFK",
        ),
        FlightRecord(
            departureTime="2024-02-03T10:00:00Z",
            arrivalTime="2024-02-03T12:00:00Z",
            carrier="TP",
            origin="LIS",
            destination="OPO",
        ),
        FlightRecord(
            departureTime="2023-12-31T23:59:59Z",
            arrivalTime="2024-01-01T02:00:00Z",
            carrier="BA",
            origin="LHR",
            destination="LIS",
        ),
    ]

@pytest.fixture
def fixture_distances() -> Dict[Tuple[str, str], float]:
    return {
        ("LIS", "LHR"): 100.0,
        ("LHR", "JFK"): 200.0,
        ("LIS", "OPO"): 50.0,
        ("LHR", "LIS"): 100.0,
    }
