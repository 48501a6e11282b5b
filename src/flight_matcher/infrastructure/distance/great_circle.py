"""
Provedor de distância por círculo máximo (fórmula de haversine)
"""
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from ...application.interfaces import DistanceProviderInterface
from ...domain.errors import DistanceLookupError

EARTH_RADIUS_MILES = 3958.8

# IATA -> (latitude, longitude)
AIRPORT_COORDINATES: Dict[str, Tuple[float, float]] = {
    "AMS": (52.3086, 4.7639),
    "ATL": (33.6367, -84.4281),
    "BOS": (42.3643, -71.0052),
    "CDG": (49.0128, 2.5500),
    "DEN": (39.8617, -104.6731),
    "DFW": (32.8968, -97.0380),
    "DXB": (25.2528, 55.3644),
    "EWR": (40.6925, -74.1687),
    "FCO": (41.8045, 12.2508),
    "FRA": (50.0333, 8.5706),
    "GRU": (-23.4356, -46.4731),
    "HKG": (22.3089, 113.9150),
    "HND": (35.5523, 139.7800),
    "IAD": (38.9445, -77.4558),
    "ICN": (37.4691, 126.4510),
    "JFK": (40.6398, -73.7789),
    "LAS": (36.0801, -115.1520),
    "LAX": (33.9425, -118.4081),
    "LGA": (40.7772, -73.8726),
    "LHR": (51.4706, -0.4619),
    "LIS": (38.7813, -9.1359),
    "MAD": (40.4719, -3.5626),
    "MIA": (25.7932, -80.2906),
    "NRT": (35.7647, 140.3864),
    "OPO": (41.2481, -8.6814),
    "ORD": (41.9786, -87.9048),
    "SEA": (47.4490, -122.3093),
    "SFO": (37.6190, -122.3750),
    "SIN": (1.3502, 103.9940),
    "SYD": (-33.9461, 151.1772),
    "TPE": (25.0777, 121.2330),
    "YYZ": (43.6772, -79.6306),
}


class GreatCircleDistanceProvider(DistanceProviderInterface):
    """Distância em milhas entre aeroportos conhecidos pelas suas coordenadas"""

    def __init__(self, coordinates: Optional[Mapping[str, Tuple[float, float]]] = None):
        source = AIRPORT_COORDINATES if coordinates is None else coordinates
        self._coordinates = {code.upper(): point for code, point in source.items()}

    async def get_distance(self, origin: str, destination: str) -> float:
        start = self._get_coordinates(origin, destination, origin)
        end = self._get_coordinates(origin, destination, destination)
        return haversine_miles(start, end)

    def _get_coordinates(self, origin: str, destination: str, code: str) -> Tuple[float, float]:
        coordinates = self._coordinates.get((code or "").upper().strip())
        if coordinates is None:
            raise DistanceLookupError(origin, destination, f"unknown airport {code!r}")
        return coordinates


def haversine_miles(start: Tuple[float, float], end: Tuple[float, float]) -> float:
    """Distância de círculo máximo entre dois pontos (lat, lon) em graus"""
    lat1, lon1, lat2, lon2 = np.radians([start[0], start[1], end[0], end[1]])
    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    # clip evita arcsin(>1) por erro de arredondamento
    return float(2 * EARTH_RADIUS_MILES * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0))))
