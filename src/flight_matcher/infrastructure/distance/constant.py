"""
Provedor de distância constante (placeholder)
"""
from ...application.interfaces import DistanceProviderInterface


class ConstantDistanceProvider(DistanceProviderInterface):
    """Retorna a mesma distância para qualquer par de aeroportos"""

    def __init__(self, distance: float = 1.0):
        if distance < 0:
            raise ValueError("distance must be non-negative")
        self._distance = float(distance)

    async def get_distance(self, origin: str, destination: str) -> float:
        return self._distance
