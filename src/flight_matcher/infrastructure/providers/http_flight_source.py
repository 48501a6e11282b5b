"""
Fonte de voos via HTTP (lista JSON publicada numa URL)
"""
import json
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from ...domain.errors import FlightSourceError
from ...domain.models import FlightRecord
from ..config import Config

logger = logging.getLogger(__name__)


class HttpFlightSource:
    """Busca e interpreta a lista de voos publicada em FLIGHTS_LIST_DATA_SOURCE_URL"""

    name = "HTTP"

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._config = config
        self._url = config.FLIGHTS_LIST_DATA_SOURCE_URL
        self._transport = transport
        self._clock = clock
        # url -> (instante da busca, voos)
        self._cache: Dict[str, Tuple[float, List[FlightRecord]]] = {}

    async def fetch_flights(self) -> List[FlightRecord]:
        """Busca a lista de voos; qualquer falha vira FlightSourceError"""
        cached = self._get_cached()
        if cached is not None:
            return cached

        async with httpx.AsyncClient(
            timeout=self._config.REQUEST_TIMEOUT, transport=self._transport
        ) as client:
            try:
                response = await client.get(self._url)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise FlightSourceError(f"flights list request timed out: {e}") from e
            except httpx.HTTPStatusError as e:
                raise FlightSourceError(
                    f"flights list request failed with HTTP {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise FlightSourceError(f"flights list request failed: {e}") from e

        flights = self._parse_response(response.text)
        logger.debug("Fetched %d flights from %s", len(flights), self._url)

        if self._config.is_flights_cache_enabled:
            self._cache[self._url] = (self._clock(), flights)
        return list(flights)

    def _get_cached(self) -> Optional[List[FlightRecord]]:
        if not self._config.is_flights_cache_enabled:
            return None
        entry = self._cache.get(self._url)
        if entry is None:
            return None
        fetched_at, flights = entry
        if self._clock() - fetched_at >= self._config.FLIGHTS_CACHE_TTL_SECONDS:
            del self._cache[self._url]
            return None
        return list(flights)

    def _parse_response(self, body: str) -> List[FlightRecord]:
        """Converte o corpo da resposta em FlightRecords"""
        data = self._decode_json(body)
        # Aceita também o array codificado duas vezes (string JSON com o array)
        if isinstance(data, str):
            data = self._decode_json(data)

        if not isinstance(data, list):
            raise FlightSourceError(
                f"flights list should be a JSON array, got {type(data).__name__}"
            )

        flights = []
        for index, item in enumerate(data):
            try:
                flights.append(FlightRecord.model_validate(item))
            except ValidationError as e:
                raise FlightSourceError(f"flights list item #{index} is invalid: {e}") from e
        return flights

    @staticmethod
    def _decode_json(text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise FlightSourceError(f"flights list is not valid JSON: {e}") from e
