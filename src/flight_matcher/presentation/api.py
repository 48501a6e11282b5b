"""
API HTTP (FastAPI) para busca de voos compatíveis

Executar com:
    flight-matcher-api
"""
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from ..application.services import MatchingFlightsService
from ..domain.models import MatchStatus
from ..infrastructure.config import Config
from ..infrastructure.factory import MatchingFlightsServiceFactory
from ..infrastructure.logging_setup import configure_logging

logger = logging.getLogger(__name__)

# WRONG_ARGS é erro de domínio, não de transporte
HTTP_STATUS_BY_RESULT = {
    MatchStatus.OK: 200,
    MatchStatus.WRONG_ARGS: 200,
    MatchStatus.UPSTREAM_ERROR: 502,
    MatchStatus.INTERNAL_ERROR: 500,
}


def create_app(service: MatchingFlightsService) -> FastAPI:
    """Cria a aplicação FastAPI em torno de um serviço já configurado"""
    app = FastAPI(title="FlightMatcher", description="Voos compatíveis com as restrições do passageiro")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/matching-flights")
    async def matching_flights(
        request: Request,
        max_acceptable_flight_duration_hours: Optional[str] = Query(None),
        min_acceptable_departure_datetime: Optional[str] = Query(None),
        max_acceptable_departure_datetime: Optional[str] = Query(None),
        preferred_carrier_name: Optional[str] = Query(None),
    ) -> JSONResponse:
        try:
            result = await service.get_matching_flights({
                "max_acceptable_flight_duration_hours": max_acceptable_flight_duration_hours,
                "min_acceptable_departure_datetime": min_acceptable_departure_datetime,
                "max_acceptable_departure_datetime": max_acceptable_departure_datetime,
                "preferred_carrier_name": preferred_carrier_name,
            })
            return JSONResponse(
                status_code=HTTP_STATUS_BY_RESULT[result.status],
                content=result.to_response(),
            )

        except Exception:
            logger.exception(
                "Unhandled error serving %s (query=%s, headers=%s)",
                request.url.path, dict(request.query_params), dict(request.headers),
            )
            return JSONResponse(status_code=500, content={"status": MatchStatus.INTERNAL_ERROR.value})

    return app


def run(config: Optional[Config] = None):
    """Sobe o servidor HTTP na porta configurada"""
    if config is None:
        config = Config.from_env()
    configure_logging(config.LOG_LEVEL)

    service = MatchingFlightsServiceFactory.create(config)
    app = create_app(service)

    logger.info("server listening on :%d", config.HTTP_SERVER_PORT)
    uvicorn.run(app, host=config.HTTP_SERVER_HOST, port=config.HTTP_SERVER_PORT)


if __name__ == "__main__":
    run()
