"""
Configuração da aplicação
"""
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_FLIGHTS_LIST_DATA_SOURCE_URL = (
    "https://gist.githubusercontent.com/bgdavidx/132a9e3b9c70897bc07cfa5ca25747be/raw/"
    "8dbbe1db38087fad4a8c8ade48e741d6fad8c872/gistfile1.txt"
)


class Config(BaseModel):
    """Configuração centralizada, imutável depois de criada"""
    model_config = ConfigDict(frozen=True)

    # Fonte de dados
    FLIGHTS_LIST_DATA_SOURCE_URL: str = DEFAULT_FLIGHTS_LIST_DATA_SOURCE_URL
    FLIGHTS_CACHE_TTL_SECONDS: float = Field(0.0, ge=0)

    # Servidor HTTP
    HTTP_SERVER_HOST: str = "0.0.0.0"
    HTTP_SERVER_PORT: int = Field(3000, ge=1, le=65535)

    # Limites
    REQUEST_TIMEOUT: float = Field(30.0, gt=0)
    DISTANCE_LOOKUP_TIMEOUT: float = Field(5.0, gt=0)

    DISTANCE_PROVIDER: Literal["constant", "great_circle"] = "constant"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Lê .env e variáveis de ambiente; valores inválidos lançam ValueError"""
        load_dotenv()

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(name)
            if raw is not None and raw.strip() != "":
                values[name] = raw.strip()

        if "DISTANCE_PROVIDER" in values:
            values["DISTANCE_PROVIDER"] = values["DISTANCE_PROVIDER"].lower()
        if "LOG_LEVEL" in values:
            values["LOG_LEVEL"] = values["LOG_LEVEL"].upper()

        try:
            return cls(**values)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    @property
    def is_flights_cache_enabled(self) -> bool:
        return self.FLIGHTS_CACHE_TTL_SECONDS > 0
