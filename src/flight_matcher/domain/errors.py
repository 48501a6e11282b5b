"""
Erros de domínio - cada erro carrega o seu tipo (kind) estável
"""


class MatchingError(Exception):
    """Erro base do pipeline de matching"""

    kind: str = "INTERNAL_ERROR"

    def __init__(self, desc: str):
        super().__init__(desc)
        self.desc = desc


class WrongArgsError(MatchingError):
    """Restrições inválidas fornecidas pelo passageiro"""

    kind = "WRONG_ARGS"


class FlightSourceError(MatchingError):
    """Falha ao buscar ou interpretar a lista de voos"""

    kind = "UPSTREAM_ERROR"


class MalformedTimestampError(MatchingError):
    """Timestamp que não pode ser interpretado"""

    kind = "MALFORMED_TIMESTAMP"

    def __init__(self, value: object):
        super().__init__(f"malformed timestamp: {value!r}")
        self.value = value


class DistanceLookupError(MatchingError):
    """Falha ao obter a distância entre dois aeroportos"""

    kind = "DISTANCE_LOOKUP_FAILED"

    def __init__(self, origin: str, destination: str, reason: str = ""):
        desc = f"distance lookup failed for {origin}-{destination}"
        if reason:
            desc = f"{desc}: {reason}"
        super().__init__(desc)
        self.origin = origin
        self.destination = destination
