"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api: operações e testes dependem só
deste contrato.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class HttpMethod(str, Enum):
    """Métodos aceitos pela API HeyReach."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class HeyReachTransportProtocol(Protocol):
    """Contrato mínimo do Transport HeyReach.

    Ambos os métodos fazem exatamente uma ida e volta de rede e levantam
    ApiError classificado em qualquer falha.
    """

    def send(
        self,
        method: HttpMethod,
        path: str,
        api_key: str,
        body: dict[str, Any] | None = None,
        *,
        response_type: Any = Any,
    ) -> Any: ...

    def send_empty(
        self,
        method: HttpMethod,
        path: str,
        api_key: str,
        body: dict[str, Any] | None = None,
    ) -> None: ...
