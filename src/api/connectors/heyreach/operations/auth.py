"""Verificação de credencial."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("check_api_key")
def check_api_key(
    api_key: str,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    """Valida a API key contra o endpoint de autenticação.

    Retorno normal significa credencial aceita. Qualquer ApiError significa
    credencial rejeitada ou falha de transporte, distinguíveis pelo kind.
    """
    resolve_client(http_client).send_empty(
        HttpMethod.GET, api_path("auth", "CheckApiKey"), api_key
    )
