"""Infraestrutura comum das operações HeyReach."""

from __future__ import annotations

import functools
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from app.observability import operation_scope

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import HeyReachTransportProtocol

logger = logging.getLogger(__name__)

API_PREFIX = "/api/public"

F = TypeVar("F", bound="Callable[..., Any]")


def api_path(resource: str, action: str, **query: int) -> str:
    """Monta o path relativo à origem, com query opcional.

    Ex.: api_path("campaign", "GetById", campaignId=7)
    -> "/api/public/campaign/GetById?campaignId=7"
    """
    path = f"{API_PREFIX}/{resource}/{action}"
    if query:
        path += "?" + "&".join(f"{key}={value}" for key, value in query.items())
    return path


def resolve_client(
    http_client: HeyReachTransportProtocol | None,
) -> HeyReachTransportProtocol:
    """Retorna o Transport informado ou o padrão montado a partir das settings."""
    if http_client is not None:
        return http_client
    # Import local para evitar dependência circular
    from api.connectors.heyreach.http_client import create_heyreach_http_client

    return create_heyreach_http_client()


def heyreach_operation(name: str) -> Callable[[F], F]:
    """Decorator: executa a operação dentro de operation_scope(name).

    Loga apenas a duração (DEBUG), com ou sem erro; a falha classificada já
    foi logada pelo Transport. Erros são relançados sem alteração.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with operation_scope(name):
                start = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    logger.debug(
                        "heyreach_operation_finished",
                        extra={"duration_ms": round((time.perf_counter() - start) * 1000, 2)},
                    )

        return wrapper  # type: ignore[return-value]

    return decorator
