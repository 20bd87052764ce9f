"""Helpers de logging para a API HeyReach (sem API key nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(
    error: ApiError,
    method: str,
    path: str,
    status_code: int | None = None,
) -> None:
    """Loga erro classificado sem expor dados sensíveis."""
    logger.warning(
        "heyreach_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "error_kind": error.kind.value,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
    body_bytes: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "heyreach_request_succeeded",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "body_bytes": body_bytes,
        },
    )
