"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo hospedeiro
    configure_logging(level="INFO")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("heyreach_page_reconciled", extra={"total_count": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import current_operation
from config.logging.filters import OperationContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "heyreach_client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    operation_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez pelo processo que hospeda o adapter.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        operation_getter: Função que retorna a operação atual. Por padrão
            lê o ContextVar de app.observability.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        OperationContextFilter(service_name, operation_getter or current_operation)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Log observável de degradação silenciosa (sem PII).

    Registra quando um valor do wire foi substituído por um default
    (ex: enum não reconhecido virou UNKNOWN).

    Args:
        logger: Logger instance.
        component: Nome do campo/componente (ex: "campaign_status").
        reason: Razão do fallback (ex: "unrecognized_value").
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.debug(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
