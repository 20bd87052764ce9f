"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="heyreach_client")

    logger = get_logger(__name__)
    logger.debug("heyreach_request_sent", extra={"method": "POST"})

Campos obrigatórios em todo log:
- operation
- service
- level
- logger
- message
- asctime

A API key nunca é logada.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import OperationContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "OperationContextFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
