"""Filters de logging para injeção de contexto.

Campos injetados:
- operation: operação HeyReach em andamento (ex: campaigns_get_all)
- service: nome do serviço (ex: heyreach_client)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class OperationContextFilter(logging.Filter):
    """Injeta operation e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        operation_getter: Função que retorna a operação atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        operation_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_operation = operation_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona operation e service ao record.

        Se operation já foi passado via `extra`, preserva o valor.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "operation", None)
        record.operation = existing if existing else self._get_operation()
        record.service = self._service_name
        return True
