"""Operação HeyReach em andamento, para enriquecer logs.

Usa ContextVar para ser thread/async-safe: chamadas concorrentes não
compartilham estado.

Uso:
    from app.observability import current_operation, operation_scope

    with operation_scope("campaigns_get_all"):
        ...  # logs emitidos aqui carregam operation="campaigns_get_all"
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_operation: ContextVar[str] = ContextVar("heyreach_operation", default="")


def current_operation() -> str:
    """Retorna a operação do contexto atual ou string vazia."""
    return _operation.get()


@contextmanager
def operation_scope(name: str) -> Iterator[str]:
    """Marca o contexto atual com o nome da operação e restaura ao sair."""
    token = _operation.set(name)
    try:
        yield name
    finally:
        _operation.reset(token)
