"""Observabilidade — contexto de operação para logs estruturados.

Uso:
    from app.observability import current_operation, operation_scope
"""

from app.observability.operation import current_operation, operation_scope

__all__ = [
    "current_operation",
    "operation_scope",
]
