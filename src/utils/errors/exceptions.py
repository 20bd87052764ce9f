"""Exceções compartilhadas do adapter HeyReach.

Taxonomia fechada: toda falha (headers, serialização, transporte, status
não-2xx, decoding, parse JSON) vira exatamente um ApiErrorKind.
"""

from __future__ import annotations

from enum import Enum


class ApiErrorKind(str, Enum):
    """Tipos de erro classificados na borda do Transport."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    TOO_MANY_REQUESTS = "too_many_requests"
    BAD_REQUEST = "bad_request"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class ApiError(Exception):
    """Erro classificado da API HeyReach.

    Construído no Transport e propagado sem alteração pelas camadas acima.
    Nunca carrega a API key nem o corpo bruto da requisição.
    """

    def __init__(self, kind: ApiErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.name}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self.kind is other.kind and self.message == other.message

    __hash__ = Exception.__hash__
