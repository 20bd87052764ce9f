"""Exceções utilitárias compartilhadas."""

from .exceptions import ApiError, ApiErrorKind

__all__ = [
    "ApiError",
    "ApiErrorKind",
]
