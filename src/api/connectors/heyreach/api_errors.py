"""Classificação de erros HTTP da API HeyReach."""

from __future__ import annotations

import json
from typing import Any

from utils.errors import ApiError, ApiErrorKind

_STATUS_KINDS: dict[int, ApiErrorKind] = {
    400: ApiErrorKind.BAD_REQUEST,
    401: ApiErrorKind.UNAUTHORIZED,
    404: ApiErrorKind.NOT_FOUND,
    422: ApiErrorKind.VALIDATION,
    429: ApiErrorKind.TOO_MANY_REQUESTS,
}

# Ordem de preferência dos campos de mensagem no corpo de erro
ERROR_MESSAGE_FIELDS = ("detail", "errorMessage", "message")


def classify_status(status_code: int) -> ApiErrorKind:
    """Mapeia status >= 400 para o tipo de erro; não mapeado vira UNKNOWN."""
    return _STATUS_KINDS.get(status_code, ApiErrorKind.UNKNOWN)


def extract_error_message(status_code: int, body: bytes) -> str:
    """Extrai mensagem legível do corpo de erro.

    Ordem:
    - Corpo não UTF-8: "HTTP <status>"
    - JSON objeto: primeiro campo string entre detail, errorMessage, message
    - JSON sem esses campos: "HTTP <status>"
    - Não-JSON: o texto decodificado como veio
    """
    fallback = f"HTTP {status_code}"
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return fallback

    try:
        parsed: Any = json.loads(text)
    except ValueError:
        return text

    if isinstance(parsed, dict):
        for field in ERROR_MESSAGE_FIELDS:
            value = parsed.get(field)
            if isinstance(value, str):
                return value
    return fallback


def error_from_response(status_code: int, body: bytes) -> ApiError:
    """Constrói ApiError a partir de status e corpo de uma resposta >= 400."""
    return ApiError(classify_status(status_code), extract_error_message(status_code, body))
