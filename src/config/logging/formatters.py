"""Formatters de logging estruturado.

Define o formatter JSON com campos obrigatórios:
- operation
- service
- timestamp (asctime)
- level
- logger (name)
- message

Nunca inclui API key nem corpos de requisição/resposta.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "operation",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "DEBUG",
            "logger": "api.connectors.heyreach.http_client",
            "message": "heyreach_response_received",
            "operation": "campaigns_get_all",
            "service": "heyreach_client",
            "status_code": 200
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
