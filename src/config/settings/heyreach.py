"""Settings específicas da API HeyReach.

A API key NÃO faz parte das settings: é fornecida pelo chamador a cada
operação e nunca é persistida.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API pública
HEYREACH_API_BASE_URL: str = "https://api.heyreach.io"
HEYREACH_API_KEY_HEADER: str = "X-API-KEY"


@dataclass(frozen=True)
class HeyReachSettings:
    """Configurações do adapter HeyReach.

    Attributes:
        api_base_url: Origem fixa (scheme + host) da API
        api_key_header: Nome do header que carrega a credencial
        request_timeout_seconds: Timeout de socket por requisição
        verify_ssl: Validar certificado TLS
        user_agent: User-Agent enviado em toda requisição
    """

    api_base_url: str = HEYREACH_API_BASE_URL
    api_key_header: str = HEYREACH_API_KEY_HEADER
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "heyreach-client/0.1"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("HEYREACH_API_BASE_URL deve começar com http(s)://")

        if not self.api_key_header.strip():
            errors.append("HEYREACH_API_KEY_HEADER não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("HEYREACH_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> HeyReachSettings:
    """Carrega HeyReachSettings a partir de variáveis de ambiente."""
    return HeyReachSettings(
        api_base_url=os.getenv("HEYREACH_API_BASE_URL", HEYREACH_API_BASE_URL).rstrip("/"),
        api_key_header=os.getenv("HEYREACH_API_KEY_HEADER", HEYREACH_API_KEY_HEADER),
        request_timeout_seconds=float(os.getenv("HEYREACH_REQUEST_TIMEOUT_SECONDS", "30")),
        verify_ssl=os.getenv("HEYREACH_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
        user_agent=os.getenv("HEYREACH_USER_AGENT", "heyreach-client/0.1"),
    )


@lru_cache(maxsize=1)
def get_heyreach_settings() -> HeyReachSettings:
    """Retorna instância cacheada de HeyReachSettings."""
    return _load_from_env()
