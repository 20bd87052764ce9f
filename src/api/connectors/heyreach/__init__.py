"""Conector HeyReach - adapter de borda para a HeyReach public API.

Este pacote é o único ponto de IO com a HeyReach.
Responsabilidades:
- HTTP client síncrono (uma ida e volta por chamada)
- Classificação de erros HTTP em ApiErrorKind
- Modelos de wire (camelCase)
- Operation Set (em .operations)
"""

from .api_errors import classify_status, error_from_response, extract_error_message
from .http_client import HeyReachHttpClient, HttpClientConfig, create_heyreach_http_client

__all__ = [
    "HeyReachHttpClient",
    "HttpClientConfig",
    "classify_status",
    "create_heyreach_http_client",
    "error_from_response",
    "extract_error_message",
]
