"""Protocolos e contratos do core da aplicação."""

from .http_client import HeyReachTransportProtocol, HttpMethod

__all__ = [
    "HeyReachTransportProtocol",
    "HttpMethod",
]
