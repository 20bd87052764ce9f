"""Agregador de settings do heyreach-client.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.heyreach import (
    HEYREACH_API_BASE_URL,
    HEYREACH_API_KEY_HEADER,
    HeyReachSettings,
    get_heyreach_settings,
)

__all__ = [
    # Constants
    "HEYREACH_API_BASE_URL",
    "HEYREACH_API_KEY_HEADER",
    # HeyReach
    "HeyReachSettings",
    "get_heyreach_settings",
]
