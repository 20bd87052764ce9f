"""Normalizer HeyReach — envelopes paginados e conversão wire -> domínio.

Responsabilidades:
- Reconciliar os formatos históricos de envelope em Page
- Converter modelos de wire em modelos de domínio
"""

from .converters import (
    to_add_leads_result,
    to_campaign_summary,
    to_conversation_summary,
    to_delete_by_profile_url_result,
    to_lead,
    to_lead_list_summary,
    to_lead_tags,
    to_linkedin_account,
    to_list_summary,
    to_progress_stats,
    to_replaced_lead_tags,
    to_webhook,
)
from .envelope import ENVELOPE_DECODERS, decode_direct, decode_nested, reconcile_page

__all__ = [
    "ENVELOPE_DECODERS",
    "decode_direct",
    "decode_nested",
    "reconcile_page",
    "to_add_leads_result",
    "to_campaign_summary",
    "to_conversation_summary",
    "to_delete_by_profile_url_result",
    "to_lead",
    "to_lead_list_summary",
    "to_lead_tags",
    "to_linkedin_account",
    "to_list_summary",
    "to_progress_stats",
    "to_replaced_lead_tags",
    "to_webhook",
]
