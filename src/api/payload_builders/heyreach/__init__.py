"""Builders de payload para a API HeyReach.

Cada builder converte um request de domínio no dicionário JSON esperado
pelo endpoint, passando pelos modelos de wire.
"""

from api.payload_builders.heyreach.accounts import (
    build_create_webhook,
    build_li_account_filter,
    build_webhooks_filter,
)
from api.payload_builders.heyreach.campaigns import (
    build_campaign_add_leads,
    build_campaign_filter,
)
from api.payload_builders.heyreach.inbox import (
    build_inbox_get_conversations,
    build_inbox_send_message,
)
from api.payload_builders.heyreach.leads import (
    build_lead_get,
    build_lead_lists,
    build_lead_replace_tags,
    build_wire_lead,
)
from api.payload_builders.heyreach.lists import (
    build_list_add_leads,
    build_list_delete_by_profile_url,
    build_list_delete_leads,
    build_list_filter,
    build_list_get_leads,
)

__all__ = [
    "build_campaign_add_leads",
    "build_campaign_filter",
    "build_create_webhook",
    "build_inbox_get_conversations",
    "build_inbox_send_message",
    "build_lead_get",
    "build_lead_lists",
    "build_lead_replace_tags",
    "build_li_account_filter",
    "build_list_add_leads",
    "build_list_delete_by_profile_url",
    "build_list_delete_leads",
    "build_list_filter",
    "build_list_get_leads",
    "build_webhooks_filter",
    "build_wire_lead",
]
