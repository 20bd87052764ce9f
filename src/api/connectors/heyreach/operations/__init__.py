"""Operation Set da API HeyReach — superfície pública do cliente.

Cada operação é uma função síncrona: recebe a API key e um request
tipado, faz exatamente uma requisição e devolve um modelo de domínio ou
levanta ApiError classificado.
"""

from .accounts import li_accounts_get_all
from .auth import check_api_key
from .campaigns import (
    campaigns_add_leads,
    campaigns_add_leads_v2,
    campaigns_get_all,
    campaigns_get_by_id,
    campaigns_pause,
    campaigns_resume,
)
from .inbox import inbox_get_conversations, inbox_send_message
from .leads import lead_get, lead_get_lists, lead_get_tags, lead_replace_tags
from .lists import (
    lists_add_leads,
    lists_add_leads_v2,
    lists_delete_leads,
    lists_delete_leads_by_profile_url,
    lists_get_all,
    lists_get_by_id,
    lists_get_leads,
)
from .webhooks import webhooks_create, webhooks_delete, webhooks_get_all, webhooks_get_by_id

__all__ = [
    "campaigns_add_leads",
    "campaigns_add_leads_v2",
    "campaigns_get_all",
    "campaigns_get_by_id",
    "campaigns_pause",
    "campaigns_resume",
    "check_api_key",
    "inbox_get_conversations",
    "inbox_send_message",
    "lead_get",
    "lead_get_lists",
    "lead_get_tags",
    "lead_replace_tags",
    "li_accounts_get_all",
    "lists_add_leads",
    "lists_add_leads_v2",
    "lists_delete_leads",
    "lists_delete_leads_by_profile_url",
    "lists_get_all",
    "lists_get_by_id",
    "lists_get_leads",
    "webhooks_create",
    "webhooks_delete",
    "webhooks_get_all",
    "webhooks_get_by_id",
]
