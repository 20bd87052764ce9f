"""Builders de payload para o inbox.

O domínio usa `conversation_id`; no wire o campo se chama `id`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.wire_models import (
    WireInboxFilters,
    WireInboxGetConversationsRequest,
    WireInboxSendMessageRequest,
)

if TYPE_CHECKING:
    from app.domain.inbox import InboxGetConversationsRequest, InboxSendMessageRequest


def build_inbox_get_conversations(request: InboxGetConversationsRequest) -> dict[str, Any]:
    """Filtro composto: só a paginação é obrigatória."""
    filters = request.filters
    return WireInboxGetConversationsRequest(
        offset=request.offset,
        limit=request.limit,
        filters=WireInboxFilters(
            linked_in_account_ids=list(filters.linked_in_account_ids),
            campaign_ids=list(filters.campaign_ids),
            search_string=filters.search_string,
            lead_linked_in_id=filters.lead_linked_in_id,
            lead_profile_url=filters.lead_profile_url,
            seen=filters.seen,
        ),
    ).to_wire()


def build_inbox_send_message(request: InboxSendMessageRequest) -> dict[str, Any]:
    return WireInboxSendMessageRequest(
        conversation_id=request.conversation_id,
        linked_in_account_id=request.linked_in_account_id,
        message=request.message,
        subject=request.subject,
    ).to_wire()
