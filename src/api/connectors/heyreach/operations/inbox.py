"""Operações de inbox."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import WireConversationSummary
from api.normalizers.heyreach.converters import to_conversation_summary
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.inbox import (
    build_inbox_get_conversations,
    build_inbox_send_message,
)
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.domain.inbox import (
        ConversationSummary,
        InboxGetConversationsRequest,
        InboxSendMessageRequest,
    )
    from app.domain.page import Page
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("inbox_get_conversations")
def inbox_get_conversations(
    api_key: str,
    request: InboxGetConversationsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[ConversationSummary]:
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("inbox", "GetConversationsV2"),
        api_key,
        build_inbox_get_conversations(request),
    )
    return reconcile_page(payload, WireConversationSummary, to_conversation_summary)


@heyreach_operation("inbox_send_message")
def inbox_send_message(
    api_key: str,
    request: InboxSendMessageRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    resolve_client(http_client).send_empty(
        HttpMethod.POST,
        api_path("inbox", "SendMessage"),
        api_key,
        build_inbox_send_message(request),
    )
