"""Builders de payload para contas LinkedIn e webhooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.wire_models import (
    WireCreateWebhookRequest,
    WireKeywordPageFilter,
    WirePageFilter,
)

if TYPE_CHECKING:
    from app.domain.account import LiAccountFilter
    from app.domain.webhook import CreateWebhookRequest, GetWebhooksFilter


def build_li_account_filter(request: LiAccountFilter) -> dict[str, Any]:
    return WireKeywordPageFilter(
        offset=request.offset,
        limit=request.limit,
        keyword=request.keyword,
    ).to_wire()


def build_webhooks_filter(request: GetWebhooksFilter) -> dict[str, Any]:
    return WirePageFilter(offset=request.offset, limit=request.limit).to_wire()


def build_create_webhook(request: CreateWebhookRequest) -> dict[str, Any]:
    """Tipo de evento vai sempre pelo token canônico CamelCase."""
    return WireCreateWebhookRequest(
        webhook_name=request.webhook_name,
        webhook_url=request.webhook_url,
        event_type=request.event_type.to_wire(),
        campaign_ids=list(request.campaign_ids),
        is_active=request.is_active,
    ).to_wire()
