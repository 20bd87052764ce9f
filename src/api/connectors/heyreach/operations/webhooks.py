"""Operações de webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import WireWebhook
from api.normalizers.heyreach.converters import to_webhook
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.accounts import build_create_webhook, build_webhooks_filter
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.domain.page import Page
    from app.domain.webhook import CreateWebhookRequest, GetWebhooksFilter, Webhook
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("webhooks_create")
def webhooks_create(
    api_key: str,
    request: CreateWebhookRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Webhook:
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("webhooks", "CreateWebhook"),
        api_key,
        build_create_webhook(request),
        response_type=WireWebhook,
    )
    return to_webhook(wire)


@heyreach_operation("webhooks_get_by_id")
def webhooks_get_by_id(
    api_key: str,
    webhook_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Webhook:
    wire = resolve_client(http_client).send(
        HttpMethod.GET,
        api_path("webhooks", "GetWebhookById", webhookId=webhook_id),
        api_key,
        response_type=WireWebhook,
    )
    return to_webhook(wire)


@heyreach_operation("webhooks_get_all")
def webhooks_get_all(
    api_key: str,
    request: GetWebhooksFilter,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[Webhook]:
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("webhooks", "GetAllWebhooks"),
        api_key,
        build_webhooks_filter(request),
    )
    return reconcile_page(payload, WireWebhook, to_webhook)


@heyreach_operation("webhooks_delete")
def webhooks_delete(
    api_key: str,
    webhook_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    resolve_client(http_client).send_empty(
        HttpMethod.DELETE,
        api_path("webhooks", "DeleteWebhook", webhookId=webhook_id),
        api_key,
    )
