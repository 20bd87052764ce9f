"""Modelos de domínio de webhooks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import WebhookEventType


class Webhook(BaseModel):
    """Webhook registrado na conta."""

    model_config = ConfigDict(frozen=True)

    id: int
    webhook_name: str = ""
    webhook_url: str = ""
    event_type: WebhookEventType = WebhookEventType.UNKNOWN
    campaign_ids: list[int] = Field(default_factory=list)
    is_active: bool = False


class CreateWebhookRequest(BaseModel):
    """Criação de webhook."""

    model_config = ConfigDict(frozen=True)

    webhook_name: str
    webhook_url: str
    event_type: WebhookEventType
    campaign_ids: list[int] = Field(default_factory=list)
    is_active: bool = True


class GetWebhooksFilter(BaseModel):
    """Paginação da listagem de webhooks."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)
