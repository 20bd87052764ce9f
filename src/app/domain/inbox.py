"""Modelos de domínio da caixa de entrada (conversas LinkedIn)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InboxFilters(BaseModel):
    """Filtro composto de conversas; todos os campos são opcionais."""

    model_config = ConfigDict(frozen=True)

    linked_in_account_ids: list[int] = Field(default_factory=list)
    campaign_ids: list[int] = Field(default_factory=list)
    search_string: str | None = None
    lead_linked_in_id: str | None = None
    lead_profile_url: str | None = None
    seen: bool | None = None


class InboxGetConversationsRequest(BaseModel):
    """Consulta paginada de conversas."""

    model_config = ConfigDict(frozen=True)

    filters: InboxFilters = Field(default_factory=InboxFilters)
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)


class ConversationSummary(BaseModel):
    """Resumo de conversa.

    No wire, `conversation_id` é `id` e `seen` é `read`.
    """

    model_config = ConfigDict(frozen=True)

    conversation_id: str
    linked_in_account_id: int = 0
    lead_profile_url: str | None = None
    last_message_snippet: str | None = None
    seen: bool = False


class InboxSendMessageRequest(BaseModel):
    """Envio de mensagem em uma conversa existente."""

    model_config = ConfigDict(frozen=True)

    conversation_id: str
    linked_in_account_id: int
    message: str
    subject: str | None = None
