"""Modelos de wire da API HeyReach (camelCase, exatamente como o JSON remoto).

Nunca expostos aos chamadores: ficam restritos à operação que os cria.

Tolerância a drift:
- Chaves extras são ignoradas.
- Chave ausente ou `null` assume o default do campo: contadores 0,
  booleanos False, listas vazias, enums como string vazia (vira UNKNOWN).
- Valor presente mas inválido (tipo errado, contador negativo) também assume
  o default, com log de fallback. Só campos sem default (envelopes e
  requisições) falham a validação.
- Identificadores de resposta (id, profileUrl, listId) têm default 0 ou "",
  para que um item malformado chegue ao chamador em vez de ser descartado.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from config.logging import log_fallback

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Base dos modelos de wire: camelCase, extras ignorados, null = ausente."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_drift(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            if field.is_required():
                raise
            log_fallback(logger, f"{cls.__name__}.{info.field_name}", reason="invalid_value")
            return field.get_default(call_default_factory=True)

    def to_wire(self) -> dict[str, Any]:
        """Serializa para o JSON remoto, omitindo campos opcionais vazios."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# -------- Paginação --------


class WirePageInfo(WireModel):
    offset: int = 0
    limit: int = 0
    total_count: int = Field(..., ge=0)


class WireDirectEnvelope(WireModel):
    """Envelope atual: {totalCount, items}."""

    total_count: int = Field(..., ge=0)
    items: list[Any] = Field(default_factory=list)


class WireNestedEnvelope(WireModel):
    """Envelope antigo: {page: {offset, limit, totalCount}, items}."""

    page: WirePageInfo
    items: list[Any] = Field(default_factory=list)


class WirePageFilter(WireModel):
    offset: int = 0
    limit: int = 0


class WireKeywordPageFilter(WirePageFilter):
    keyword: str | None = None


# -------- Leads --------


class WireCustomUserField(WireModel):
    name: str = ""
    value: str = ""


class WireLead(WireModel):
    first_name: str = ""
    last_name: str = ""
    profile_url: str = ""
    location: str | None = None
    summary: str | None = None
    company_name: str | None = None
    position: str | None = None
    about: str | None = None
    email_address: str | None = None
    custom_user_fields: list[WireCustomUserField] = Field(default_factory=list)


class WireLeadGetRequest(WireModel):
    profile_url: str


class WireLeadListsRequest(WireModel):
    email: str | None = None
    linkedin_id: str | None = None
    profile_url: str | None = None
    offset: int = 0
    limit: int = 0


class WireLeadListSummary(WireModel):
    list_id: int = 0
    list_name: str = ""


class WireLeadTags(WireModel):
    tags: list[str] = Field(default_factory=list)


class WireLeadReplaceTagsRequest(WireModel):
    lead_profile_url: str | None = None
    lead_linked_in_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    create_tag_if_not_existing: bool = False


class WireLeadReplaceTagsResponse(WireModel):
    new_assigned_tags: list[str] = Field(default_factory=list)


# -------- Campanhas --------


class WireCampaignFilter(WireKeywordPageFilter):
    statuses: list[str] = Field(default_factory=list)
    account_ids: list[int] = Field(default_factory=list)


class WireProgressStats(WireModel):
    total_users: int = Field(default=0, ge=0)
    # Único contador com sinal: a API já devolveu valores negativos
    total_users_in_progress: int = 0
    total_users_pending: int = Field(default=0, ge=0)
    total_users_finished: int = Field(default=0, ge=0)
    total_users_failed: int = Field(default=0, ge=0)
    total_users_manually_stopped: int = Field(default=0, ge=0)
    total_users_excluded: int = Field(default=0, ge=0)


class WireCampaignSummary(WireModel):
    id: int = 0
    name: str = ""
    creation_time: str = ""
    linked_in_user_list_name: str | None = None
    linked_in_user_list_id: int | None = None
    campaign_account_ids: list[int] = Field(default_factory=list)
    status: str = ""
    progress_stats: WireProgressStats | None = None

    exclude_in_other_campaigns: bool = False
    exclude_has_other_acc_conversations: bool = False
    exclude_contacted_from_sender_in_other_campaign: bool = False
    exclude_list_id: int | None = None
    organization_unit_id: int | None = None

    # Campos legados: mantidos opcionais (None quando ausentes)
    exclude_already_messaged_global: bool | None = None
    exclude_already_messaged_campaign_accounts: bool | None = None
    exclude_first_connection_campaign_accounts: bool | None = None
    exclude_first_connection_global: bool | None = None
    exclude_no_profile_picture: bool | None = None


class WireAccountLeadPair(WireModel):
    linked_in_account_id: int | None = None
    lead: WireLead


class WireCampaignAddLeadsRequest(WireModel):
    campaign_id: int
    account_lead_pairs: list[WireAccountLeadPair] = Field(default_factory=list)


class WireAddLeadsV2Result(WireModel):
    added_leads_count: int = Field(default=0, ge=0)
    updated_leads_count: int = Field(default=0, ge=0)
    failed_leads_count: int = Field(default=0, ge=0)


# -------- Listas --------


class WireListSummary(WireModel):
    id: int = 0
    name: str = ""
    total_items_count: int = Field(default=0, ge=0)
    list_type: str = ""
    creation_time: str = ""
    campaign_ids: list[int] = Field(default_factory=list)


class WireListGetLeadsRequest(WireKeywordPageFilter):
    list_id: int


class WireListAddLeadsRequest(WireModel):
    list_id: int
    leads: list[WireLead] = Field(default_factory=list)


class WireListLeadDeleteRequest(WireModel):
    list_id: int
    lead_member_ids: list[str] = Field(default_factory=list)


class WireListLeadDeleteByProfileUrlRequest(WireModel):
    list_id: int
    profile_urls: list[str] = Field(default_factory=list)


class WireListLeadDeleteByProfileUrlResponse(WireModel):
    not_found_in_list: list[str] = Field(default_factory=list)


# -------- Inbox --------


class WireInboxFilters(WireModel):
    linked_in_account_ids: list[int] = Field(default_factory=list)
    campaign_ids: list[int] = Field(default_factory=list)
    search_string: str | None = None
    lead_linked_in_id: str | None = None
    lead_profile_url: str | None = None
    seen: bool | None = None


class WireInboxGetConversationsRequest(WirePageFilter):
    filters: WireInboxFilters = Field(default_factory=WireInboxFilters)


class WireConversationSummary(WireModel):
    # A API usa `id` e `read`; o domínio expõe conversation_id e seen
    conversation_id: str = Field(default="", alias="id")
    linked_in_account_id: int = 0
    lead_profile_url: str | None = None
    last_message_snippet: str | None = None
    seen: bool = Field(default=False, alias="read")


class WireInboxSendMessageRequest(WireModel):
    message: str
    subject: str | None = None
    conversation_id: str = Field(..., alias="id")
    linked_in_account_id: int


# -------- Contas LinkedIn --------


class WireLinkedInAccount(WireModel):
    id: int = 0
    email_address: str = ""
    first_name: str = ""
    last_name: str = ""
    is_active: bool = False
    active_campaigns: int = Field(default=0, ge=0)
    auth_is_valid: bool = False
    is_valid_navigator: bool = False
    is_valid_recruiter: bool = False


# -------- Webhooks --------


class WireWebhook(WireModel):
    id: int = 0
    webhook_name: str = ""
    webhook_url: str = ""
    event_type: str = ""
    campaign_ids: list[int] = Field(default_factory=list)
    is_active: bool = False


class WireCreateWebhookRequest(WireModel):
    webhook_name: str
    webhook_url: str
    event_type: str
    campaign_ids: list[int] = Field(default_factory=list)
    is_active: bool = True
