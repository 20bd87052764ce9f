"""Modelos de domínio de campanhas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import CampaignStatus
from app.domain.lead import Lead


class ProgressStats(BaseModel):
    """Contadores de progresso de uma campanha.

    `total_users_in_progress` é o único contador com sinal: a API já
    reportou valores negativos.
    """

    model_config = ConfigDict(frozen=True)

    total_users: int = Field(default=0, ge=0)
    total_users_in_progress: int = 0
    total_users_pending: int = Field(default=0, ge=0)
    total_users_finished: int = Field(default=0, ge=0)
    total_users_failed: int = Field(default=0, ge=0)
    total_users_manually_stopped: int = Field(default=0, ge=0)
    total_users_excluded: int = Field(default=0, ge=0)


class CampaignSummary(BaseModel):
    """Campanha como vista pelo chamador."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    creation_time: str
    linkedin_user_list_name: str | None = None
    linkedin_user_list_id: int | None = None
    campaign_account_ids: list[int] = Field(default_factory=list)
    status: CampaignStatus = CampaignStatus.UNKNOWN
    progress_stats: ProgressStats | None = None

    # Regras de exclusão (formato atual da API)
    exclude_in_other_campaigns: bool = False
    exclude_has_other_acc_conversations: bool = False
    exclude_contacted_from_sender_in_other_campaign: bool = False
    exclude_list_id: int | None = None
    organization_unit_id: int | None = None

    # Regras de exclusão legadas; None quando a API não envia
    exclude_already_messaged_global: bool | None = None
    exclude_already_messaged_campaign_accounts: bool | None = None
    exclude_first_connection_campaign_accounts: bool | None = None
    exclude_first_connection_global: bool | None = None
    exclude_no_profile_picture: bool | None = None


class CampaignFilter(BaseModel):
    """Filtro de listagem de campanhas."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)
    keyword: str | None = None
    statuses: list[CampaignStatus] = Field(default_factory=list)
    account_ids: list[int] = Field(default_factory=list)


class AccountLeadPair(BaseModel):
    """Lead a adicionar, opcionalmente amarrado a uma conta LinkedIn."""

    model_config = ConfigDict(frozen=True)

    linked_in_account_id: int | None = None
    lead: Lead


class CampaignAddLeadsRequest(BaseModel):
    """Requisição de inclusão de leads em campanha (v1 e v2)."""

    model_config = ConfigDict(frozen=True)

    campaign_id: int
    account_lead_pairs: list[AccountLeadPair] = Field(default_factory=list)


class AddLeadsResult(BaseModel):
    """Resultado tri-contador dos endpoints de inclusão v2."""

    model_config = ConfigDict(frozen=True)

    added_leads_count: int = Field(default=0, ge=0)
    updated_leads_count: int = Field(default=0, ge=0)
    failed_leads_count: int = Field(default=0, ge=0)
