"""Operações de campanha."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import WireAddLeadsV2Result, WireCampaignSummary
from api.normalizers.heyreach.converters import to_add_leads_result, to_campaign_summary
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.campaigns import (
    build_campaign_add_leads,
    build_campaign_filter,
)
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.domain.campaign import (
        AddLeadsResult,
        CampaignAddLeadsRequest,
        CampaignFilter,
        CampaignSummary,
    )
    from app.domain.page import Page
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("campaigns_get_all")
def campaigns_get_all(
    api_key: str,
    request: CampaignFilter,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[CampaignSummary]:
    """Lista campanhas paginadas, aceitando ambos os formatos de envelope."""
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("campaign", "GetAll"),
        api_key,
        build_campaign_filter(request),
    )
    return reconcile_page(payload, WireCampaignSummary, to_campaign_summary)


@heyreach_operation("campaigns_get_by_id")
def campaigns_get_by_id(
    api_key: str,
    campaign_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> CampaignSummary:
    wire = resolve_client(http_client).send(
        HttpMethod.GET,
        api_path("campaign", "GetById", campaignId=campaign_id),
        api_key,
        response_type=WireCampaignSummary,
    )
    return to_campaign_summary(wire)


@heyreach_operation("campaigns_resume")
def campaigns_resume(
    api_key: str,
    campaign_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    resolve_client(http_client).send_empty(
        HttpMethod.POST,
        api_path("campaign", "Resume", campaignId=campaign_id),
        api_key,
    )


@heyreach_operation("campaigns_pause")
def campaigns_pause(
    api_key: str,
    campaign_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    resolve_client(http_client).send_empty(
        HttpMethod.POST,
        api_path("campaign", "Pause", campaignId=campaign_id),
        api_key,
    )


@heyreach_operation("campaigns_add_leads")
def campaigns_add_leads(
    api_key: str,
    request: CampaignAddLeadsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> int:
    """Endpoint v1: a API responde apenas o número de leads adicionados."""
    return resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("campaign", "AddLeadsToCampaign"),
        api_key,
        build_campaign_add_leads(request),
        response_type=int,
    )


@heyreach_operation("campaigns_add_leads_v2")
def campaigns_add_leads_v2(
    api_key: str,
    request: CampaignAddLeadsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> AddLeadsResult:
    """Endpoint v2: contagem separada de adicionados, atualizados e falhos."""
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("campaign", "AddLeadsToCampaignV2"),
        api_key,
        build_campaign_add_leads(request),
        response_type=WireAddLeadsV2Result,
    )
    return to_add_leads_result(wire)
