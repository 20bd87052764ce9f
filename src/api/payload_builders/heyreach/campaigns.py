"""Builders de payload para operações de campanha."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.wire_models import (
    WireAccountLeadPair,
    WireCampaignAddLeadsRequest,
    WireCampaignFilter,
)
from api.payload_builders.heyreach.leads import build_wire_lead

if TYPE_CHECKING:
    from app.domain.campaign import CampaignAddLeadsRequest, CampaignFilter


def build_campaign_filter(request: CampaignFilter) -> dict[str, Any]:
    """Filtro de GetAll; status vão pelo token canônico de cada membro."""
    return WireCampaignFilter(
        offset=request.offset,
        limit=request.limit,
        keyword=request.keyword,
        statuses=[status.to_wire() for status in request.statuses],
        account_ids=list(request.account_ids),
    ).to_wire()


def build_campaign_add_leads(request: CampaignAddLeadsRequest) -> dict[str, Any]:
    """Corpo compartilhado por AddLeadsToCampaign e AddLeadsToCampaignV2."""
    return WireCampaignAddLeadsRequest(
        campaign_id=request.campaign_id,
        account_lead_pairs=[
            WireAccountLeadPair(
                linked_in_account_id=pair.linked_in_account_id,
                lead=build_wire_lead(pair.lead),
            )
            for pair in request.account_lead_pairs
        ],
    ).to_wire()
