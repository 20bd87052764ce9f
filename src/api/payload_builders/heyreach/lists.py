"""Builders de payload para operações de lista."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.wire_models import (
    WireKeywordPageFilter,
    WireListAddLeadsRequest,
    WireListGetLeadsRequest,
    WireListLeadDeleteByProfileUrlRequest,
    WireListLeadDeleteRequest,
)
from api.payload_builders.heyreach.leads import build_wire_lead

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.lead import Lead
    from app.domain.lists import (
        ListGetAllFilter,
        ListGetLeadsRequest,
        ListLeadDeleteByProfileUrlRequest,
        ListLeadDeleteRequest,
    )


def build_list_filter(request: ListGetAllFilter) -> dict[str, Any]:
    return WireKeywordPageFilter(
        offset=request.offset,
        limit=request.limit,
        keyword=request.keyword,
    ).to_wire()


def build_list_get_leads(request: ListGetLeadsRequest) -> dict[str, Any]:
    return WireListGetLeadsRequest(
        list_id=request.list_id,
        offset=request.offset,
        limit=request.limit,
        keyword=request.keyword,
    ).to_wire()


def build_list_add_leads(list_id: int, leads: Sequence[Lead]) -> dict[str, Any]:
    """Corpo compartilhado por AddLeadsToList e AddLeadsToListV2."""
    return WireListAddLeadsRequest(
        list_id=list_id,
        leads=[build_wire_lead(lead) for lead in leads],
    ).to_wire()


def build_list_delete_leads(request: ListLeadDeleteRequest) -> dict[str, Any]:
    return WireListLeadDeleteRequest(
        list_id=request.list_id,
        lead_member_ids=list(request.lead_member_ids),
    ).to_wire()


def build_list_delete_by_profile_url(
    request: ListLeadDeleteByProfileUrlRequest,
) -> dict[str, Any]:
    return WireListLeadDeleteByProfileUrlRequest(
        list_id=request.list_id,
        profile_urls=list(request.profile_urls),
    ).to_wire()
