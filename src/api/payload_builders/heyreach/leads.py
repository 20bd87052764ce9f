"""Builders de payload para operações de lead."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.wire_models import (
    WireCustomUserField,
    WireLead,
    WireLeadGetRequest,
    WireLeadListsRequest,
    WireLeadReplaceTagsRequest,
)

if TYPE_CHECKING:
    from app.domain.lead import Lead, LeadListsRequest, LeadReplaceTagsRequest


def build_wire_lead(lead: Lead) -> WireLead:
    """Lead de domínio -> modelo de wire (reutilizado por campanhas e listas)."""
    return WireLead(
        first_name=lead.first_name,
        last_name=lead.last_name,
        profile_url=lead.profile_url,
        location=lead.location,
        summary=lead.summary,
        company_name=lead.company_name,
        position=lead.position,
        about=lead.about,
        email_address=lead.email_address,
        custom_user_fields=[
            WireCustomUserField(name=field.name, value=field.value)
            for field in lead.custom_user_fields
        ],
    )


def build_lead_get(profile_url: str) -> dict[str, Any]:
    return WireLeadGetRequest(profile_url=profile_url).to_wire()


def build_lead_lists(request: LeadListsRequest) -> dict[str, Any]:
    """Filtro de GetListsForLead; identificadores ausentes são omitidos."""
    return WireLeadListsRequest(
        email=request.email,
        linkedin_id=request.linkedin_id,
        profile_url=request.profile_url,
        offset=request.offset,
        limit=request.limit,
    ).to_wire()


def build_lead_replace_tags(request: LeadReplaceTagsRequest) -> dict[str, Any]:
    return WireLeadReplaceTagsRequest(
        lead_profile_url=request.lead_profile_url,
        lead_linked_in_id=request.lead_linked_in_id,
        tags=list(request.tags),
        create_tag_if_not_existing=request.create_tag_if_not_existing,
    ).to_wire()
