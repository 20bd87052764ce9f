"""Operações de lead e tags."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import (
    WireLead,
    WireLeadListSummary,
    WireLeadReplaceTagsResponse,
    WireLeadTags,
)
from api.normalizers.heyreach.converters import (
    to_lead,
    to_lead_list_summary,
    to_lead_tags,
    to_replaced_lead_tags,
)
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.leads import (
    build_lead_get,
    build_lead_lists,
    build_lead_replace_tags,
)
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.domain.lead import (
        Lead,
        LeadListsRequest,
        LeadListSummary,
        LeadReplaceTagsRequest,
        LeadTags,
    )
    from app.domain.page import Page
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("lead_get")
def lead_get(
    api_key: str,
    profile_url: str,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Lead:
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("lead", "GetLead"),
        api_key,
        build_lead_get(profile_url),
        response_type=WireLead,
    )
    return to_lead(wire)


@heyreach_operation("lead_get_lists")
def lead_get_lists(
    api_key: str,
    request: LeadListsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[LeadListSummary]:
    """Listas que contêm o lead (por email, LinkedIn id ou URL de perfil)."""
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("list", "GetListsForLead"),
        api_key,
        build_lead_lists(request),
    )
    return reconcile_page(payload, WireLeadListSummary, to_lead_list_summary)


@heyreach_operation("lead_get_tags")
def lead_get_tags(
    api_key: str,
    profile_url: str,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> LeadTags:
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("lead", "GetTags"),
        api_key,
        build_lead_get(profile_url),
        response_type=WireLeadTags,
    )
    return to_lead_tags(wire)


@heyreach_operation("lead_replace_tags")
def lead_replace_tags(
    api_key: str,
    request: LeadReplaceTagsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> LeadTags:
    """Substitui todas as tags do lead.

    Returns:
        Conjunto completo de tags após a substituição, como devolvido
        pela API.
    """
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("lead", "ReplaceTags"),
        api_key,
        build_lead_replace_tags(request),
        response_type=WireLeadReplaceTagsResponse,
    )
    return to_replaced_lead_tags(wire)
