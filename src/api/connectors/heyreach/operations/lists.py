"""Operações de lista."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import (
    WireAddLeadsV2Result,
    WireLead,
    WireListLeadDeleteByProfileUrlResponse,
    WireListSummary,
)
from api.normalizers.heyreach.converters import (
    to_add_leads_result,
    to_delete_by_profile_url_result,
    to_lead,
    to_list_summary,
)
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.lists import (
    build_list_add_leads,
    build_list_delete_by_profile_url,
    build_list_delete_leads,
    build_list_filter,
    build_list_get_leads,
)
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.campaign import AddLeadsResult
    from app.domain.lead import Lead
    from app.domain.lists import (
        DeleteByProfileUrlResult,
        ListGetAllFilter,
        ListGetLeadsRequest,
        ListLeadDeleteByProfileUrlRequest,
        ListLeadDeleteRequest,
        ListSummary,
    )
    from app.domain.page import Page
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("lists_get_all")
def lists_get_all(
    api_key: str,
    request: ListGetAllFilter,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[ListSummary]:
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("list", "GetAll"),
        api_key,
        build_list_filter(request),
    )
    return reconcile_page(payload, WireListSummary, to_list_summary)


@heyreach_operation("lists_get_by_id")
def lists_get_by_id(
    api_key: str,
    list_id: int,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> ListSummary:
    wire = resolve_client(http_client).send(
        HttpMethod.GET,
        api_path("list", "GetById", listId=list_id),
        api_key,
        response_type=WireListSummary,
    )
    return to_list_summary(wire)


@heyreach_operation("lists_get_leads")
def lists_get_leads(
    api_key: str,
    request: ListGetLeadsRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[Lead]:
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("list", "GetLeadsFromList"),
        api_key,
        build_list_get_leads(request),
    )
    return reconcile_page(payload, WireLead, to_lead)


@heyreach_operation("lists_add_leads")
def lists_add_leads(
    api_key: str,
    list_id: int,
    leads: Sequence[Lead],
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    """Endpoint v1: sucesso sem corpo relevante."""
    resolve_client(http_client).send_empty(
        HttpMethod.POST,
        api_path("list", "AddLeadsToList"),
        api_key,
        build_list_add_leads(list_id, leads),
    )


@heyreach_operation("lists_add_leads_v2")
def lists_add_leads_v2(
    api_key: str,
    list_id: int,
    leads: Sequence[Lead],
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> AddLeadsResult:
    wire = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("list", "AddLeadsToListV2"),
        api_key,
        build_list_add_leads(list_id, leads),
        response_type=WireAddLeadsV2Result,
    )
    return to_add_leads_result(wire)


@heyreach_operation("lists_delete_leads")
def lists_delete_leads(
    api_key: str,
    request: ListLeadDeleteRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> None:
    resolve_client(http_client).send_empty(
        HttpMethod.DELETE,
        api_path("list", "DeleteLeadsFromList"),
        api_key,
        build_list_delete_leads(request),
    )


@heyreach_operation("lists_delete_leads_by_profile_url")
def lists_delete_leads_by_profile_url(
    api_key: str,
    request: ListLeadDeleteByProfileUrlRequest,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> DeleteByProfileUrlResult:
    """Remove leads por URL de perfil.

    URLs que não estavam na lista voltam em `not_found_in_list`; isso é
    informativo e não vira erro.
    """
    wire = resolve_client(http_client).send(
        HttpMethod.DELETE,
        api_path("list", "DeleteLeadsFromListByProfileUrl"),
        api_key,
        build_list_delete_by_profile_url(request),
        response_type=WireListLeadDeleteByProfileUrlResponse,
    )
    return to_delete_by_profile_url_result(wire)
