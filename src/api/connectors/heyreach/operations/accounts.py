"""Operações de contas LinkedIn."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.heyreach.operations.base import api_path, heyreach_operation, resolve_client
from api.connectors.heyreach.wire_models import WireLinkedInAccount
from api.normalizers.heyreach.converters import to_linkedin_account
from api.normalizers.heyreach.envelope import reconcile_page
from api.payload_builders.heyreach.accounts import build_li_account_filter
from app.protocols import HttpMethod

if TYPE_CHECKING:
    from app.domain.account import LiAccountFilter, LinkedInAccount
    from app.domain.page import Page
    from app.protocols import HeyReachTransportProtocol


@heyreach_operation("li_accounts_get_all")
def li_accounts_get_all(
    api_key: str,
    request: LiAccountFilter,
    *,
    http_client: HeyReachTransportProtocol | None = None,
) -> Page[LinkedInAccount]:
    payload: Any = resolve_client(http_client).send(
        HttpMethod.POST,
        api_path("li_account", "GetAll"),
        api_key,
        build_li_account_filter(request),
    )
    return reconcile_page(payload, WireLinkedInAccount, to_linkedin_account)
