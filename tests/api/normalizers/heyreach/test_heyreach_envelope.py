"""Testes para reconciliação de envelopes paginados."""

from __future__ import annotations

import pytest

from api.connectors.heyreach.wire_models import WireCampaignSummary, WireListSummary, WireWebhook
from api.normalizers.heyreach import (
    ENVELOPE_DECODERS,
    decode_direct,
    decode_nested,
    reconcile_page,
)
from api.normalizers.heyreach.converters import to_campaign_summary, to_list_summary, to_webhook
from app.domain.enums import ListType
from utils.errors import ApiError, ApiErrorKind

LIST_ITEMS = [
    {"id": 1, "name": "Founders", "listType": "USER_LIST", "totalItemsCount": 40},
    {"id": 2, "name": "Accounts", "listType": "companies"},
]


def test_decoders_are_tried_direct_first() -> None:
    assert ENVELOPE_DECODERS == (decode_direct, decode_nested)


def test_both_envelope_shapes_reconcile_to_identical_pages() -> None:
    direct = {"totalCount": 5, "items": LIST_ITEMS}
    nested = {"page": {"offset": 0, "limit": 10, "totalCount": 5}, "items": LIST_ITEMS}

    page_direct = reconcile_page(direct, WireListSummary, to_list_summary)
    page_nested = reconcile_page(nested, WireListSummary, to_list_summary)

    assert page_direct == page_nested
    assert page_direct.total_count == 5
    assert [item.id for item in page_direct.items] == [1, 2]


def test_items_keep_received_order_and_degrade_enums() -> None:
    page = reconcile_page({"totalCount": 2, "items": LIST_ITEMS}, WireListSummary, to_list_summary)

    assert page.items[0].list_type is ListType.UNKNOWN
    assert page.items[1].list_type is ListType.COMPANIES
    assert page.items[1].total_items_count == 0


def test_missing_items_gives_empty_page() -> None:
    page = reconcile_page({"totalCount": 0}, WireListSummary, to_list_summary)

    assert page.total_count == 0
    assert page.items == []


def test_total_count_is_not_checked_against_items() -> None:
    """A API pode subcontar: total menor que o número de itens é aceito."""
    page = reconcile_page({"totalCount": 1, "items": LIST_ITEMS}, WireListSummary, to_list_summary)

    assert page.total_count == 1
    assert len(page.items) == 2


def test_campaign_item_missing_counters_defaults_to_zero() -> None:
    payload = {
        "totalCount": 1,
        "items": [
            {
                "id": 9,
                "name": "Q3",
                "status": "Paused",
                "progressStats": {
                    "totalUsers": 10,
                    "totalUsersInProgress": -1,
                    "totalUsersPending": 3,
                    "totalUsersFinished": 4,
                    "totalUsersFailed": 1,
                },
            }
        ],
    }

    page = reconcile_page(payload, WireCampaignSummary, to_campaign_summary)

    stats = page.items[0].progress_stats
    assert stats is not None
    assert stats.total_users_manually_stopped == 0
    assert stats.total_users_excluded == 0
    assert stats.total_users_in_progress == -1


def test_null_fields_take_defaults() -> None:
    payload = {"totalCount": 1, "items": [{"id": 3, "name": None, "campaignIds": None}]}

    page = reconcile_page(payload, WireListSummary, to_list_summary)

    assert page.items[0].name == ""
    assert page.items[0].campaign_ids == []


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        {"data": [], "count": 3},
        {"page": "1", "items": []},
        [],
        "totalCount",
        None,
    ],
)
def test_unrecognized_envelope(payload: object) -> None:
    with pytest.raises(ApiError) as exc_info:
        reconcile_page(payload, WireListSummary, to_list_summary)

    assert exc_info.value == ApiError(ApiErrorKind.UNKNOWN, "Unrecognized page envelope")


def test_drifted_counter_defaults_without_failing_page() -> None:
    """Contador negativo vira 0 e os demais itens da página continuam."""
    payload = {
        "totalCount": 2,
        "items": [
            {"id": 1, "name": "Q1", "progressStats": {"totalUsers": 10, "totalUsersPending": -1}},
            {"id": 2, "name": "Q2"},
        ],
    }

    page = reconcile_page(payload, WireCampaignSummary, to_campaign_summary)

    assert [item.id for item in page.items] == [1, 2]
    stats = page.items[0].progress_stats
    assert stats is not None
    assert stats.total_users == 10
    assert stats.total_users_pending == 0


def test_unparseable_flag_defaults_to_false() -> None:
    payload = {
        "totalCount": 1,
        "items": [{"id": 9, "webhookName": "w", "eventType": "MessageSent", "isActive": "sometimes"}],
    }

    page = reconcile_page(payload, WireWebhook, to_webhook)

    assert len(page.items) == 1
    assert page.items[0].id == 9
    assert page.items[0].webhook_name == "w"
    assert page.items[0].is_active is False


def test_item_without_identifier_is_kept_with_default_id() -> None:
    payload = {"totalCount": 2, "items": [{"id": 1}, {"name": "sem id"}]}

    page = reconcile_page(payload, WireListSummary, to_list_summary)

    assert [item.id for item in page.items] == [1, 0]
    assert page.items[1].name == "sem id"


def test_non_object_item_becomes_defaults_item() -> None:
    page = reconcile_page({"totalCount": 1, "items": ["x"]}, WireListSummary, to_list_summary)

    assert len(page.items) == 1
    assert page.items[0].id == 0
    assert page.items[0].list_type is ListType.UNKNOWN


def test_negative_total_count_is_rejected() -> None:
    with pytest.raises(ApiError) as exc_info:
        reconcile_page({"totalCount": -1, "items": []}, WireListSummary, to_list_summary)

    assert exc_info.value.kind is ApiErrorKind.UNKNOWN
