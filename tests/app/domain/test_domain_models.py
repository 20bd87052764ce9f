"""Testes para modelos de domínio (validação local de requests)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain.campaign import CampaignFilter, ProgressStats
from app.domain.lead import Lead
from app.domain.page import Page
from app.domain.webhook import CreateWebhookRequest


def test_negative_offset_is_rejected_before_sending() -> None:
    with pytest.raises(ValidationError):
        CampaignFilter(offset=-1)


def test_lead_requires_profile_url() -> None:
    with pytest.raises(ValidationError):
        Lead(first_name="Ana")  # type: ignore[call-arg]


def test_progress_stats_in_progress_may_be_negative() -> None:
    stats = ProgressStats(total_users_in_progress=-2)

    assert stats.total_users_in_progress == -2
    assert stats.total_users == 0


def test_progress_stats_other_counters_are_non_negative() -> None:
    with pytest.raises(ValidationError):
        ProgressStats(total_users_failed=-1)


def test_models_are_frozen() -> None:
    page: Page[int] = Page(total_count=1, items=[1])

    with pytest.raises(ValidationError):
        page.total_count = 2  # type: ignore[misc]


def test_create_webhook_defaults_to_active() -> None:
    request = CreateWebhookRequest(
        webhook_name="n", webhook_url="https://hooks.example.com", event_type="MessageSent"
    )

    assert request.is_active is True
    assert request.event_type.to_wire() == "MessageSent"
