"""Testes para conversores wire -> domínio."""

from __future__ import annotations

import logging

import pytest

from api.connectors.heyreach.wire_models import (
    WireCampaignSummary,
    WireConversationSummary,
    WireLead,
    WireLeadReplaceTagsResponse,
    WireLinkedInAccount,
    WireWebhook,
)
from api.normalizers.heyreach import (
    to_campaign_summary,
    to_conversation_summary,
    to_lead,
    to_linkedin_account,
    to_replaced_lead_tags,
    to_webhook,
)
from app.domain.enums import CampaignStatus, WebhookEventType


class TestCampaignConversion:
    def test_full_campaign(self) -> None:
        wire = WireCampaignSummary.model_validate(
            {
                "id": 11,
                "name": "Outbound",
                "creationTime": "2024-05-01T10:00:00Z",
                "linkedInUserListName": "Founders",
                "linkedInUserListId": 4,
                "campaignAccountIds": [1, 2],
                "status": "IN_PROGRESS",
                "excludeInOtherCampaigns": True,
                "organizationUnitId": 99,
                "unexpectedNewField": "ignored",
            }
        )

        campaign = to_campaign_summary(wire)

        assert campaign.id == 11
        assert campaign.linkedin_user_list_name == "Founders"
        assert campaign.linkedin_user_list_id == 4
        assert campaign.campaign_account_ids == [1, 2]
        assert campaign.status is CampaignStatus.UNKNOWN
        assert campaign.exclude_in_other_campaigns is True
        assert campaign.exclude_has_other_acc_conversations is False
        assert campaign.organization_unit_id == 99
        assert campaign.progress_stats is None
        assert campaign.exclude_no_profile_picture is None

    @pytest.mark.parametrize("raw", ["ACTIVE", "active", "Active", " active "])
    def test_status_any_casing(self, raw: str) -> None:
        wire = WireCampaignSummary.model_validate({"id": 1, "status": raw})
        assert to_campaign_summary(wire).status is CampaignStatus.ACTIVE

    def test_unknown_status_logs_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        wire = WireCampaignSummary.model_validate({"id": 1, "status": "ARCHIVED"})

        with caplog.at_level(logging.DEBUG, logger="api.normalizers.heyreach.converters"):
            campaign = to_campaign_summary(wire)

        assert campaign.status is CampaignStatus.UNKNOWN
        record = next(r for r in caplog.records if r.getMessage().startswith("Fallback applied"))
        assert record.component == "campaign_status"


def test_lead_optional_fields_stay_absent() -> None:
    lead = to_lead(WireLead.model_validate({"profileUrl": "https://linkedin.com/in/ana"}))

    assert lead.profile_url == "https://linkedin.com/in/ana"
    assert lead.first_name == ""
    assert lead.email_address is None
    assert lead.custom_user_fields == []


def test_lead_custom_fields() -> None:
    wire = WireLead.model_validate(
        {
            "firstName": "Ana",
            "profileUrl": "https://linkedin.com/in/ana",
            "customUserFields": [{"name": "plan", "value": "pro"}],
        }
    )

    lead = to_lead(wire)

    assert lead.custom_user_fields[0].name == "plan"
    assert lead.custom_user_fields[0].value == "pro"


def test_conversation_binds_read_and_id() -> None:
    wire = WireConversationSummary.model_validate(
        {"id": "conv-1", "read": True, "linkedInAccountId": 5}
    )

    conversation = to_conversation_summary(wire)

    assert conversation.conversation_id == "conv-1"
    assert conversation.seen is True
    assert conversation.linked_in_account_id == 5


def test_conversation_numeric_id_becomes_string() -> None:
    wire = WireConversationSummary.model_validate({"id": 123})
    assert to_conversation_summary(wire).conversation_id == "123"


def test_linkedin_account_keeps_flags_independent() -> None:
    wire = WireLinkedInAccount.model_validate(
        {
            "id": 3,
            "emailAddress": "sdr@example.com",
            "isActive": True,
            "activeCampaigns": 2,
            "authIsValid": True,
            "isValidNavigator": True,
            "isValidRecruiter": False,
        }
    )

    account = to_linkedin_account(wire)

    assert account.auth_is_valid is True
    assert account.is_valid_navigator is True
    assert account.is_valid_recruiter is False
    assert account.active_campaigns == 2


def test_webhook_event_type_synonyms() -> None:
    wire = WireWebhook.model_validate(
        {"id": 8, "webhookName": "replies", "eventType": "message_replied", "isActive": True}
    )

    webhook = to_webhook(wire)

    assert webhook.event_type is WebhookEventType.MESSAGE_REPLIED
    assert webhook.is_active is True


def test_replaced_tags_are_trusted_as_is() -> None:
    wire = WireLeadReplaceTagsResponse.model_validate({"newAssignedTags": ["vip", "VIP", "hot"]})

    assert to_replaced_lead_tags(wire).tags == ["vip", "VIP", "hot"]
