"""Conversores de campo: modelos de wire HeyReach -> modelos de domínio.

Funções puras; nenhuma levanta exceção por enum desconhecido (vira
UNKNOWN, com log de fallback em DEBUG).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.account import LinkedInAccount
from app.domain.campaign import AddLeadsResult, CampaignSummary, ProgressStats
from app.domain.enums import CampaignStatus, ListType, WebhookEventType
from app.domain.inbox import ConversationSummary
from app.domain.lead import CustomUserField, Lead, LeadListSummary, LeadTags
from app.domain.lists import DeleteByProfileUrlResult, ListSummary
from app.domain.webhook import Webhook
from config.logging import log_fallback

if TYPE_CHECKING:
    from api.connectors.heyreach.wire_models import (
        WireAddLeadsV2Result,
        WireCampaignSummary,
        WireConversationSummary,
        WireLead,
        WireLeadListSummary,
        WireLeadReplaceTagsResponse,
        WireLeadTags,
        WireLinkedInAccount,
        WireListLeadDeleteByProfileUrlResponse,
        WireListSummary,
        WireProgressStats,
        WireWebhook,
    )

logger = logging.getLogger(__name__)


def _parse_campaign_status(raw: str) -> CampaignStatus:
    status = CampaignStatus.parse(raw)
    if status is CampaignStatus.UNKNOWN and raw:
        log_fallback(logger, "campaign_status", reason="unrecognized_value")
    return status


def _parse_list_type(raw: str) -> ListType:
    list_type = ListType.parse(raw)
    if list_type is ListType.UNKNOWN and raw:
        log_fallback(logger, "list_type", reason="unrecognized_value")
    return list_type


def _parse_event_type(raw: str) -> WebhookEventType:
    event_type = WebhookEventType.parse(raw)
    if event_type is WebhookEventType.UNKNOWN and raw:
        log_fallback(logger, "webhook_event_type", reason="unrecognized_value")
    return event_type


# -------- Campanhas --------


def to_progress_stats(wire: WireProgressStats) -> ProgressStats:
    return ProgressStats(
        total_users=wire.total_users,
        total_users_in_progress=wire.total_users_in_progress,
        total_users_pending=wire.total_users_pending,
        total_users_finished=wire.total_users_finished,
        total_users_failed=wire.total_users_failed,
        total_users_manually_stopped=wire.total_users_manually_stopped,
        total_users_excluded=wire.total_users_excluded,
    )


def to_campaign_summary(wire: WireCampaignSummary) -> CampaignSummary:
    return CampaignSummary(
        id=wire.id,
        name=wire.name,
        creation_time=wire.creation_time,
        linkedin_user_list_name=wire.linked_in_user_list_name,
        linkedin_user_list_id=wire.linked_in_user_list_id,
        campaign_account_ids=list(wire.campaign_account_ids),
        status=_parse_campaign_status(wire.status),
        progress_stats=to_progress_stats(wire.progress_stats) if wire.progress_stats else None,
        exclude_in_other_campaigns=wire.exclude_in_other_campaigns,
        exclude_has_other_acc_conversations=wire.exclude_has_other_acc_conversations,
        exclude_contacted_from_sender_in_other_campaign=(
            wire.exclude_contacted_from_sender_in_other_campaign
        ),
        exclude_list_id=wire.exclude_list_id,
        organization_unit_id=wire.organization_unit_id,
        exclude_already_messaged_global=wire.exclude_already_messaged_global,
        exclude_already_messaged_campaign_accounts=wire.exclude_already_messaged_campaign_accounts,
        exclude_first_connection_campaign_accounts=wire.exclude_first_connection_campaign_accounts,
        exclude_first_connection_global=wire.exclude_first_connection_global,
        exclude_no_profile_picture=wire.exclude_no_profile_picture,
    )


def to_add_leads_result(wire: WireAddLeadsV2Result) -> AddLeadsResult:
    return AddLeadsResult(
        added_leads_count=wire.added_leads_count,
        updated_leads_count=wire.updated_leads_count,
        failed_leads_count=wire.failed_leads_count,
    )


# -------- Leads --------


def to_lead(wire: WireLead) -> Lead:
    return Lead(
        first_name=wire.first_name,
        last_name=wire.last_name,
        profile_url=wire.profile_url,
        location=wire.location,
        summary=wire.summary,
        company_name=wire.company_name,
        position=wire.position,
        about=wire.about,
        email_address=wire.email_address,
        custom_user_fields=[
            CustomUserField(name=field.name, value=field.value)
            for field in wire.custom_user_fields
        ],
    )


def to_lead_list_summary(wire: WireLeadListSummary) -> LeadListSummary:
    return LeadListSummary(list_id=wire.list_id, list_name=wire.list_name)


def to_lead_tags(wire: WireLeadTags) -> LeadTags:
    return LeadTags(tags=list(wire.tags))


def to_replaced_lead_tags(wire: WireLeadReplaceTagsResponse) -> LeadTags:
    """Conjunto completo após a substituição (newAssignedTags), não um diff.

    Confiado como está: não é revalidado contra as tags enviadas.
    """
    return LeadTags(tags=list(wire.new_assigned_tags))


# -------- Listas --------


def to_list_summary(wire: WireListSummary) -> ListSummary:
    return ListSummary(
        id=wire.id,
        name=wire.name,
        total_items_count=wire.total_items_count,
        list_type=_parse_list_type(wire.list_type),
        creation_time=wire.creation_time,
        campaign_ids=list(wire.campaign_ids),
    )


def to_delete_by_profile_url_result(
    wire: WireListLeadDeleteByProfileUrlResponse,
) -> DeleteByProfileUrlResult:
    return DeleteByProfileUrlResult(not_found_in_list=list(wire.not_found_in_list))


# -------- Inbox --------


def to_conversation_summary(wire: WireConversationSummary) -> ConversationSummary:
    return ConversationSummary(
        conversation_id=wire.conversation_id,
        linked_in_account_id=wire.linked_in_account_id,
        lead_profile_url=wire.lead_profile_url,
        last_message_snippet=wire.last_message_snippet,
        seen=wire.seen,
    )


# -------- Contas LinkedIn --------


def to_linkedin_account(wire: WireLinkedInAccount) -> LinkedInAccount:
    return LinkedInAccount(
        id=wire.id,
        email_address=wire.email_address,
        first_name=wire.first_name,
        last_name=wire.last_name,
        is_active=wire.is_active,
        active_campaigns=wire.active_campaigns,
        auth_is_valid=wire.auth_is_valid,
        is_valid_recruiter=wire.is_valid_recruiter,
        is_valid_navigator=wire.is_valid_navigator,
    )


# -------- Webhooks --------


def to_webhook(wire: WireWebhook) -> Webhook:
    return Webhook(
        id=wire.id,
        webhook_name=wire.webhook_name,
        webhook_url=wire.webhook_url,
        event_type=_parse_event_type(wire.event_type),
        campaign_ids=list(wire.campaign_ids),
        is_active=wire.is_active,
    )
