#!/usr/bin/env python3
"""
Moderation service - administrative writes to provider trust state.

Every change is persisted together with an audit row in moderation_action.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core import moderation
from core.moderation import ModerationActionType, ModerationError
from core.search.models import Provider
from database.models import ModerationActionRecord
from database.repositories import SqlProviderRepository, ReportRepository
from ..exceptions import (
    InvalidModerationActionException,
    ProviderNotFoundException,
    ReportNotFoundException,
)
from ..models.requests import (
    BadgeDecisionRequest,
    ModerationActionRequest,
    StatusTransitionRequest,
)
from ..models.responses import (
    ModerationActionResponse,
    ModerationActionSummary,
    ProviderAdminResponse,
)
from ..utils import safe_datetime_iso

logger = logging.getLogger(__name__)


def action_to_summary(record: ModerationActionRecord) -> ModerationActionSummary:
    return ModerationActionSummary(
        id=record.id,
        provider_id=record.provider_id,
        report_id=record.report_id,
        action=record.action,
        reason=record.reason,
        performed_by=record.performed_by,
        performed_at=safe_datetime_iso(record.performed_at),
    )


def provider_admin_response(provider: Provider) -> ProviderAdminResponse:
    return ProviderAdminResponse(
        success=True,
        provider_id=provider.id,
        status=provider.status.value,
        trust_badges=[badge.value for badge in provider.trust.trust_badges],
        community_endorsements=provider.trust.community_endorsements,
    )


class ModerationService:
    """Service for moderator actions on providers."""

    def __init__(self, db: Session):
        self.db = db
        self.providers = SqlProviderRepository(db)
        self.reports = ReportRepository(db)

    def _get_provider(self, provider_id: str) -> Provider:
        provider = self.providers.find_by_id(provider_id)
        if provider is None:
            raise ProviderNotFoundException(f"Provider not found: {provider_id}")
        return provider

    def apply_action(self, provider_id: str, request: ModerationActionRequest) -> ModerationActionResponse:
        """
        Warn, suspend or reinstate a provider.

        When the action references a report, that report is resolved with
        the action as its resolution.

        Raises:
            ProviderNotFoundException: Unknown provider.
            ReportNotFoundException: Unknown report id.
            InvalidModerationActionException: The lifecycle does not allow the
                action, or the report was filed against another provider.
        """
        provider = self._get_provider(provider_id)
        if request.report_id:
            report = self.reports.get_report(request.report_id)
            if report is None:
                raise ReportNotFoundException(f"Report not found: {request.report_id}")
            if report.provider_id != provider_id:
                raise InvalidModerationActionException(
                    f"Report {request.report_id} does not concern provider {provider_id}"
                )

        try:
            updated = moderation.apply_action(provider, request.action)
        except ModerationError as e:
            raise InvalidModerationActionException(str(e))

        if request.action != ModerationActionType.WARNING:
            self.providers.update(updated)
        record = self.reports.create_action(
            provider_id=provider_id,
            action=request.action.value,
            reason=request.reason,
            performed_by=request.performed_by,
            report_id=request.report_id,
        )
        if request.report_id:
            self.reports.update_report_status(
                request.report_id,
                'resolved',
                resolution=f"{request.action.value}: {request.reason}",
            )
        self.providers.commit()

        return ModerationActionResponse(
            success=True,
            action=action_to_summary(record),
            provider_status=updated.status.value,
        )

    def transition_status(self, provider_id: str, request: StatusTransitionRequest) -> ProviderAdminResponse:
        """
        Move a provider through draft, review, approval and activation.

        Raises:
            ProviderNotFoundException: Unknown provider.
            InvalidModerationActionException: Transition not allowed.
        """
        provider = self._get_provider(provider_id)
        try:
            updated = moderation.transition_status(provider, request.status)
        except ModerationError as e:
            raise InvalidModerationActionException(str(e))

        self.providers.update(updated)
        self.reports.create_action(
            provider_id=provider_id,
            action=f"status:{updated.status.value}",
            reason=request.reason or "",
            performed_by=request.performed_by,
        )
        self.providers.commit()
        return provider_admin_response(updated)

    def decide_badge(self, provider_id: str, request: BadgeDecisionRequest) -> ProviderAdminResponse:
        """
        Grant or revoke a trust badge.

        Raises:
            ProviderNotFoundException: Unknown provider.
            InvalidModerationActionException: Verification level too low for the badge.
        """
        provider = self._get_provider(provider_id)
        try:
            if request.granted:
                updated = moderation.approve_badge(provider, request.badge)
            else:
                updated = moderation.revoke_badge(provider, request.badge)
        except ModerationError as e:
            raise InvalidModerationActionException(str(e))

        self.providers.update(updated)
        self.reports.create_action(
            provider_id=provider_id,
            action=f"badge:{request.badge.value}:{'granted' if request.granted else 'revoked'}",
            reason="",
            performed_by=request.performed_by,
        )
        self.providers.commit()
        return provider_admin_response(updated)

    def record_endorsement(self, provider_id: str, withdraw: bool = False) -> ProviderAdminResponse:
        """Count (or withdraw) an approved community vouch."""
        provider = self._get_provider(provider_id)
        if withdraw:
            updated = moderation.withdraw_endorsement(provider)
        else:
            updated = moderation.record_endorsement(provider)
        self.providers.update(updated)
        self.providers.commit()
        return provider_admin_response(updated)

    def get_history(self, provider_id: Optional[str] = None) -> List[ModerationActionSummary]:
        if provider_id:
            self._get_provider(provider_id)
        return [action_to_summary(r) for r in self.reports.list_actions(provider_id)]
