#!/usr/bin/env python3
"""
Moderation write paths for provider trust state.

Status transitions, badge approval and vouch counting. These are the only
writers of the fields search ranks on; search simply reads whatever has been
committed. Every function returns an updated copy and leaves its input
untouched; callers persist the copy through a ProviderRepository.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Set

from core.search.models import Provider, ProviderStatus, TrustBadgeId, VerificationLevel

logger = logging.getLogger(__name__)


class ModerationError(Exception):
    """Base class for rejected moderation operations."""
    pass


class InvalidTransitionError(ModerationError):
    pass


class BadgeRequirementError(ModerationError):
    pass


class ModerationActionType(str, Enum):
    WARNING = "warning"
    SUSPEND = "suspend"
    REINSTATE = "reinstate"


ALLOWED_TRANSITIONS: Dict[ProviderStatus, Set[ProviderStatus]] = {
    ProviderStatus.DRAFT: {ProviderStatus.PENDING_REVIEW},
    ProviderStatus.PENDING_REVIEW: {ProviderStatus.APPROVED, ProviderStatus.SUSPENDED, ProviderStatus.DRAFT},
    ProviderStatus.APPROVED: {ProviderStatus.ACTIVE, ProviderStatus.SUSPENDED},
    ProviderStatus.ACTIVE: {ProviderStatus.SUSPENDED},
    ProviderStatus.SUSPENDED: {ProviderStatus.ACTIVE, ProviderStatus.PENDING_REVIEW},
}

# The verified badge requires independently checked credentials
BADGE_MIN_LEVEL: Dict[TrustBadgeId, VerificationLevel] = {
    TrustBadgeId.VERIFIED: VerificationLevel.CREDENTIAL,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _with_trust(provider: Provider, **changes) -> Provider:
    trust = provider.trust.model_copy(update=changes)
    return provider.model_copy(update={'trust': trust, 'updated_at': _now()}, deep=True)


def can_transition(current: ProviderStatus, target: ProviderStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


def transition_status(provider: Provider, target: ProviderStatus) -> Provider:
    """
    Move a provider to a new lifecycle status.

    Raises:
        InvalidTransitionError: If the lifecycle does not allow the move.
    """
    target = ProviderStatus(target)
    if not can_transition(provider.status, target):
        raise InvalidTransitionError(
            f"Cannot move provider {provider.id} from {provider.status.value} to {target.value}"
        )
    logger.info(f"Provider {provider.id}: {provider.status.value} -> {target.value}")
    return provider.model_copy(update={'status': target, 'updated_at': _now()}, deep=True)


def apply_action(provider: Provider, action: ModerationActionType) -> Provider:
    """Apply a moderation action. Warnings leave status unchanged."""
    action = ModerationActionType(action)
    if action == ModerationActionType.SUSPEND:
        return transition_status(provider, ProviderStatus.SUSPENDED)
    if action == ModerationActionType.REINSTATE:
        return transition_status(provider, ProviderStatus.ACTIVE)
    return provider.model_copy(deep=True)


def approve_badge(provider: Provider, badge: TrustBadgeId) -> Provider:
    """
    Grant a trust badge.

    Raises:
        BadgeRequirementError: If the provider's verification level is too low.
    """
    badge = TrustBadgeId(badge)
    required = BADGE_MIN_LEVEL.get(badge)
    level = provider.trust.verification.level
    if required is not None and level < required:
        raise BadgeRequirementError(
            f"Badge {badge.value} requires {required.value} verification, provider {provider.id} is {level.value}"
        )

    if badge in provider.trust.trust_badges:
        return provider.model_copy(deep=True)
    return _with_trust(provider, trust_badges=[*provider.trust.trust_badges, badge])


def revoke_badge(provider: Provider, badge: TrustBadgeId) -> Provider:
    badge = TrustBadgeId(badge)
    return _with_trust(provider, trust_badges=[b for b in provider.trust.trust_badges if b != badge])


def record_endorsement(provider: Provider) -> Provider:
    """Count an approved community vouch."""
    return _with_trust(provider, community_endorsements=provider.trust.community_endorsements + 1)


def withdraw_endorsement(provider: Provider) -> Provider:
    return _with_trust(provider, community_endorsements=max(provider.trust.community_endorsements - 1, 0))
