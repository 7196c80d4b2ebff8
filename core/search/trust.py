#!/usr/bin/env python3
"""
Trust Scoring - deterministic trust ordering for providers.

Ranking components, in priority order:
1. Verification level trust score (0-4)
2. Community endorsements (vouches)
3. Number of trust badges
4. LGBTQ+ owned flag (owned businesses win among otherwise-equal providers)
5. Provider id ascending, for reproducible ordering

All functions are pure functions of the provider snapshot.
"""

from typing import Any, Dict, Tuple

from core.search.models import Provider, VerificationLevel


def trust_score(level: VerificationLevel) -> int:
    """Trust score (0-4) for a verification level."""
    return VerificationLevel(level).trust_score


def trust_rank(provider: Provider) -> Tuple[int, int, int, bool, str]:
    """
    Build the ascending sort key that yields descending trust order.

    Higher-trust providers produce smaller keys, so
    ``sorted(providers, key=trust_rank)`` lists the most trusted first.

    Args:
        provider: Provider snapshot.

    Returns:
        Tuple of (-score, -endorsements, -badge_count, not_owned, id).
    """
    trust = provider.trust
    return (
        -trust_score(trust.verification.level),
        -trust.community_endorsements,
        -len(trust.trust_badges),
        not trust.lgbtq_owned,
        provider.id,
    )


def explain_trust(provider: Provider) -> Dict[str, Any]:
    """
    Break the trust rank down into its components for display.

    Returns:
        Dict with the verification level, its score and each tie-break input.
    """
    trust = provider.trust
    level = VerificationLevel(trust.verification.level)
    return {
        'verification_level': level.value,
        'trust_score': level.trust_score,
        'community_endorsements': trust.community_endorsements,
        'badge_count': len(trust.trust_badges),
        'badges': [badge.value for badge in trust.trust_badges],
        'lgbtq_owned': trust.lgbtq_owned,
        'verified_at': trust.verification.verified_at.isoformat() if trust.verification.verified_at else None,
        'verification_method': trust.verification.method,
    }
