"""
Provider builders for tests.

make_provider() returns an active provider with neutral trust values;
override only what the test is about.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from core.search.models import Provider


def make_provider(provider_id: str = "p1", **overrides: Any) -> Provider:
    trust: Dict[str, Any] = {
        "verification": {"level": "credential"},
        "trust_badges": [],
        "inclusive_tags": [],
        "lgbtq_owned": False,
        "community_endorsements": 0,
    }
    trust.update(overrides.pop("trust", {}))

    data: Dict[str, Any] = {
        "id": provider_id,
        "name": f"Provider {provider_id}",
        "category_id": "healthcare",
        "subcategory": "Primary Care",
        "description": "General practice",
        "location": {"city": "Austin", "state": "TX", "virtual": False},
        "trust": trust,
        "status": "active",
        "rating": 4.5,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Provider.model_validate(data)


def make_trusted(provider_id: str, level: str, endorsements: int = 0, badges=(), lgbtq_owned: bool = False,
                 **overrides: Any) -> Provider:
    return make_provider(
        provider_id,
        trust={
            "verification": {"level": level},
            "community_endorsements": endorsements,
            "trust_badges": list(badges),
            "lgbtq_owned": lgbtq_owned,
        },
        **overrides,
    )
