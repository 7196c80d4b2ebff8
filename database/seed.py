"""
Sample provider dataset used for local development and tests.

The bundled JSON holds sixteen active providers across the five service
categories in wire (camelCase) format.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from core.search.models import Provider
from core.search.repository import ProviderRepository

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).parent / 'data' / 'providers.json'


def load_seed_providers(path: Optional[Path] = None) -> List[Provider]:
    """Parse the seed file into Provider models."""
    with open(path or SEED_PATH, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    return [Provider.model_validate(item) for item in raw]


def seed_providers(repository: ProviderRepository, path: Optional[Path] = None) -> int:
    """
    Insert seed providers that are not already stored.

    Safe to call repeatedly; existing ids are left untouched.

    Returns:
        Number of providers inserted.
    """
    inserted = 0
    for provider in load_seed_providers(path):
        if repository.find_by_id(provider.id) is None:
            repository.create(provider)
            inserted += 1

    if inserted:
        logger.info(f"Seeded {inserted} providers")
    return inserted


def main():
    """Create tables and load the sample providers into the configured database."""
    from database.database import init_db
    from database.uow import provider_uow

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    init_db()
    with provider_uow() as uow:
        inserted = seed_providers(uow.providers)
    logger.info(f"Seed complete: {inserted} new providers")


if __name__ == "__main__":
    main()
