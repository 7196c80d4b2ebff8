import logging
from typing import List, Optional

from sqlalchemy import select

from core.search.models import Provider, ProviderStatus
from core.search.repository import DuplicateProviderError, ProviderRepository
from database.models import ProviderRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def provider_to_record(provider: Provider, record: Optional[ProviderRecord] = None) -> ProviderRecord:
    data = provider.model_dump(mode='json', by_alias=True)
    record = record or ProviderRecord(id=provider.id)
    record.name = provider.name
    record.business_name = provider.business_name
    record.category_id = provider.category_id
    record.subcategory = provider.subcategory
    record.description = provider.description
    record.short_bio = provider.short_bio
    record.pronouns = provider.pronouns
    record.year_established = provider.year_established
    record.specialties = list(provider.specialties)
    record.languages = list(provider.languages)
    record.location = data['location']
    record.contact = data['contact']
    record.trust = data['trust']
    record.status = provider.status.value
    record.rating = provider.rating
    record.review_count = provider.review_count
    record.created_at = provider.created_at
    record.updated_at = provider.updated_at
    return record


def record_to_provider(record: ProviderRecord) -> Provider:
    return Provider.model_validate({
        'id': record.id,
        'name': record.name,
        'business_name': record.business_name,
        'category_id': record.category_id,
        'subcategory': record.subcategory or '',
        'description': record.description or '',
        'short_bio': record.short_bio or '',
        'pronouns': record.pronouns,
        'year_established': record.year_established,
        'specialties': record.specialties or [],
        'languages': record.languages or [],
        'location': record.location,
        'contact': record.contact or {},
        'trust': record.trust or {},
        'status': record.status,
        'rating': record.rating,
        'review_count': record.review_count,
        'created_at': record.created_at,
        'updated_at': record.updated_at,
    })


class SqlProviderRepository(BaseRepository, ProviderRepository):
    """SQLAlchemy-backed provider store. Callers own the transaction (commit/rollback)."""

    def find_all(self) -> List[Provider]:
        stmt = select(ProviderRecord).order_by(ProviderRecord.id)
        return [record_to_provider(r) for r in self.db.execute(stmt).scalars().all()]

    def find_all_active(self) -> List[Provider]:
        stmt = select(ProviderRecord).where(
            ProviderRecord.status == ProviderStatus.ACTIVE.value
        ).order_by(ProviderRecord.id)
        return [record_to_provider(r) for r in self.db.execute(stmt).scalars().all()]

    def find_by_id(self, provider_id: str) -> Optional[Provider]:
        record = self.db.get(ProviderRecord, provider_id)
        return record_to_provider(record) if record else None

    def create(self, provider: Provider) -> Provider:
        if self.db.get(ProviderRecord, provider.id) is not None:
            raise DuplicateProviderError(f"Provider {provider.id} already exists")
        self.db.add(provider_to_record(provider))
        self.db.flush()
        logger.info(f"Created provider {provider.id} ({provider.name})")
        return provider.model_copy(deep=True)

    def update(self, provider: Provider) -> Optional[Provider]:
        record = self.db.get(ProviderRecord, provider.id)
        if record is None:
            return None
        provider_to_record(provider, record)
        self.db.flush()
        return provider.model_copy(deep=True)

    def count(self) -> int:
        return self.db.query(ProviderRecord).count()
