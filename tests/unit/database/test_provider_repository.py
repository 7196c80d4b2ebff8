"""
Tests for the SQL provider repository against in-memory SQLite.
"""

import pytest

from core.search import ProviderSearchService, ProviderStatus, TrustBadgeId
from core.search.repository import DuplicateProviderError
from database.models import ProviderRecord
from database.repositories import SqlProviderRepository
from database.repositories.provider import provider_to_record, record_to_provider
from tests.fixtures.providers import make_provider, make_trusted


class TestRecordMapping:

    def test_round_trip_preserves_nested_fields(self):
        provider = make_trusted(
            "p1", "community", endorsements=4, badges=["verified", "owned"], lgbtq_owned=True,
            specialties=["EMDR"], languages=["English", "Spanish"], pronouns="they/them",
        )
        restored = record_to_provider(provider_to_record(provider))
        assert restored.model_dump() == provider.model_dump()

    def test_nested_json_uses_wire_keys(self):
        record = provider_to_record(make_provider("p1", trust={"lgbtq_owned": True}))
        assert record.trust["lgbtqOwned"] is True
        assert record.location["city"] == "Austin"
        assert record.status == "active"


class TestSqlProviderRepository:

    @pytest.fixture
    def repository(self, db_session):
        return SqlProviderRepository(db_session)

    def test_create_and_find(self, repository):
        repository.create(make_provider("a", name="Alpha"))
        found = repository.find_by_id("a")
        assert found.name == "Alpha"
        assert found.created_at.tzinfo is not None
        assert repository.find_by_id("missing") is None

    def test_duplicate_create_rejected(self, repository):
        repository.create(make_provider("a"))
        with pytest.raises(DuplicateProviderError):
            repository.create(make_provider("a"))

    def test_find_all_active_filters_in_sql(self, repository):
        repository.create(make_provider("a"))
        repository.create(make_provider("b", status="suspended"))
        repository.create(make_provider("c", status="draft"))
        assert [p.id for p in repository.find_all_active()] == ["a"]
        assert [p.id for p in repository.find_all()] == ["a", "b", "c"]
        assert repository.count() == 3

    def test_update(self, repository):
        repository.create(make_provider("a"))
        provider = repository.find_by_id("a")
        changed = provider.model_copy(update={"status": ProviderStatus.SUSPENDED})
        repository.update(changed)
        assert repository.find_by_id("a").status == ProviderStatus.SUSPENDED

    def test_update_missing_returns_none(self, repository):
        assert repository.update(make_provider("ghost")) is None

    def test_returned_snapshots_are_detached(self, repository):
        repository.create(make_provider("a", trust={"trust_badges": ["owned"]}))
        snapshot = repository.find_by_id("a")
        snapshot.trust.trust_badges.append(TrustBadgeId.VERIFIED)
        assert repository.find_by_id("a").trust.trust_badges == [TrustBadgeId.OWNED]

    def test_record_stored_with_indexes_columns(self, repository, db_session):
        repository.create(make_provider("a", category_id="legal"))
        record = db_session.get(ProviderRecord, "a")
        assert record.category_id == "legal"


class TestSearchOverSql:

    def test_sample_search_matches_in_memory(self, seeded_session, sample_providers):
        from core.search import search_providers

        service = ProviderSearchService(SqlProviderRepository(seeded_session))
        sql_result = service.search_providers({"tags": "trans-affirming"}, "rating", 1, 5)
        memory_result = search_providers(sample_providers, {"tags": "trans-affirming"}, "rating", 1, 5)

        assert [p.id for p in sql_result.providers] == [p.id for p in memory_result.providers]
        assert sql_result.total == memory_result.total
        assert sql_result.has_more == memory_result.has_more

    def test_suspended_provider_drops_out_of_search(self, seeded_session):
        repository = SqlProviderRepository(seeded_session)
        provider = repository.find_by_id("13")
        repository.update(provider.model_copy(update={"status": ProviderStatus.SUSPENDED}))
        seeded_session.commit()

        result = ProviderSearchService(repository).search_providers()
        assert result.total == 15
        assert "13" not in [p.id for p in result.providers]
