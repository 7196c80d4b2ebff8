"""
Tests for the search orchestrator against the sample dataset and small
hand-built catalogs.
"""

import pytest

from core.search import (
    InMemoryProviderRepository,
    ProviderSearchService,
    SearchFilters,
    SortOption,
    TrustBadgeId,
    search_providers,
)
from core.search.repository import DuplicateProviderError
from tests.fixtures.providers import make_provider

TRUST_ORDER = ["13", "3", "12", "5", "1", "14", "15", "11", "7", "6", "16", "9", "2", "8", "4", "10"]


def _ids(providers):
    return [p.id for p in providers]


@pytest.fixture
def service(sample_providers):
    return ProviderSearchService(InMemoryProviderRepository(sample_providers))


class TestSampleDatasetScenarios:

    def test_no_filters_returns_all_active_by_trust(self, service):
        result = service.search_providers({})
        assert result.total == 16
        assert _ids(result.providers) == TRUST_ORDER
        assert result.page == 1
        assert result.page_size == 20
        assert result.has_more is False

    def test_healthcare_category(self, service):
        result = service.search_providers({"category": "healthcare"})
        assert result.total == 4
        assert sorted(_ids(result.providers)) == ["1", "2", "3", "4"]
        assert all(p.category_id == "healthcare" for p in result.providers)

    def test_nonexistent_query_is_empty_not_error(self, service):
        result = service.search_providers({"query": "xyznonexistent12345"})
        assert result.providers == []
        assert result.total == 0
        assert result.has_more is False

    def test_pages_are_disjoint_and_reconstruct_order(self, service):
        collected = []
        page = 1
        while True:
            result = service.search_providers({}, "trust", page, 5)
            collected.extend(_ids(result.providers))
            if not result.has_more:
                break
            page += 1

        first = set(_ids(service.search_providers({}, "trust", 1, 5).providers))
        second = set(_ids(service.search_providers({}, "trust", 2, 5).providers))
        assert first.isdisjoint(second)
        assert collected == TRUST_ORDER
        assert page == 4

    def test_large_page_has_no_more(self, service):
        result = service.search_providers({}, "trust", 1, 100)
        assert len(result.providers) == 16
        assert result.has_more is False

    def test_total_independent_of_paging(self, service):
        totals = {service.search_providers({"badges": "owned"}, page=p, page_size=3).total for p in (1, 2, 5)}
        assert totals == {10}

    def test_repeated_queries_identical(self, service):
        first = service.search_providers({"location": "CA"}, "rating")
        second = service.search_providers({"location": "CA"}, "rating")
        assert _ids(first.providers) == _ids(second.providers)
        assert first.total == second.total

    def test_sort_does_not_change_membership(self, service):
        filters = {"tags": "trans-affirming"}
        memberships = {
            frozenset(_ids(service.search_providers(filters, sort, page_size=50).providers))
            for sort in SortOption
        }
        assert len(memberships) == 1

    def test_all_badges_filter(self, service):
        result = service.search_providers({"badges": ["verified", "owned", "trained"]})
        assert _ids(result.providers) == ["3", "16"]

    def test_browse_any_badge(self, service):
        result = service.browse_by_badges([TrustBadgeId.TRAINED])
        assert set(_ids(result.providers)) == {"2", "3", "4", "6", "9", "16"}

    def test_browse_without_badges_returns_everything(self, service):
        assert service.browse_by_badges([]).total == 16

    def test_combined_filters(self, service):
        result = service.search_providers(SearchFilters(location="CA", lgbtq_owned=True, virtual=True))
        assert _ids(result.providers) == ["12", "1", "14"]


class TestServiceLookups:

    def test_get_provider_by_id(self, service):
        assert service.get_provider_by_id("3").name == "Dr. Alex Kim"
        assert service.get_provider_by_id("missing") is None

    def test_providers_by_category(self, service):
        assert _ids(service.get_providers_by_category("legal")) == ["5", "7", "6"]

    def test_providers_by_inclusive_tag(self, service):
        assert _ids(service.get_providers_by_inclusive_tag("elder-lgbtq")) == ["14", "8"]
        assert service.get_providers_by_inclusive_tag("not-a-tag") == []

    def test_featured_are_top_trust(self, service):
        assert _ids(service.get_featured_providers()) == TRUST_ORDER[:4]
        assert _ids(service.get_featured_providers(2)) == TRUST_ORDER[:2]

    def test_count_by_category(self, service):
        assert service.count_by_category() == {
            "healthcare": 4, "legal": 3, "financial": 3, "career": 2, "lifestyle": 4,
        }


class TestActiveBaseline:

    def test_inactive_providers_never_returned(self):
        providers = [
            make_provider("a"),
            make_provider("b", status="draft"),
            make_provider("c", status="pending_review"),
            make_provider("d", status="approved"),
            make_provider("e", status="suspended"),
        ]
        result = search_providers(providers)
        assert _ids(result.providers) == ["a"]
        assert result.total == 1

    def test_lookup_still_sees_inactive(self):
        service = ProviderSearchService(InMemoryProviderRepository([make_provider("x", status="suspended")]))
        assert service.get_provider_by_id("x") is not None
        assert service.get_featured_providers() == []

    def test_configured_defaults(self):
        providers = [make_provider(str(i), rating=float(i % 5)) for i in range(1, 8)]
        service = ProviderSearchService(
            InMemoryProviderRepository(providers), default_page_size=3, default_sort="rating"
        )
        result = service.search_providers()
        assert result.page_size == 3
        assert result.has_more is True
        assert _ids(result.providers) == ["4", "3", "2"]

    def test_empty_catalog(self):
        result = search_providers([])
        assert result.total == 0
        assert result.providers == []

    def test_repeated_ids_keep_first_occurrence(self):
        result = search_providers([
            make_provider("1", name="First"),
            make_provider("1", name="Second"),
            make_provider("2"),
        ])
        assert result.total == 2
        assert [p.name for p in result.providers if p.id == "1"] == ["First"]

    def test_search_result_serializes_camel_case(self):
        data = search_providers([make_provider("a")]).model_dump(by_alias=True)
        assert set(data) == {"providers", "total", "page", "pageSize", "hasMore"}
        assert "categoryId" in data["providers"][0]


class TestInMemoryRepository:

    def test_snapshots_are_detached(self):
        repository = InMemoryProviderRepository([make_provider("a", name="Original")])
        snapshot = repository.find_by_id("a")
        snapshot.name = "Changed"
        assert repository.find_by_id("a").name == "Original"

    def test_duplicate_create_rejected(self):
        repository = InMemoryProviderRepository([make_provider("a")])
        with pytest.raises(DuplicateProviderError):
            repository.create(make_provider("a"))

    def test_update_missing_returns_none(self):
        assert InMemoryProviderRepository().update(make_provider("zz")) is None
