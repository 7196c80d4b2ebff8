#!/usr/bin/env python3
"""
Unit tests for the public provider endpoints.
Tests /api/providers search, browse, featured, detail and /api/categories.
"""

TRUST_ORDER = ["13", "3", "12", "5", "1", "14", "15", "11", "7", "6", "16", "9", "2", "8", "4", "10"]


def _ids(payload):
    return [p["id"] for p in payload["providers"]]


class TestSearchEndpoint:

    def test_default_search(self, api_client):
        response = api_client.get("/api/providers")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 16
        assert data["page"] == 1
        assert data["pageSize"] == 20
        assert data["hasMore"] is False
        assert _ids(data) == TRUST_ORDER

    def test_provider_payload_is_camel_case(self, api_client):
        provider = api_client.get("/api/providers", params={"pageSize": 1}).json()["providers"][0]
        assert provider["categoryId"] == "lifestyle"
        assert provider["trust"]["verification"]["level"] == "arcus_verified"
        assert "trustBadges" in provider["trust"]
        assert "zipCode" in provider["location"]

    def test_category_filter(self, api_client):
        data = api_client.get("/api/providers", params={"category": "healthcare"}).json()
        assert data["total"] == 4
        assert {p["categoryId"] for p in data["providers"]} == {"healthcare"}

    def test_no_match_is_empty(self, api_client):
        response = api_client.get("/api/providers", params={"q": "xyznonexistent12345"})
        assert response.status_code == 200
        assert response.json()["providers"] == []
        assert response.json()["total"] == 0

    def test_pagination(self, api_client):
        data = api_client.get("/api/providers", params={"page": 2, "pageSize": 5}).json()
        assert _ids(data) == TRUST_ORDER[5:10]
        assert data["hasMore"] is True
        assert data["total"] == 16

    def test_malformed_params_fall_back(self, api_client):
        response = api_client.get(
            "/api/providers",
            params={"page": "abc", "pageSize": "-3", "sort": "popular", "badges": "gold", "virtual": "nah"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["pageSize"] == 20
        assert _ids(data) == TRUST_ORDER

    def test_badges_must_all_match(self, api_client):
        data = api_client.get("/api/providers", params={"badges": "verified,owned,trained"}).json()
        assert _ids(data) == ["3", "16"]

    def test_combined_filters_and_sort(self, api_client):
        data = api_client.get(
            "/api/providers",
            params={"tags": "trans-affirming", "lgbtqOwned": "true", "sort": "alphabetical"}
        ).json()
        names = [p["name"] for p in data["providers"]]
        assert names == sorted(names, key=str.casefold)
        assert all(p["trust"]["lgbtqOwned"] for p in data["providers"])

    def test_verification_level_exact(self, api_client):
        data = api_client.get("/api/providers", params={"verificationLevel": "self"}).json()
        assert _ids(data) == ["10"]


class TestBrowseEndpoint:

    def test_any_badge(self, api_client):
        data = api_client.get("/api/providers/browse", params={"badges": "trained"}).json()
        assert set(_ids(data)) == {"2", "3", "4", "6", "9", "16"}

    def test_ignores_other_filters(self, api_client):
        data = api_client.get("/api/providers/browse", params={"badges": "trained", "category": "legal"}).json()
        assert data["total"] == 6

    def test_no_badges_returns_all(self, api_client):
        assert api_client.get("/api/providers/browse").json()["total"] == 16


class TestFeaturedEndpoint:

    def test_default_limit(self, api_client):
        data = api_client.get("/api/providers/featured").json()
        assert _ids(data) == TRUST_ORDER[:4]
        assert data["total"] == 4

    def test_custom_limit(self, api_client):
        assert _ids(api_client.get("/api/providers/featured", params={"limit": 2}).json()) == TRUST_ORDER[:2]

    def test_invalid_limit_rejected(self, api_client):
        assert api_client.get("/api/providers/featured", params={"limit": 0}).status_code == 422


class TestProviderDetail:

    def test_detail_with_trust_breakdown(self, api_client):
        response = api_client.get("/api/providers/3")
        assert response.status_code == 200
        data = response.json()
        assert data["provider"]["name"] == "Dr. Alex Kim"
        assert data["trust"]["trustScore"] == 4
        assert data["trust"]["communityEndorsements"] == 67
        assert data["trust"]["badgeCount"] == 4
        assert data["trust"]["lgbtqOwned"] is True

    def test_unknown_provider(self, api_client):
        response = api_client.get("/api/providers/nope")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["type"] == "ProviderNotFoundException"


class TestCatalogEndpoint:

    def test_catalog(self, api_client):
        response = api_client.get("/api/categories")
        assert response.status_code == 200
        data = response.json()
        counts = {c["id"]: c["provider_count"] for c in data["categories"]}
        assert counts == {"healthcare": 4, "legal": 3, "financial": 3, "career": 2, "lifestyle": 4}
        assert len(data["trustBadges"]) == 4
        assert len(data["inclusiveTags"]) == 14
        assert [v["level"] for v in data["verificationLevels"]][-1] == "arcus_verified"
        assert len(data["reportReasons"]) == 7


class TestHealth:

    def test_health(self, api_client):
        assert api_client.get("/health").json()["status"] == "healthy"
