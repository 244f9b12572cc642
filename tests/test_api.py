"""
Integration tests for the HTTP API (/api/v1/...).
"""

import pytest

API = "/api/v1"


def contact_form(**overrides):
    data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "subject": "New website",
        "message": "We need a new website.",
        "budgetRange": "50k-plus",
        "timeline": "asap",
        "serviceInterest": ["Web Development"],
    }
    data.update(overrides)
    return data


class TestAuthorization:
    def test_admin_route_without_token_is_401(self, client):
        response = client.get(f"{API}/contacts/")
        assert response.status_code == 401

    def test_admin_route_with_unknown_token_is_403(self, client, admin_token):
        response = client.get(f"{API}/contacts/", headers={"Authorization": "Bearer wrong"})
        assert response.status_code == 403

    def test_admin_route_with_configured_token(self, client, admin_headers):
        response = client.get(f"{API}/contacts/", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_no_configured_tokens_means_no_admin(self, client):
        response = client.post(f"{API}/seed/", headers={"Authorization": "Bearer anything"})
        assert response.status_code == 403


class TestServices:
    def test_crud_round_trip(self, client, admin_headers):
        payload = {"title": "Web", "description": "Sites", "icon": "code", "category": "development"}
        created = client.post(f"{API}/services/", json=payload, headers=admin_headers)
        assert created.status_code == 201
        body = created.json()
        assert body["isActive"] is True
        assert body["sortOrder"] == 1
        service_id = body["id"]

        assert client.get(f"{API}/services/{service_id}").json()["title"] == "Web"

        patched = client.patch(f"{API}/services/{service_id}", json={"title": "Web Apps"}, headers=admin_headers)
        assert patched.json()["title"] == "Web Apps"

        toggled = client.post(f"{API}/services/{service_id}/toggle", headers=admin_headers)
        assert toggled.json()["isActive"] is False
        assert client.get(f"{API}/services/").json() == []
        assert len(client.get(f"{API}/services/all", headers=admin_headers).json()) == 1

        assert client.delete(f"{API}/services/{service_id}", headers=admin_headers).status_code == 204
        assert client.get(f"{API}/services/{service_id}").status_code == 404

    def test_create_requires_admin(self, client):
        payload = {"title": "Web", "description": "Sites", "icon": "code", "category": "development"}
        assert client.post(f"{API}/services/", json=payload).status_code == 401

    def test_invalid_category_is_422(self, client, admin_headers):
        payload = {"title": "Web", "description": "Sites", "icon": "code", "category": "gardening"}
        assert client.post(f"{API}/services/", json=payload, headers=admin_headers).status_code == 422

    def test_reorder_with_unknown_id_is_400(self, client, admin_headers):
        response = client.put(f"{API}/services/reorder", json={"serviceIds": ["missing"]}, headers=admin_headers)
        assert response.status_code == 400


class TestContacts:
    def test_public_submission_and_admin_inbox(self, client, admin_headers):
        submitted = client.post(f"{API}/contacts/", json=contact_form())
        assert submitted.status_code == 201
        contact_id = submitted.json()["id"]

        contact = client.get(f"{API}/contacts/{contact_id}", headers=admin_headers).json()
        assert contact["priority"] == "urgent"
        assert contact["status"] == "new"
        assert contact["isRead"] is False
        assert contact["serviceInterest"] == ["Web Development"]

        status = client.put(f"{API}/contacts/{contact_id}/status", json={"status": "contacted"}, headers=admin_headers)
        assert status.json()["respondedAt"] is not None

        read = client.put(f"{API}/contacts/{contact_id}/read", json={}, headers=admin_headers)
        assert read.json()["isRead"] is True

        notes = client.post(f"{API}/contacts/{contact_id}/notes", json={"notes": "Called"}, headers=admin_headers)
        assert notes.json()["notes"].endswith("] Called")

        stats = client.get(f"{API}/contacts/stats", headers=admin_headers).json()
        assert stats["total"] == 1
        assert stats["contacted"] == 1

    @pytest.mark.parametrize(
        "overrides",
        [{"email": "nope"}, {"name": "  "}, {"message": "x" * 5001}, {"timeline": "someday"}],
    )
    def test_invalid_submission_is_422(self, client, overrides):
        assert client.post(f"{API}/contacts/", json=contact_form(**overrides)).status_code == 422

    def test_unknown_contact_is_404(self, client, admin_headers):
        response = client.put(f"{API}/contacts/missing/priority", json={"priority": "low"}, headers=admin_headers)
        assert response.status_code == 404

    def test_filter_by_status(self, client, admin_headers):
        client.post(f"{API}/contacts/", json=contact_form())
        assert client.get(f"{API}/contacts/?status=closed", headers=admin_headers).json() == []
        assert len(client.get(f"{API}/contacts/?status=new&unreadOnly=true", headers=admin_headers).json()) == 1


class TestAnalytics:
    def test_track_event_is_public(self, client, admin_headers):
        response = client.post(
            f"{API}/analytics/events",
            json={"event": "service_inquiry", "path": "/services", "metadata": {"serviceName": "Web"}},
        )
        assert response.status_code == 201

        events = client.get(f"{API}/analytics/events?event=service_inquiry", headers=admin_headers).json()
        assert len(events) == 1
        assert events[0]["metadata"] == {"serviceName": "Web"}
        assert "timestamp" in events[0]

    def test_bad_metadata_is_422(self, client):
        response = client.post(f"{API}/analytics/events", json={"event": "portfolio_view", "metadata": {}})
        assert response.status_code == 422

    def test_real_time_serialises_recent_events(self, client, admin_headers):
        client.post(f"{API}/analytics/events", json={"event": "page_view", "path": "/", "sessionId": "abc"})

        data = client.get(f"{API}/analytics/real-time", headers=admin_headers).json()

        assert data["last24Hours"] == 1
        assert data["recentEvents"][0]["sessionId"] == "abc"

    def test_reads_require_admin(self, client):
        assert client.get(f"{API}/analytics/dashboard").status_code == 401


class TestSite:
    def test_seed_then_stats(self, client, admin_headers):
        seeded = client.post(f"{API}/seed/", headers=admin_headers)
        assert seeded.status_code == 200
        assert seeded.json()["services"] == 3

        overview = client.get(f"{API}/site/stats").json()["overview"]
        assert overview["totalServices"] == 3
        assert overview["totalProjects"] == 8
        assert overview["totalTestimonials"] == 5
        assert overview["totalContacts"] == 3

        cleared = client.delete(f"{API}/seed/", headers=admin_headers).json()
        assert cleared["services"] == 3
        assert client.get(f"{API}/site/stats").json()["overview"]["totalServices"] == 0

    def test_health(self, client):
        health = client.get(f"{API}/site/health").json()
        assert health["status"] == "healthy"
        assert health["database"]["connected"] is True

    def test_search_hides_contacts_from_visitors(self, client, admin_headers):
        client.post(f"{API}/seed/contacts", headers=admin_headers)
        client.post(f"{API}/seed/services", headers=admin_headers)

        public = client.get(f"{API}/site/search", params={"q": "ai"}).json()
        assert public["contacts"] == []
        assert "AI & Machine Learning" in [s["title"] for s in public["services"]]

        admin = client.get(f"{API}/site/search", params={"q": "garcia"}, headers=admin_headers).json()
        assert [c["name"] for c in admin["contacts"]] == ["Robert Garcia"]

    def test_popular_and_trending_shapes(self, client):
        popular = client.get(f"{API}/site/popular").json()
        assert set(popular) == {"popularPages", "popularServices", "popularProjects"}

        trending = client.get(f"{API}/site/trending?days=7").json()
        assert trending["totalInquiries"] == 0

    def test_configuration(self, client):
        assert client.get(f"{API}/site/configuration").json()["site"]["name"] == "Veritron"
