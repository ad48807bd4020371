"""Tests for the HTTP API."""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from shared.exceptions import (
    ConsoleError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)
from modules.session.service import SessionGuard
from modules.session.store import MemorySessionStore
from modules.session.exceptions import ExpiredSessionError
from modules.console.exceptions import DialogStateError
from api.app import app, status_for
from api.dependencies import ServiceContainer, get_container, reset_container

from tests.conftest import create_session_record


@pytest.fixture
def container(settings, guard, notifier, account_service, post_service, feed) -> ServiceContainer:
    """Container wired to the in-memory fakes."""
    return ServiceContainer(
        settings=settings,
        guard=guard,
        notifier=notifier,
        accounts=account_service,
        posts=post_service,
        feed=feed,
    )


@pytest.fixture
def client(container):
    """Test client sharing one event loop across requests."""
    app.dependency_overrides[get_container] = lambda: container
    with TestClient(app) as client:
        yield client
        client.portal.call(container.close)
    app.dependency_overrides.clear()
    reset_container()


class TestStatusMapping:
    @pytest.mark.parametrize(
        "error,status",
        [
            (ExpiredSessionError(), 401),
            (NotFoundError("x"), 404),
            (DialogStateError("edit-post", "submitting", "close"), 409),
            (ValidationError("x"), 422),
            (ExternalServiceError("x", service="supabase"), 502),
            (ConsoleError("x"), 400),
        ],
    )
    def test_status_for(self, error, status):
        assert status_for(error) == status


class TestHealth:
    def test_health_needs_no_session(self, client, session_store):
        session_store.clear()

        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSession:
    def test_get_session(self, client):
        response = client.get("/api/session")

        assert response.status_code == 200
        assert response.json() == {"id": "admin-1", "email": "admin@example.com", "full_name": "Admin"}

    def test_missing_session(self, client, session_store):
        session_store.clear()

        response = client.get("/api/accounts")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Session"
        assert response.json()["error"] == "MISSING_SESSION"

    def test_expired_session_is_cleared(self, client, container, session_store):
        container.guard = SessionGuard(session_store, ttl=timedelta(0))

        response = client.get("/api/stats")

        assert response.status_code == 401
        assert response.json()["error"] == "SESSION_EXPIRED"
        assert session_store.load() is None

    def test_expiry_closes_the_console(self, client, session_store, feed):
        """Subscriptions end with the session that opened them."""
        assert client.get("/api/accounts").status_code == 200
        assert feed.active == 2
        stale = datetime.now(timezone.utc) - timedelta(hours=25)
        session_store.save(create_session_record(login_time=stale))

        response = client.get("/api/accounts")

        assert response.status_code == 401
        assert response.json()["error"] == "SESSION_EXPIRED"
        assert feed.active == 0
        assert len(feed.unsubscribed) == 2

    def test_sign_out(self, client, session_store, feed):
        assert client.get("/api/accounts").status_code == 200
        assert feed.active == 2

        response = client.post("/api/session/sign-out")

        assert response.status_code == 204
        assert session_store.load() is None
        assert feed.active == 0
        assert client.get("/api/session").status_code == 401


class TestAccounts:
    def test_list_newest_first(self, client):
        response = client.get("/api/accounts")

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == ["acct-2", "acct-1"]

    def test_create(self, client, identity):
        response = client.post(
            "/api/accounts",
            json={"email": "new@example.com", "password": "secret", "full_name": "New"},
        )

        assert response.status_code == 202
        assert response.json() == {"id": "acct-new-1"}
        assert identity.created[0]["email"] == "new@example.com"

    def test_create_missing_password(self, client, identity):
        response = client.post("/api/accounts", json={"email": "new@example.com"})

        assert response.status_code == 422
        assert response.json()["error"] == "ACCOUNT_VALIDATION_FAILED"
        assert identity.created == []

    def test_create_identity_failure(self, client, identity):
        identity.fail_create = "User already registered"

        response = client.post("/api/accounts", json={"email": "a@example.com", "password": "pw"})

        assert response.status_code == 502
        assert response.json()["details"]["service"] == "supabase_auth"

    def test_upgrade_to_premium(self, client):
        response = client.patch("/api/accounts/acct-1", json={"subscription_tier": "premium"})

        assert response.status_code == 200
        body = response.json()
        assert body["subscription_tier"] == "premium"
        assert body["subscription_end"] is not None
        assert body["full_name"] == "Old User"

    def test_set_premium_end_date(self, client):
        response = client.patch(
            "/api/accounts/acct-1",
            json={"subscription_tier": "premium", "subscription_end": "2027-06-30T00:00:00Z"},
        )

        assert response.status_code == 200
        assert response.json()["subscription_end"].startswith("2027-06-30T00:00:00")

    def test_update_unknown(self, client):
        response = client.patch("/api/accounts/nope", json={"full_name": "X"})

        assert response.status_code == 404
        assert response.json()["error"] == "ACCOUNT_NOT_FOUND"

    def test_delete_requires_confirm(self, client, account_repository):
        response = client.delete("/api/accounts/acct-1")

        assert response.status_code == 422
        assert response.json()["error"] == "DELETE_NOT_CONFIRMED"
        assert "acct-1" in account_repository.rows

    def test_delete(self, client, account_repository):
        response = client.delete("/api/accounts/acct-1", params={"confirm": "true"})

        assert response.status_code == 204
        assert "acct-1" not in account_repository.rows
        assert [a["id"] for a in client.get("/api/accounts").json()] == ["acct-2"]


class TestPosts:
    def test_create_returns_refetched_list(self, client):
        response = client.post("/api/posts", json={"title": "New", "content": "Body"})

        assert response.status_code == 201
        posts = response.json()
        assert posts[0]["id"] == "post-new-1"
        assert posts[0]["excerpt"] == "Body..."

    def test_create_invalid(self, client):
        response = client.post("/api/posts", json={"title": "New"})

        assert response.status_code == 422
        assert response.json()["error"] == "POST_VALIDATION_FAILED"

    def test_update(self, client):
        response = client.patch("/api/posts/post-1", json={"published": True})

        assert response.status_code == 200
        assert response.json()["published"] is True
        assert response.json()["title"] == "First"

    def test_update_store_failure(self, client, post_repository):
        post_repository.fail("update")

        response = client.patch("/api/posts/post-1", json={"title": "X"})

        assert response.status_code == 502
        assert response.json()["error"] == "RECORD_STORE_ERROR"

    def test_delete(self, client, post_repository):
        response = client.delete("/api/posts/post-2", params={"confirm": True})

        assert response.status_code == 204
        assert "post-2" not in post_repository.rows


class TestDashboard:
    def test_stats(self, client):
        response = client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {
            "total_users": 2,
            "premium_users": 1,
            "total_posts": 2,
            "published_posts": 1,
            "total_revenue": 9,
        }

    def test_refresh(self, client, post_repository):
        client.get("/api/stats")
        post_repository.rows.clear()

        response = client.post("/api/refresh")

        assert response.json()["total_posts"] == 0

    def test_notifications_are_drained(self, client):
        client.delete("/api/posts/post-1", params={"confirm": True})

        first = client.get("/api/notifications").json()
        second = client.get("/api/notifications").json()

        assert [n["message"] for n in first] == ["Blog deleted successfully"]
        assert second == []


class TestConsoleReuse:
    def test_console_is_shared_between_requests(self, client, feed):
        client.get("/api/accounts")
        client.get("/api/posts")
        client.get("/api/stats")

        assert len(feed.subscribed) == 2
