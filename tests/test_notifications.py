import pytest
from fastapi.testclient import TestClient

from spurgeon_daily.deps import get_preferences
from spurgeon_daily.main import app
from spurgeon_daily.notifications import (
    AuthorizationStatus,
    NotificationPreferences,
    env_authorizer,
)

client = TestClient(app)


@pytest.fixture
def prefs():
    fresh = NotificationPreferences()
    app.dependency_overrides[get_preferences] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_preferences, None)


def test_starts_undetermined_and_disabled():
    state = NotificationPreferences().state()
    assert state.authorization == AuthorizationStatus.NOT_DETERMINED
    assert state.enabled is False
    assert state.options == ["alert", "badge", "sound"]


def test_request_authorization_granted_and_denied():
    p = NotificationPreferences()
    assert p.request_authorization(env_authorizer(True)) == AuthorizationStatus.GRANTED
    assert p.request_authorization(env_authorizer(False)) == AuthorizationStatus.DENIED


def test_failing_authorizer_counts_as_denied():
    def boom(options):
        raise RuntimeError("no notification center")

    assert NotificationPreferences().request_authorization(boom) == AuthorizationStatus.DENIED


def test_toggle_round_trip(prefs):
    r = client.put("/notifications", json={"enabled": True})
    assert r.status_code == 200
    assert r.json()["enabled"] is True
    assert prefs.enabled is True

    r = client.get("/notifications")
    assert r.json()["enabled"] is True


def test_toggle_shows_on_main_view(prefs, use_service, year_service):
    use_service(year_service)
    prefs.set_enabled(True)
    assert client.get("/today").json()["notifications_enabled"] is True


def test_toggle_requires_bool(prefs):
    r = client.put("/notifications", json={"enabled": "maybe"})
    assert r.status_code == 422
