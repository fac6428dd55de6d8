import io
import json
import os
import sys
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

# Set PYTHONPATH to include src if the package is not installed
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from horno_bridge import services
from horno_bridge.config import Settings
from horno_bridge.event_store import EventStore
from horno_bridge.shadow import ShadowGateway


FIXED_TS = datetime(2025, 3, 14, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables to prevent accidental cloud calls."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    monkeypatch.delenv("LOG_MODE", raising=False)
    monkeypatch.delenv("STORE_TIMEOUT_SECONDS", raising=False)


@pytest.fixture(autouse=True)
def clean_services():
    """Every test starts with an empty cache and no shared collaborators."""
    services.reset_services()
    yield
    services.reset_services()


class FakeShadowClient:
    """
    IoT Data Plane stand-in.

    `reported` / `desired` can be changed between calls; every
    get_thing_shadow returns a fresh stream like boto3 does.
    """

    def __init__(self, reported=None, desired=None):
        self.reported = dict(reported or {})
        self.desired = dict(desired or {})
        self.get_thing_shadow = MagicMock(side_effect=self._get_thing_shadow)
        self.update_thing_shadow = MagicMock(return_value={"payload": io.BytesIO(b"{}")})

    def _get_thing_shadow(self, **kwargs):
        document = {"state": {"reported": self.reported, "desired": self.desired}, "version": 7}
        return {"payload": io.BytesIO(json.dumps(document).encode("utf-8"))}


@pytest.fixture
def fixed_ts():
    return FIXED_TS


@pytest.fixture
def shadow_client():
    return FakeShadowClient()


@pytest.fixture
def gateway(shadow_client):
    return ShadowGateway(client=shadow_client)


@pytest.fixture
def store():
    """Event store mock that accepts every record."""
    mock = MagicMock(spec=EventStore)
    mock.insert.return_value = True
    return mock


@pytest.fixture
def settings():
    return Settings(SUPABASE_URL="https://example.supabase.co", SUPABASE_ANON_KEY="anon-key")
