import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from horno_bridge.config import Settings
from horno_bridge.core.exceptions import ConfigurationError
from horno_bridge.core.models import EventRecord, ReadingRecord
from horno_bridge.event_store import EventStore


@pytest.fixture
def session():
    mock = MagicMock()
    mock.post.return_value = MagicMock(status_code=201, reason="Created", text="")
    return mock


@pytest.fixture
def reading(fixed_ts):
    return ReadingRecord(
        signal_id="AI..4:1-1",
        sensor="Temperatura vulcanizadora",
        valor=180.5,
        unidad="°C",
        timestamp=fixed_ts,
    )


@pytest.fixture
def event(fixed_ts):
    return EventRecord(
        maquina="Horno centrifugo",
        modo_operacion="manual",
        comentario="Pistón activado",
        signal_id="Q..1:10-1",
        timestamp=fixed_ts,
    )


def test_posts_reading_to_table(settings, session, reading):
    store = EventStore(settings, session=session)

    assert store.insert(reading) is True

    args, kwargs = session.post.call_args
    assert args[0] == "https://example.supabase.co/rest/v1/eventos_industriales"
    assert kwargs["headers"] == {
        "Content-Type": "application/json",
        "apikey": "anon-key",
        "Authorization": "Bearer anon-key",
    }
    assert kwargs["timeout"] == 10
    body = json.loads(kwargs["data"].decode("utf-8"))
    assert body == {
        "tipo": "lectura",
        "signal_id": "AI..4:1-1",
        "sensor": "Temperatura vulcanizadora",
        "valor": 180.5,
        "unidad": "°C",
        "timestamp": "2025-03-14T10:30:00Z",
    }


def test_event_body_uses_spanish_columns(settings, session, event):
    EventStore(settings, session=session).insert(event)

    body = json.loads(session.post.call_args.kwargs["data"])
    assert body == {
        "tipo": "evento",
        "maquina": "Horno centrifugo",
        "modo_operacion": "manual",
        "comentario": "Pistón activado",
        "signal_id": "Q..1:10-1",
        "timestamp": "2025-03-14T10:30:00Z",
    }


def test_trailing_slash_and_custom_table(session, reading):
    settings = Settings(SUPABASE_URL="https://x.supabase.co/", SUPABASE_ANON_KEY="k", EVENT_TABLE="eventos_test")
    EventStore(settings, session=session).insert(reading)
    assert session.post.call_args.args[0] == "https://x.supabase.co/rest/v1/eventos_test"


@pytest.mark.parametrize("url,key", [("", "k"), ("https://x.supabase.co", ""), ("", ""), ("   ", "k")])
def test_missing_credentials_skip_insert(url, key, session, reading, caplog):
    store = EventStore(Settings(SUPABASE_URL=url, SUPABASE_ANON_KEY=key), session=session)

    with caplog.at_level(logging.ERROR, logger="horno_bridge"):
        assert store.insert(reading) is None

    session.post.assert_not_called()
    assert "Faltan variables de entorno de Supabase" in caplog.text


def test_rejected_insert_is_swallowed(settings, session, event, caplog):
    session.post.return_value = MagicMock(status_code=409, reason="Conflict", text="duplicate key")
    store = EventStore(settings, session=session)

    with caplog.at_level(logging.ERROR, logger="horno_bridge"):
        assert store.insert(event) is False

    assert "409" in caplog.text


def test_transport_error_is_swallowed(settings, session, event):
    session.post.side_effect = requests.ConnectionError("connection refused")
    assert EventStore(settings, session=session).insert(event) is False


def test_timeout_is_swallowed(settings, session, event):
    session.post.side_effect = requests.Timeout("read timed out")
    assert EventStore(settings, session=session).insert(event) is False


def test_success_is_logged(settings, session, event, caplog):
    with caplog.at_level(logging.INFO, logger="horno_bridge"):
        EventStore(settings, session=session).insert(event)
    assert "Guardado: evento - Q..1:10-1" in caplog.text


def test_non_positive_timeout_is_rejected():
    with pytest.raises(ConfigurationError):
        EventStore(Settings(SUPABASE_URL="https://x", SUPABASE_ANON_KEY="k", STORE_TIMEOUT_SECONDS=0))


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
    monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "2.5")

    settings = Settings()

    assert settings.store_configured
    assert settings.STORE_TIMEOUT_SECONDS == 2.5
    assert settings.EVENT_TABLE == "eventos_industriales"
