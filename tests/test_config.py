"""Tests for backend credential resolution, probing and runtime activation."""

import json

import pytest

from app.core.config import (
    BackendCredentials,
    is_valid_anon_key,
    is_valid_backend_url,
    resolve_backend_credentials,
)
from app.core.exceptions import BackendError, ConfigurationError
from app.database.client import probe_backend
from tests.fake_backend import VALID_KEY

ENV_URL = "https://ambiente.example.co"
STORED_URL = "https://salvo.example.co"
OVERRIDE_URL = "https://override.example.co"


@pytest.fixture
def env_settings(app_settings):
    return app_settings.model_copy(update={"BACKEND_URL": ENV_URL, "BACKEND_ANON_KEY": VALID_KEY})


def test_url_and_key_rules():
    assert is_valid_backend_url("https://projeto.supabase.co")
    assert not is_valid_backend_url("http://projeto.supabase.co")
    assert not is_valid_backend_url("https://")
    assert not is_valid_backend_url(None)
    assert is_valid_anon_key("k" * 21)
    assert not is_valid_anon_key("k" * 20)


def test_environment_is_the_fallback(env_settings, store):
    credentials = resolve_backend_credentials(store=store, app_settings=env_settings)
    assert credentials.url == ENV_URL
    assert credentials.source == "environment"


def test_persisted_beats_environment(env_settings, store):
    store.save(BackendCredentials(url=STORED_URL, anon_key=VALID_KEY))
    credentials = resolve_backend_credentials(store=store, app_settings=env_settings)
    assert credentials.url == STORED_URL
    assert credentials.source == "persisted"


def test_override_beats_everything(env_settings, store):
    store.save(BackendCredentials(url=STORED_URL, anon_key=VALID_KEY))
    override = BackendCredentials(url=OVERRIDE_URL + "/", anon_key=VALID_KEY)
    credentials = resolve_backend_credentials(override, store=store, app_settings=env_settings)
    assert credentials.url == OVERRIDE_URL
    assert credentials.source == "override"


def test_invalid_persisted_falls_through(env_settings, store):
    store.path.write_text(json.dumps({"url": "http://inseguro.example.co", "anon_key": VALID_KEY}))
    assert resolve_backend_credentials(store=store, app_settings=env_settings).source == "environment"


def test_unreadable_persisted_file_is_ignored(env_settings, store):
    store.path.write_text("{não é json")
    assert resolve_backend_credentials(store=store, app_settings=env_settings).source == "environment"


def test_missing_everywhere_raises(app_settings, store):
    with pytest.raises(ConfigurationError):
        resolve_backend_credentials(store=store, app_settings=app_settings)


@pytest.mark.asyncio
async def test_probe_accepts_reachable_backend(http, credentials, fake):
    await probe_backend(http, credentials)
    request = fake.requests[-1]
    assert request.url.path == "/rest/v1/"
    assert request.headers["apikey"] == VALID_KEY
    assert request.headers["Authorization"] == f"Bearer {VALID_KEY}"


@pytest.mark.asyncio
async def test_probe_rejects_non_2xx(http, credentials, fake):
    fake.probe_status = 404
    with pytest.raises(ConfigurationError) as exc:
        await probe_backend(http, credentials)
    assert exc.value.message == "Conexão falhou: HTTP 404"


@pytest.mark.asyncio
async def test_activate_persists_only_after_probe(connection, store, fake):
    fake.probe_status = 500
    with pytest.raises(ConfigurationError):
        await connection.activate(OVERRIDE_URL, VALID_KEY)
    assert store.load() is None
    assert not connection.is_configured

    fake.probe_status = 200
    credentials = await connection.activate(OVERRIDE_URL, VALID_KEY)
    assert store.load() == {"url": OVERRIDE_URL, "anon_key": VALID_KEY}
    assert connection.credentials == credentials


@pytest.mark.asyncio
async def test_activate_validates_before_probing(connection, fake):
    with pytest.raises(ConfigurationError):
        await connection.activate("http://inseguro.example.co", VALID_KEY)
    with pytest.raises(ConfigurationError):
        await connection.activate(OVERRIDE_URL, "curta")
    assert fake.requests == []


def test_forget_returns_to_environment(fake, env_settings, store):
    from app.database import BackendConnection

    store.save(BackendCredentials(url=STORED_URL, anon_key=VALID_KEY))
    connection = BackendConnection(app_settings=env_settings, store=store, transport=fake.transport())
    assert connection.configure().source == "persisted"
    connection.forget()
    assert connection.credentials.source == "environment"
    assert not store.path.exists()


def test_unconfigured_connection_refuses_clients(connection):
    connection.configure()
    assert not connection.is_configured
    with pytest.raises(ConfigurationError):
        connection.client()


@pytest.mark.asyncio
async def test_invalid_api_key_asks_for_reconfiguration(http, fake):
    from app.database import BackendClient

    wrong = BackendCredentials(url="https://projeto-teste.example.co", anon_key="chave-errada-" + "y" * 20)
    with pytest.raises(ConfigurationError):
        await BackendClient(wrong, http).table("packages").select().execute()


@pytest.mark.asyncio
async def test_backend_failure_is_backend_error(backend, fake):
    fake.failing_tables.add("packages")
    with pytest.raises(BackendError) as exc:
        await backend.table("packages").select().execute()
    assert exc.value.status == 500
    assert exc.value.table == "packages"
