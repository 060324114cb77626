"""Pytest fixtures: fake hosted backend, clients and the FastAPI app."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import BackendCredentials, CredentialStore, Settings
from app.core.rate_limit import limiter
from app.database import AuthEvents, AuthService, BackendClient, BackendConnection
from app.models import EventType, Package, PackagePaymentMethod, PaymentMethod
from app.services.catalog import Catalog
from tests.fake_backend import VALID_KEY, FakeBackend

BACKEND_URL = "https://projeto-teste.example.co"


@pytest.fixture
def fake():
    """In-memory backend seeded with a small catalog."""
    return FakeBackend()


@pytest.fixture
def credentials():
    return BackendCredentials(url=BACKEND_URL, anon_key=VALID_KEY, source="override")


@pytest.fixture
def http(fake):
    return httpx.AsyncClient(transport=fake.transport())


@pytest.fixture
def backend(credentials, http):
    return BackendClient(credentials, http)


@pytest.fixture
def auth_events():
    return AuthEvents()


@pytest.fixture
def auth(credentials, http, auth_events):
    return AuthService(credentials, http, auth_events)


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        BACKEND_URL=None,
        BACKEND_ANON_KEY=None,
        BACKEND_CREDENTIALS_FILE=str(tmp_path / "credentials.json"),
    )


@pytest.fixture
def store(app_settings):
    return CredentialStore(app_settings.BACKEND_CREDENTIALS_FILE)


@pytest.fixture
def connection(fake, app_settings, store):
    return BackendConnection(app_settings=app_settings, store=store, transport=fake.transport())


@pytest.fixture
def client(connection, credentials):
    """TestClient over the app with the fake backend configured."""
    from app.main import app

    connection.configure(override=credentials)
    app.state.backend = connection
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client(connection):
    """TestClient whose backend has no valid credentials."""
    from app.main import app

    connection.configure()
    app.state.backend = connection
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(fake):
    return {"Authorization": f"Bearer {fake.issue_token()}"}


@pytest.fixture
def catalog(fake):
    """Catalog built straight from the seed tables (same filtering as the loader)."""
    tables = fake.tables
    return Catalog(
        event_types=[EventType.model_validate(r) for r in tables["event_types"] if r["is_active"]],
        packages=[Package.model_validate(r) for r in tables["packages"] if r["is_active"]],
        payment_methods=[PaymentMethod.model_validate(r) for r in tables["payment_methods"] if r["is_active"]],
        package_payment_methods=[PackagePaymentMethod.model_validate(r) for r in tables["package_payment_methods"]],
    )
