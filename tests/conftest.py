import pytest
from fastapi.testclient import TestClient

from api.dependencies import contact_limiter, get_mail_service, get_record_store
from main import app
from tests.fakes import FakeMailService, FakeRecordStore


@pytest.fixture
def store():
    return FakeRecordStore()


@pytest.fixture
def mailer(store):
    return FakeMailService(store)


@pytest.fixture
def client(store, mailer):
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_mail_service] = lambda: mailer
    app.dependency_overrides[contact_limiter] = lambda: None
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
