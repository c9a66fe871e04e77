import error

from api.dependencies import contact_limiter
from config.setting import settings
from main import app
from model import ContactMessage, Subscriber
from service.rate_limit import FixedWindowRateLimiter
from util.enum import DbState
from tests.fakes import FakeCounter

CONTACT = {"name": "Ana", "email": "ana@x.com", "subject": "Hi", "message": "Hello"}


def test_health_reports_store_state(client, store):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "dbState": "Connected"}

    store.state = DbState.disconnected
    response = client.get("/api/health")
    assert response.json() == {"status": "OK", "dbState": "Disconnected"}


def test_contact_success(client, store, mailer):
    response = client.post("/api/contact", json=CONTACT)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"]
    assert store.count(ContactMessage) == 1
    recipients = sorted(message.to for message in mailer.sent)
    assert recipients == sorted([settings.OWNER_EMAIL, "ana@x.com"])


def test_contact_missing_fields(client, store, mailer):
    response = client.post("/api/contact", json={"name": "Ana", "email": "ana@x.com"})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Todos los campos son requeridos",
    }
    assert store.count(ContactMessage) == 0
    assert mailer.attempts == []


def test_contact_mailer_down_keeps_record(client, store, mailer):
    mailer.fail_for = {settings.OWNER_EMAIL, "ana@x.com"}

    response = client.post("/api/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert store.count(ContactMessage) == 1


def test_contact_rejects_unparseable_body(client):
    response = client.post(
        "/api/contact",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Todos los campos son requeridos",
    }


def test_contact_is_rate_limited(client, store):
    app.dependency_overrides[contact_limiter] = FixedWindowRateLimiter(
        scope="contact",
        limit=5,
        window_seconds=900,
        counter=FakeCounter(),
        clock=lambda: 1_000.0,
    )

    statuses = [client.post("/api/contact", json=CONTACT).status_code for _ in range(6)]

    assert statuses == [200] * 5 + [429]
    last = client.post("/api/contact", json=CONTACT)
    assert last.json() == {
        "success": False,
        "message": "Demasiados intentos. Intenta más tarde.",
    }
    assert store.count(ContactMessage) == 5


def test_subscribe_invalid_email(client, store):
    response = client.post("/api/subscribe", json={"email": "bad"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email inválido"}
    assert store.count(Subscriber) == 0


def test_subscribe_twice(client, store):
    first = client.post("/api/subscribe", json={"email": "a@b.com"})
    second = client.post("/api/subscribe", json={"email": "a@b.com"})

    assert first.status_code == 200
    assert first.json()["success"] is True
    assert second.status_code == 400
    assert second.json() == {"success": False, "message": "Este email ya está suscrito."}
    assert store.count(Subscriber) == 1


def test_subscribe_is_not_rate_limited(client):
    app.dependency_overrides[contact_limiter] = FixedWindowRateLimiter(
        scope="contact", limit=0, window_seconds=900, counter=FakeCounter()
    )

    response = client.post("/api/subscribe", json={"email": "a@b.com"})

    assert response.status_code == 200


def test_unexpected_error_still_answers_json(client, store):
    async def explode(record):
        raise RuntimeError("driver bug")

    store.insert = explode

    response = client.post("/api/subscribe", json={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error interno del servidor."}


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_security_headers_and_cors(client):
    response = client.get(
        "/api/health", headers={"Origin": settings.FRONTEND_URL}
    )

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["access-control-allow-origin"] == settings.FRONTEND_URL


def test_root_redirects_to_docs(client):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


def test_contact_store_down_sends_nothing(client, store, mailer):
    store.insert_error = error.DatabaseError(msg="unreachable")

    response = client.post("/api/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error interno del servidor."}
    assert mailer.attempts == []


def test_subscribe_store_down(client, store):
    store.find_error = error.DatabaseError(msg="unreachable")

    response = client.post("/api/subscribe", json={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error interno."}
    assert store.count(Subscriber) == 0


def test_subscribe_wrong_type_uses_email_message(client, store):
    response = client.post("/api/subscribe", json={"email": 123})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email inválido"}
    assert store.count(Subscriber) == 0


def test_subscribe_unparseable_body_uses_email_message(client):
    response = client.post(
        "/api/subscribe",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email inválido"}
