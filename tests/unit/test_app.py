from app.core.config import settings


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == settings.VERSION


def test_root_lists_docs(client):
    body = client.get("/").json()

    assert body["name"] == settings.PROJECT_NAME
    assert body["docs"] == "/docs"


def test_request_id_generated_when_absent(client):
    response = client.get("/health")

    assert response.headers.get("X-Request-ID")


def test_contact_preflight_from_allowed_origin(client):
    origin = settings.ALLOWED_ORIGINS[0]
    response = client.options(
        "/api/contact",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == origin


def test_preflight_rejects_unknown_origin(client):
    response = client.options(
        "/api/rfq",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert "access-control-allow-origin" not in response.headers


def test_delete_method_not_allowed(client):
    response = client.delete("/api/contact")

    assert response.status_code == 405
