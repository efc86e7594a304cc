"""Error rendering: every failure is {"error": ...}."""

from httpx import ASGITransport, AsyncClient

from fesnotes.core.errors import AuthorizationError, ValidationFailed, error_body


def test_error_body():
    assert error_body("boom") == {"error": "boom"}
    assert error_body("boom", [{"a": 1}]) == {"error": "boom", "details": [{"a": 1}]}


def test_domain_errors_carry_status():
    assert AuthorizationError().status_code == 403
    err = ValidationFailed("bad", details=[1])
    assert (err.status_code, err.detail, err.details) == (400, "bad", [1])


async def test_unmatched_route(client):
    response = await client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


async def test_validation_error_has_field_details(client, register):
    headers, _ = await register("alice")

    response = await client.post("/api/notes", json={"title": "T"}, headers=headers)

    assert response.status_code == 400
    body = response.json()
    assert body["error"].startswith("content:")
    assert body["details"][0]["field"] == "content"


async def test_unhandled_exception_is_generic_500(test_app):
    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
