"""Health & Reference API — health checks, constants, status badges and form validation.

Invariants:
    - /health/ready reports the test database as healthy
    - Status badge endpoint is total: unknown values answer 200 with a neutral badge
    - Login form scenario flags only the short password
    - Unknown form names → 404 with the error envelope
"""


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_constants(client):
    res = await client.get("/api/v1/reference/constants")
    assert res.status_code == 200
    body = res.json()
    assert body["roles"] == ["admin", "coordinator", "mentor", "staff"]
    assert body["max_file_sizes"] == {
        "document": 10 * 1024 * 1024,
        "image": 5 * 1024 * 1024,
        "receipt": 5 * 1024 * 1024,
    }
    assert body["file_extensions"]["receipts"] == [".pdf", ".jpg", ".jpeg", ".png"]


async def test_status_badge_known(client):
    res = await client.get("/api/v1/reference/status/invoice/paid")
    assert res.status_code == 200
    body = res.json()
    assert body["category"] == "positive"
    assert "bg-green-100" in body["css_class"]
    assert body["icon"] == "check-circle"


async def test_status_badge_label(client):
    res = await client.get("/api/v1/reference/status/mentee/on-hold")
    assert res.json()["label"] == "on hold"
    assert res.json()["category"] == "warning"


async def test_status_badge_unknown_is_neutral(client):
    for path in ("invoice/unknown-status", "bogus-type/paid", "invoice/PAID"):
        res = await client.get(f"/api/v1/reference/status/{path}")
        assert res.status_code == 200
        assert res.json()["category"] == "neutral"


async def test_login_form_short_password(client):
    res = await client.post(
        "/api/v1/reference/validate/login",
        json={"email": "test@example.com", "password": "abc12"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["is_valid"] is False
    assert body["errors"] == {
        "password": "Password must be at least 6 characters",
    }


async def test_registration_form_valid(client):
    res = await client.post(
        "/api/v1/reference/validate/registration",
        json={
            "first_name": "Jane", "last_name": "Student",
            "email": "jane@example.com", "password": "secret1",
            "phone": "(473) 555-0101",
        },
    )
    assert res.json() == {"form": "registration", "is_valid": True, "errors": {}}


async def test_unknown_form_is_404(client):
    res = await client.post("/api/v1/reference/validate/signup", json={})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_validate_requires_object_body(client):
    res = await client.post("/api/v1/reference/validate/login", json=["a"])
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
