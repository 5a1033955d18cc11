"""Staff API — staff profiles with linked login accounts.

Invariants:
    - POST creates User + Staff and returns a one-time temporary password
    - The stored password is a PBKDF2 hash of that temporary password
    - Duplicate email → 409; non-staff roles rejected with 400
    - PUT mirrors account fields onto the linked User
    - DELETE removes profile and account together and unassigns mentees
    - set-password needs 8+ characters and replaces the stored hash
"""

from uuid import uuid4

from sqlalchemy import func, select

from mentorship.infrastructure.passwords import verify_password
from mentorship.models.staff import Staff
from mentorship.models.user import User


async def test_create_staff_returns_temporary_password(client, test_db, staff_payload):
    res = await client.post("/api/v1/staff", json=staff_payload)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["staff"]["email"] == "john.mentor@mentorship.com"
    assert body["staff"]["mentees"] == []
    temp = body["temporary_password"]
    assert len(temp) == 12

    user = (await test_db.execute(
        select(User).where(User.email == "john.mentor@mentorship.com"),
    )).scalar_one()
    assert user.role == "mentor"
    assert user.password_hash != temp
    assert verify_password(temp, user.password_hash)
    assert body["staff"]["user_id"] == str(user.id)


async def test_duplicate_staff_email_is_409(client, staff_payload):
    await client.post("/api/v1/staff", json=staff_payload)
    res = await client.post("/api/v1/staff", json=staff_payload)
    assert res.status_code == 409


async def test_staff_role_validation(client, staff_payload):
    res = await client.post("/api/v1/staff", json={**staff_payload, "role": "janitor"})
    assert res.status_code == 400


async def test_get_and_list_staff(client, staff_payload):
    created = (await client.post("/api/v1/staff", json=staff_payload)).json()["staff"]
    await client.post("/api/v1/staff", json={
        **staff_payload, "first_name": "Sarah", "last_name": "Coordinator",
        "email": "sarah.coord@mentorship.com", "role": "coordinator",
        "department": "Program Coordination",
    })

    res = await client.get(f"/api/v1/staff/{created['id']}")
    assert res.status_code == 200
    assert res.json()["first_name"] == "John"

    res = await client.get("/api/v1/staff")
    assert res.json()["total"] == 2
    assert [s["last_name"] for s in res.json()["staff"]] == ["Coordinator", "Mentor"]

    res = await client.get("/api/v1/staff", params={"search": "coordination"})
    assert [s["first_name"] for s in res.json()["staff"]] == ["Sarah"]


async def test_missing_staff_is_404(client):
    res = await client.get(f"/api/v1/staff/{uuid4()}")
    assert res.status_code == 404


async def _user_by_email(db, email):
    return (await db.execute(
        select(User).where(User.email == email)
        .execution_options(populate_existing=True),
    )).scalar_one_or_none()


async def test_update_staff_syncs_user_account(client, test_db, staff_payload):
    created = (await client.post("/api/v1/staff", json=staff_payload)).json()["staff"]
    res = await client.put(f"/api/v1/staff/{created['id']}", json={
        "first_name": "Johnny",
        "email": "Johnny.Mentor@Mentorship.com",
        "role": "coordinator",
        "department": "Outreach",
    })
    assert res.status_code == 200, res.text
    staff = res.json()["staff"]
    assert staff["first_name"] == "Johnny"
    assert staff["email"] == "johnny.mentor@mentorship.com"
    assert staff["department"] == "Outreach"
    assert staff["last_name"] == "Mentor"

    user = await _user_by_email(test_db, "johnny.mentor@mentorship.com")
    assert user is not None
    assert (user.first_name, user.role) == ("Johnny", "coordinator")
    assert await _user_by_email(test_db, "john.mentor@mentorship.com") is None


async def test_update_staff_email_conflict(client, staff_payload):
    await client.post("/api/v1/staff", json=staff_payload)
    other = (await client.post("/api/v1/staff", json={
        **staff_payload, "email": "sarah.coord@mentorship.com",
    })).json()["staff"]
    res = await client.put(
        f"/api/v1/staff/{other['id']}", json={"email": staff_payload["email"]},
    )
    assert res.status_code == 409


async def test_update_missing_staff_is_404(client):
    res = await client.put(f"/api/v1/staff/{uuid4()}", json={"department": "x"})
    assert res.status_code == 404


async def test_delete_staff_removes_account_and_unassigns_mentees(
    client, test_db, staff_payload, mentee_payload,
):
    created = (await client.post("/api/v1/staff", json=staff_payload)).json()["staff"]
    mentee = (await client.post(
        "/api/v1/mentees", json={**mentee_payload, "mentor_id": created["id"]},
    )).json()
    assert mentee["mentor_id"] == created["id"]

    res = await client.delete(f"/api/v1/staff/{created['id']}")
    assert res.status_code == 200
    assert (await client.get(f"/api/v1/staff/{created['id']}")).status_code == 404
    assert await _user_by_email(test_db, staff_payload["email"]) is None
    assert await test_db.scalar(select(func.count()).select_from(Staff)) == 0

    res = await client.get(f"/api/v1/mentees/{mentee['id']}")
    assert res.json()["mentor_id"] is None


async def test_delete_missing_staff_is_404(client):
    res = await client.delete(f"/api/v1/staff/{uuid4()}")
    assert res.status_code == 404


async def test_set_password_replaces_hash(client, test_db, staff_payload):
    created = (await client.post("/api/v1/staff", json=staff_payload)).json()["staff"]
    res = await client.put(
        f"/api/v1/staff/{created['id']}/set-password", json={"password": "brand-new-pass"},
    )
    assert res.status_code == 200, res.text
    assert res.json()["message"] == "Password for John Mentor has been updated"

    user = await _user_by_email(test_db, staff_payload["email"])
    assert verify_password("brand-new-pass", user.password_hash)


async def test_set_password_too_short_is_400(client, staff_payload):
    created = (await client.post("/api/v1/staff", json=staff_payload)).json()["staff"]
    res = await client.put(
        f"/api/v1/staff/{created['id']}/set-password", json={"password": "short77"},
    )
    assert res.status_code == 400


async def test_set_password_without_account_is_404(client, test_db):
    staff = Staff(
        first_name="No", last_name="Account",
        email="no.account@mentorship.com", role="mentor",
    )
    test_db.add(staff)
    await test_db.commit()
    res = await client.put(
        f"/api/v1/staff/{staff.id}/set-password", json={"password": "long-enough"},
    )
    assert res.status_code == 404
