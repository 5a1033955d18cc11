"""People Schemas — request validation for mentees and staff.

Tests cover:
    - email normalized (strip + lower) then validated
    - blank phone becomes None, invalid phone rejected, at most 30 characters
    - whitespace-only names rejected
    - programme end date cannot precede start date
    - staff role limited to admin/coordinator/mentor
    - staff updates are partial; password resets need 8+ characters
"""

from datetime import date

import pytest
from pydantic import ValidationError

from mentorship.schemas.people import (
    MenteeCreate, MenteeUpdate, PasswordSet, StaffCreate, StaffUpdate,
)


def _mentee(**overrides):
    data = {
        "first_name": "Jane",
        "last_name": "Student",
        "email": "jane@example.com",
        "program_start_date": "2024-09-01",
    }
    data.update(overrides)
    return MenteeCreate(**data)


def test_mentee_defaults():
    mentee = _mentee()
    assert mentee.status.value == "active"
    assert mentee.goals == []
    assert mentee.phone is None


def test_email_normalized():
    assert _mentee(email="  Jane@Example.COM ").email == "jane@example.com"


def test_invalid_email_rejected():
    with pytest.raises(ValidationError):
        _mentee(email="jane-at-example")


def test_blank_names_rejected():
    with pytest.raises(ValidationError):
        _mentee(first_name="   ")


def test_phone_handling():
    assert _mentee(phone="").phone is None
    assert _mentee(phone=" (473) 555-0101 ").phone == "(473) 555-0101"
    with pytest.raises(ValidationError):
        _mentee(phone="0473555")


def test_program_dates_ordered():
    with pytest.raises(ValidationError):
        _mentee(program_end_date="2024-08-01")
    assert _mentee(program_end_date="2025-06-30").program_end_date == date(2025, 6, 30)


def test_on_hold_status_accepted():
    assert _mentee(status="on-hold").status.value == "on-hold"
    with pytest.raises(ValidationError):
        _mentee(status="paused")


def test_mentee_update_is_partial():
    update = MenteeUpdate(status="completed")
    assert update.model_dump(exclude_unset=True) == {"status": "completed"}


def test_mentee_update_revalidates_email():
    with pytest.raises(ValidationError):
        MenteeUpdate(email="nope")


def test_staff_role_restricted():
    base = {"first_name": "John", "last_name": "Mentor", "email": "john@example.com"}
    assert StaffCreate(**base, role="mentor").role == "mentor"
    with pytest.raises(ValidationError):
        StaffCreate(**base, role="staff")


def test_phone_fits_column_width():
    thirty = "1-2-3-4-5-6-7-8-9-1-2-3-4-5-67"
    assert len(thirty) == 30
    assert _mentee(phone=thirty).phone == thirty
    with pytest.raises(ValidationError):
        _mentee(phone="1-2-3-4-5-6-7-8-9-1-2-3-4-5-6-7")
    with pytest.raises(ValidationError):
        StaffCreate(
            first_name="John", last_name="Mentor", email="john@example.com",
            role="mentor", phone="1-2-3-4-5-6-7-8-9-1-2-3-4-5-6-7",
        )


def test_staff_update_is_partial():
    update = StaffUpdate(department="Outreach", is_active=False)
    assert update.model_dump(exclude_unset=True) == {
        "department": "Outreach", "is_active": False,
    }
    with pytest.raises(ValidationError):
        StaffUpdate(role="staff")
    with pytest.raises(ValidationError):
        StaffUpdate(email="nope")


def test_password_set_minimum_length():
    assert PasswordSet(password="eight888").password == "eight888"
    with pytest.raises(ValidationError):
        PasswordSet(password="seven77")
