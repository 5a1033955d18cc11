"""Admin Seeding — create the initial admin account (and optionally demo staff).

Usage:
    ADMIN_PASSWORD=... python -m mentorship.scripts.create_admin
    python -m mentorship.scripts.create_admin --email ops@example.org --password s3cret!
    python -m mentorship.scripts.create_admin --password s3cret! --with-demo-staff

Invariants:
    - Idempotent: an existing account with the same email is left untouched (exit 0)
    - Email must pass validate_email and password validate_password, else exit 2
    - There is no built-in password: --password or ADMIN_PASSWORD is required (exit 2)
    - Passwords are stored as PBKDF2 hashes only
    - Demo staff rows are inserted only when their email is absent
"""

import argparse
import asyncio
import logging
import sys
from datetime import date

from sqlalchemy import select

from mentorship.config import get_settings
from mentorship.core.domain_types import UserRole
from mentorship.core.validators import validate_email, validate_password
from mentorship.infrastructure.database import DatabaseSessionManager
from mentorship.infrastructure.observability import setup_logging
from mentorship.infrastructure.passwords import hash_password
from mentorship.models.staff import Staff
from mentorship.models.user import User

logger = logging.getLogger("mentorship.scripts.create_admin")

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

DEMO_STAFF = (
    {
        "first_name": "Test",
        "last_name": "Admin",
        "email": "admin@mentorship.com",
        "phone": "+1-473-555-0001",
        "role": UserRole.ADMIN.value,
        "department": "Administration",
        "hire_date": date(2024, 1, 15),
        "bio": "System administrator with extensive experience in mentorship programs.",
        "skills": ["Leadership", "Project Management", "System Administration"],
    },
    {
        "first_name": "John",
        "last_name": "Mentor",
        "email": "john.mentor@mentorship.com",
        "phone": "+1-473-555-0002",
        "role": UserRole.MENTOR.value,
        "department": "Business Development",
        "hire_date": date(2024, 2, 20),
        "bio": "Senior business mentor specializing in startup guidance and strategic planning.",
        "skills": ["Business Strategy", "Startup Mentoring", "Financial Planning"],
    },
    {
        "first_name": "Sarah",
        "last_name": "Coordinator",
        "email": "sarah.coord@mentorship.com",
        "phone": "+1-473-555-0003",
        "role": UserRole.COORDINATOR.value,
        "department": "Program Coordination",
        "hire_date": date(2024, 3, 10),
        "bio": "Program coordinator focusing on mentor-mentee matching and program logistics.",
        "skills": ["Program Management", "Coordination", "Communication"],
    },
)


async def create_admin(
    manager: DatabaseSessionManager,
    email: str,
    password: str,
    first_name: str = "Test",
    last_name: str = "Admin",
) -> bool:
    """Insert the admin user. Returns False when the email is already taken."""
    async with manager.session() as db:
        existing = await db.scalar(select(User.id).where(User.email == email))
        if existing:
            logger.info(f"Admin user already exists: {email}", extra={"email": email})
            return False
        db.add(User(
            email=email,
            password_hash=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            role=UserRole.ADMIN.value,
        ))
        await db.commit()
    logger.info(f"Admin user created: {email}", extra={"email": email})
    return True


async def seed_demo_staff(manager: DatabaseSessionManager) -> int:
    """Insert the demo staff roster. Returns the number of rows added."""
    added = 0
    async with manager.session() as db:
        for profile in DEMO_STAFF:
            if await db.scalar(select(Staff.id).where(Staff.email == profile["email"])):
                continue
            user_id = await db.scalar(select(User.id).where(User.email == profile["email"]))
            db.add(Staff(user_id=user_id, **profile))
            added += 1
        await db.commit()
    logger.info(f"Demo staff seeded: {added} added")
    return added


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="python -m mentorship.scripts.create_admin",
        description="Create the initial admin account.",
    )
    parser.add_argument("--email", default=settings.admin_email)
    parser.add_argument("--password", default=settings.admin_password)
    parser.add_argument(
        "--with-demo-staff", action="store_true",
        help="also insert the demo staff roster",
    )
    return parser


async def run(
    args: argparse.Namespace, manager: DatabaseSessionManager | None = None,
) -> int:
    email = args.email.strip().lower()
    if not validate_email(email):
        logger.error(f"Invalid email address: {args.email!r}")
        return EXIT_INVALID_INPUT
    if args.password is None:
        logger.error("No password given: pass --password or set ADMIN_PASSWORD")
        return EXIT_INVALID_INPUT
    if not validate_password(args.password):
        logger.error("Password must be at least 6 characters")
        return EXIT_INVALID_INPUT

    owns_manager = manager is None
    if owns_manager:
        settings = get_settings()
        manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    try:
        await create_admin(manager, email, args.password)
        if args.with_demo_staff:
            await seed_demo_staff(manager)
    finally:
        if owns_manager:
            await manager.close()
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    return asyncio.run(run(build_parser().parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
