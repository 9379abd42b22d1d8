"""Create the default admin and volunteer accounts used for local testing."""

from __future__ import annotations

import argparse
import logging
from datetime import timedelta
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.profiles import save_profile
from volunteer_api.application.use_cases.users import register_user
from volunteer_api.config import get_settings
from volunteer_api.domain.entities import ROLE_ADMIN, ROLE_VOLUNTEER, User
from volunteer_api.domain.exceptions import DomainError
from volunteer_api.infrastructure.database import SessionLocal, initialize_database
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.logging_config import configure_logging
from volunteer_api.utils import today_in_app_timezone

ADMIN_EMAIL = "admin@volunteer.com"
VOLUNTEER_EMAIL = "volunteer@volunteer.com"

logger = logging.getLogger("seed_users")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the default admin and volunteer accounts.",
    )
    parser.add_argument(
        "--admin-password",
        default=None,
        help="Password for admin@volunteer.com. Prompted for when omitted.",
    )
    parser.add_argument(
        "--volunteer-password",
        default=None,
        help="Password for volunteer@volunteer.com. Prompted for when omitted.",
    )
    parser.add_argument(
        "--skip-profile",
        action="store_true",
        help="Do not create the sample profile for the volunteer account.",
    )
    return parser.parse_args()


def _ensure_user(session: Session, email: str, role: str, password: str | None) -> User | None:
    """Return the new user, or ``None`` when ``email`` is already registered."""

    if UserRepository(session).get_by_email(email):
        logger.info("%s already exists", email)
        return None

    password = password or getpass(f"Password for {email}: ")
    user = register_user(session, email=email, password=password, role=role)
    logger.info("Created %s user %s", role, email)
    return user


def _create_sample_profile(session: Session, user: User) -> None:
    today = today_in_app_timezone()
    save_profile(
        session,
        user_id=user.id,
        full_name="John Volunteer",
        address1="123 Main St",
        address2="Apt 4B",
        city="Houston",
        state="TX",
        zip_code="77001",
        skills=["Communication", "Teamwork", "Organized"],
        preferences="Available on weekends",
        availability=[(today + timedelta(days=offset)).isoformat() for offset in (7, 14, 21)],
    )
    logger.info("Created sample profile for %s", user.email)


def main() -> None:
    args = parse_args()
    configure_logging(get_settings().log_level)

    initialize_database()

    session = SessionLocal()
    try:
        # Admin accounts are seeded even when public admin registration is off.
        admin = _ensure_user(session, ADMIN_EMAIL, ROLE_ADMIN, args.admin_password)
        if admin is not None and admin.role != ROLE_ADMIN:
            admin = UserRepository(session).set_role(admin.id, ROLE_ADMIN)

        volunteer = _ensure_user(session, VOLUNTEER_EMAIL, ROLE_VOLUNTEER, args.volunteer_password)
        if volunteer is not None and not args.skip_profile:
            _create_sample_profile(session, volunteer)
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed users: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while seeding users: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()
