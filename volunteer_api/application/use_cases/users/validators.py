"""Common validation helpers for user use cases."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

INVALID_EMAIL_MESSAGE = "Invalid email format"
INVALID_PASSWORD_MESSAGE = (
    f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
)


def normalize_email(email: str | None) -> str:
    """Return ``email`` trimmed and lowercased; emails are unique case-insensitively."""

    return (email or "").strip().lower()


def collect_credential_errors(email: str, password: str | None) -> list[str]:
    """Return every rule violated by the given credentials."""

    errors: list[str] = []
    if not email or not EMAIL_PATTERN.match(email):
        errors.append(INVALID_EMAIL_MESSAGE)
    if not isinstance(password, str) or not (
        PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH
    ):
        errors.append(INVALID_PASSWORD_MESSAGE)
    return errors


__all__ = [
    "INVALID_EMAIL_MESSAGE",
    "INVALID_PASSWORD_MESSAGE",
    "collect_credential_errors",
    "normalize_email",
]
