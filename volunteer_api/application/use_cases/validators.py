"""Field-level checks shared by the profile and event use cases.

Each helper appends human-readable messages to an ``errors`` list instead of
raising, so a request reports every violated rule at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from volunteer_api.domain.entities import SKILLS


def as_list(value: Any) -> list[Any]:
    """Accept a single scalar where a list is expected."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [value]


def clean_text(value: Any) -> str | None:
    """Return ``value`` stripped, or ``None`` for blanks and non-strings."""

    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def required_text(
    value: Any,
    *,
    required_message: str,
    errors: list[str],
    max_length: int | None = None,
    too_long_message: str | None = None,
) -> str | None:
    cleaned = clean_text(value)
    if cleaned is None:
        errors.append(required_message)
        return None
    if max_length is not None and len(cleaned) > max_length:
        errors.append(too_long_message or f"Must be at most {max_length} characters")
        return None
    return cleaned


def optional_text(
    value: Any,
    *,
    errors: list[str],
    max_length: int,
    too_long_message: str,
) -> str | None:
    cleaned = clean_text(value)
    if cleaned is not None and len(cleaned) > max_length:
        errors.append(too_long_message)
        return None
    return cleaned


def collect_skills(
    value: Any,
    *,
    errors: list[str],
    empty_message: str,
    allowed: Iterable[str] = SKILLS,
) -> list[str]:
    """Return the unique skills in ``value`` after checking the vocabulary."""

    allowed_set = set(allowed)
    skills: list[str] = []
    items = [item for item in as_list(value) if item not in (None, "")]
    if not items:
        errors.append(empty_message)
        return skills
    for item in items:
        label = item.strip() if isinstance(item, str) else None
        if label not in allowed_set:
            errors.append(f"Invalid skill: {item}")
            continue
        if label not in skills:
            skills.append(label)
    return skills


__all__ = [
    "as_list",
    "clean_text",
    "collect_skills",
    "optional_text",
    "required_text",
]
