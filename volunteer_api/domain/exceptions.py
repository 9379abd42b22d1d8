"""Exceptions raised by use cases and repositories.

Every exception derives from :class:`DomainError`, itself a ``ValueError``, so
callers that only care about "the request was not acceptable" can keep
catching ``ValueError``. The HTTP layer maps each subclass to a status code.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainError(ValueError):
    """Base class for expected, client-attributable failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """One or more input rules were violated.

    All violated rules are reported together in :attr:`messages`.
    """

    def __init__(self, messages: Iterable[str] | str) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages = [message for message in messages if message]
        super().__init__("; ".join(self.messages) or "Invalid input")


class AuthenticationError(DomainError):
    """The caller supplied no credential or a wrong one."""


class PermissionDeniedError(DomainError):
    """The caller is authenticated but may not perform the operation."""


class NotFoundError(DomainError):
    """The referenced record does not exist."""


class ConflictError(DomainError):
    """The operation would violate a uniqueness rule."""


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
]
