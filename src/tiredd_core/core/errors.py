"""Typed failures raised by the core services.

Every error carries a machine-readable ``reason`` code. Translating a reason
into something a person reads is the job of whatever sits in front of the
core; the API layer only forwards the code.
"""

from __future__ import annotations

from typing import ClassVar


class CoreError(RuntimeError):
    """Base class for all expected failures of a core operation."""

    reason: ClassVar[str] = "core_error"

    def __init__(self, *context: object) -> None:
        super().__init__(self.reason, *context)


class UnauthenticatedError(CoreError):
    """The session token is missing, unknown, or expired."""

    reason = "unauthenticated"


class InvalidCredentialsError(CoreError):
    """Username/password pair was rejected by the account directory."""

    reason = "invalid_credentials"


class NotFoundError(CoreError):
    """A referenced post, comment or score entry does not exist."""

    reason = "not_found"


class InvalidContentError(CoreError):
    """Submitted content has nothing displayable or breaks a length limit."""

    reason = "invalid_content"


class InvalidParentError(CoreError):
    """A comment parent is missing or belongs to a different post."""

    reason = "invalid_parent"


class DuplicateVoteError(CoreError):
    """The account already voted on this item."""

    reason = "duplicate_vote"


class TransientStoreError(CoreError):
    """The backing store failed twice in a row with a retryable error."""

    reason = "transient_store_failure"


__all__ = [
    "CoreError",
    "DuplicateVoteError",
    "InvalidContentError",
    "InvalidCredentialsError",
    "InvalidParentError",
    "NotFoundError",
    "TransientStoreError",
    "UnauthenticatedError",
]
