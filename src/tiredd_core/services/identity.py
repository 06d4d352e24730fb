"""Resolution of opaque session tokens into account identities."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from tiredd_core.core.errors import UnauthenticatedError
from tiredd_core.core.security import hash_session_token
from tiredd_core.db.time import utcnow
from tiredd_core.db.transaction import run_read
from tiredd_core.models import Account, AccountSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountIdentity:
    """Who is acting on a request, as proven by a live session."""

    account_id: int
    username: str


class IdentityResolver:
    """Read-only lookup from session token to account."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def read_session(self, token: str | None) -> tuple[Account, AccountSession]:
        """Return the account and live session behind ``token``.

        Raises:
            UnauthenticatedError: If the token is absent, unknown, or expired.
        """
        if not token:
            raise UnauthenticatedError()

        stmt = (
            select(Account, AccountSession)
            .join(AccountSession, AccountSession.account_id == Account.id)
            .where(
                AccountSession.token_hash == hash_session_token(token),
                AccountSession.expires_at > utcnow(),
            )
        )
        row = run_read(self.db, lambda: self.db.execute(stmt).first())
        if row is None:
            logger.warning("Rejected unknown or expired session token")
            raise UnauthenticatedError()
        account, session = row
        return account, session

    def resolve(self, token: str | None) -> AccountIdentity:
        """Return the identity behind ``token`` or raise ``UnauthenticatedError``."""
        account, _ = self.read_session(token)
        return AccountIdentity(account_id=account.id, username=account.username)

    def resolve_optional(self, token: str | None) -> AccountIdentity | None:
        """Like :meth:`resolve`, but an absent token yields ``None``.

        A token that is supplied and invalid still fails.
        """
        if token is None or token == "":
            return None
        return self.resolve(token)
