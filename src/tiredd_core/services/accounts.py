"""Account directory: credential checks and session lifecycle."""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tiredd_core.core import security
from tiredd_core.core.errors import InvalidCredentialsError, UnauthenticatedError
from tiredd_core.core.settings import settings
from tiredd_core.db.time import expiry_from, utcnow
from tiredd_core.db.transaction import run_transaction
from tiredd_core.models import Account, AccountSession

logger = logging.getLogger(__name__)

__all__ = ["AccountDirectory"]


class AccountDirectory:
    """Stands in for the external user-management collaborator."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_username(self, username: str) -> Account | None:
        """Return the account with ``username`` if it exists."""
        return self.db.execute(
            select(Account).where(Account.username == username)
        ).scalar_one_or_none()

    def register(self, username: str, password: str) -> Account:
        """Create an account with a hashed password.

        Raises:
            InvalidCredentialsError: If the username is empty, too long or taken,
                or the password is empty.
        """
        self._check_shape(username, password)
        password_hash = security.hash_password(password)

        def _insert() -> Account:
            account = Account(username=username, password_hash=password_hash)
            self.db.add(account)
            self.db.flush()
            return account

        try:
            account = run_transaction(self.db, _insert)
        except IntegrityError as exc:
            raise InvalidCredentialsError() from exc
        logger.info("Registered account %s", account.id)
        return account

    def login(self, username: str, password: str) -> tuple[Account, str, AccountSession]:
        """Verify credentials and open a new session.

        Unknown usernames are registered on the fly when
        ``auto_register_on_login`` is enabled.

        Returns:
            The account, the raw session token (only ever returned here) and
            the stored session row.
        """
        self._check_shape(username, password)
        account = self.get_by_username(username)
        if account is None:
            if not settings.auto_register_on_login:
                raise InvalidCredentialsError()
            account = self.register(username, password)
        elif not security.verify_password(account.password_hash, password):
            logger.info("Rejected login for account %s", account.id)
            raise InvalidCredentialsError()

        token = security.generate_session_token()
        now = utcnow()

        def _open_session() -> AccountSession:
            self._delete_expired(now)
            session = AccountSession(
                token_hash=security.hash_session_token(token),
                account_id=account.id,
                created_at=now,
                expires_at=expiry_from(now, settings.session_ttl_minutes),
            )
            self.db.add(session)
            self.db.flush()
            return session

        session = run_transaction(self.db, _open_session)
        logger.info("Opened session %s for account %s", session.id, account.id)
        return account, token, session

    def purge_expired_sessions(self) -> int:
        """Delete every expired session, whoever owns it, and return how many went."""
        removed = run_transaction(self.db, lambda: self._delete_expired(utcnow()))
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed

    def _delete_expired(self, now: datetime) -> int:
        result = self.db.execute(
            delete(AccountSession)
            .where(AccountSession.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def logout(self, token: str | None) -> None:
        """Destroy the session behind ``token``.

        Raises:
            UnauthenticatedError: If no session matches the token.
        """
        if not token:
            raise UnauthenticatedError()
        token_hash = security.hash_session_token(token)

        def _delete() -> int:
            result = self.db.execute(
                delete(AccountSession).where(AccountSession.token_hash == token_hash)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

        if run_transaction(self.db, _delete) == 0:
            raise UnauthenticatedError()
        logger.info("Closed a session")

    @staticmethod
    def _check_shape(username: str, password: str) -> None:
        if not username or not password:
            raise InvalidCredentialsError()
        if len(username) > settings.max_username_length:
            raise InvalidCredentialsError()
