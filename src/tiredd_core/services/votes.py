"""Vote casting on posts and comments."""

from __future__ import annotations

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tiredd_core.core.errors import DuplicateVoteError
from tiredd_core.core.settings import settings
from tiredd_core.db.transaction import run_transaction
from tiredd_core.models import ItemKind, VoteDirection, VoteRecord
from tiredd_core.services.identity import IdentityResolver
from tiredd_core.services.ledger import ScoreLedger

logger = logging.getLogger(__name__)

__all__ = ["VoteService"]


class VoteService:
    """Authenticates a voter and applies the vote atomically."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.identity = IdentityResolver(db)
        self.ledger = ScoreLedger(db)

    def cast_vote(
        self,
        token: str | None,
        item_id: int,
        kind: ItemKind,
        direction: VoteDirection,
    ) -> int:
        """Record one vote and return the item's new score.

        The counter bump and, when single-vote enforcement is on, the vote
        record commit together; any failure leaves the counters untouched.

        Raises:
            UnauthenticatedError: If the token is missing, unknown, or expired.
            NotFoundError: If the item has no score entry.
            DuplicateVoteError: If the account already voted on the item.
        """
        voter = self.identity.resolve(token)

        def _vote() -> int:
            score = self.ledger.apply(item_id, kind, direction)
            if settings.enforce_single_vote:
                self.db.execute(
                    insert(VoteRecord).values(
                        account_id=voter.account_id,
                        item_id=item_id,
                        kind=kind,
                        direction=int(direction),
                    )
                )
            return score

        try:
            score = run_transaction(self.db, _vote)
        except IntegrityError as exc:
            logger.info("Account %s already voted on %s %s", voter.account_id, kind.value, item_id)
            raise DuplicateVoteError(kind.value, item_id) from exc
        logger.debug("Account %s voted on %s %s", voter.account_id, kind.value, item_id)
        return score

    def vote_of(self, token: str | None, item_id: int, kind: ItemKind) -> int:
        """Return the caller's recorded direction on an item, or 0 when none."""
        voter = self.identity.resolve(token)
        direction = self.db.execute(
            select(VoteRecord.direction).where(
                VoteRecord.account_id == voter.account_id,
                VoteRecord.item_id == item_id,
                VoteRecord.kind == kind,
            )
        ).scalar_one_or_none()
        return direction or 0
