"""Score ledger: per-item vote counters with an atomic increment path.

Every counter change is a single ``UPDATE ... SET upvotes = upvotes + 1``
statement, so the read-modify-write happens inside the database. Concurrent
votes on one item serialise on that row and compound; votes on different items
touch different rows and never contend.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from tiredd_core.core.errors import NotFoundError
from tiredd_core.db.transaction import run_transaction
from tiredd_core.models import ItemKind, ScoreEntry, VoteDirection

logger = logging.getLogger(__name__)

__all__ = ["ScoreLedger"]


class ScoreLedger:
    """Sole writer of ``score_entry`` counters."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def open_entry(self, item_id: int, kind: ItemKind) -> ScoreEntry:
        """Add a zeroed entry to the caller's open transaction.

        The caller commits it together with the item it scores.
        """
        entry = ScoreEntry(item_id=item_id, kind=kind, upvotes=0, downvotes=0)
        self.db.add(entry)
        return entry

    def apply(self, item_id: int, kind: ItemKind, direction: VoteDirection) -> int:
        """Bump one counter inside the caller's transaction and return the new score.

        Raises:
            NotFoundError: If no entry exists for (item_id, kind).
        """
        counter = ScoreEntry.upvotes if direction is VoteDirection.UP else ScoreEntry.downvotes
        result = self.db.execute(
            update(ScoreEntry)
            .where(ScoreEntry.item_id == item_id, ScoreEntry.kind == kind)
            .values({counter: counter + 1})
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError(kind.value, item_id)
        score = self.db.execute(
            select(ScoreEntry.score).where(
                ScoreEntry.item_id == item_id,
                ScoreEntry.kind == kind,
            )
        ).scalar_one()
        logger.debug("%s %s voted %s, score now %s", kind.value, item_id, direction.name, score)
        return score

    def increment(self, item_id: int, kind: ItemKind, direction: VoteDirection) -> int:
        """Apply one vote in its own transaction and return the new score."""
        return run_transaction(self.db, lambda: self.apply(item_id, kind, direction))

    def get(self, item_id: int, kind: ItemKind) -> ScoreEntry:
        """Return the current entry for (item_id, kind).

        Raises:
            NotFoundError: If the entry does not exist.
        """
        entry = self.db.execute(
            select(ScoreEntry)
            .where(ScoreEntry.item_id == item_id, ScoreEntry.kind == kind)
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        if entry is None:
            raise NotFoundError(kind.value, item_id)
        return entry

    def scores_for(self, kind: ItemKind, item_ids: Iterable[int]) -> dict[int, ScoreEntry]:
        """Return the entries for ``item_ids`` keyed by item id."""
        ids = list(item_ids)
        if not ids:
            return {}
        entries = self.db.execute(
            select(ScoreEntry)
            .where(ScoreEntry.kind == kind, ScoreEntry.item_id.in_(ids))
            .execution_options(populate_existing=True)
        ).scalars()
        return {entry.item_id: entry for entry in entries}
