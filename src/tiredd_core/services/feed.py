"""Feed partitioner: score-range views over posts.

"Hot" and "new" are two disjoint score ranges evaluated against the live
ledger on every read. Nothing about a post's view is stored, so a post moves
between views as soon as a vote moves it across the threshold.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from tiredd_core.core.settings import settings
from tiredd_core.db.transaction import run_read
from tiredd_core.models import ItemKind, Post, ScoreEntry
from tiredd_core.services.content import ScoredPost

ALL_SUBS = "all"


class FeedOrder(str, enum.Enum):
    """Ordering applied to a feed result."""

    HOT = "hot"  # score desc, newest first on ties
    NEW = "new"  # newest first


@dataclass(frozen=True)
class ScoreRange:
    """Inclusive score bounds; ``None`` leaves a side unbounded."""

    minimum: int | None = None
    maximum: int | None = None


def hot_range() -> ScoreRange:
    return ScoreRange(minimum=settings.hot_threshold, maximum=None)


def new_range() -> ScoreRange:
    return ScoreRange(minimum=settings.new_score_floor, maximum=settings.new_score_ceiling)


def clamp_limit(limit: int | None) -> int:
    """Apply the default and the hard cap to a requested page size."""
    if limit is None or limit <= 0:
        return settings.feed_default_limit
    return min(limit, settings.feed_max_limit)


class FeedPartitioner:
    """Lists posts filtered by sub and live score, in hot or new order."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_posts(
        self,
        sub: str | None = ALL_SUBS,
        score_min: int | None = None,
        score_max: int | None = None,
        order_by: FeedOrder = FeedOrder.NEW,
        limit: int | None = None,
    ) -> list[ScoredPost]:
        """Return matching posts, or an empty list when nothing qualifies."""
        stmt: Select = (
            select(Post, ScoreEntry.upvotes, ScoreEntry.downvotes)
            .join(
                ScoreEntry,
                (ScoreEntry.item_id == Post.id) & (ScoreEntry.kind == ItemKind.POST),
            )
            .execution_options(populate_existing=True)
        )
        if sub and sub != ALL_SUBS:
            stmt = stmt.where(Post.sub == sub)
        if score_min is not None:
            stmt = stmt.where(ScoreEntry.score >= score_min)
        if score_max is not None:
            stmt = stmt.where(ScoreEntry.score <= score_max)

        if order_by is FeedOrder.HOT:
            stmt = stmt.order_by(ScoreEntry.score.desc(), Post.created_at.desc(), Post.id.desc())
        else:
            stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())

        stmt = stmt.limit(clamp_limit(limit))
        rows = run_read(self.db, lambda: self.db.execute(stmt).all())
        return [
            ScoredPost(post=post, upvotes=upvotes, downvotes=downvotes)
            for post, upvotes, downvotes in rows
        ]

    def hot(self, sub: str | None = ALL_SUBS, limit: int | None = None) -> list[ScoredPost]:
        """Posts at or above the hot threshold, best first."""
        bounds = hot_range()
        return self.list_posts(sub, bounds.minimum, bounds.maximum, FeedOrder.HOT, limit)

    def new(self, sub: str | None = ALL_SUBS, limit: int | None = None) -> list[ScoredPost]:
        """Posts below the hot threshold but above the floor, newest first."""
        bounds = new_range()
        return self.list_posts(sub, bounds.minimum, bounds.maximum, FeedOrder.NEW, limit)

    def view(
        self, order: FeedOrder, sub: str | None = ALL_SUBS, limit: int | None = None
    ) -> list[ScoredPost]:
        """Dispatch to :meth:`hot` or :meth:`new`."""
        if order is FeedOrder.HOT:
            return self.hot(sub, limit)
        return self.new(sub, limit)
