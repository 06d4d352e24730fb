"""Content store: creation and lookup of posts and comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from tiredd_core.core.errors import InvalidContentError, InvalidParentError, NotFoundError
from tiredd_core.core.settings import settings
from tiredd_core.db.transaction import run_read, run_transaction
from tiredd_core.models import Comment, ItemKind, Post, ScoreEntry
from tiredd_core.services.identity import AccountIdentity
from tiredd_core.services.ledger import ScoreLedger

logger = logging.getLogger(__name__)

__all__ = ["ContentStore", "ScoredComment", "ScoredPost"]


@dataclass(frozen=True)
class ScoredPost:
    """A post joined with its live counters."""

    post: Post
    upvotes: int
    downvotes: int

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


@dataclass(frozen=True)
class ScoredComment:
    """A comment joined with its live counters.

    ``top_level`` is True when the comment has no parent, or its parent is not
    among the post's comments and it should be presented at the root.
    """

    comment: Comment
    upvotes: int
    downvotes: int
    top_level: bool

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ContentStore:
    """Owns post and comment records and their lifecycle."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.ledger = ScoreLedger(db)

    def create_post(
        self,
        author: AccountIdentity | None,
        sub: str,
        title: str | None = None,
        url: str | None = None,
        content: str | None = None,
    ) -> ScoredPost:
        """Create a post and its zeroed score entry in one transaction.

        Raises:
            InvalidContentError: If the sub is missing, none of title/url/content
                carries text, or a field exceeds its length limit.
        """
        sub_name = _clean(sub)
        title = _clean(title)
        url = _clean(url)
        body = content.strip() if content else ""

        if sub_name is None or len(sub_name) > settings.max_sub_length:
            raise InvalidContentError("sub")
        if title is None and url is None and not body:
            raise InvalidContentError("empty")
        if title is not None and len(title) > settings.max_title_length:
            raise InvalidContentError("title")
        if url is not None and len(url) > settings.max_url_length:
            raise InvalidContentError("url")
        if len(body) > settings.max_content_length:
            raise InvalidContentError("content")

        def _insert() -> Post:
            post = Post(
                author_id=author.account_id if author else None,
                author_name=author.username if author else None,
                sub=sub_name,
                title=title,
                url=url,
                content=body,
                comment_count=0,
            )
            self.db.add(post)
            self.db.flush()
            self.ledger.open_entry(post.id, ItemKind.POST)
            self.db.flush()
            return post

        post = run_transaction(self.db, _insert)
        logger.info("Created post %s in sub %s", post.id, post.sub)
        return ScoredPost(post=post, upvotes=0, downvotes=0)

    def create_comment(
        self,
        author: AccountIdentity | None,
        post_id: int,
        content: str,
        parent_id: int | None = None,
    ) -> ScoredComment:
        """Create a comment, bump the post's comment count and open its score entry.

        Raises:
            NotFoundError: If the post does not exist.
            InvalidParentError: If ``parent_id`` is set but is not a comment of
                the same post.
            InvalidContentError: If the content is empty or too long.
        """
        body = content.strip() if content else ""
        if not body or len(body) > settings.max_content_length:
            raise InvalidContentError("content")

        if self.db.get(Post, post_id) is None:
            raise NotFoundError(ItemKind.POST.value, post_id)
        if parent_id is not None:
            parent = self.db.get(Comment, parent_id)
            if parent is None or parent.post_id != post_id:
                raise InvalidParentError(parent_id)

        def _insert() -> Comment:
            comment = Comment(
                post_id=post_id,
                parent_id=parent_id,
                author_id=author.account_id if author else None,
                author_name=author.username if author else None,
                content=body,
            )
            self.db.add(comment)
            self.db.flush()
            self.ledger.open_entry(comment.id, ItemKind.COMMENT)
            self.db.execute(
                update(Post)
                .where(Post.id == post_id)
                .values(comment_count=Post.comment_count + 1)
                .execution_options(synchronize_session=False)
            )
            self.db.flush()
            return comment

        comment = run_transaction(self.db, _insert)
        logger.info("Created comment %s on post %s", comment.id, post_id)
        return ScoredComment(comment=comment, upvotes=0, downvotes=0, top_level=parent_id is None)

    def get_post(self, post_id: int) -> ScoredPost:
        """Return a post with its live score.

        Raises:
            NotFoundError: If the post does not exist.
        """
        stmt = (
            select(Post, ScoreEntry.upvotes, ScoreEntry.downvotes)
            .join(
                ScoreEntry,
                (ScoreEntry.item_id == Post.id) & (ScoreEntry.kind == ItemKind.POST),
            )
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        row = run_read(self.db, lambda: self.db.execute(stmt).first())
        if row is None:
            raise NotFoundError(ItemKind.POST.value, post_id)
        post, upvotes, downvotes = row
        return ScoredPost(post=post, upvotes=upvotes, downvotes=downvotes)

    def list_comments_for_post(self, post_id: int) -> list[Comment]:
        """Return the post's comments in creation order."""
        return list(
            self.db.execute(
                select(Comment)
                .where(Comment.post_id == post_id)
                .order_by(Comment.created_at, Comment.id)
            ).scalars()
        )
