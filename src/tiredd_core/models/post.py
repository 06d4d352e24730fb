# src/tiredd_core/models/post.py
"""SQLAlchemy models for posts and their comments."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tiredd_core.db.session import Base
from tiredd_core.db.time import utcnow


class Post(Base):
    """Submission in a sub-community.

    Content fields never change after creation; only ``comment_count`` moves.
    The score lives in ``score_entry`` under (id, "post").
    """

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_sub_created", "sub", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Null for anonymous submissions.
    author_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("account.id"),
        nullable=True,
    )
    author_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sub: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Comment(Base):
    """Reply to a post, optionally nested under another comment of the same post."""

    __tablename__ = "comment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id"),
        nullable=False,
        index=True,
    )
    # Top-level comments have parent_id = NULL.
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("comment.id"),
        nullable=True,
    )
    author_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("account.id"),
        nullable=True,
    )
    author_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
