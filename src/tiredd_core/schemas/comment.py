"""Comment-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from tiredd_core.services.comments import CommentNode
from tiredd_core.services.content import ScoredComment


class CommentCreate(BaseModel):
    """Schema for submitting a comment."""

    session_id: str | None = Field(None, description="Session token; omit to comment anonymously")
    post_id: int = Field(..., description="Post the comment belongs to")
    parent_id: int | None = Field(None, description="Parent comment on the same post")
    content: str = Field(..., description="Comment text")


class CommentResponse(BaseModel):
    """Schema for a comment with its live score."""

    id: int
    post_id: int
    parent_id: int | None
    top_level: bool
    author_id: int | None
    author_name: str | None
    content: str
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int

    @classmethod
    def from_scored(cls, scored: ScoredComment) -> CommentResponse:
        comment = scored.comment
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            top_level=scored.top_level,
            author_id=comment.author_id,
            author_name=comment.author_name,
            content=comment.content,
            created_at=comment.created_at,
            upvotes=scored.upvotes,
            downvotes=scored.downvotes,
            score=scored.score,
        )


class CommentTreeResponse(CommentResponse):
    """Comment with its replies nested beneath it."""

    replies: list[CommentTreeResponse] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> CommentTreeResponse:
        base = CommentResponse.from_scored(node.comment)
        return cls(
            **base.model_dump(),
            replies=[cls.from_node(child) for child in node.replies],
        )
