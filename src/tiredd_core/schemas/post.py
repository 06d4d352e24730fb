"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from tiredd_core.services.content import ScoredPost


class PostCreate(BaseModel):
    """Schema for submitting a new post."""

    session_id: str | None = Field(None, description="Session token; omit to post anonymously")
    sub: str = Field(..., description="Sub-community name")
    title: str | None = Field(None, description="Optional title")
    url: str | None = Field(None, description="Optional external link")
    content: str = Field("", description="Body text")


class PostResponse(BaseModel):
    """Schema for post information returned by the API, with its live score."""

    id: int
    author_id: int | None
    author_name: str | None
    sub: str
    title: str | None
    url: str | None
    content: str
    created_at: datetime
    comment_count: int
    upvotes: int
    downvotes: int
    score: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_scored(cls, scored: ScoredPost) -> "PostResponse":
        post = scored.post
        return cls(
            id=post.id,
            author_id=post.author_id,
            author_name=post.author_name,
            sub=post.sub,
            title=post.title,
            url=post.url,
            content=post.content,
            created_at=post.created_at,
            comment_count=post.comment_count,
            upvotes=scored.upvotes,
            downvotes=scored.downvotes,
            score=scored.score,
        )
