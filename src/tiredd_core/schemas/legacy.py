"""Request/response shapes spoken by the original browser client.

Field names follow the client's camelCase JSON; Python attributes stay
snake_case through aliases.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tiredd_core.models import Account, AccountSession
from tiredd_core.services.content import ScoredComment, ScoredPost


class LegacyModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LegacyPostBody(LegacyModel):
    sub: str = ""
    title: str | None = None
    url: str | None = None
    content: str = ""


class LegacyPostRequest(LegacyModel):
    post: LegacyPostBody
    session_id: str | None = Field(None, alias="sessionId")


class LegacyPostsRequest(LegacyModel):
    min: int | None = None
    max: int | None = None
    limit: int = 0
    sub: str = ""


class LegacyVoteRequest(LegacyModel):
    id: int
    session_id: str | None = Field(None, alias="sessionId")


class LegacyCommentBody(LegacyModel):
    content: str = ""
    post_id: int = Field(..., alias="postId")
    parent: int | None = None


class LegacyCommentRequest(LegacyModel):
    comment: LegacyCommentBody
    session_id: str | None = Field(None, alias="sessionId")


class LegacyCommentsRequest(LegacyModel):
    post_id: int = Field(..., alias="postId")


class LegacyLoginRequest(LegacyModel):
    username: str
    password: str


class LegacyReadSessionRequest(LegacyModel):
    session_id: str | None = Field(None, alias="sessionId")


def _timestamp(value: datetime) -> str:
    return value.isoformat()


def post_record(scored: ScoredPost) -> dict[str, Any]:
    """Render a post the way the client's ``Post`` interface expects it."""
    post = scored.post
    return {
        "id": post.id,
        "userId": post.author_id,
        "userName": post.author_name or "",
        "content": post.content,
        "created": _timestamp(post.created_at),
        "upvotes": scored.upvotes,
        "downvotes": scored.downvotes,
        "score": scored.score,
        "title": post.title or "",
        "url": post.url or "",
        "sub": post.sub,
        "commentCount": post.comment_count,
    }


def comment_record(scored: ScoredComment) -> dict[str, Any]:
    """Render a comment the way the client's ``Comment`` interface expects it."""
    comment = scored.comment
    return {
        "id": comment.id,
        "content": comment.content,
        "parent": None if scored.top_level else comment.parent_id,
        "upvotes": scored.upvotes,
        "downvotes": scored.downvotes,
        "score": scored.score,
        "postId": comment.post_id,
        "userName": comment.author_name or "",
        "userId": comment.author_id,
        "created": _timestamp(comment.created_at),
    }


def session_record(session: AccountSession, token: str) -> dict[str, Any]:
    return {
        "id": token,
        "userId": session.account_id,
        "created": _timestamp(session.created_at),
        "expires": _timestamp(session.expires_at),
    }


def account_record(account: Account) -> dict[str, Any]:
    return {"id": account.id, "username": account.username}
