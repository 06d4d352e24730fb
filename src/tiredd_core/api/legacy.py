# src/tiredd_core/api/legacy.py
"""Routes matching the original browser client's RPC-style paths.

Every call is a JSON ``POST``. Failures come back as ``{"error": reason}``
because that is where the client reads them from.
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from tiredd_core.api.errors import status_for
from tiredd_core.api.v1.dependencies import (
    AccountsDep,
    CommentAssemblerDep,
    ContentStoreDep,
    FeedDep,
    IdentityDep,
    VoteServiceDep,
)
from tiredd_core.core.errors import CoreError, UnauthenticatedError
from tiredd_core.core.settings import settings
from tiredd_core.models import ItemKind, VoteDirection
from tiredd_core.schemas.legacy import (
    LegacyCommentRequest,
    LegacyCommentsRequest,
    LegacyLoginRequest,
    LegacyPostRequest,
    LegacyPostsRequest,
    LegacyReadSessionRequest,
    LegacyVoteRequest,
    account_record,
    comment_record,
    post_record,
    session_record,
)
from tiredd_core.services.feed import ALL_SUBS, FeedOrder


class LegacyErrorRoute(APIRoute):
    """Route class rendering core failures as ``{"error": reason}``."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def _handler(request: Request) -> Response:
            try:
                return await handler(request)
            except CoreError as exc:
                return JSONResponse(status_code=status_for(exc), content={"error": exc.reason})

        return _handler


router = APIRouter(tags=["legacy"], route_class=LegacyErrorRoute)


@router.post("/post")
def submit_post(payload: LegacyPostRequest, identity: IdentityDep, store: ContentStoreDep) -> dict:
    author = identity.resolve_optional(payload.session_id)
    if author is None and not settings.allow_anonymous_content:
        raise UnauthenticatedError()
    scored = store.create_post(
        author,
        sub=payload.post.sub,
        title=payload.post.title,
        url=payload.post.url,
        content=payload.post.content,
    )
    return {"post": post_record(scored)}


@router.post("/posts")
def list_posts(payload: LegacyPostsRequest, feed: FeedDep) -> dict:
    """List posts; a minimum at or above the hot threshold means the hot view.

    A missing or non-positive maximum leaves the range open at the top.
    An absent limit reads up to ``FEED_MAX_LIMIT``.
    """
    hot = payload.min is not None and payload.min >= settings.hot_threshold
    posts = feed.list_posts(
        payload.sub or ALL_SUBS,
        score_min=payload.min,
        score_max=payload.max if payload.max and payload.max > 0 else None,
        order_by=FeedOrder.HOT if hot else FeedOrder.NEW,
        limit=payload.limit if payload.limit > 0 else settings.feed_max_limit,
    )
    return {"records": [post_record(post) for post in posts]}


def _vote(
    votes: VoteServiceDep,
    payload: LegacyVoteRequest,
    kind: ItemKind,
    direction: VoteDirection,
) -> dict:
    votes.cast_vote(payload.session_id, payload.id, kind, direction)
    return {}


@router.post("/upvotePost")
def upvote_post(payload: LegacyVoteRequest, votes: VoteServiceDep) -> dict:
    return _vote(votes, payload, ItemKind.POST, VoteDirection.UP)


@router.post("/downvotePost")
def downvote_post(payload: LegacyVoteRequest, votes: VoteServiceDep) -> dict:
    return _vote(votes, payload, ItemKind.POST, VoteDirection.DOWN)


@router.post("/upvoteComment")
def upvote_comment(payload: LegacyVoteRequest, votes: VoteServiceDep) -> dict:
    return _vote(votes, payload, ItemKind.COMMENT, VoteDirection.UP)


@router.post("/downvoteComment")
def downvote_comment(payload: LegacyVoteRequest, votes: VoteServiceDep) -> dict:
    return _vote(votes, payload, ItemKind.COMMENT, VoteDirection.DOWN)


@router.post("/comment")
def submit_comment(
    payload: LegacyCommentRequest,
    identity: IdentityDep,
    store: ContentStoreDep,
) -> dict:
    author = identity.resolve_optional(payload.session_id)
    if author is None and not settings.allow_anonymous_content:
        raise UnauthenticatedError()
    store.create_comment(
        author,
        post_id=payload.comment.post_id,
        content=payload.comment.content,
        parent_id=payload.comment.parent,
    )
    return {}


@router.post("/comments")
def list_comments(payload: LegacyCommentsRequest, assembler: CommentAssemblerDep) -> dict:
    comments = assembler.comments_for_post(payload.post_id)
    return {"records": [comment_record(comment) for comment in comments]}


@router.post("/login")
def login(payload: LegacyLoginRequest, accounts: AccountsDep) -> dict:
    _, token, session = accounts.login(payload.username, payload.password)
    return {"session": session_record(session, token)}


@router.post("/readSession")
def read_session(payload: LegacyReadSessionRequest, identity: IdentityDep) -> dict:
    account, session = identity.read_session(payload.session_id)
    return {
        "session": session_record(session, payload.session_id or ""),
        "account": account_record(account),
    }
