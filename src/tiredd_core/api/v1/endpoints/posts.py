"""Post and feed endpoints for the Tiredd API."""

from fastapi import APIRouter, Query, status

from tiredd_core.api.v1.dependencies import (
    CommentAssemblerDep,
    ContentStoreDep,
    FeedDep,
    IdentityDep,
)
from tiredd_core.core.errors import UnauthenticatedError
from tiredd_core.core.settings import settings
from tiredd_core.schemas.comment import CommentResponse, CommentTreeResponse
from tiredd_core.schemas.post import PostCreate, PostResponse
from tiredd_core.services.feed import ALL_SUBS, FeedOrder

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
def list_posts(
    feed: FeedDep,
    sub: str = Query(ALL_SUBS, description='Sub-community name or "all"'),
    view: FeedOrder | None = Query(None, description="Preset score range: hot or new"),
    score_min: int | None = Query(None, description="Inclusive lower score bound"),
    score_max: int | None = Query(None, description="Inclusive upper score bound"),
    order_by: FeedOrder = Query(FeedOrder.NEW, description="Ordering when no view is given"),
    limit: int | None = Query(None, ge=1, description="Maximum number of posts to return"),
) -> list[PostResponse]:
    """List posts by sub and live score.

    With ``view`` the hot/new preset ranges apply and the explicit bounds are
    ignored; without it the bounds and ordering are taken as given.
    """
    if view is not None:
        posts = feed.view(view, sub, limit)
    else:
        posts = feed.list_posts(sub, score_min, score_max, order_by, limit)
    return [PostResponse.from_scored(post) for post in posts]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, store: ContentStoreDep) -> PostResponse:
    """Get a specific post with its live score."""
    return PostResponse.from_scored(store.get_post(post_id))


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
def get_post_comments(post_id: int, assembler: CommentAssemblerDep) -> list[CommentResponse]:
    """Get a post's comments in creation order with live scores."""
    return [CommentResponse.from_scored(c) for c in assembler.comments_for_post(post_id)]


@router.get("/{post_id}/comments/tree", response_model=list[CommentTreeResponse])
def get_post_comment_tree(
    post_id: int,
    assembler: CommentAssemblerDep,
) -> list[CommentTreeResponse]:
    """Get a post's comments with replies nested under their parents."""
    return [CommentTreeResponse.from_node(node) for node in assembler.tree(post_id)]


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    identity: IdentityDep,
    store: ContentStoreDep,
) -> PostResponse:
    """Submit a post; a supplied session token must be valid."""
    author = identity.resolve_optional(post_data.session_id)
    if author is None and not settings.allow_anonymous_content:
        raise UnauthenticatedError()
    scored = store.create_post(
        author,
        sub=post_data.sub,
        title=post_data.title,
        url=post_data.url,
        content=post_data.content,
    )
    return PostResponse.from_scored(scored)
