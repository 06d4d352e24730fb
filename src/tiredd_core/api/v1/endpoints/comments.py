"""Comment submission endpoint for the Tiredd API."""

from fastapi import APIRouter, status

from tiredd_core.api.v1.dependencies import ContentStoreDep, IdentityDep
from tiredd_core.core.errors import UnauthenticatedError
from tiredd_core.core.settings import settings
from tiredd_core.schemas.comment import CommentCreate, CommentResponse

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_data: CommentCreate,
    identity: IdentityDep,
    store: ContentStoreDep,
) -> CommentResponse:
    """Add a comment to a post, optionally under another comment of that post."""
    author = identity.resolve_optional(comment_data.session_id)
    if author is None and not settings.allow_anonymous_content:
        raise UnauthenticatedError()
    scored = store.create_comment(
        author,
        post_id=comment_data.post_id,
        content=comment_data.content,
        parent_id=comment_data.parent_id,
    )
    return CommentResponse.from_scored(scored)
