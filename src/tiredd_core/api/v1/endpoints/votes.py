# src/tiredd_core/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Tiredd API."""

from fastapi import APIRouter, status

from tiredd_core.api.v1.dependencies import VoteServiceDep
from tiredd_core.models import ItemKind
from tiredd_core.schemas.auth import SessionRequest
from tiredd_core.schemas.vote import VoteCreate, VoteResponse

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("/", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
def cast_vote(vote_data: VoteCreate, votes: VoteServiceDep) -> VoteResponse:
    """Cast an up or down vote on a post or comment."""
    score = votes.cast_vote(
        vote_data.session_id,
        vote_data.item_id,
        vote_data.kind,
        vote_data.direction,
    )
    return VoteResponse(score=score)


@router.post("/{kind}/{item_id}/mine")
def get_my_vote(
    kind: ItemKind,
    item_id: int,
    payload: SessionRequest,
    votes: VoteServiceDep,
) -> dict[str, int]:
    """Get the caller's recorded vote on an item (0 when none)."""
    return {"direction": votes.vote_of(payload.session_id, item_id, kind)}
