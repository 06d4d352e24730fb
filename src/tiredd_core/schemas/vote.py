"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, Field

from tiredd_core.models import ItemKind, VoteDirection


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    session_id: str | None = Field(None, description="Session token of the voter")
    item_id: int
    kind: ItemKind = Field(ItemKind.POST, description="post or comment")
    direction: VoteDirection = Field(..., description="1 for upvote, -1 for downvote")


class VoteResponse(BaseModel):
    """Acknowledgement of a vote with the item's new score."""

    status: str = "success"
    score: int
