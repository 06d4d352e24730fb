"""Models capturing who voted on which item."""

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from tiredd_core.db.session import Base
from tiredd_core.models.score import ItemKind, ItemKindType


class VoteRecord(Base):
    """Per-account vote on a post or comment.

    Only written when single-vote enforcement is enabled; the counters in
    ``score_entry`` remain the source of truth for scores.
    """

    __tablename__ = "vote_record"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_vote_record_direction"),
    )

    # Composite primary key prevents duplicate votes from the same account.
    account_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    item_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    kind: Mapped[ItemKind] = mapped_column(ItemKindType, primary_key=True)

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
