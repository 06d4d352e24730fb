"""Score ledger rows shared by every votable item kind."""

from __future__ import annotations

import enum

from sqlalchemy import BigInteger, CheckConstraint, Enum, Integer
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column

from tiredd_core.db.session import Base


class ItemKind(str, enum.Enum):
    """Tag distinguishing the votable item a score entry belongs to."""

    POST = "post"
    COMMENT = "comment"


class VoteDirection(enum.IntEnum):
    """Direction of a single vote; the value is its contribution to the score."""

    UP = 1
    DOWN = -1


ItemKindType = Enum(
    ItemKind,
    name="item_kind",
    native_enum=False,
    length=16,
    values_callable=lambda kinds: [kind.value for kind in kinds],
)


class ScoreEntry(Base):
    """Upvote/downvote counter pair for one (item, kind).

    The signed score is derived from the counters on every read, in Python and
    in SQL, and is never stored.
    """

    __tablename__ = "score_entry"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_score_entry_upvotes"),
        CheckConstraint("downvotes >= 0", name="ck_score_entry_downvotes"),
    )

    item_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    kind: Mapped[ItemKind] = mapped_column(ItemKindType, primary_key=True)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    @hybrid_property
    def score(self) -> int:
        return self.upvotes - self.downvotes
