"""Comment tree assembler."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tiredd_core.core.errors import NotFoundError
from tiredd_core.db.transaction import run_read
from tiredd_core.models import Comment, ItemKind, Post, ScoreEntry
from tiredd_core.services.content import ContentStore, ScoredComment
from tiredd_core.services.ledger import ScoreLedger


@dataclass
class CommentNode:
    """A comment with its direct replies, in creation order."""

    comment: ScoredComment
    replies: list[CommentNode] = field(default_factory=list)


class CommentTreeAssembler:
    """Returns a post's comments with live scores, parent links preserved."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.store = ContentStore(db)
        self.ledger = ScoreLedger(db)

    def comments_for_post(self, post_id: int) -> list[ScoredComment]:
        """Return every comment of the post in creation order.

        Raises:
            NotFoundError: If the post does not exist.
        """
        loaded = run_read(self.db, lambda: self._load(post_id))
        if loaded is None:
            raise NotFoundError(ItemKind.POST.value, post_id)
        comments, entries = loaded
        known_ids = {comment.id for comment in comments}

        scored = []
        for comment in comments:
            entry = entries.get(comment.id)
            scored.append(
                ScoredComment(
                    comment=comment,
                    upvotes=entry.upvotes if entry else 0,
                    downvotes=entry.downvotes if entry else 0,
                    top_level=comment.parent_id is None or comment.parent_id not in known_ids,
                )
            )
        return scored

    def _load(self, post_id: int) -> tuple[list[Comment], dict[int, ScoreEntry]] | None:
        if self.db.get(Post, post_id) is None:
            return None
        comments = self.store.list_comments_for_post(post_id)
        entries = self.ledger.scores_for(ItemKind.COMMENT, [c.id for c in comments])
        return comments, entries

    def tree(self, post_id: int) -> list[CommentNode]:
        """Return the post's comments nested under their parents."""
        nodes: dict[int, CommentNode] = {}
        roots: list[CommentNode] = []
        for scored in self.comments_for_post(post_id):
            node = CommentNode(comment=scored)
            nodes[scored.comment.id] = node
            if scored.top_level:
                roots.append(node)
        for node in nodes.values():
            if not node.comment.top_level:
                nodes[node.comment.comment.parent_id].replies.append(node)
        return roots
