# src/tiredd_core/services/__init__.py
"""Business logic services for the Tiredd core."""

from .accounts import AccountDirectory
from .comments import CommentNode, CommentTreeAssembler
from .content import ContentStore, ScoredComment, ScoredPost
from .feed import ALL_SUBS, FeedOrder, FeedPartitioner
from .identity import AccountIdentity, IdentityResolver
from .ledger import ScoreLedger
from .votes import VoteService

__all__ = [
    "ALL_SUBS",
    "AccountDirectory",
    "AccountIdentity",
    "CommentNode",
    "CommentTreeAssembler",
    "ContentStore",
    "FeedOrder",
    "FeedPartitioner",
    "IdentityResolver",
    "ScoreLedger",
    "ScoredComment",
    "ScoredPost",
    "VoteService",
]
