# src/tiredd_core/models/__init__.py
"""SQLAlchemy models for the Tiredd core."""

from .account import Account, AccountSession
from .post import Comment, Post
from .score import ItemKind, ScoreEntry, VoteDirection
from .vote import VoteRecord

__all__ = [
    "Account", "AccountSession",
    "Comment", "Post",
    "ItemKind", "ScoreEntry", "VoteDirection",
    "VoteRecord",
]
