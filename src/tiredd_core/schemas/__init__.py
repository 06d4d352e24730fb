"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    ReadSessionResponse,
    SessionRequest,
    SessionResponse,
)
from .comment import CommentCreate, CommentResponse, CommentTreeResponse
from .post import PostCreate, PostResponse
from .vote import VoteCreate, VoteResponse

__all__ = [
    "AccountResponse", "LoginRequest", "LoginResponse",
    "ReadSessionResponse", "SessionRequest", "SessionResponse",
    "CommentCreate", "CommentResponse", "CommentTreeResponse",
    "PostCreate", "PostResponse",
    "VoteCreate", "VoteResponse",
]
