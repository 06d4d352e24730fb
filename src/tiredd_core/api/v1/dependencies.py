"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from tiredd_core.db.session import get_db
from tiredd_core.services import (
    AccountDirectory,
    CommentTreeAssembler,
    ContentStore,
    FeedPartitioner,
    IdentityResolver,
    VoteService,
)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_accounts(db: SessionDep) -> AccountDirectory:
    return AccountDirectory(db)


def get_identity(db: SessionDep) -> IdentityResolver:
    return IdentityResolver(db)


def get_content_store(db: SessionDep) -> ContentStore:
    return ContentStore(db)


def get_feed(db: SessionDep) -> FeedPartitioner:
    return FeedPartitioner(db)


def get_comment_assembler(db: SessionDep) -> CommentTreeAssembler:
    return CommentTreeAssembler(db)


def get_vote_service(db: SessionDep) -> VoteService:
    return VoteService(db)


AccountsDep = Annotated[AccountDirectory, Depends(get_accounts)]
IdentityDep = Annotated[IdentityResolver, Depends(get_identity)]
ContentStoreDep = Annotated[ContentStore, Depends(get_content_store)]
FeedDep = Annotated[FeedPartitioner, Depends(get_feed)]
CommentAssemblerDep = Annotated[CommentTreeAssembler, Depends(get_comment_assembler)]
VoteServiceDep = Annotated[VoteService, Depends(get_vote_service)]
