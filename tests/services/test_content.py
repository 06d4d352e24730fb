# mypy: ignore-errors
"""Tests for post and comment creation."""

import pytest

from tiredd_core.core.errors import InvalidContentError, InvalidParentError, NotFoundError
from tiredd_core.models import ItemKind
from tiredd_core.services import ContentStore, ScoreLedger


def test_create_post_opens_zeroed_entry(db_session, author) -> None:
    store = ContentStore(db_session)

    scored = store.create_post(author, sub="python", title="Hello", url="https://example.com")

    assert scored.score == 0
    assert scored.post.author_id == author.account_id
    assert scored.post.author_name == "alice"
    assert scored.post.comment_count == 0
    entry = ScoreLedger(db_session).get(scored.post.id, ItemKind.POST)
    assert (entry.upvotes, entry.downvotes) == (0, 0)


def test_create_post_anonymous(db_session) -> None:
    scored = ContentStore(db_session).create_post(None, sub="python", content="just text")

    assert scored.post.author_id is None
    assert scored.post.content == "just text"


def test_create_post_strips_fields(db_session, author) -> None:
    scored = ContentStore(db_session).create_post(author, sub="  python ", title="  Hi  ", url="   ")

    assert scored.post.sub == "python"
    assert scored.post.title == "Hi"
    assert scored.post.url is None


@pytest.mark.parametrize(
    "fields",
    [
        {"sub": "", "title": "t"},
        {"sub": "x" * 51, "title": "t"},
        {"sub": "python"},
        {"sub": "python", "title": "   ", "url": "", "content": "  "},
        {"sub": "python", "title": "t" * 201},
        {"sub": "python", "url": "u" * 201},
        {"sub": "python", "content": "c" * 3001},
    ],
)
def test_create_post_rejects_invalid_content(db_session, author, fields) -> None:
    with pytest.raises(InvalidContentError):
        ContentStore(db_session).create_post(author, **fields)


def test_get_post_missing(db_session) -> None:
    with pytest.raises(NotFoundError):
        ContentStore(db_session).get_post(999)


def test_create_comment_increments_count(db_session, author, test_post) -> None:
    store = ContentStore(db_session)

    first = store.create_comment(author, test_post.post.id, "first!")
    store.create_comment(None, test_post.post.id, "reply", parent_id=first.comment.id)

    assert first.top_level is True
    assert first.score == 0
    assert store.get_post(test_post.post.id).post.comment_count == 2
    assert ScoreLedger(db_session).get(first.comment.id, ItemKind.COMMENT).score == 0


def test_create_comment_missing_post(db_session, author) -> None:
    with pytest.raises(NotFoundError):
        ContentStore(db_session).create_comment(author, 999, "hello")


@pytest.mark.parametrize("content", ["", "   ", "c" * 3001])
def test_create_comment_rejects_invalid_content(db_session, author, test_post, content) -> None:
    with pytest.raises(InvalidContentError):
        ContentStore(db_session).create_comment(author, test_post.post.id, content)


def test_create_comment_rejects_parent_on_other_post(db_session, author, test_post) -> None:
    store = ContentStore(db_session)
    other = store.create_post(author, sub="python", title="Other")
    foreign = store.create_comment(author, other.post.id, "elsewhere")

    with pytest.raises(InvalidParentError):
        store.create_comment(author, test_post.post.id, "reply", parent_id=foreign.comment.id)
    with pytest.raises(InvalidParentError):
        store.create_comment(author, test_post.post.id, "reply", parent_id=12345)

    assert store.get_post(test_post.post.id).post.comment_count == 0
