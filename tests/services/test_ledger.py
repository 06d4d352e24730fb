# mypy: ignore-errors
"""Tests for the score ledger, including concurrent increments."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from tiredd_core.core.errors import NotFoundError
from tiredd_core.models import ItemKind, VoteDirection
from tiredd_core.services import ScoreLedger


def _open(session_factory, item_id, kind=ItemKind.POST):
    with session_factory() as db:
        ScoreLedger(db).open_entry(item_id, kind)
        db.commit()


def _vote(session_factory, item_id, kind, direction):
    with session_factory() as db:
        return ScoreLedger(db).increment(item_id, kind, direction)


def _counters(session_factory, item_id, kind=ItemKind.POST):
    with session_factory() as db:
        entry = ScoreLedger(db).get(item_id, kind)
        return entry.upvotes, entry.downvotes, entry.score


def test_open_entry_starts_at_zero(db_session) -> None:
    ledger = ScoreLedger(db_session)
    ledger.open_entry(7, ItemKind.POST)
    db_session.commit()

    entry = ledger.get(7, ItemKind.POST)
    assert (entry.upvotes, entry.downvotes, entry.score) == (0, 0, 0)


def test_increment_returns_new_score(db_session) -> None:
    ledger = ScoreLedger(db_session)
    ledger.open_entry(1, ItemKind.POST)
    db_session.commit()

    assert ledger.increment(1, ItemKind.POST, VoteDirection.UP) == 1
    assert ledger.increment(1, ItemKind.POST, VoteDirection.UP) == 2
    assert ledger.increment(1, ItemKind.POST, VoteDirection.DOWN) == 1

    entry = ledger.get(1, ItemKind.POST)
    assert (entry.upvotes, entry.downvotes) == (2, 1)


def test_score_may_go_negative(db_session) -> None:
    ledger = ScoreLedger(db_session)
    ledger.open_entry(1, ItemKind.COMMENT)
    db_session.commit()

    for _ in range(3):
        ledger.increment(1, ItemKind.COMMENT, VoteDirection.DOWN)

    assert ledger.get(1, ItemKind.COMMENT).score == -3


def test_kinds_are_independent(db_session) -> None:
    ledger = ScoreLedger(db_session)
    ledger.open_entry(5, ItemKind.POST)
    ledger.open_entry(5, ItemKind.COMMENT)
    db_session.commit()

    ledger.increment(5, ItemKind.POST, VoteDirection.UP)

    assert ledger.get(5, ItemKind.POST).score == 1
    assert ledger.get(5, ItemKind.COMMENT).score == 0


def test_increment_missing_entry_raises_not_found(db_session) -> None:
    with pytest.raises(NotFoundError):
        ScoreLedger(db_session).increment(404, ItemKind.POST, VoteDirection.UP)


def test_get_missing_entry_raises_not_found(db_session) -> None:
    with pytest.raises(NotFoundError):
        ScoreLedger(db_session).get(404, ItemKind.COMMENT)


def test_scores_for_returns_only_requested_ids(db_session) -> None:
    ledger = ScoreLedger(db_session)
    for item_id in (1, 2, 3):
        ledger.open_entry(item_id, ItemKind.COMMENT)
    db_session.commit()
    ledger.increment(2, ItemKind.COMMENT, VoteDirection.UP)

    entries = ledger.scores_for(ItemKind.COMMENT, [2, 3, 99])

    assert set(entries) == {2, 3}
    assert entries[2].score == 1
    assert ledger.scores_for(ItemKind.COMMENT, []) == {}


@pytest.mark.parametrize("voters", [2, 10, 1000])
def test_concurrent_upvotes_all_land(file_sessions, voters) -> None:
    """Concurrent upvotes on one post compound; none are lost."""
    _open(file_sessions, 1)

    with ThreadPoolExecutor(max_workers=8) as pool:
        scores = list(
            pool.map(lambda _: _vote(file_sessions, 1, ItemKind.POST, VoteDirection.UP), range(voters))
        )

    assert _counters(file_sessions, 1) == (voters, 0, voters)
    # Each vote observed a distinct intermediate score.
    assert sorted(scores) == list(range(1, voters + 1))


def test_interleaved_votes_match_counts(file_sessions) -> None:
    """Randomly interleaved up/down votes across items net out exactly."""
    rng = random.Random(1234)
    items = [(item_id, kind) for item_id in (1, 2, 3) for kind in ItemKind]
    for item_id, kind in items:
        _open(file_sessions, item_id, kind)

    votes = [
        (*rng.choice(items), rng.choice(list(VoteDirection)))
        for _ in range(300)
    ]
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda vote: _vote(file_sessions, *vote), votes))

    for item_id, kind in items:
        ups = sum(1 for v in votes if v[:2] == (item_id, kind) and v[2] is VoteDirection.UP)
        downs = sum(1 for v in votes if v[:2] == (item_id, kind) and v[2] is VoteDirection.DOWN)
        assert _counters(file_sessions, item_id, kind) == (ups, downs, ups - downs)
