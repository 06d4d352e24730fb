# mypy: ignore-errors
"""Tests for the RPC-style routes used by the browser client."""

import pytest
from fastapi import status

from tiredd_core.services import ContentStore


@pytest.fixture()
def session_id(client) -> str:
    response = client.post("/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == status.HTTP_200_OK
    return response.json()["session"]["id"]


def _submit(client, session_id=None, **fields):
    post = {"sub": "python", "title": "Legacy", **fields}
    return client.post("/post", json={"post": post, "sessionId": session_id})


def test_login_and_read_session(client, session_id) -> None:
    response = client.post("/readSession", json={"sessionId": session_id})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["session"]["id"] == session_id
    assert body["session"]["userId"] == body["account"]["id"]
    assert body["account"]["username"] == "alice"


def test_read_session_unknown(client) -> None:
    response = client.post("/readSession", json={"sessionId": "bogus"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "unauthenticated"}


def test_login_wrong_password(client, session_id) -> None:
    response = client.post("/login", json={"username": "alice", "password": "wrong"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "invalid_credentials"}


def test_submit_post_returns_record(client, session_id) -> None:
    response = _submit(client, session_id, url="https://example.com")

    assert response.status_code == status.HTTP_200_OK
    record = response.json()["post"]
    assert record["userName"] == "alice"
    assert record["url"] == "https://example.com"
    assert record["content"] == ""
    assert record["commentCount"] == 0
    assert record["score"] == 0


def test_submit_post_invalid(client) -> None:
    response = _submit(client, title="")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "invalid_content"}


def test_posts_hot_and_new(client, session_id, login) -> None:
    hot_id = _submit(client, session_id, title="hot").json()["post"]["id"]
    new_id = _submit(client, session_id, title="new").json()["post"]["id"]
    for _ in range(2):
        client.post("/upvotePost", json={"id": hot_id, "sessionId": login()})

    hot = client.post("/posts", json={"min": 2, "max": 0, "limit": 0, "sub": "all"}).json()
    new = client.post("/posts", json={"min": -20, "max": 1, "limit": 0, "sub": ""}).json()

    assert [r["id"] for r in hot["records"]] == [hot_id]
    assert hot["records"][0]["upvotes"] == 2
    assert [r["id"] for r in new["records"]] == [new_id]


def test_votes_on_posts_and_comments(client, session_id, login) -> None:
    post_id = _submit(client, session_id).json()["post"]["id"]
    client.post("/comment", json={"comment": {"content": "hi", "postId": post_id}})
    comment_id = client.post("/comments", json={"postId": post_id}).json()["records"][0]["id"]

    assert client.post("/downvotePost", json={"id": post_id, "sessionId": login()}).json() == {}
    assert client.post("/upvoteComment", json={"id": comment_id, "sessionId": login()}).json() == {}
    client.post("/downvoteComment", json={"id": comment_id, "sessionId": login()})
    client.post("/downvoteComment", json={"id": comment_id, "sessionId": login()})

    record = client.post("/comments", json={"postId": post_id}).json()["records"][0]
    assert (record["upvotes"], record["downvotes"], record["score"]) == (1, 2, -1)
    post = client.post("/posts", json={"max": 0, "sub": "python"}).json()["records"]
    assert post[0]["score"] == -1


def test_vote_without_session(client, session_id) -> None:
    post_id = _submit(client, session_id).json()["post"]["id"]

    response = client.post("/upvotePost", json={"id": post_id})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "unauthenticated"}


def test_comments_records(client, session_id) -> None:
    post_id = _submit(client, session_id).json()["post"]["id"]
    client.post(
        "/comment",
        json={"comment": {"content": "root", "postId": post_id}, "sessionId": session_id},
    )
    records = client.post("/comments", json={"postId": post_id}).json()["records"]
    client.post(
        "/comment",
        json={"comment": {"content": "reply", "postId": post_id, "parent": records[0]["id"]}},
    )

    records = client.post("/comments", json={"postId": post_id}).json()["records"]

    assert [r["content"] for r in records] == ["root", "reply"]
    assert records[0]["parent"] is None
    assert records[0]["userName"] == "alice"
    assert records[1]["parent"] == records[0]["id"]
    assert records[1]["postId"] == post_id


def test_comment_on_missing_post(client) -> None:
    response = client.post("/comment", json={"comment": {"content": "hi", "postId": 999}})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "not_found"}


def test_posts_without_limit_returns_every_match(client, db_session) -> None:
    store = ContentStore(db_session)
    for index in range(150):
        store.create_post(None, sub="python", title=f"post {index}")

    response = client.post("/posts", json={"min": -20, "max": 1, "sub": "all"})

    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()["records"]) == 150
