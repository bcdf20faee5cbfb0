# tests/v1/test_feed.py
"""Tests for the trending and following feeds."""

from datetime import timedelta

from fastapi import status


def test_trending_feed_ranks_and_attaches_authors(client, store, test_user) -> None:
    popular = store.create_writing(test_user.id, "Popular", "Body", is_public=True)
    quiet = store.create_writing(test_user.id, "Quiet", "Body", is_public=True)
    store.create_writing(test_user.id, "Draft", "Body")
    quiet.views = 100
    popular.views = 50
    popular.upvotes = {f"reader-{i}" for i in range(6)}

    response = client.get("/api/v1/feed")
    assert response.status_code == status.HTTP_200_OK
    writings = response.json()["writings"]
    assert [w["id"] for w in writings] == [popular.id, quiet.id]
    assert writings[0]["author"] == {
        "id": test_user.id,
        "name": test_user.name,
        "avatar": None,
        "verified": True,
    }


def test_following_feed(client, store, test_user, other_user, auth_token) -> None:
    store.follow_user(test_user.id, other_user.id)
    older = store.create_writing(other_user.id, "Older", "Body", is_public=True)
    newer = store.create_writing(other_user.id, "Newer", "Body", is_public=True)
    older.timestamp -= timedelta(hours=1)
    store.create_writing(test_user.id, "Mine", "Body", is_public=True)

    response = client.get("/api/v1/feed?type=following", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert [w["id"] for w in response.json()["writings"]] == [newer.id, older.id]


def test_following_feed_requires_auth(client) -> None:
    response = client.get("/api/v1/feed?type=following")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_unknown_feed_type(client) -> None:
    response = client.get("/api/v1/feed?type=random")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
