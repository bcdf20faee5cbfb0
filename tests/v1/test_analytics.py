# tests/v1/test_analytics.py
"""Tests for the analytics endpoint."""

import pytest
from fastapi import status


def test_analytics_with_top_writings(client, store, test_user, other_user, auth_token) -> None:
    first = store.create_writing(test_user.id, "First", "Body", is_public=True)
    second = store.create_writing(test_user.id, "Second", "Body", is_public=True)
    store.create_writing(test_user.id, "Draft", "Body")
    for _ in range(3):
        store.increment_views(second.id)
    store.increment_views(first.id)
    store.vote_writing(first.id, other_user.id, "up")
    store.increment_shares(first.id)

    response = client.get("/api/v1/analytics", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    analytics = response.json()["analytics"]
    assert analytics["userId"] == test_user.id
    assert analytics["totalViews"] == 4
    assert analytics["totalEarnings"] == pytest.approx(0.4)
    assert analytics["totalUpvotes"] == 1
    assert analytics["totalShares"] == 1
    assert analytics["writingsCount"] == 3
    assert [w["title"] for w in analytics["topWritings"]] == ["Second", "First"]
    assert analytics["topWritings"][1] == {
        "id": first.id,
        "title": "First",
        "views": 1,
        "upvotes": 1,
        "shares": 1,
    }


def test_analytics_requires_auth(client) -> None:
    response = client.get("/api/v1/analytics")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
