# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from authentiwrite.core.security import create_access_token
from authentiwrite.main import create_app
from authentiwrite.models import User, Writing
from authentiwrite.services.store import Store

_GOV_ID_COUNTER = count(100000)


def next_gov_id() -> str:
    """Return a well-formed, unused government ID."""
    return f"GOV{next(_GOV_ID_COUNTER):06d}"


def bearer(user: User) -> dict[str, str]:
    """Return authorization headers for ``user``."""
    return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}


@pytest.fixture()
def store() -> Store:
    """Provide an empty store for each test."""
    return Store()


@pytest.fixture()
def app(store: Store) -> FastAPI:
    return create_app(store=store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(store: Store) -> Callable[..., User]:
    """Return a factory that registers users directly in the store."""

    def _make_user(name: str = "Test Writer", **overrides: Any) -> User:
        gov_id = overrides.pop("gov_id", next_gov_id())
        email = overrides.pop("email", f"{gov_id.lower()}@example.com")
        return store.create_user(
            gov_id=gov_id,
            email=email,
            name=name,
            verified=overrides.pop("verified", True),
            **overrides,
        )

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create the primary test user."""
    return make_user("Test User")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create a second test user."""
    return make_user("Other User")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return bearer(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return bearer(other_user)


@pytest.fixture()
def test_writing(store: Store, test_user: User) -> Writing:
    """Create a public writing owned by the primary test user."""
    return store.create_writing(
        author_id=test_user.id,
        title="Test writing",
        content="Test writing content",
        template="article",
        is_public=True,
    )


@pytest.fixture()
def draft_writing(store: Store, test_user: User) -> Writing:
    """Create a private draft owned by the primary test user."""
    return store.create_writing(
        author_id=test_user.id,
        title="Private draft",
        content="Not ready yet",
        template="note",
        is_public=False,
    )
