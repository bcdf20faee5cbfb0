"""In-memory repository for users, writings, comments and analytics."""

from __future__ import annotations

import hashlib
import logging
import secrets
import time
import uuid
from datetime import UTC, datetime
from threading import RLock
from typing import Any, Final

from authentiwrite.models import Analytics, Comment, User, VoteType, Writing, WritingTemplate

__all__ = ["Store", "UPDATABLE_WRITING_FIELDS"]

logger = logging.getLogger(__name__)

DEFAULT_EARNINGS_PER_VIEW: Final[float] = 0.1

UPDATABLE_WRITING_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "title",
        "content",
        "template",
        "is_public",
        "background",
        "font_family",
        "color_grade",
        "images",
        "links",
    }
)


def _now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


class Store:
    """Authoritative in-memory state and the only mutator of every entity.

    Every public method runs inside a single re-entrant lock, so derived
    metrics updated alongside a mutation (vote then upvote rescan, view then
    earnings) are never observed half-applied. Unknown ids yield ``None`` or
    ``False``; the store never raises for them.
    """

    def __init__(self, earnings_per_view: float = DEFAULT_EARNINGS_PER_VIEW) -> None:
        self.earnings_per_view = earnings_per_view
        self._lock = RLock()
        self._users: dict[str, User] = {}
        self._writings: dict[str, Writing] = {}
        self._comments: dict[str, Comment] = {}
        self._analytics: dict[str, Analytics] = {}
        self._gov_id_index: dict[str, str] = {}
        self._email_index: dict[str, str] = {}

    @staticmethod
    def fingerprint(content: str) -> str:
        """Return a SHA-256 fingerprint of ``content`` salted with a creation nonce."""
        nonce = f"{int(time.time() * 1000)}:{secrets.token_hex(8)}"
        return hashlib.sha256(f"{content}{nonce}".encode("utf-8")).hexdigest()

    # User operations

    def create_user(
        self,
        gov_id: str,
        email: str,
        name: str,
        verified: bool,
        bio: str | None = None,
        avatar: str | None = None,
    ) -> User:
        """Register a user and its zeroed analytics record.

        Duplicate ``gov_id``/``email`` checks are the caller's job; a later
        registration overwrites the index entry.
        """
        with self._lock:
            user = User(
                id=_new_id(),
                gov_id=gov_id,
                email=email,
                name=name,
                verified=verified,
                bio=bio,
                avatar=avatar,
                created_at=_now(),
            )
            self._users[user.id] = user
            self._gov_id_index[gov_id] = user.id
            self._email_index[email] = user.id
            self._analytics[user.id] = Analytics(user_id=user.id)
            logger.debug("Created user %s", user.id)
            return user

    def get_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_gov_id(self, gov_id: str) -> User | None:
        with self._lock:
            user_id = self._gov_id_index.get(gov_id)
            return self._users.get(user_id) if user_id is not None else None

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            user_id = self._email_index.get(email)
            return self._users.get(user_id) if user_id is not None else None

    def follow_user(self, follower_id: str, following_id: str) -> bool:
        """Make ``follower_id`` follow ``following_id``.

        Returns False when either user is unknown, when they are the same
        user, or when the relationship already exists.
        """
        with self._lock:
            follower = self._users.get(follower_id)
            following = self._users.get(following_id)
            if follower is None or following is None or follower_id == following_id:
                return False
            if following_id in follower.following:
                return False

            follower.following.add(following_id)
            following.followers.add(follower_id)
            analytics = self._analytics.get(following_id)
            if analytics is not None:
                analytics.followers_count += 1
            logger.debug("User %s now follows %s", follower_id, following_id)
            return True

    def unfollow_user(self, follower_id: str, following_id: str) -> bool:
        """Remove a follow relationship; succeeds even if none existed."""
        with self._lock:
            follower = self._users.get(follower_id)
            following = self._users.get(following_id)
            if follower is None or following is None:
                return False

            follower.following.discard(following_id)
            following.followers.discard(follower_id)
            analytics = self._analytics.get(following_id)
            if analytics is not None:
                analytics.followers_count = max(0, analytics.followers_count - 1)
            logger.debug("User %s unfollowed %s", follower_id, following_id)
            return True

    # Writing operations

    def create_writing(
        self,
        author_id: str,
        title: str,
        content: str,
        template: WritingTemplate = "blank",
        is_public: bool = False,
        *,
        background: str | None = None,
        font_family: str | None = None,
        color_grade: str | None = None,
        images: list[str] | None = None,
        links: list[str] | None = None,
    ) -> Writing:
        """Create a writing and bump the author's ``writings_count``."""
        with self._lock:
            now = _now()
            writing = Writing(
                id=_new_id(),
                author_id=author_id,
                title=title,
                content=content,
                template=template,
                is_public=is_public,
                timestamp=now,
                last_modified=now,
                legal_hash=self.fingerprint(content),
                background=background,
                font_family=font_family,
                color_grade=color_grade,
                images=images,
                links=links,
            )
            self._writings[writing.id] = writing

            analytics = self._analytics.get(author_id)
            if analytics is not None:
                analytics.writings_count += 1
            logger.debug("Created writing %s by %s", writing.id, author_id)
            return writing

    def get_writing_by_id(self, writing_id: str) -> Writing | None:
        with self._lock:
            return self._writings.get(writing_id)

    def get_writings_by_author(self, author_id: str) -> list[Writing]:
        """Return the author's writings in no guaranteed order."""
        with self._lock:
            return [w for w in self._writings.values() if w.author_id == author_id]

    def get_public_writings(self) -> list[Writing]:
        """Return every public writing in no guaranteed order."""
        with self._lock:
            return [w for w in self._writings.values() if w.is_public]

    def update_writing(self, writing_id: str, **updates: Any) -> Writing | None:
        """Merge ``updates`` over an existing writing and refresh ``last_modified``.

        Only presentation and content fields are merged; identity, counters
        and ``legal_hash`` are ignored. The fingerprint is not recomputed.
        """
        with self._lock:
            writing = self._writings.get(writing_id)
            if writing is None:
                return None

            ignored = set(updates) - UPDATABLE_WRITING_FIELDS
            if ignored:
                logger.debug("Ignoring non-updatable writing fields: %s", sorted(ignored))
            for key, value in updates.items():
                if key in UPDATABLE_WRITING_FIELDS:
                    setattr(writing, key, value)
            writing.last_modified = _now()
            return writing

    def delete_writing(self, writing_id: str) -> bool:
        with self._lock:
            writing = self._writings.pop(writing_id, None)
            if writing is None:
                return False

            analytics = self._analytics.get(writing.author_id)
            if analytics is not None:
                analytics.writings_count = max(0, analytics.writings_count - 1)
            logger.debug("Deleted writing %s", writing_id)
            return True

    def vote_writing(self, writing_id: str, user_id: str, vote_type: VoteType) -> bool:
        """Record ``user_id``'s vote, replacing any earlier vote on the writing.

        An up-vote recomputes the author's ``total_upvotes`` by rescanning all
        of the author's writings; a down-vote leaves it as it was.
        """
        with self._lock:
            writing = self._writings.get(writing_id)
            if writing is None:
                return False

            writing.upvotes.discard(user_id)
            writing.downvotes.discard(user_id)
            if vote_type == "up":
                writing.upvotes.add(user_id)
            else:
                writing.downvotes.add(user_id)

            analytics = self._analytics.get(writing.author_id)
            if analytics is not None and vote_type == "up":
                # Full rescan rather than an incremental counter.
                analytics.total_upvotes = sum(
                    len(w.upvotes)
                    for w in self._writings.values()
                    if w.author_id == writing.author_id
                )
            logger.debug("User %s voted %s on %s", user_id, vote_type, writing_id)
            return True

    def increment_views(self, writing_id: str) -> None:
        with self._lock:
            writing = self._writings.get(writing_id)
            if writing is None:
                return

            writing.views += 1
            analytics = self._analytics.get(writing.author_id)
            if analytics is not None:
                analytics.total_views += 1
                analytics.total_earnings = analytics.total_views * self.earnings_per_view

    def increment_shares(self, writing_id: str) -> None:
        with self._lock:
            writing = self._writings.get(writing_id)
            if writing is None:
                return

            writing.shares += 1
            analytics = self._analytics.get(writing.author_id)
            if analytics is not None:
                analytics.total_shares += 1

    # Comment operations

    def create_comment(self, writing_id: str, author_id: str, content: str) -> Comment:
        """Attach a comment; callers check that the writing exists."""
        with self._lock:
            comment = Comment(
                id=_new_id(),
                writing_id=writing_id,
                author_id=author_id,
                content=content,
                timestamp=_now(),
            )
            self._comments[comment.id] = comment
            return comment

    def get_comments_by_writing(self, writing_id: str) -> list[Comment]:
        with self._lock:
            return [c for c in self._comments.values() if c.writing_id == writing_id]

    # Analytics operations

    def get_analytics(self, user_id: str) -> Analytics | None:
        with self._lock:
            return self._analytics.get(user_id)

    def get_top_writings(self, user_id: str, limit: int = 5) -> list[Writing]:
        """Return the user's public writings with the most views first."""
        with self._lock:
            writings = [
                w for w in self._writings.values() if w.author_id == user_id and w.is_public
            ]
            writings.sort(key=lambda w: w.views, reverse=True)
            return writings[:limit]

    # Feed operations

    def get_trending_writings(self, limit: int = 10) -> list[Writing]:
        """Rank public writings by trending score; ties keep insertion order."""
        with self._lock:
            public = [w for w in self._writings.values() if w.is_public]
            public.sort(key=lambda w: w.trending_score, reverse=True)
            return public[:limit]

    def get_following_feed(self, user_id: str, limit: int = 20) -> list[Writing]:
        """Return public writings by followed authors, newest first."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return []

            feed = [
                w
                for w in self._writings.values()
                if w.is_public and w.author_id in user.following
            ]
            feed.sort(key=lambda w: w.timestamp, reverse=True)
            return feed[:limit]
