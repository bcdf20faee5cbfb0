"""Fixed sample data loaded into a fresh store at process start."""

from __future__ import annotations

import logging
from datetime import timedelta

from authentiwrite.services.store import Store

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def seed_sample_data(store: Store) -> None:
    """Populate ``store`` with two verified writers who upvote each other.

    Counters are written straight onto the returned records so the feeds
    have something to rank on first boot.
    """
    jane = store.create_user(
        gov_id="GOV123456",
        email="writer@example.com",
        name="Jane Writer",
        verified=True,
        bio="Professional writer and storyteller",
    )
    john = store.create_user(
        gov_id="GOV789012",
        email="author@example.com",
        name="John Author",
        verified=True,
        bio="Published author and blogger",
    )

    samples = (
        (
            jane,
            john,
            "The Future of Human Writing",
            "In an age where AI can generate text at lightning speed, human writing has "
            "become more precious than ever. This article explores why authentic human "
            "creativity matters...",
            1250,
            45,
            ONE_DAY,
        ),
        (
            john,
            jane,
            "My Journey as a Writer",
            "Writing has always been my passion. From the first story I wrote as a child "
            "to my published novels today, every word has been crafted with care and "
            "intention...",
            890,
            32,
            2 * ONE_DAY,
        ),
    )

    for author, voter, title, content, views, shares, age in samples:
        writing = store.create_writing(
            author_id=author.id,
            title=title,
            content=content,
            template="article",
            is_public=True,
        )
        writing.timestamp = writing.timestamp - age
        writing.last_modified = writing.timestamp
        writing.views = views
        writing.shares = shares
        store.vote_writing(writing.id, voter.id, "up")

        analytics = store.get_analytics(author.id)
        if analytics is not None:
            analytics.total_views = views
            analytics.total_shares = shares
            analytics.total_earnings = views * store.earnings_per_view

    logger.info("Seeded sample writers %s and %s", jane.id, john.id)
