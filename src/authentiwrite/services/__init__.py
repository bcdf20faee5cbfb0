"""Service layer: the in-memory store and its start-up data."""

from .seed import seed_sample_data
from .store import Store

__all__ = ["Store", "seed_sample_data"]
