"""Endpoint pool: per-call shuffled ordering of the configured instances."""

import random
from typing import Iterable, Optional


def select_endpoints(endpoints: Optional[Iterable[Optional[str]]], rng: Optional[random.Random] = None) -> list[str]:
    """Drop empty entries, trim whitespace and trailing slashes, and return the rest in random order.

    May return an empty list; callers check before use.
    """
    cleaned = [e.strip().rstrip("/") for e in (endpoints or []) if e and e.strip().rstrip("/")]
    if len(cleaned) > 1:
        (rng or random).shuffle(cleaned)
    return cleaned
