from __future__ import annotations
from collections.abc import Iterable

from jobfeed.crawlers.base import JobPosting


def dedupe_by_apply_url(postings: Iterable[JobPosting]) -> list[JobPosting]:
    """Drop postings whose apply URL was already seen; first occurrence wins, order is kept."""
    seen: set[str] = set()
    out: list[JobPosting] = []
    for posting in postings:
        if posting.apply_url in seen:
            continue
        seen.add(posting.apply_url)
        out.append(posting)
    return out
