from __future__ import annotations

from jobfeed.crawlers.base import JobPosting
from jobfeed.utils.dedupe import dedupe_by_apply_url


def test_first_posting_per_apply_url_wins():
    first = JobPosting.build("Acme", "Engineer", "Canada", "https://x.com/job/1", "Eng")
    other = JobPosting.build("Beta", "Designer", "USA", "https://x.com/job/2")
    dup = JobPosting.build("Beta", "Senior Engineer", "Toronto, Canada", "https://x.com/job/1", "Platform")

    out = dedupe_by_apply_url([first, other, dup])

    assert out == [first, other]
