from __future__ import annotations

from typing import Any

from jobfeed.crawlers.base import AdapterKind, JobPosting, SchemaViolation, SourceAdapter
from jobfeed.crawlers.http_helpers import fetch_json
from jobfeed.crawlers.normalize import matches_region

PAGE_LIMIT = 200


def _build_postings(company: str, payload: Any, region_tokens: list[str]) -> list[JobPosting]:
    if not isinstance(payload, list):
        raise SchemaViolation(f"expected a JSON array of postings, got {type(payload).__name__}")

    postings: list[JobPosting] = []
    for item in payload:
        categories = item.get("categories") if isinstance(item, dict) else None
        location = categories.get("location") if isinstance(categories, dict) else None
        if not matches_region(location, region_tokens):
            continue

        posting = JobPosting.build(
            company,
            title=item["text"],
            location=location,
            apply_url=item["applyUrl"],
            category=categories.get("team"),
        )
        if posting.title and posting.apply_url:
            postings.append(posting)
    return postings


class LeverAdapter(SourceAdapter):
    kind = AdapterKind.LEVER

    @property
    def url(self) -> str:
        return f"{self.settings.lever_api_base.rstrip('/')}/v0/postings/{self.source.locator}"

    def collect(self) -> list[JobPosting]:
        payload = fetch_json(
            self.url,
            self.settings.request_timeout_s,
            self.settings.user_agent,
            client=self.client,
            params={"limit": PAGE_LIMIT},
        )
        return _build_postings(self.source.name, payload, self.region_tokens)
