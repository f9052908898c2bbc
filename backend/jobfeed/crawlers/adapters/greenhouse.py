from __future__ import annotations

from typing import Any

from jobfeed.crawlers.base import AdapterKind, JobPosting, SchemaViolation, SourceAdapter
from jobfeed.crawlers.http_helpers import fetch_json
from jobfeed.crawlers.normalize import matches_region


def _first_department(job: dict[str, Any]) -> str | None:
    departments = job.get("departments")
    if isinstance(departments, list) and departments and isinstance(departments[0], dict):
        return departments[0].get("name")
    return None


def _build_postings(company: str, payload: Any, region_tokens: list[str]) -> list[JobPosting]:
    jobs = payload.get("jobs") if isinstance(payload, dict) else None
    if not isinstance(jobs, list):
        raise SchemaViolation("expected an object with a 'jobs' array")

    postings: list[JobPosting] = []
    for job in jobs:
        location = job["location"]["name"]
        if not matches_region(location, region_tokens):
            continue

        posting = JobPosting.build(
            company,
            title=job["title"],
            location=location,
            apply_url=job["absolute_url"],
            category=_first_department(job),
        )
        if posting.title and posting.apply_url:
            postings.append(posting)
    return postings


class GreenhouseAdapter(SourceAdapter):
    kind = AdapterKind.GREENHOUSE

    @property
    def url(self) -> str:
        return f"{self.settings.greenhouse_api_base.rstrip('/')}/v1/boards/{self.source.locator}/jobs"

    def collect(self) -> list[JobPosting]:
        payload = fetch_json(self.url, self.settings.request_timeout_s, self.settings.user_agent, client=self.client)
        return _build_postings(self.source.name, payload, self.region_tokens)
