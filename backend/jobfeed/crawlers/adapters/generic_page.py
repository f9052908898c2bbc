from __future__ import annotations
from urllib.parse import urljoin

from jobfeed.crawlers.base import AdapterKind, JobPosting, SourceAdapter
from jobfeed.crawlers.http_helpers import fetch_text, soup_links
from jobfeed.crawlers.normalize import matches_region

# Nearest ancestor whose text is used as the posting's surrounding context.
CONTEXT_TAGS = ["li", "div", "tr"]
TITLE_SEPARATOR = "–"


def _split_snippet(snippet: str) -> tuple[str, str]:
    """``"Title – Location"`` -> ``("Title", "Location")``; the location is empty without a dash."""
    parts = snippet.split(TITLE_SEPARATOR)
    location = parts[1] if len(parts) > 1 else ""
    return parts[0], location


def scrape_jobs_from_page(html: str, page_url: str, company: str, region_tokens: list[str]) -> list[JobPosting]:
    _soup, links = soup_links(html)
    jobs: list[JobPosting] = []
    seen: set[str] = set()

    for a in links:
        snippet = a.get_text().strip()
        if not snippet:
            continue

        container = a.find_parent(CONTEXT_TAGS)
        context = container.get_text() if container is not None else ""
        if not matches_region(snippet + context, region_tokens):
            continue

        full_url = urljoin(page_url, a["href"].strip())
        if full_url in seen:
            continue

        title, location = _split_snippet(snippet)
        posting = JobPosting.build(company, title=title, location=location, apply_url=full_url)
        if not posting.title:
            continue
        seen.add(full_url)
        jobs.append(posting)

    return jobs


class GenericPageAdapter(SourceAdapter):
    kind = AdapterKind.HTML

    def collect(self) -> list[JobPosting]:
        html = fetch_text(self.source.locator, self.settings.request_timeout_s, self.settings.user_agent, client=self.client)
        return scrape_jobs_from_page(html, self.source.locator, self.source.name, self.region_tokens)
