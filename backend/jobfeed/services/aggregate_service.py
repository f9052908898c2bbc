from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import httpx

from jobfeed.core.config import Settings, settings as default_settings
from jobfeed.core.logging_utils import log_event
from jobfeed.crawlers.base import AdapterKind, JobPosting, SourceAdapter, SourceDescriptor
from jobfeed.crawlers.http_helpers import build_client
from jobfeed.crawlers.registry import ADAPTERS
from jobfeed.services.sources import build_registry
from jobfeed.utils.dedupe import dedupe_by_apply_url

LOGGER = logging.getLogger("jobfeed.aggregator")


@dataclass
class SourceStat:
    source: str
    kind: str
    fetched: int
    status: str
    error: str | None = None


@dataclass
class AggregateResult:
    """Ordered, deduplicated postings of one run plus advisory per-source stats."""

    postings: list[JobPosting] = field(default_factory=list)
    source_stats: list[SourceStat] = field(default_factory=list)

    def __iter__(self) -> Iterator[JobPosting]:
        return iter(self.postings)

    def __len__(self) -> int:
        return len(self.postings)

    def __getitem__(self, index: int) -> JobPosting:
        return self.postings[index]

    @property
    def failed_sources(self) -> list[str]:
        return [stat.source for stat in self.source_stats if stat.status == "failed"]

    def as_list(self) -> list[dict[str, str]]:
        return [posting.as_dict() for posting in self.postings]


def run_aggregation(
    registry: Iterable[SourceDescriptor] | None = None,
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
    adapters: Mapping[AdapterKind, type[SourceAdapter]] | None = None,
    client: httpx.Client | None = None,
) -> AggregateResult:
    """Fetch every source on the roster and return one fresh aggregate.

    Sources run on a thread pool; results land in registry-ordered slots, so the
    output order does not depend on which source answers first. A failing source
    contributes nothing and never affects the others.
    """
    cfg = settings or default_settings
    log = logger or LOGGER
    sources = build_registry() if registry is None else tuple(registry)
    adapter_map = ADAPTERS if adapters is None else adapters
    start = time.perf_counter()

    own_client = client is None
    http = client or build_client(cfg.request_timeout_s, cfg.user_agent)

    def _run_source(source: SourceDescriptor) -> tuple[list[JobPosting], str | None]:
        try:
            adapter = adapter_map[source.kind](source, settings=cfg, client=http, logger=log)
            return adapter.fetch(), adapter.error
        except Exception as exc:  # noqa: BLE001
            log_event(
                log,
                logging.WARNING,
                "source_failed",
                source=source.name,
                kind=source.kind.value,
                error_type=type(exc).__name__,
                error=str(exc)[:500],
            )
            return [], f"{type(exc).__name__}: {exc}"

    try:
        if cfg.max_workers == 1 or len(sources) <= 1:
            slots = [_run_source(source) for source in sources]
        else:
            with ThreadPoolExecutor(max_workers=min(len(sources), cfg.max_workers)) as pool:
                slots = list(pool.map(_run_source, sources))
    finally:
        if own_client:
            http.close()

    collected: list[JobPosting] = []
    stats: list[SourceStat] = []
    for source, (jobs, error) in zip(sources, slots):
        log_event(log, logging.INFO, "source_done", source=source.name, kind=source.kind.value, count=len(jobs))
        stats.append(
            SourceStat(
                source=source.name,
                kind=source.kind.value,
                fetched=len(jobs),
                status="failed" if error else "success",
                error=error,
            )
        )
        collected.extend(jobs)

    postings = dedupe_by_apply_url(collected)
    log_event(
        log,
        logging.INFO,
        "aggregation_done",
        sources=len(sources),
        collected=len(collected),
        total=len(postings),
        failed_sources=[stat.source for stat in stats if stat.status == "failed"],
        duration_s=round(time.perf_counter() - start, 3),
    )
    return AggregateResult(postings=postings, source_stats=stats)
