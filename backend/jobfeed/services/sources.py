"""The employer roster.

Entries are validated once, when the registry is built; a malformed entry is a
startup error and never surfaces during an aggregation run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from jobfeed.core.errors import ConfigurationError
from jobfeed.core.logging_utils import log_event
from jobfeed.crawlers.base import AdapterKind, SourceDescriptor

LOGGER = logging.getLogger("jobfeed.sources")

# Shorthand roster keys -> adapter kind.
_SHORTHAND_KEYS = {
    "lever_slug": AdapterKind.LEVER,
    "gh_slug": AdapterKind.GREENHOUSE,
    "url": AdapterKind.HTML,
}

DEFAULT_SOURCES: list[dict[str, str]] = [
    # Lever boards
    {"name": "Notion", "lever_slug": "notion"},
    {"name": "Figma", "lever_slug": "figma"},
    # Greenhouse boards
    {"name": "Pinterest", "gh_slug": "pinterest"},
    {"name": "Airtable", "gh_slug": "airtable"},
    # Career pages without a public board API
    {"name": "Apple", "url": "https://jobs.apple.com/en-us/search?location=Canada"},
    {"name": "Meta", "url": "https://www.metacareers.com/jobs?location=Canada"},
    {"name": "Google", "url": "https://careers.google.com/jobs/results/?location=Canada"},
    {"name": "Airbnb", "url": "https://careers.airbnb.com/positions/?locations=Canada"},
    {"name": "OpenAI", "url": "https://openai.com/careers/"},
    {"name": "Anthropic", "url": "https://www.anthropic.com/careers"},
    {"name": "Databricks", "url": "https://databricks.com/company/careers/open-positions?region=Canada"},
    {"name": "Snowflake", "url": "https://careers.snowflake.com/"},
    {"name": "LinkedIn", "url": "https://www.linkedin.com/company/linkedin/jobs/"},
    {"name": "Uber", "url": "https://www.uber.com/global/en/careers/list/?location=Canada"},
    {"name": "Grammarly", "url": "https://www.grammarly.com/careers"},
    {"name": "Snap", "url": "https://snap.com/en-US/jobs"},
    {"name": "Roblox", "url": "https://corp.roblox.com/careers/"},
    {"name": "Stripe", "url": "https://stripe.com/jobs"},
    {"name": "Two Sigma", "url": "https://www.twosigma.com/careers"},
    {"name": "HRT", "url": "https://www.hudsonrivertrading.com/careers"},
    {"name": "Plaid", "url": "https://plaid.com/careers/"},
    {"name": "ByteDance", "url": "https://jobs.bytedance.com/"},
    {"name": "Cruise", "url": "https://getcruise.com/careers"},
    {"name": "Netflix", "url": "https://jobs.netflix.com/"},
    {"name": "Twitter", "url": "https://careers.twitter.com/"},
    {"name": "Rippling", "url": "https://www.rippling.com/careers"},
    {"name": "Twitch", "url": "https://www.twitch.tv/jobs"},
    {"name": "Brex", "url": "https://brex.com/careers"},
]


def _to_fields(entry: Mapping[str, Any]) -> dict[str, Any]:
    if "kind" in entry or "locator" in entry:
        return {"name": entry.get("name"), "kind": entry.get("kind"), "locator": entry.get("locator")}

    present = [key for key in _SHORTHAND_KEYS if entry.get(key)]
    if len(present) != 1:
        raise ConfigurationError(
            f"source {entry.get('name')!r} needs exactly one of {sorted(_SHORTHAND_KEYS)}, got {present or 'none'}"
        )
    key = present[0]
    return {"name": entry.get("name"), "kind": _SHORTHAND_KEYS[key], "locator": entry[key]}


def parse_source(entry: SourceDescriptor | Mapping[str, Any]) -> SourceDescriptor:
    if isinstance(entry, SourceDescriptor):
        return entry
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"source entry must be a mapping, got {type(entry).__name__}")
    try:
        return SourceDescriptor(**_to_fields(entry))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid source {entry.get('name')!r}: {exc}") from exc


def build_registry(entries: Iterable[SourceDescriptor | Mapping[str, Any]] | None = None) -> tuple[SourceDescriptor, ...]:
    """Validate roster entries in order. Duplicate names are allowed but noted."""
    registry = tuple(parse_source(entry) for entry in (DEFAULT_SOURCES if entries is None else entries))

    seen: set[str] = set()
    for source in registry:
        if source.name in seen:
            log_event(LOGGER, logging.DEBUG, "registry_duplicate_name", source=source.name)
        seen.add(source.name)
    return registry
