"""Shared normalization contract.

Every adapter funnels its records through these helpers so that trimming,
the category fallback and the region test behave the same for all sources.
"""

from __future__ import annotations

from collections.abc import Iterable

from jobfeed.core.config import normalize_tokens

__all__ = ["DEFAULT_CATEGORY", "category_or_default", "clean_text", "matches_region", "normalize_tokens"]

DEFAULT_CATEGORY = "Other"


def clean_text(value: object) -> str:
    """Strip surrounding whitespace; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def category_or_default(value: object) -> str:
    return clean_text(value) or DEFAULT_CATEGORY


def matches_region(text: object, tokens: Iterable[str]) -> bool:
    """Case-insensitive substring test against the configured region tokens."""
    lower = clean_text(text).lower()
    if not lower:
        return False
    return any(token in lower for token in tokens)
