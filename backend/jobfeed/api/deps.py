from __future__ import annotations
from functools import lru_cache

from jobfeed.core.config import Settings, settings
from jobfeed.crawlers.base import SourceDescriptor
from jobfeed.services.sources import build_registry


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_registry() -> tuple[SourceDescriptor, ...]:
    return build_registry()
