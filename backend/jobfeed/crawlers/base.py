from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
import re
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jobfeed.core.config import Settings, settings as default_settings
from jobfeed.core.logging_utils import log_event
from jobfeed.crawlers.normalize import category_or_default, clean_text


# Board slugs are interpolated into the API path.
SLUG_RE = re.compile(r"[A-Za-z0-9._-]+")


class AdapterKind(str, Enum):
    LEVER = "lever"
    GREENHOUSE = "greenhouse"
    HTML = "html"


class SchemaViolation(ValueError):
    """Upstream payload did not have the shape the adapter expects."""


class SourceDescriptor(BaseModel):
    """One employer on the roster. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: AdapterKind
    locator: str

    @field_validator("name", "locator")
    @classmethod
    def strip_required(cls, value: str) -> str:
        value = clean_text(value)
        if not value:
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def check_locator(self) -> SourceDescriptor:
        if self.kind is AdapterKind.HTML:
            parsed = urlparse(self.locator)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError(f"html source {self.name!r} needs an absolute http(s) URL, got {self.locator!r}")
        elif not SLUG_RE.fullmatch(self.locator):
            raise ValueError(f"{self.kind.value} source {self.name!r} needs a bare board slug, got {self.locator!r}")
        return self


@dataclass(frozen=True)
class JobPosting:
    company: str
    title: str
    location: str
    category: str
    apply_url: str

    @classmethod
    def build(cls, company: str, title: object, location: object, apply_url: object, category: object = None) -> JobPosting:
        return cls(
            company=company,
            title=clean_text(title),
            location=clean_text(location),
            category=category_or_default(category),
            apply_url=clean_text(apply_url),
        )

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


class SourceAdapter:
    """Fetches one source and maps it to postings.

    ``fetch`` never raises: transport and payload-shape failures are logged as a
    warning tagged with the source name and turned into an empty list. The last
    failure is kept on ``error`` for run statistics.
    """

    kind: AdapterKind

    def __init__(
        self,
        source: SourceDescriptor,
        *,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ):
        self.source = source
        self.settings = settings or default_settings
        self.client = client
        self.logger = logger or logging.getLogger(f"jobfeed.crawlers.{self.kind.value}")
        self.error: str | None = None

    @property
    def region_tokens(self) -> list[str]:
        return self.settings.region_tokens

    def fetch(self) -> list[JobPosting]:
        self.error = None
        try:
            return self.collect()
        except Exception as exc:  # noqa: BLE001
            self.error = f"{type(exc).__name__}: {exc}"
            log_event(
                self.logger,
                logging.WARNING,
                "source_failed",
                source=self.source.name,
                kind=self.kind.value,
                error_type=type(exc).__name__,
                error=str(exc)[:500],
            )
            return []

    def collect(self) -> list[JobPosting]:
        raise NotImplementedError
