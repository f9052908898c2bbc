from __future__ import annotations
import json
from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def normalize_tokens(tokens: Iterable[str] | str) -> list[str]:
    """Lowercase, strip and dedupe region tokens, keeping the first-seen order.

    A string is read as a JSON list when it looks like one, else as comma-separated.
    """
    if isinstance(tokens, str):
        raw = tokens.strip()
        tokens = json.loads(raw) if raw.startswith("[") else raw.split(",")
    out: list[str] = []
    for token in tokens:
        key = str(token or "").strip().lower()
        if key and key not in out:
            out.append(key)
    return out


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Job Feed"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    request_timeout_s: float = 10.0
    max_workers: int = 8
    # REGION_TOKENS=canada,usa or REGION_TOKENS='["canada", "usa"]'
    region_tokens: Annotated[list[str], NoDecode] = ["canada", "usa"]
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    )

    lever_api_base: str = "https://api.lever.co"
    greenhouse_api_base: str = "https://boards-api.greenhouse.io"

    @field_validator("region_tokens", mode="before")
    @classmethod
    def normalize_region_tokens(cls, value: Any) -> list[str]:
        tokens = normalize_tokens(value)
        if not tokens:
            raise ValueError("region_tokens must contain at least one non-empty token")
        return tokens

    @field_validator("request_timeout_s")
    @classmethod
    def check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout_s must be positive")
        return value

    @field_validator("max_workers")
    @classmethod
    def check_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be at least 1")
        return value


settings = Settings()
