from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobfeed.core.errors import ConfigurationError
from jobfeed.crawlers.base import AdapterKind, SourceDescriptor
from jobfeed.crawlers.registry import ADAPTERS
from jobfeed.services.sources import DEFAULT_SOURCES, build_registry


def test_default_roster_builds_in_declared_order():
    registry = build_registry()

    assert len(registry) == len(DEFAULT_SOURCES)
    assert registry[0] == SourceDescriptor(name="Notion", kind=AdapterKind.LEVER, locator="notion")
    assert registry[2].kind is AdapterKind.GREENHOUSE
    assert registry[-1].name == "Brex"
    assert {s.kind for s in registry} <= set(ADAPTERS)


def test_accepts_explicit_and_shorthand_entries():
    registry = build_registry(
        [
            {"name": " Acme ", "kind": "greenhouse", "locator": "acme"},
            {"name": "Beta", "url": "https://beta.example/careers"},
        ]
    )

    assert registry[0].name == "Acme"
    assert registry[1].kind is AdapterKind.HTML
    assert registry[1].locator == "https://beta.example/careers"


def test_descriptor_is_read_only():
    source = build_registry([{"name": "Acme", "lever_slug": "acme"}])[0]

    with pytest.raises(ValidationError):
        source.locator = "other"


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "Acme", "kind": "workday", "locator": "acme"},
        {"name": "Acme", "kind": "lever", "locator": ""},
        {"name": "", "lever_slug": "acme"},
        {"name": "Acme"},
        {"name": "Acme", "lever_slug": "acme", "gh_slug": "acme"},
        {"name": "Acme", "url": "/careers"},
        {"name": "Acme", "gh_slug": "https://boards.greenhouse.io/acme"},
        {"name": "Acme", "lever_slug": "acme?team=Sales"},
        {"name": "Acme", "gh_slug": "acme#jobs"},
        "not-a-mapping",
    ],
)
def test_malformed_entries_fail_at_build_time(entry):
    with pytest.raises(ConfigurationError):
        build_registry([entry])


def test_duplicate_names_are_allowed():
    registry = build_registry(
        [
            {"name": "Acme", "lever_slug": "acme"},
            {"name": "Acme", "url": "https://acme.example/jobs"},
        ]
    )

    assert [s.name for s in registry] == ["Acme", "Acme"]
