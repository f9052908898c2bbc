from __future__ import annotations


class ConfigurationError(ValueError):
    """Malformed source roster or settings; raised at startup, never mid-run."""
