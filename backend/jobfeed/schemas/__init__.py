from __future__ import annotations
from jobfeed.schemas.job import JobPostingOut
from jobfeed.schemas.source import SourceOut

__all__ = ["JobPostingOut", "SourceOut"]
