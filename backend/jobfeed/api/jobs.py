from __future__ import annotations
from fastapi import APIRouter, Depends

from jobfeed.api.deps import get_registry, get_settings
from jobfeed.core.config import Settings
from jobfeed.crawlers.base import SourceDescriptor
from jobfeed.schemas.job import JobPostingOut
from jobfeed.services.aggregate_service import run_aggregation

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobPostingOut])
def list_jobs(
    registry: tuple[SourceDescriptor, ...] = Depends(get_registry),
    cfg: Settings = Depends(get_settings),
):
    # Every call is a full re-fetch; nothing is cached between requests.
    result = run_aggregation(registry, settings=cfg)
    return result.as_list()
