from __future__ import annotations
from fastapi import APIRouter, Depends

from jobfeed.api.deps import get_registry
from jobfeed.crawlers.base import SourceDescriptor
from jobfeed.schemas.source import SourceOut

router = APIRouter(prefix="/sources", tags=["sources"])


@router.get("", response_model=list[SourceOut])
def list_sources(registry: tuple[SourceDescriptor, ...] = Depends(get_registry)):
    return [{"name": s.name, "kind": s.kind.value, "locator": s.locator} for s in registry]
