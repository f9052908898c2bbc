from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobfeed.api import health, jobs, sources
from jobfeed.api.deps import get_registry
from jobfeed.core.config import settings
from jobfeed.core.logging_utils import configure_logging

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    configure_logging(settings.log_level)
    # A malformed roster must stop the process here, not surface mid-request.
    get_registry()


app.include_router(health.router)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(sources.router, prefix=settings.api_prefix)
