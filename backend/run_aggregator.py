from __future__ import annotations
import json

from jobfeed.core.config import settings
from jobfeed.core.logging_utils import configure_logging
from jobfeed.services.aggregate_service import run_aggregation
from jobfeed.services.sources import build_registry


if __name__ == "__main__":
    configure_logging(settings.log_level)
    registry = build_registry()
    result = run_aggregation(registry, settings=settings)
    print(json.dumps(result.as_list(), indent=2, ensure_ascii=False))
