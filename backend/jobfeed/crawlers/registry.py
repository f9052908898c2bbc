from __future__ import annotations
from jobfeed.crawlers.adapters.generic_page import GenericPageAdapter
from jobfeed.crawlers.adapters.greenhouse import GreenhouseAdapter
from jobfeed.crawlers.adapters.lever import LeverAdapter
from jobfeed.crawlers.base import AdapterKind, SourceAdapter

ADAPTERS: dict[AdapterKind, type[SourceAdapter]] = {
    AdapterKind.LEVER: LeverAdapter,
    AdapterKind.GREENHOUSE: GreenhouseAdapter,
    AdapterKind.HTML: GenericPageAdapter,
}
