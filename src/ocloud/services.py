"""Resource service: fetch exports, map them to records, paginate and search."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ocloud.config import Settings
from ocloud.connectors.base_connector import BaseConnector
from ocloud.pagination import Page, paginate
from ocloud.resources.registry import ResourceType, get_resource_type
from ocloud.search.matcher import clean_pattern, search_records

logger = logging.getLogger(__name__)


class ResourceService:
    """List, search, and find records of any registered resource type."""

    def __init__(self, connector: BaseConnector, settings: Optional[Settings] = None) -> None:
        self.connector = connector
        self.settings = settings or Settings()

    async def fetch(self, key: str) -> tuple[ResourceType, List[Any]]:
        """Fetch every record of ``key`` in export order."""
        rt = get_resource_type(key)
        payloads = await self.connector.fetch_records(rt.key)
        records = [rt.from_payload(p) for p in payloads]
        logger.debug("Mapped %d %s record(s)", len(records), rt.key)
        return rt, records

    async def list(
        self, key: str, limit: Optional[int] = None, page: Optional[int] = None
    ) -> Page[Any]:
        """Return one page of ``key`` records; defaults come from ``settings.listing``."""
        listing = self.settings.listing
        _, records = await self.fetch(key)
        result = paginate(
            records,
            listing.default_limit if limit is None else limit,
            listing.default_page if page is None else page,
        )
        logger.info(
            "Completed %s pagination: page=%d records=%d limit=%d nextPage=%r",
            key,
            result.page,
            result.total_count,
            result.limit,
            result.next_page_token,
        )
        return result

    async def search(self, key: str, pattern: str) -> List[Any]:
        """Fuzzy-search ``key`` records for ``pattern``, best match first.

        Raises
        ------
        InvalidPatternError
            If ``pattern`` is empty; raised before any export is fetched.
        """
        clean_pattern(pattern)
        rt, records = await self.fetch(key)
        if not records:
            return []
        matched = search_records(records, pattern, rt.fields, config=self.settings.search)
        logger.info("Search %s for %r matched %d of %d", rt.key, pattern, len(matched), len(records))
        return matched

    async def find(self, key: str, name: str) -> List[Any]:
        """Exact case-insensitive name matches, or substring matches when none are exact."""
        needle = clean_pattern(name)
        _, records = await self.fetch(key)
        names = [(r, (getattr(r, "display_name", "") or "").lower()) for r in records]
        exact = [r for r, n in names if n == needle]
        if exact:
            return exact
        return [r for r, n in names if needle in n]
