import logging
from typing import Any, Dict, List

import pytest

from ocloud.config import Settings
from ocloud.connectors.base_connector import BaseConnector
from ocloud.exceptions import InvalidPatternError, UnknownResourceError
from ocloud.resources import Instance
from ocloud.services import ResourceService


class FakeConnector(BaseConnector):
    def __init__(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        self.data = data
        self.calls: List[str] = []

    async def fetch_records(self, resource_key: str) -> List[Dict[str, Any]]:
        self.calls.append(resource_key)
        return list(self.data.get(resource_key, []))


def instances(*names: str) -> List[Dict[str, Any]]:
    return [
        {"id": f"ocid1.instance.oc1..{i:04d}xyz", "display-name": n, "lifecycle-state": "RUNNING"}
        for i, n in enumerate(names)
    ]


@pytest.mark.asyncio
async def test_list_uses_default_page_size() -> None:
    names = [f"node-{i:02d}" for i in range(25)]
    service = ResourceService(FakeConnector({"instance": instances(*names)}), Settings())

    first = await service.list("instance")
    assert len(first.items) == 20
    assert first.next_page_token == "2"
    assert all(isinstance(r, Instance) for r in first.items)

    second = await service.list("instance", page=2)
    assert [r.display_name for r in second.items] == names[20:]
    assert second.total_count == 25
    assert second.next_page_token == ""


@pytest.mark.asyncio
async def test_list_logs_total_record_count(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="ocloud")
    names = [f"node-{i:02d}" for i in range(25)]
    service = ResourceService(FakeConnector({"instance": instances(*names)}), Settings())
    await service.list("instance", page=1)
    assert "page=1 records=25 limit=20" in caplog.text


@pytest.mark.asyncio
async def test_list_honours_configured_limit() -> None:
    settings = Settings()
    settings.listing.default_limit = 2
    service = ResourceService(FakeConnector({"instance": instances("a", "b", "c")}), settings)
    page = await service.list("instance")
    assert [r.display_name for r in page.items] == ["a", "b"]


@pytest.mark.asyncio
async def test_search_returns_ranked_records() -> None:
    service = ResourceService(FakeConnector({"instance": instances("web-01", "web-02", "db-01")}))
    found = await service.search("instance", "web")
    assert [r.display_name for r in found] == ["web-01", "web-02"]


@pytest.mark.asyncio
async def test_search_by_full_ocid_ranks_exact_record_first() -> None:
    service = ResourceService(FakeConnector({"instance": instances("web-01", "web-02", "db-01")}))
    found = await service.search("instance", "ocid1.instance.oc1..0001xyz")
    # Sibling OCIDs one edit away still arrive as fuzzy hits, after the exact one.
    assert found[0].display_name == "web-02"
    assert {r.display_name for r in found[1:]} <= {"web-01", "db-01"}


@pytest.mark.asyncio
async def test_empty_pattern_is_rejected_before_fetching() -> None:
    conn = FakeConnector({"instance": instances("web-01")})
    service = ResourceService(conn)
    with pytest.raises(InvalidPatternError):
        await service.search("instance", "  ")
    assert conn.calls == []


@pytest.mark.asyncio
async def test_search_on_empty_export_is_empty() -> None:
    service = ResourceService(FakeConnector({}))
    assert await service.search("vcn", "prod") == []


@pytest.mark.asyncio
async def test_find_prefers_exact_names() -> None:
    service = ResourceService(
        FakeConnector({"instance": instances("web", "web-01", "Web", "db-01")})
    )
    exact = await service.find("instance", "WEB")
    assert [r.display_name for r in exact] == ["web", "Web"]

    partial = await service.find("instance", "01")
    assert [r.display_name for r in partial] == ["web-01", "db-01"]


@pytest.mark.asyncio
async def test_unknown_resource_type_raises() -> None:
    service = ResourceService(FakeConnector({}))
    with pytest.raises(UnknownResourceError):
        await service.list("satellite")
