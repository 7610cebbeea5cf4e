from typing import List

from ocloud.config import TenancyConfig
from ocloud.display import JsonRenderer, TableRenderer, format_table, report_empty
from ocloud.pagination import paginate
from ocloud.resources import Compartment, get_resource_type


def test_report_empty_on_empty_collection() -> None:
    out: List[str] = []
    report_empty(paginate([], limit=1, page=1), out.append)
    assert out == ["No Items found."]

    out.clear()
    report_empty(None, out.append)
    assert out == ["No Items found."]


def test_report_empty_past_the_end_suggests_lower_page() -> None:
    out: List[str] = []
    report_empty(paginate(["a", "b"], limit=1, page=3), out.append)
    assert out == [
        "No Items found.",
        "Page 3 is empty. Total records: 2",
        "Try a lower page number (e.g., --page 2)",
    ]


def test_format_table_aligns_columns() -> None:
    lines = format_table(["Name", "State"], [["prod", "ACTIVE"], ["a-much-longer-name", "DELETED"]])
    assert lines[0] == "Name".ljust(18) + "  State"
    assert lines[1] == "-" * 18 + "  " + "-" * 7
    assert lines[3] == "a-much-longer-name  DELETED"


def test_table_title_uses_tenancy_context() -> None:
    out: List[str] = []
    renderer = TableRenderer(TenancyConfig(tenancy_name="acme", compartment_name="prod"), echo=out.append)
    rt = get_resource_type("compartment")
    renderer.render_records([Compartment(ocid="ocid1.compartment.oc1..x", display_name="apps")], rt)
    assert out[0] == "acme: prod: Compartments"
    assert out[-1].startswith("apps")


def test_json_payload_without_pagination() -> None:
    payload = JsonRenderer.payload([Compartment(ocid="c1", display_name="apps")])
    assert payload["pagination"] is None
    assert payload["items"][0]["display_name"] == "apps"
