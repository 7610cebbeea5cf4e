import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ocloud.cli import cli
from ocloud.config import Settings


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    data = {
        "data": [
            {"id": "ocid1.instance.oc1..a1", "display-name": "web-01", "shape": "VM.Standard.E4.Flex"},
            {"id": "ocid1.instance.oc1..b2", "display-name": "web-02", "shape": "VM.Standard.E4.Flex"},
            {"id": "ocid1.instance.oc1..c3", "display-name": "db-01", "shape": "VM.Standard.E5.Flex"},
        ]
    }
    (tmp_path / "instance.json").write_text(json.dumps(data), encoding="utf-8")
    return tmp_path


def invoke(export_dir: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(
        cli,
        ["--log-level", "WARNING", "--export-dir", str(export_dir), *args],
        obj={"settings": Settings()},
    )


def test_list_json_includes_pagination(export_dir: Path) -> None:
    result = invoke(export_dir, "instance", "list", "--limit", "2", "--json")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [i["display_name"] for i in payload["items"]] == ["web-01", "web-02"]
    assert payload["pagination"] == {
        "current_page": 1,
        "total_count": 3,
        "limit": 2,
        "next_page_token": "2",
    }


def test_list_table_has_title_rows_and_footer(export_dir: Path) -> None:
    result = invoke(export_dir, "instance", "list", "-m", "2", "-p", "2")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "-: -: Instances"
    assert lines[1].startswith("Name")
    assert any(line.startswith("db-01") for line in lines)
    assert lines[-1] == "Page 2 | 3 of 3 | limit 2"


def test_list_past_the_end_reports_empty_page(export_dir: Path) -> None:
    result = invoke(export_dir, "instance", "list", "--limit", "2", "--page", "5")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "No Items found.",
        "Page 5 is empty. Total records: 3",
        "Try a lower page number (e.g., --page 4)",
    ]


def test_search_and_find(export_dir: Path) -> None:
    result = invoke(export_dir, "instance", "search", "web", "--json")
    assert result.exit_code == 0, result.output
    assert [i["display_name"] for i in json.loads(result.output)["items"]] == ["web-01", "web-02"]

    result = invoke(export_dir, "instance", "find", "DB-01", "-j")
    assert result.exit_code == 0, result.output
    assert [i["ocid"] for i in json.loads(result.output)["items"]] == ["ocid1.instance.oc1..c3"]


def test_missing_export_lists_nothing(export_dir: Path) -> None:
    result = invoke(export_dir, "bucket", "list")
    assert result.exit_code == 0
    assert result.output.strip() == "No Items found."


def test_blank_search_pattern_is_a_usage_error(export_dir: Path) -> None:
    result = invoke(export_dir, "instance", "search", "  ")
    assert result.exit_code == 1
    assert "must not be empty" in result.output


def test_unknown_log_level_is_rejected(export_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["--log-level", "CHATTY", "instance", "list"], obj={"settings": Settings()})
    assert result.exit_code == 2


def test_invalid_environment_config_exits_cleanly(
    export_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(export_dir)
    monkeypatch.setenv("OCLOUD_LISTING__DEFAULT_LIMIT", "0")
    result = CliRunner().invoke(cli, ["--export-dir", str(export_dir), "instance", "list"])
    assert result.exit_code == 1
    assert "Invalid ocloud configuration" in result.output
