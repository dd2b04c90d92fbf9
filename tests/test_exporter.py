"""Tests for the spreadsheet exporter."""

import io

import pytest
from openpyxl import load_workbook

from src.dashboard.exporter import EXPORT_COLUMNS, ReportRenderError, build_export_rows, export_to_excel
from src.dashboard.state import DashboardState, with_category_results
from src.integrations.contracts.interfaces import ResultRecord


def _sheet_rows(content: bytes, sheet_name: str = "API Results"):
    workbook = load_workbook(io.BytesIO(content))
    return [list(row) for row in workbook[sheet_name].iter_rows(values_only=True)]


def test_empty_state_exports_header_only():
    rows = _sheet_rows(export_to_excel(DashboardState()))
    assert rows == [EXPORT_COLUMNS]


def test_rows_look_up_method_and_url_from_catalog():
    state = with_category_results(
        "OTP", [ResultRecord.passed("Send OTP", 201, {"id": 101})]
    )(DashboardState())
    state = with_category_results(
        "SIM", [ResultRecord.failed("SIM Info Fail", 404, "Request failed with status code 404")]
    )(state)

    rows = build_export_rows(state)

    assert rows[0] == {
        "Category": "OTP",
        "API Name": "Send OTP",
        "Method": "POST",
        "URL": "https://jsonplaceholder.typicode.com/posts",
        "Status Code": 201,
        "Success": "PASS",
        "Response / Error": '{"id":101}',
    }
    assert rows[1]["Method"] == "GET"
    assert rows[1]["Success"] == "FAIL"
    assert rows[1]["Response / Error"] == "Request failed with status code 404"


def test_unknown_name_leaves_method_and_url_blank():
    state = with_category_results("SIM", [ResultRecord.passed("Renamed", 200, {})])(DashboardState())
    row = build_export_rows(state)[0]
    assert row["Method"] == ""
    assert row["URL"] == ""


def test_workbook_contents_and_destination(tmp_path):
    state = with_category_results(
        "Valid", [ResultRecord.failed("Validate Email", "Error", "Network Error")]
    )(DashboardState())
    target = tmp_path / "api-test-results.xlsx"

    content = export_to_excel(state, destination=target)

    assert target.read_bytes() == content
    rows = _sheet_rows(content)
    assert rows[0] == EXPORT_COLUMNS
    assert rows[1] == [
        "Valid",
        "Validate Email",
        "GET",
        "https://jsonplaceholder.typicode.com/comments/1",
        "Error",
        "FAIL",
        "Network Error",
    ]


def test_writer_failure_is_wrapped(monkeypatch):
    import src.dashboard.exporter as exporter_mod

    def broken_writer(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(exporter_mod.pd, "ExcelWriter", broken_writer)

    with pytest.raises(ReportRenderError) as excinfo:
        export_to_excel(DashboardState())
    assert excinfo.value.artifact == "excel"


def test_unwritable_destination_is_a_render_error(tmp_path):
    with pytest.raises(ReportRenderError) as excinfo:
        export_to_excel(DashboardState(), destination=tmp_path)
    assert excinfo.value.artifact == "excel"
