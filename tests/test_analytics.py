"""Tests for analytics derivation."""

from src.dashboard.analytics import build_analytics, flatten, snippet, summarize
from src.dashboard.state import DashboardState, ResultStore, with_category_results
from src.integrations.contracts.interfaces import ResultRecord


def _state():
    state = with_category_results(
        "SIM",
        [
            ResultRecord.passed("SIM Info Success", 200, {"userId": 1, "title": "x" * 80}),
            ResultRecord.failed("SIM Info Fail", 404, "Request failed with status code 404"),
        ],
    )(DashboardState())
    return with_category_results("Valid", [ResultRecord.passed("Validate Email", 200, {"id": 1})])(state)


def test_summarize_counts_pass_and_fail_per_category():
    summary = summarize(_state())
    assert [(s.category, s.passed, s.failed) for s in summary] == [("SIM", 1, 1), ("Valid", 1, 0)]


def test_flatten_keeps_category_then_catalog_order():
    rows = flatten(_state())
    assert [(r.category, r.name) for r in rows] == [
        ("SIM", "SIM Info Success"),
        ("SIM", "SIM Info Fail"),
        ("Valid", "Validate Email"),
    ]
    assert rows[1].error == "Request failed with status code 404"
    assert rows[1].data_snippet == ""
    assert rows[1].detail == rows[1].error


def test_snippet_truncates_with_ellipsis():
    long_row = flatten(_state())[0]
    assert len(long_row.data_snippet) == 53
    assert long_row.data_snippet.endswith("...")
    assert long_row.data_snippet.startswith('{"userId":1,"title":"')

    assert snippet({"id": 1}) == '{"id":1}'
    assert snippet("x" * 50) == '"' + "x" * 49 + "..."


def test_analytics_reflect_latest_snapshot():
    store = ResultStore()
    assert build_analytics(store.state)["rows"] == []

    store.dispatch(with_category_results("Valid", [ResultRecord.passed("Validate Email", 200, {"id": 1})]))
    first = build_analytics(store.state)
    store.dispatch(with_category_results("Valid", [ResultRecord.failed("Validate Email", "Error", "Network Error")]))
    second = build_analytics(store.state)

    assert first["totals"] == {"passed": 1, "failed": 0}
    assert second["totals"] == {"passed": 0, "failed": 1}
    assert second["rows"][0]["detail"] == "Network Error"
