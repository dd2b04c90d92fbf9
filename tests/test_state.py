"""Tests for the immutable dashboard state and its store."""

from src.dashboard.state import (
    CustomDraft,
    DashboardState,
    ResultStore,
    category_status,
    state_to_dict,
    use_mock_in_custom,
    with_category_results,
    with_custom_result,
    with_mock_preview,
)
from src.integrations.contracts.interfaces import ResultRecord
from src.integrations.contracts.mock_service import MockPreview

import pytest


def _ok(name):
    return ResultRecord.passed(name, 200, {"id": 1})


def _fail(name):
    return ResultRecord.failed(name, 404, "Request failed with status code 404")


def test_updates_return_new_state_and_leave_old_untouched():
    before = DashboardState()
    after = with_category_results("SIM", [_ok("a")])(before)

    assert before.results == {}
    assert [r.name for r in after.results["SIM"]] == ["a"]


def test_category_results_are_replaced_not_merged():
    state = with_category_results("SIM", [_ok("a"), _ok("b")])(DashboardState())
    state = with_category_results("SIM", [_fail("c")])(state)

    assert [r.name for r in state.results["SIM"]] == ["c"]


def test_category_status():
    state = with_category_results("SIM", [_ok("a"), _fail("b")])(DashboardState())
    state = with_category_results("OTP", [_ok("c")])(state)

    assert category_status(state, "SIM") == "failed"
    assert category_status(state, "OTP") == "passed"
    assert category_status(state, "Valid") is None


def test_store_notifies_subscribers_until_unsubscribed():
    store = ResultStore()
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.dispatch(with_custom_result(_ok("Custom API")))
    unsubscribe()
    store.dispatch(with_custom_result(None))

    assert len(seen) == 1
    assert seen[0].custom_result.name == "Custom API"
    assert store.state.custom_result is None


def test_failing_listener_does_not_break_dispatch():
    store = ResultStore()

    def broken(_state):
        raise RuntimeError("render failed")

    store.subscribe(broken)
    store.dispatch(with_category_results("SIM", [_ok("a")]))

    assert len(store.results_for("SIM")) == 1


def test_use_mock_in_custom_copies_url_as_get():
    preview = MockPreview(url="http://localhost:5000/api/generate-mock", preview="{}", body={})
    state = with_mock_preview(preview)(DashboardState(custom_draft=CustomDraft(method="POST", url="x", body="{}")))

    state = use_mock_in_custom(state)

    assert state.custom_draft == CustomDraft(method="GET", url=preview.url, body="")
    assert state.active_tab == "custom"


def test_use_mock_in_custom_without_preview_is_a_no_op():
    state = DashboardState()
    assert use_mock_in_custom(state) is state


def test_state_to_dict():
    state = with_category_results("SIM", [_ok("a"), _fail("b")])(DashboardState())

    out = state_to_dict(state, ["SIM", "OTP"])

    assert out["category_status"] == {"SIM": "failed", "OTP": None}
    assert out["results"]["SIM"][0] == {"name": "a", "status": 200, "success": True, "data": {"id": 1}}
    assert out["results"]["SIM"][1] == {
        "name": "b",
        "status": 404,
        "success": False,
        "error": "Request failed with status code 404",
    }
    assert out["custom_result"] is None


def test_record_rejects_inconsistent_outcomes():
    with pytest.raises(ValueError):
        ResultRecord(name="x", status=200, success=True, error="boom")
    with pytest.raises(ValueError):
        ResultRecord(name="x", status=500, success=False)
    with pytest.raises(ValueError):
        ResultRecord(name="x", status=500, success=False, data={"a": 1}, error="boom")
