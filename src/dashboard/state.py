"""
In-memory dashboard state.

The state is an immutable snapshot. Every change goes through a pure update
function (state -> new state) dispatched on the ResultStore, which swaps the
snapshot and notifies subscribers. Nothing is persisted: a restart starts empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from src.integrations.contracts.interfaces import HttpMethod, ResultRecord
from src.integrations.contracts.mock_service import MockPreview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomDraft:
    """Inputs of the ad-hoc custom API tester."""

    method: str = HttpMethod.GET.value
    url: str = ""
    body: str = ""


@dataclass(frozen=True)
class DashboardState:
    results: Mapping[str, Tuple[ResultRecord, ...]] = field(default_factory=lambda: MappingProxyType({}))
    custom_result: Optional[ResultRecord] = None
    custom_draft: CustomDraft = field(default_factory=CustomDraft)
    mock_preview: Optional[MockPreview] = None
    active_tab: str = "SIM"
    loading_category: Optional[str] = None
    all_loading: bool = False


Update = Callable[[DashboardState], DashboardState]
Listener = Callable[[DashboardState], None]


# ---------------------------------------------------------------------------
# Pure updates
# ---------------------------------------------------------------------------

def with_category_results(category: str, records: Sequence[ResultRecord]) -> Update:
    """Replace (never merge) the stored results of one category."""

    def update(state: DashboardState) -> DashboardState:
        results = dict(state.results)
        results[category] = tuple(records)
        return replace(state, results=MappingProxyType(results))

    return update


def with_custom_result(record: Optional[ResultRecord]) -> Update:
    return lambda state: replace(state, custom_result=record)


def with_custom_draft(draft: CustomDraft) -> Update:
    return lambda state: replace(state, custom_draft=draft)


def with_mock_preview(preview: Optional[MockPreview]) -> Update:
    return lambda state: replace(state, mock_preview=preview)


def with_active_tab(tab: str) -> Update:
    return lambda state: replace(state, active_tab=tab)


def with_loading_category(category: Optional[str]) -> Update:
    return lambda state: replace(state, loading_category=category)


def with_all_loading(flag: bool) -> Update:
    return lambda state: replace(state, all_loading=flag)


def use_mock_in_custom(state: DashboardState) -> DashboardState:
    """Copy the last mock URL into the custom tester as a GET with no body."""
    if state.mock_preview is None:
        return state
    draft = CustomDraft(method=HttpMethod.GET.value, url=state.mock_preview.url, body="")
    return replace(state, custom_draft=draft, active_tab="custom")


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------

def category_status(state: DashboardState, category: str) -> Optional[str]:
    """'passed' when every call succeeded, 'failed' when any failed, None if never run."""
    records = state.results.get(category)
    if not records:
        return None
    if all(r.success for r in records):
        return "passed"
    return "failed"


def state_to_dict(state: DashboardState, category_names: Sequence[str]) -> Dict[str, Any]:
    return {
        "active_tab": state.active_tab,
        "loading_category": state.loading_category,
        "all_loading": state.all_loading,
        "results": {cat: [r.to_dict() for r in records] for cat, records in state.results.items()},
        "category_status": {cat: category_status(state, cat) for cat in category_names},
        "custom_result": state.custom_result.to_dict() if state.custom_result else None,
        "custom_draft": {
            "method": state.custom_draft.method,
            "url": state.custom_draft.url,
            "body": state.custom_draft.body,
        },
        "mock_preview": state.mock_preview.model_dump(include={"url", "preview"}) if state.mock_preview else None,
    }


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class ResultStore:
    """Holds the current DashboardState snapshot and notifies subscribers on change."""

    def __init__(self, initial: Optional[DashboardState] = None) -> None:
        self._state = initial or DashboardState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    def dispatch(self, update: Update) -> DashboardState:
        self._state = update(self._state)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener failed")
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def results_for(self, category: str) -> Tuple[ResultRecord, ...]:
        return self._state.results.get(category, ())

    def reset(self) -> None:
        self.dispatch(lambda _state: DashboardState())
