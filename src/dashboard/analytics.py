"""
Analytics derived from the dashboard state.

Everything here is a pure function of the snapshot passed in and is recomputed
on each call, so what is rendered always matches the store at render time.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Union

from src.dashboard.state import DashboardState

ELLIPSIS = "..."
DEFAULT_SNIPPET_LENGTH = 50


@dataclass(frozen=True)
class CategorySummary:
    category: str
    passed: int
    failed: int


@dataclass(frozen=True)
class ResultRow:
    category: str
    name: str
    status: Union[int, str]
    success: bool
    error: str
    data_snippet: str

    @property
    def detail(self) -> str:
        """Snippet for passes, error message for failures."""
        return self.data_snippet if self.success else self.error


def compact_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, default=str)


def snippet(data: Any, limit: int = DEFAULT_SNIPPET_LENGTH) -> str:
    text = compact_json(data)
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def summarize(state: DashboardState) -> List[CategorySummary]:
    summaries = []
    for category, records in state.results.items():
        passed = sum(1 for r in records if r.success)
        summaries.append(CategorySummary(category=category, passed=passed, failed=len(records) - passed))
    return summaries


def flatten(state: DashboardState, snippet_length: int = DEFAULT_SNIPPET_LENGTH) -> List[ResultRow]:
    rows = []
    for category, records in state.results.items():
        for record in records:
            rows.append(
                ResultRow(
                    category=category,
                    name=record.name,
                    status=record.status,
                    success=record.success,
                    error=record.error or "",
                    data_snippet=snippet(record.data, snippet_length) if record.success else "",
                )
            )
    return rows


def build_analytics(state: DashboardState, snippet_length: int = DEFAULT_SNIPPET_LENGTH) -> Dict[str, Any]:
    summary = summarize(state)
    rows = flatten(state, snippet_length)
    return {
        "summary": [asdict(s) for s in summary],
        "totals": {
            "passed": sum(s.passed for s in summary),
            "failed": sum(s.failed for s in summary),
        },
        "rows": [{**asdict(r), "detail": r.detail} for r in rows],
    }
