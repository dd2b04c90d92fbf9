"""
Chart and PDF rendering for the analytics view.

The chart is a grouped pass/fail bar per category. The PDF report starts with the
chart page, followed by the detailed results table.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.backends.backend_pdf import PdfPages  # noqa: E402
from matplotlib.ticker import MaxNLocator  # noqa: E402

from src.dashboard.analytics import DEFAULT_SNIPPET_LENGTH, CategorySummary, ResultRow, flatten, summarize  # noqa: E402
from src.dashboard.exporter import ReportRenderError, write_artifact  # noqa: E402
from src.dashboard.state import DashboardState  # noqa: E402

logger = logging.getLogger(__name__)

PASS_COLOR = "#4ade80"
FAIL_COLOR = "#f87171"
REPORT_TITLE = "API Test Analytics Report"
TABLE_TITLE = "API Test Results (Detailed)"
EMPTY_TABLE_TEXT = "No API results yet"
TABLE_COLUMNS = ["Category", "API Name", "Status Code", "Result", "Error / Response Snippet"]

# A4 portrait, inches
A4_SIZE = (8.27, 11.69)
ROWS_PER_PAGE = 30


def _draw_chart(ax, summary: List[CategorySummary]) -> None:
    labels = [s.category for s in summary]
    positions = list(range(len(labels)))
    width = 0.38

    ax.bar([p - width / 2 for p in positions], [s.passed for s in summary], width, label="Pass", color=PASS_COLOR)
    ax.bar([p + width / 2 for p in positions], [s.failed for s in summary], width, label="Fail", color=FAIL_COLOR)
    ax.set_xticks(positions)
    ax.set_xticklabels(labels)
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_ylabel("Calls")
    if summary:
        ax.legend()


def _table_cells(rows: List[ResultRow]) -> List[List[str]]:
    return [
        [r.category, r.name, str(r.status), "PASS" if r.success else "FAIL", r.detail]
        for r in rows
    ]


def _draw_table_page(pdf: PdfPages, cells: List[List[str]], title: str) -> None:
    fig = plt.figure(figsize=A4_SIZE)
    try:
        fig.suptitle(title, x=0.05, ha="left", fontsize=16)
        ax = fig.add_axes([0.05, 0.05, 0.9, 0.85])
        ax.axis("off")
        if cells:
            table = ax.table(cellText=cells, colLabels=TABLE_COLUMNS, loc="upper center", cellLoc="left")
            table.auto_set_font_size(False)
            table.set_fontsize(7)
            table.auto_set_column_width(list(range(len(TABLE_COLUMNS))))
            for (row_idx, _col_idx), cell in table.get_celld().items():
                if row_idx == 0:
                    cell.set_text_props(weight="bold")
                elif cells[row_idx - 1][3] == "FAIL":
                    cell.set_facecolor("#fde2e2")
        else:
            ax.text(0.5, 0.95, EMPTY_TABLE_TEXT, ha="center", va="top", fontsize=11)
        pdf.savefig(fig)
    finally:
        plt.close(fig)


def render_chart_png(state: DashboardState) -> bytes:
    """
    Pass/fail bar chart as PNG bytes.

    Raises:
        ReportRenderError: If rendering fails
    """
    try:
        fig, ax = plt.subplots(figsize=(6, 3))
        try:
            _draw_chart(ax, summarize(state))
            fig.tight_layout()
            buffer = io.BytesIO()
            fig.savefig(buffer, format="png")
        finally:
            plt.close(fig)
    except Exception as e:
        logger.error(f"Failed to render chart: {e}", exc_info=True)
        raise ReportRenderError("Error generating chart", artifact="chart") from e
    return buffer.getvalue()


def render_pdf_report(
    state: DashboardState,
    destination: Optional[Union[str, Path]] = None,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> bytes:
    """
    Multi-page PDF: chart page, then the detailed table (continued over as many pages as needed).

    Raises:
        ReportRenderError: If the document cannot be generated
    """
    summary = summarize(state)
    cells = _table_cells(flatten(state, snippet_length))

    buffer = io.BytesIO()
    try:
        with PdfPages(buffer) as pdf:
            fig = plt.figure(figsize=A4_SIZE)
            try:
                fig.suptitle(REPORT_TITLE, x=0.05, ha="left", fontsize=18, color="#212121")
                ax = fig.add_axes([0.1, 0.55, 0.8, 0.35])
                _draw_chart(ax, summary)
                pdf.savefig(fig)
            finally:
                plt.close(fig)

            if not cells:
                _draw_table_page(pdf, [], TABLE_TITLE)
            for start in range(0, len(cells), ROWS_PER_PAGE):
                title = TABLE_TITLE if start == 0 else f"{TABLE_TITLE} (continued)"
                _draw_table_page(pdf, cells[start:start + ROWS_PER_PAGE], title)
    except Exception as e:
        logger.error(f"Failed to generate PDF: {e}", exc_info=True)
        raise ReportRenderError("Error generating PDF", artifact="pdf") from e

    content = buffer.getvalue()
    if destination is not None:
        write_artifact(destination, content, artifact="pdf")
        logger.info(f"PDF report written to {destination}")
    return content
