"""
Spreadsheet export of the dashboard results.

One row per ResultRecord. Method and URL are not stored on records: they are
looked up from the catalog by category + name.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from src.dashboard.analytics import compact_json
from src.dashboard.catalog import DEFAULT_CATALOG, Catalog, find_definition
from src.dashboard.state import DashboardState

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "Category",
    "API Name",
    "Method",
    "URL",
    "Status Code",
    "Success",
    "Response / Error",
]
DEFAULT_SHEET_NAME = "API Results"


class ReportRenderError(RuntimeError):
    def __init__(self, message: str, *, artifact: str) -> None:
        super().__init__(message)
        self.artifact = artifact


def write_artifact(destination: Union[str, Path], content: bytes, *, artifact: str) -> None:
    try:
        Path(destination).write_bytes(content)
    except OSError as e:
        logger.error(f"Failed to write {artifact} to {destination}: {e}")
        raise ReportRenderError(f"Could not write {destination}", artifact=artifact) from e


def build_export_rows(state: DashboardState, catalog: Catalog = DEFAULT_CATALOG) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for category, records in state.results.items():
        for record in records:
            definition = find_definition(category, record.name, catalog)
            rows.append(
                {
                    "Category": category,
                    "API Name": record.name,
                    "Method": definition.method.value if definition else "",
                    "URL": definition.url if definition else "",
                    "Status Code": record.status,
                    "Success": "PASS" if record.success else "FAIL",
                    "Response / Error": compact_json(record.data) if record.success else record.error,
                }
            )
    return rows


def export_to_excel(
    state: DashboardState,
    catalog: Catalog = DEFAULT_CATALOG,
    destination: Optional[Union[str, Path]] = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> bytes:
    """
    Write the results workbook.

    Args:
        destination: Optional file path; the workbook bytes are returned either way

    Raises:
        ReportRenderError: If the workbook cannot be written
    """
    rows = build_export_rows(state, catalog)
    # Explicit columns keep the header row when there is nothing to export.
    frame = pd.DataFrame(rows, columns=EXPORT_COLUMNS)

    buffer = io.BytesIO()
    try:
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name=sheet_name, index=False)
    except Exception as e:
        logger.error(f"Failed to write spreadsheet: {e}", exc_info=True)
        raise ReportRenderError("Error generating spreadsheet", artifact="excel") from e

    content = buffer.getvalue()
    if destination is not None:
        write_artifact(destination, content, artifact="excel")
        logger.info(f"Exported {len(rows)} rows to {destination}")
    return content
