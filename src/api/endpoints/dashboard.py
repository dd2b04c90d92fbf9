"""
Dashboard endpoints: run catalog categories, run custom calls, generate mocks,
read analytics and download exports.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from src.dashboard.analytics import build_analytics
from src.dashboard.catalog import CUSTOM_TAB, UnknownCategoryError, catalog_to_dict, categories
from src.dashboard.exporter import ReportRenderError, export_to_excel
from src.dashboard.mock_tools import copy_mock_to_custom, create_mock_api
from src.dashboard.report import render_chart_png, render_pdf_report
from src.dashboard.runner import RequestRunner
from src.dashboard.state import (
    CustomDraft,
    ResultStore,
    category_status,
    state_to_dict,
    with_active_tab,
    with_custom_draft,
)
from src.error_handler import ErrorHandler
from src.integrations.clients.real_http.mock_service_client import MockGenerationError, MockServiceClient
from src.integrations.contracts.interfaces import HttpMethod
from src.utils.config_loader import DashboardConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

# Will be set by main.py after import
store: ResultStore = None
runner: RequestRunner = None
mock_client: MockServiceClient = None
config: DashboardConfig = None

error_handler = ErrorHandler()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class TabRequest(BaseModel):
    tab: str


class CustomApiRequest(BaseModel):
    method: HttpMethod = HttpMethod.GET
    url: str = ""
    body: Optional[str] = Field(default=None, description="Raw JSON text; ignored for GET and DELETE")


class MockRequest(BaseModel):
    description: str


def _download(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _render_failure(exc: ReportRenderError) -> JSONResponse:
    payload = error_handler.handle_exception(exc, context={"artifact": exc.artifact})
    return JSONResponse(status_code=500, content=payload)


@router.get("/catalog")
async def get_catalog():
    return {"categories": catalog_to_dict(runner.catalog)}


@router.get("/state")
async def get_state():
    return state_to_dict(store.state, categories(runner.catalog))


@router.post("/tab")
async def select_tab(body: TabRequest):
    if body.tab != CUSTOM_TAB and body.tab not in runner.catalog:
        raise HTTPException(status_code=404, detail=f"Unknown tab '{body.tab}'")
    store.dispatch(with_active_tab(body.tab))
    return {"active_tab": store.state.active_tab}


@router.post("/run-all")
async def run_all():
    await runner.run_all()
    return state_to_dict(store.state, categories(runner.catalog))


@router.post("/run/{category}")
async def run_category(category: str):
    try:
        records = await runner.run_category(category)
    except UnknownCategoryError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "category": category,
        "status": category_status(store.state, category),
        "results": [r.to_dict() for r in records],
    }


@router.post("/custom")
async def run_custom(body: CustomApiRequest):
    store.dispatch(with_custom_draft(CustomDraft(method=body.method.value, url=body.url, body=body.body or "")))
    record = await runner.run_custom(body.method.value, body.url, body.body)
    return record.to_dict()


@router.post("/mock")
async def generate_mock(body: MockRequest):
    if not body.description.strip():
        raise HTTPException(status_code=400, detail="Describe the mock API to generate")
    try:
        preview = await create_mock_api(store, mock_client, body.description)
    except MockGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"url": preview.url, "preview": preview.preview}


@router.post("/mock/use")
async def use_mock_in_custom_tester():
    if not copy_mock_to_custom(store):
        raise HTTPException(status_code=409, detail="No mock API generated yet")
    draft = store.state.custom_draft
    return {"message": "Mock API copied to Custom API tester.", "method": draft.method, "url": draft.url}


@router.get("/analytics")
async def get_analytics():
    return build_analytics(store.state, config.analytics.snippet_length)


@router.get("/export/excel")
async def export_excel():
    try:
        content = export_to_excel(store.state, runner.catalog, sheet_name=config.export.sheet_name)
    except ReportRenderError as e:
        return _render_failure(e)
    return _download(content, XLSX_MEDIA_TYPE, config.export.excel_filename)


@router.get("/export/pdf")
async def export_pdf():
    try:
        content = render_pdf_report(store.state, snippet_length=config.analytics.snippet_length)
    except ReportRenderError as e:
        return _render_failure(e)
    return _download(content, "application/pdf", config.export.pdf_filename)


@router.get("/export/chart.png")
async def export_chart():
    try:
        content = render_chart_png(store.state)
    except ReportRenderError as e:
        return _render_failure(e)
    return _download(content, "image/png", config.export.chart_filename)
