"""
FastAPI application - Main entry point

Serves the mock service (/api/...) and the dashboard (/api/v1/dashboard/...).
Run with:
  uvicorn src.api.main:app --host 127.0.0.1 --port 5000
or:
  python -m src.api.main
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import src.api.endpoints.dashboard as dashboard_module
from src.api.endpoints.dashboard import router as dashboard_router
from src.api.endpoints.mock_service import router as mock_service_router
from src.dashboard.catalog import DEFAULT_CATALOG
from src.dashboard.runner import RequestRunner
from src.dashboard.state import ResultStore
from src.integrations.clients.real_http.api_caller import ApiCaller
from src.integrations.clients.real_http.mock_service_client import MockServiceClient
from src.utils.config_loader import load_dashboard_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "API Testing Dashboard"
VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Mock telecom endpoints plus a dashboard that runs API test batches and exports reports",
    version=VERSION,
)

# CORS middleware: the mock service accepts cross-origin requests from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

config = load_dashboard_config()

result_store = ResultStore()
request_runner = RequestRunner(
    store=result_store,
    caller=ApiCaller(
        timeout_seconds=config.runner.timeout_seconds,
        follow_redirects=config.runner.follow_redirects,
    ),
    catalog=DEFAULT_CATALOG,
    cors_proxy_url=config.runner.cors_proxy_url,
)

dashboard_module.store = result_store
dashboard_module.runner = request_runner
dashboard_module.mock_client = MockServiceClient(base_url=config.mock_service.base_url)
dashboard_module.config = config

# Register routers
app.include_router(mock_service_router)
app.include_router(dashboard_router, prefix="/api/v1")


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": SERVICE_NAME, "status": "healthy", "version": VERSION, "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with a summary of the in-memory state."""
    state = result_store.state
    return {
        "status": "healthy",
        "categories_run": sorted(state.results.keys()),
        "running": state.loading_category,
        "timestamp": datetime.now().isoformat(),
    }


def main() -> None:
    import uvicorn

    logger.info(f"Backend running on http://{config.mock_service.host}:{config.mock_service.port}")
    uvicorn.run(app, host=config.mock_service.host, port=config.mock_service.port)


if __name__ == "__main__":
    main()
