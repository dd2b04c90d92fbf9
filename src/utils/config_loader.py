"""
Configuration loader for the API testing dashboard
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "dashboard_config.yml"


class MockServiceConfig(BaseModel):
    """Mock service (fixed local port) configuration"""

    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
    base_url: str = "http://localhost:5000"


class RunnerConfig(BaseModel):
    """Request runner configuration"""

    cors_proxy_url: str = "https://cors-anywhere.herokuapp.com/"
    # None means no timeout: an unresponsive endpoint stalls its category run
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    follow_redirects: bool = True


class AnalyticsConfig(BaseModel):
    """Analytics view configuration"""

    snippet_length: int = Field(default=50, ge=1, le=10_000)


class ExportConfig(BaseModel):
    """Spreadsheet / PDF export configuration"""

    excel_filename: str = "api-test-results.xlsx"
    sheet_name: str = "API Results"
    pdf_filename: str = "api-test-report.pdf"
    chart_filename: str = "api-test-chart.png"


class DashboardConfig(BaseModel):
    """Complete dashboard configuration"""

    mock_service: MockServiceConfig = Field(default_factory=MockServiceConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_dashboard_config(config_path: Optional[Path] = None) -> DashboardConfig:
    """
    Load and validate dashboard configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to $DASHBOARD_CONFIG_PATH,
            then config/dashboard_config.yml

    Returns:
        Validated DashboardConfig object with environment overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        env_path = os.getenv("DASHBOARD_CONFIG_PATH", "").strip()
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = DashboardConfig(**config_data)
        logger.info(f"Successfully loaded config from {config_path}")
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise

    return apply_env_overrides(config)


def apply_env_overrides(config: DashboardConfig) -> DashboardConfig:
    """Environment variables win over file values."""
    base_url = os.getenv("MOCK_SERVICE_BASE_URL", "").strip()
    if base_url:
        config.mock_service.base_url = base_url

    # An empty CORS_PROXY_URL is meaningful: it disables the proxy retry.
    proxy_url = os.getenv("CORS_PROXY_URL")
    if proxy_url is not None:
        config.runner.cors_proxy_url = proxy_url.strip()

    return config
