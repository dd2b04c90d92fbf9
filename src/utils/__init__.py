"""
Utility modules for the API testing dashboard
"""
from .config_loader import DashboardConfig, load_dashboard_config

__all__ = [
    'DashboardConfig',
    'load_dashboard_config',
]
