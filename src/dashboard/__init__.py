"""
API testing dashboard: catalog, in-memory state, request runner, analytics and exports.
"""

from .catalog import CUSTOM_TAB, DEFAULT_CATALOG, UnknownCategoryError
from .runner import RequestRunner
from .state import DashboardState, ResultStore

__all__ = [
    "CUSTOM_TAB",
    "DEFAULT_CATALOG",
    "DashboardState",
    "RequestRunner",
    "ResultStore",
    "UnknownCategoryError",
]
