"""Error handling helpers for dashboard actions that end in a user notification."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Dashboard action failed: %s", exc, exc_info=True)
        return {
            "message": "The report could not be generated. Please try again later.",
            "blocking": True,
            "metadata": {"error": str(exc), "error_type": type(exc).__name__, "context": context or {}},
        }
