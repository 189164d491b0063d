"""
Observability module: logging configuration, correlation IDs and request middleware.
"""

from coachdesk.observability.correlation import get_correlation_id, set_correlation_id
from coachdesk.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
