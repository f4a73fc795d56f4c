"""Observability module for metrics and logging."""

from faq_matcher.observability.logging import LogContext, configure_logging, get_logger
from faq_matcher.observability.metrics import record_match

__all__ = [
    "LogContext",
    "configure_logging",
    "get_logger",
    "record_match",
]
