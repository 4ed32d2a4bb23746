"""Observability package for the CodexCrafters site API."""

from .logging import setup_logging, get_logger, log_performance, JSONFormatter, ColoredFormatter
from .prometheus_metrics import (
    setup_prometheus_metrics,
    record_docs_scan,
    record_content_request,
    get_metrics_summary,
    PrometheusMiddleware,
    site_registry
)

__all__ = [
    'setup_logging',
    'get_logger',
    'log_performance',
    'JSONFormatter',
    'ColoredFormatter',
    'setup_prometheus_metrics',
    'record_docs_scan',
    'record_content_request',
    'get_metrics_summary',
    'PrometheusMiddleware',
    'site_registry'
]
