"""Prometheus metrics integration for the CodexCrafters site API."""

from prometheus_client import Counter, Histogram, Info, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client.core import CollectorRegistry
from fastapi import FastAPI, Response
import time
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

UNMATCHED_ENDPOINT = "unmatched"

# Custom registry so test apps do not collide with the default one
site_registry = CollectorRegistry()

# Request metrics
request_count = Counter(
    'codexcrafters_http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code'],
    registry=site_registry
)

request_duration = Histogram(
    'codexcrafters_http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    registry=site_registry
)

# Documentation metrics
docs_scan_duration = Histogram(
    'codexcrafters_docs_scan_duration_seconds',
    'Documentation tree scan duration in seconds',
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
    registry=site_registry
)

docs_files_scanned = Counter(
    'codexcrafters_docs_files_scanned_total',
    'Total number of markdown files read while building the docs tree',
    registry=site_registry
)

docs_content_requests = Counter(
    'codexcrafters_docs_content_requests_total',
    'Documentation content requests by outcome',
    ['outcome'],
    registry=site_registry
)

# Application info
app_info = Info(
    'codexcrafters_app_info',
    'CodexCrafters application information',
    registry=site_registry
)

# Error metrics
error_count = Counter(
    'codexcrafters_errors_total',
    'Total number of errors',
    ['error_type', 'component'],
    registry=site_registry
)


class PrometheusMiddleware:
    """Middleware to collect Prometheus metrics for HTTP requests.

    Requests are labelled with the matched route template, so the number of
    series is bounded by the routes the app defines.
    """

    def __init__(self, app: FastAPI):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        start_time = time.time()
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            logger.error(f"Request processing error: {e}")
            error_count.labels(error_type=type(e).__name__, component="http").inc()
            raise
        finally:
            duration = time.time() - start_time
            endpoint = route_label(scope)
            request_count.labels(
                method=method,
                endpoint=endpoint,
                status_code=str(status_code)
            ).inc()
            request_duration.labels(method=method, endpoint=endpoint).observe(duration)


def route_label(scope) -> str:
    """Route template the router matched, e.g. ``/api/guides/{guide_id}``."""
    # The router stores the matched route in the shared scope
    route = scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ENDPOINT


def setup_prometheus_metrics(app: FastAPI, version: str, environment: str) -> None:
    """Setup Prometheus metrics collection for FastAPI app."""
    app.add_middleware(PrometheusMiddleware)

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint():
        """Prometheus metrics endpoint."""
        return Response(generate_latest(site_registry), media_type=CONTENT_TYPE_LATEST)

    app_info.info({'version': version, 'environment': environment})
    logger.info("Prometheus metrics configured")


def record_docs_scan(duration: float, file_count: int, failures: int = 0) -> None:
    """Record metrics for one documentation tree build."""
    docs_scan_duration.observe(duration)
    docs_files_scanned.inc(file_count)
    if failures:
        error_count.labels(error_type="scan_error", component="docs").inc(failures)


def record_content_request(outcome: str) -> None:
    """Record the outcome of a documentation content request."""
    docs_content_requests.labels(outcome=outcome).inc()


def get_metrics_summary() -> Dict[str, Any]:
    """Get a summary of current metrics."""
    return {
        "docs_files_scanned_total": docs_files_scanned._value.get(),
        "errors_total": sum(
            sample.value
            for metric in error_count.collect()
            for sample in metric.samples
            if sample.name.endswith("_total")
        ),
    }
