from __future__ import annotations

import time
from collections.abc import Iterable

from fastapi import Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response as StarletteResponse

# HTTP side: labelled by route template so /today?on=... stays one series
HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "route", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency (seconds)",
    ["method", "route"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

# Quote side
QUOTE_SELECTIONS_TOTAL = Counter(
    "quote_selections_total",
    "Daily quote selections by outcome (ok or a QuoteExitReason value)",
    ["outcome"],
)

QUOTE_ENTRIES = Gauge(
    "quote_entries",
    "Entries in the quote collection as of the last selection",
)

WIDGET_TIMELINES_TOTAL = Counter(
    "widget_timelines_total",
    "Widget timelines generated",
)

WIDGET_TIMELINE_ENTRIES = Histogram(
    "widget_timeline_entries",
    "Entries per generated widget timeline",
    buckets=(1, 2, 5, 10, 24, 48),
)


def record_selection(outcome: str, entries: int | None = None) -> None:
    QUOTE_SELECTIONS_TOTAL.labels(outcome=outcome).inc()
    if entries is not None:
        QUOTE_ENTRIES.set(entries)


def record_timeline(entries: int) -> None:
    WIDGET_TIMELINES_TOTAL.inc()
    WIDGET_TIMELINE_ENTRIES.observe(entries)


def route_label(request: Request) -> str:
    """Matched route template, or "unmatched" so 404 scans can't mint new series."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    """Counts requests and times them per route; paths in skip_paths are passed through."""

    def __init__(self, app, skip_paths: Iterable[str] = ()):
        super().__init__(app)
        self._skip = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> StarletteResponse:
        if request.url.path in self._skip:
            return await call_next(request)

        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            HTTP_REQUESTS_TOTAL.labels(
                method=request.method, route=route_label(request), status="500"
            ).inc()
            raise

        # the route is only resolved once the app has handled the request
        route = route_label(request)
        HTTP_REQUESTS_TOTAL.labels(
            method=request.method, route=route, status=str(response.status_code)
        ).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=request.method, route=route).observe(
            time.time() - start
        )
        return response


def metrics_endpoint() -> Response:
    """Return the Prometheus metrics exposition."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
