"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time
from typing import Any, Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from babycry.telemetry import observe_request

UNMATCHED_ROUTE = "unmatched"


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Collect request metrics for Prometheus.

    Requests that match no route share the ``unmatched`` label, which keeps
    the label set bounded no matter which paths clients request. Scrapes of
    the metrics endpoint itself are not counted.
    """

    def __init__(self, app: ASGIApp, excluded_paths: Iterable[str] = ("/metrics",)) -> None:
        super().__init__(app)
        self._excluded_paths = frozenset(excluded_paths)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self._excluded_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:  # pragma: no cover
            self._observe(request, 500, start_time)
            raise

        self._observe(request, response.status_code, start_time)
        return response

    def _observe(self, request: Request, status_code: int, start_time: float) -> None:
        observe_request(
            request.method,
            self._resolve_route(request),
            status_code,
            time.perf_counter() - start_time,
        )

    @staticmethod
    def _resolve_route(request: Request) -> str:
        """Return the matched route template, available once routing has run."""

        scope_route: Any = request.scope.get("route")
        path = getattr(scope_route, "path", None)
        return path or UNMATCHED_ROUTE
