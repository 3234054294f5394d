"""ASGI application serving the LVE metrics endpoint.

The app is framework-agnostic and runs under any ASGI server (uvicorn,
hypercorn, daphne). Exposition is delegated to prometheus_client.
"""

import asyncio
import json
import logging
import time
import uuid
from collections.abc import Callable, Coroutine
from typing import Any

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from lve_exporter.core.logs import get_logger, log_exception

logger = get_logger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]

METRICS_PATH = "/metrics"

LANDING_PAGE = f"""<html>
<head><title>LVE Exporter</title></head>
<body>
<h1>LVE Exporter</h1>
<p><a href='{METRICS_PATH}'>Metrics</a></p>
</body>
</html>
"""


def _extract_request_id(scope: Scope, header_name: str = "X-Request-ID") -> str:
    """Extract or generate a request ID from ASGI scope headers.

    Searches for the specified header (case-insensitive). If not found,
    generates a new UUID.
    """
    header_bytes = header_name.lower().encode()
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    for name, value in headers:
        if name.lower() == header_bytes:
            return str(value.decode("utf-8", errors="replace"))
    return str(uuid.uuid4())


def _get_log_level_for_status(status_code: int) -> int:
    """Map an HTTP status code to a logging level.

    - 400-499 (4xx) -> WARNING
    - 500-599 (5xx) -> ERROR
    - Other -> INFO
    """
    if 400 <= status_code < 500:
        return logging.WARNING
    if 500 <= status_code < 600:
        return logging.ERROR
    return logging.INFO


async def _send_response(
    send: Send, status: int, content_type: str, body: str | bytes
) -> None:
    """Send an HTTP response with headers and body.

    Args:
        send: ASGI send callable for writing response.
        status: HTTP status code.
        content_type: Content-Type header value.
        body: Response body; strings are UTF-8 encoded.
    """
    payload = body.encode() if isinstance(body, str) else body
    headers = [
        (b"content-type", content_type.encode()),
        (b"content-length", str(len(payload)).encode()),
    ]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": payload})


async def _handle_endpoint(
    send: Send,
    endpoint_func: Callable[[], bytes],
    content_type: str,
    log_message: str,
) -> None:
    """Run a blocking endpoint function in a worker thread and respond.

    Args:
        send: ASGI send callable for writing response.
        endpoint_func: Function that returns the response body.
        content_type: Content-Type header for success response.
        log_message: Message to log on error.
    """
    try:
        body = await asyncio.to_thread(endpoint_func)
        await _send_response(send, 200, content_type, body)
    except Exception:
        log_exception(log_message, logger=logger)
        error_body = json.dumps({"error": "Internal Server Error"})
        await _send_response(send, 500, "application/json", error_body)


class AccessLogMiddleware:
    """ASGI middleware that logs one record per HTTP request.

    Records carry request_id, method, path, status_code and duration_ms as
    structured attributes. The level follows the response status.
    """

    def __init__(
        self,
        app: ASGIApp,
        request_id_header: str = "X-Request-ID",
        access_logger: logging.Logger | None = None,
    ) -> None:
        self.app = app
        self.request_id_header = request_id_header
        self.logger = access_logger or get_logger("lve_exporter.access")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        request_id = _extract_request_id(scope, self.request_id_header)
        captured: dict[str, Any] = {"status": None}

        async def wrapped_send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                captured["status"] = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, wrapped_send)
        except Exception:
            captured["status"] = 500
            raise
        finally:
            status = captured["status"] or 0
            self.logger.log(
                _get_log_level_for_status(status),
                "%s %s",
                scope.get("method", ""),
                scope.get("path", ""),
                extra={
                    "request_id": request_id,
                    "method": scope.get("method", ""),
                    "path": scope.get("path", ""),
                    "status_code": status,
                    "duration_ms": (time.perf_counter() - start_time) * 1000,
                },
            )


def create_asgi_app(registry: CollectorRegistry) -> ASGIApp:
    """Create an ASGI app with the metrics endpoint and a landing page.

    Args:
        registry: Registry rendered on every request to /metrics.

    Returns:
        ASGI application callable. Every path other than /metrics serves
        the landing page.
    """

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        if scope["path"] == METRICS_PATH:
            await _handle_endpoint(
                send,
                lambda: generate_latest(registry),
                CONTENT_TYPE_LATEST,
                "Error rendering metrics endpoint",
            )
        else:
            await _send_response(send, 200, "text/html; charset=utf-8", LANDING_PAGE)

    return app
