"""
middleware.py — Request tracing middleware

Two HTTP middlewares that wrap every request, whatever the route:

- request_id_middleware (outer): fresh uuid4 per request, stored on
  request.state.request_id, bound into Loguru's context for everything
  logged while the request runs, echoed as the X-Request-ID header.
  An exception nobody handled becomes a 500 JSON body that still
  carries the header.
- request_logging_middleware (inner): one "http_request" log entry per
  request with method, path, status and latency, also when the
  downstream raised.

Starlette runs the most recently added middleware first, so main.py
registers request_logging_middleware before request_id_middleware.

Called by: users_api/main.py (create_app)
Depends on: loguru
"""

import time
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

REQUEST_ID_HEADER = "X-Request-ID"


async def request_id_middleware(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    with logger.contextualize(request_id=request_id):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on {} {}", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"error": "internal server error"})
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def request_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    status = 500
    try:
        response = await call_next(request)
        status = response.status_code
        return response
    finally:
        latency_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.bind(
            request_id=getattr(request.state, "request_id", "-"),
            method=request.method,
            path=request.url.path,
            status=status,
            latency_ms=latency_ms,
        ).info("http_request {} {} {} {}ms", request.method, request.url.path, status, latency_ms)
