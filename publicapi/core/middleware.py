# publicapi/core/middleware.py
"""
HTTP middleware para correlation id, logging de requests e error handling.
"""

import logging
import time
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from publicapi.core.errors import UPSTREAM_FAILURE_CODE, AppError
from publicapi.core.http_errors import CORRELATION_HEADER
from publicapi.core.logging import set_correlation_id

log = logging.getLogger(__name__)

# Threshold for slow request warning (ms)
SLOW_REQUEST_MS = 2000


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cid = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        set_correlation_id(cid)
        t0 = time.perf_counter()

        method = request.method
        path = request.url.path

        try:
            log.info("-> %s %s", method, path)

            try:
                response = await call_next(request)
            except AppError as e:
                dt = (time.perf_counter() - t0) * 1000
                response = JSONResponse(
                    status_code=e.http_status, content={"code": e.code, "detail": e.detail}
                )
                response.headers[CORRELATION_HEADER] = cid
                log.warning("<- %s %s -> %s [%s] %.0fms", method, path, e.http_status, e.code, dt)
                return response
            except Exception as e:
                dt = (time.perf_counter() - t0) * 1000
                response = JSONResponse(
                    status_code=500,
                    content={"code": UPSTREAM_FAILURE_CODE, "detail": "Internal server error"},
                )
                response.headers[CORRELATION_HEADER] = cid
                log.error("<- %s %s -> 500 [%s] %.0fms", method, path, type(e).__name__, dt)
                return response

            dt = (time.perf_counter() - t0) * 1000
            response.headers[CORRELATION_HEADER] = cid

            status = response.status_code
            if status >= 500:
                log.error("<- %s %s -> %s %.0fms", method, path, status, dt)
            elif status >= 400:
                log.warning("<- %s %s -> %s %.0fms", method, path, status, dt)
            elif dt > SLOW_REQUEST_MS:
                log.warning("<- %s %s -> %s %.0fms [SLOW]", method, path, status, dt)
            else:
                log.info("<- %s %s -> %s %.0fms", method, path, status, dt)

            return response

        finally:
            set_correlation_id(None)
