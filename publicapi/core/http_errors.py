# publicapi/core/http_errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from publicapi.core.errors import UPSTREAM_FAILURE_CODE, AppError
from publicapi.core.logging import get_correlation_id

log = logging.getLogger("pubapi.http")

CORRELATION_HEADER = "X-Correlation-ID"


def _json(status: int, payload: dict) -> JSONResponse:
    response = JSONResponse(status_code=status, content=jsonable_encoder(payload))
    cid = get_correlation_id()
    if cid:
        response.headers[CORRELATION_HEADER] = cid
    return response


def init_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(_request: Request, exc: AppError):
        return _json(exc.http_status, {"code": exc.code, "detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(_request: Request, exc: RequestValidationError):
        return _json(422, {"code": "validation_error", "detail": exc.errors()})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        # já foi registado no use case / middleware; aqui só a resposta 5xx
        log.debug("Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path)
        return _json(500, {"code": UPSTREAM_FAILURE_CODE, "detail": "Internal server error"})
