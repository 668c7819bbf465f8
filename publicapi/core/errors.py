# publicapi/core/errors.py
"""
Erros de aplicação com código e status HTTP associados.

Falhas de colaboradores (repositório, mapper, composer de URIs) NÃO são
embrulhadas aqui: propagam inalteradas e o handler genérico devolve 500.
"""

from __future__ import annotations

UPSTREAM_FAILURE_CODE = "upstream_failure"


class AppError(Exception):
    code = "app_error"
    http_status = 400

    def __init__(self, detail: str | None = None, *, code: str | None = None) -> None:
        self.detail = detail or self.__class__.__name__
        if code:
            self.code = code
        super().__init__(self.detail)


class NotFound(AppError):
    code = "not_found"
    http_status = 404
