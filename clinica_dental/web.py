from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


def success(status_code: int, data: Any = None) -> Response:
    """Respuesta OK: {"data": ...}. Un 204 va sin cuerpo."""
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content={"data": jsonable_encoder(data)})


def failure(status_code: int, message: str) -> JSONResponse:
    """Respuesta de error: status, frase HTTP y mensaje plano."""
    try:
        code = HTTPStatus(status_code).phrase
    except ValueError:
        code = "Error"
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "code": code, "message": message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return failure(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return failure(status.HTTP_400_BAD_REQUEST, "invalid request")
