from __future__ import annotations

import json
import logging
import math
import re
import secrets
from typing import Any, TypeVar

from fastapi import Depends, Header, HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from .config import Settings
from .services import DentistaService, PacienteService, TurnoService

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

# rango de un entero de 64 bits con signo
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

# cuerpo que no es JSON válido
MALFORMED = object()



# Configuración y servicios (inyectados en create_app)

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_turno_service(request: Request) -> TurnoService:
    return request.app.state.turnos


def get_paciente_service(request: Request) -> PacienteService:
    return request.app.state.pacientes


def get_dentista_service(request: Request) -> DentistaService:
    return request.app.state.dentistas



# Token compartido (header TOKEN)

def require_token(
    token: str | None = Header(None, alias="TOKEN"),
    settings: Settings = Depends(get_settings),
) -> None:
    if not token:
        logger.warning("Request sin header TOKEN")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="token not found")
    if not settings.token or not secrets.compare_digest(token.encode(), settings.token.encode()):
        logger.warning("Request con TOKEN invalido")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid token")



# Cuerpo JSON

async def json_body(request: Request) -> Any:
    """
    Lee el cuerpo sin validarlo: el handler decide cuándo hacerlo,
    después del token y del id.
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except ValueError:
        return MALFORMED


def bind(model: type[M], payload: Any) -> M:
    if payload is MALFORMED:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid json")
    try:
        return model.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid json")



# Parámetros

def parse_id(raw: str, detail: str = "invalid id") -> int:
    if not _INT_RE.fullmatch(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return value


def parse_dni(raw: str | None) -> float:
    try:
        dni = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Dni invalido")
    if not math.isfinite(dni):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Dni invalido")
    return dni
