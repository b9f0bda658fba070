from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from .. import web
from ..deps import bind, get_paciente_service, json_body, parse_dni, parse_id, require_token
from ..errors import NotFoundError, ServiceError
from ..schemas import PacienteIn, PacientePatch
from ..services import PacienteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pacientes", tags=["Paciente"])


def _existente(service: PacienteService, paciente_id: int) -> None:
    try:
        service.get_by_id(paciente_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="paciente no encontrado")


@router.get("/{paciente_id}")
def get_by_id(paciente_id: str, service: PacienteService = Depends(get_paciente_service)) -> Response:
    pid = parse_id(paciente_id, detail="id invalido")
    try:
        return web.success(status.HTTP_200_OK, service.get_by_id(pid))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al paciente")


@router.get("")
def get_by_dni(
    dni: str | None = Query(None, alias="DNI"),
    service: PacienteService = Depends(get_paciente_service),
) -> Response:
    value = parse_dni(dni)
    try:
        return web.success(status.HTTP_200_OK, service.get_by_dni(value))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al paciente")


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_token)])
def create(payload: Any = Depends(json_body), service: PacienteService = Depends(get_paciente_service)) -> Response:
    paciente_in = bind(PacienteIn, payload)
    try:
        paciente = service.create(paciente_in)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return web.success(status.HTTP_201_CREATED, paciente)


@router.delete("/{paciente_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_token)])
def delete(paciente_id: str, service: PacienteService = Depends(get_paciente_service)) -> Response:
    pid = parse_id(paciente_id)
    try:
        service.delete(pid)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    logger.info("Paciente eliminado id=%s", pid)
    return web.success(status.HTTP_204_NO_CONTENT)


@router.put("/{paciente_id}", dependencies=[Depends(require_token)])
def put(
    paciente_id: str,
    payload: Any = Depends(json_body),
    service: PacienteService = Depends(get_paciente_service),
) -> Response:
    pid = parse_id(paciente_id)
    _existente(service, pid)
    paciente_in = bind(PacienteIn, payload)
    try:
        paciente = service.update(pid, paciente_in.model_dump())
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, paciente)


@router.patch("/{paciente_id}", dependencies=[Depends(require_token)])
def patch(
    paciente_id: str,
    payload: Any = Depends(json_body),
    service: PacienteService = Depends(get_paciente_service),
) -> Response:
    pid = parse_id(paciente_id)
    _existente(service, pid)
    cambios = bind(PacientePatch, payload).model_dump(exclude_unset=True, exclude_none=True)
    try:
        paciente = service.update(pid, cambios)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, paciente)
