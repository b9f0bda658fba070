from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from .. import web
from ..deps import (
    bind,
    get_dentista_service,
    get_paciente_service,
    get_turno_service,
    json_body,
    parse_dni,
    parse_id,
    require_token,
)
from ..errors import NotFoundError, ServiceError
from ..schemas import TurnoByDniAndMatricula, TurnoIn, TurnoPatch
from ..services import DentistaService, PacienteService, TurnoService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/turnos", tags=["Turno"])


def _existente(service: TurnoService, turno_id: int) -> None:
    try:
        service.get_by_id(turno_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="turno no encontrado")


@router.get("/{turno_id}")
def get_by_id(turno_id: str, service: TurnoService = Depends(get_turno_service)) -> Response:
    """Obtiene un turno por su ID."""
    tid = parse_id(turno_id, detail="id invalido")
    try:
        turno = service.get_by_id(tid)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al turno")
    return web.success(status.HTTP_200_OK, turno)


@router.get("")
def get_by_dni(
    dni: str | None = Query(None, alias="DNI"),
    service: TurnoService = Depends(get_turno_service),
) -> Response:
    """Turnos del paciente con el DNI indicado."""
    value = parse_dni(dni)
    try:
        turnos = service.get_by_dni(value)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al turno")
    return web.success(status.HTTP_200_OK, turnos)


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_token)])
def create(
    payload: Any = Depends(json_body),
    service: TurnoService = Depends(get_turno_service),
) -> Response:
    turno_in = bind(TurnoIn, payload)
    try:
        turno = service.create(turno_in)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return web.success(status.HTTP_201_CREATED, turno)


@router.post("/dni-matricula", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_token)])
def create_by_dni_and_matricula(
    payload: Any = Depends(json_body),
    service: TurnoService = Depends(get_turno_service),
    pacientes: PacienteService = Depends(get_paciente_service),
    dentistas: DentistaService = Depends(get_dentista_service),
) -> Response:
    """
    Crea un turno a partir del DNI del paciente y la matrícula del odontólogo.
    Si alguno de los dos no existe se corta con 404, sin llegar a crear nada.
    """
    aux = bind(TurnoByDniAndMatricula, payload)

    try:
        paciente = pacientes.get_by_dni(aux.dni)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="paciente inexistente")
    try:
        odontologo = dentistas.get_by_matricula(aux.matricula)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="odontologo inexistente")

    turno_in = TurnoIn(
        fecha_hora=aux.fecha_hora,
        descripcion=aux.descripcion,
        paciente_id=str(paciente.id),
        dentista_id=str(odontologo.id),
    )
    try:
        turno = service.create(turno_in)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return web.success(status.HTTP_201_CREATED, turno)


@router.delete("/{turno_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_token)])
def delete(turno_id: str, service: TurnoService = Depends(get_turno_service)) -> Response:
    tid = parse_id(turno_id)
    try:
        service.delete(tid)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    logger.info("Turno eliminado id=%s", tid)
    return web.success(status.HTTP_204_NO_CONTENT)


@router.put("/{turno_id}", dependencies=[Depends(require_token)])
def put(
    turno_id: str,
    payload: Any = Depends(json_body),
    service: TurnoService = Depends(get_turno_service),
) -> Response:
    """Reemplazo completo del turno."""
    tid = parse_id(turno_id)
    _existente(service, tid)
    turno_in = bind(TurnoIn, payload)
    try:
        turno = service.update(tid, turno_in.model_dump())
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, turno)


@router.patch("/{turno_id}", dependencies=[Depends(require_token)])
def patch(
    turno_id: str,
    payload: Any = Depends(json_body),
    service: TurnoService = Depends(get_turno_service),
) -> Response:
    """Actualización parcial: los campos ausentes conservan su valor."""
    tid = parse_id(turno_id)
    _existente(service, tid)
    cambios = bind(TurnoPatch, payload).model_dump(exclude_unset=True, exclude_none=True)
    try:
        turno = service.update(tid, cambios)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, turno)
