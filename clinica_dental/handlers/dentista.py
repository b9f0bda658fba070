from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from .. import web
from ..deps import bind, get_dentista_service, json_body, parse_id, require_token
from ..errors import NotFoundError, ServiceError
from ..schemas import DentistaIn, DentistaPatch
from ..services import DentistaService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dentistas", tags=["Dentista"])


def _existente(service: DentistaService, dentista_id: int) -> None:
    try:
        service.get_by_id(dentista_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="dentista no encontrado")


@router.get("/{dentista_id}")
def get_by_id(dentista_id: str, service: DentistaService = Depends(get_dentista_service)) -> Response:
    did = parse_id(dentista_id, detail="id invalido")
    try:
        return web.success(status.HTTP_200_OK, service.get_by_id(did))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al dentista")


@router.get("")
def get_by_matricula(
    matricula: str | None = Query(None),
    service: DentistaService = Depends(get_dentista_service),
) -> Response:
    if not matricula or not matricula.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="matricula invalida")
    try:
        return web.success(status.HTTP_200_OK, service.get_by_matricula(matricula))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no se encontró al dentista")


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_token)])
def create(payload: Any = Depends(json_body), service: DentistaService = Depends(get_dentista_service)) -> Response:
    # apellido, nombre y matricula son obligatorios: si falta alguno, bind() da 400
    dentista_in = bind(DentistaIn, payload)
    try:
        dentista = service.create(dentista_in)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return web.success(status.HTTP_201_CREATED, dentista)


@router.delete("/{dentista_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_token)])
def delete(dentista_id: str, service: DentistaService = Depends(get_dentista_service)) -> Response:
    did = parse_id(dentista_id)
    try:
        service.delete(did)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    logger.info("Dentista eliminado id=%s", did)
    return web.success(status.HTTP_204_NO_CONTENT)


@router.put("/{dentista_id}", dependencies=[Depends(require_token)])
def put(
    dentista_id: str,
    payload: Any = Depends(json_body),
    service: DentistaService = Depends(get_dentista_service),
) -> Response:
    did = parse_id(dentista_id)
    _existente(service, did)
    dentista_in = bind(DentistaIn, payload)
    try:
        dentista = service.update(did, dentista_in.model_dump())
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, dentista)


@router.patch("/{dentista_id}", dependencies=[Depends(require_token)])
def patch(
    dentista_id: str,
    payload: Any = Depends(json_body),
    service: DentistaService = Depends(get_dentista_service),
) -> Response:
    did = parse_id(dentista_id)
    _existente(service, did)
    cambios = bind(DentistaPatch, payload).model_dump(exclude_unset=True, exclude_none=True)
    try:
        dentista = service.update(did, cambios)
    except ServiceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return web.success(status.HTTP_200_OK, dentista)
