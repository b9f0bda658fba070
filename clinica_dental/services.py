from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models, schemas
from .db import Database
from .errors import ConflictError, InvalidDataError, NotFoundError

logger = logging.getLogger(__name__)

# ids enteros de 64 bits con signo (rango de la columna INTEGER)
MAX_ID = 2**63 - 1
_DIGITOS_RE = re.compile(r"\d+", re.ASCII)


# =========================
# Helper
# =========================
def _requeridos(**campos: Any) -> None:
    """InvalidDataError con el primer campo vacío (None o sólo espacios)."""
    for nombre, valor in campos.items():
        if valor is None or (isinstance(valor, str) and not valor.strip()):
            raise InvalidDataError(f"{nombre} es obligatorio")


def _dni_valido(dni: float | None) -> None:
    if dni is None or not math.isfinite(dni) or dni <= 0:
        raise InvalidDataError("dni invalido")


def _ref_id(raw: str) -> int | None:
    """Las referencias de un turno son texto: '12' -> 12, ' 012 ' -> 12, cualquier otra cosa -> None."""
    raw = raw.strip()
    if not _DIGITOS_RE.fullmatch(raw):
        return None
    ref = int(raw)
    return ref if ref <= MAX_ID else None


def _aplicar(row: Any, cambios: Mapping[str, Any]) -> None:
    for campo, valor in cambios.items():
        setattr(row, campo, valor)


def _paciente(row: models.Paciente) -> schemas.Paciente:
    return schemas.Paciente(
        id=row.id,
        nombre=row.nombre,
        apellido=row.apellido,
        domicilio=row.domicilio,
        dni=row.dni,
        fecha_alta=row.fecha_alta,
    )


def _dentista(row: models.Dentista) -> schemas.Dentista:
    return schemas.Dentista(id=row.id, apellido=row.apellido, nombre=row.nombre, matricula=row.matricula)


def _turno(row: models.Turno) -> schemas.Turno:
    return schemas.Turno(
        id=row.id,
        fecha_hora=row.fecha_hora,
        descripcion=row.descripcion,
        paciente_id=row.paciente_id,
        dentista_id=row.dentista_id,
    )


# =========================
# Pacientes
# =========================
class PacienteService:
    def __init__(self, db: Database) -> None:
        self.db = db

    def list_all(self) -> list[schemas.Paciente]:
        with self.db.session() as s:
            rows = s.scalars(select(models.Paciente).order_by(models.Paciente.apellido, models.Paciente.nombre))
            return [_paciente(r) for r in rows]

    def get_by_id(self, paciente_id: int) -> schemas.Paciente:
        with self.db.session() as s:
            row = s.get(models.Paciente, paciente_id)
            if row is None:
                raise NotFoundError("paciente no encontrado")
            return _paciente(row)

    def get_by_dni(self, dni: float) -> schemas.Paciente:
        with self.db.session() as s:
            row = s.execute(select(models.Paciente).where(models.Paciente.dni == dni)).scalar_one_or_none()
            if row is None:
                raise NotFoundError("paciente inexistente")
            return _paciente(row)

    def create(self, data: schemas.PacienteIn) -> schemas.Paciente:
        _requeridos(nombre=data.nombre, apellido=data.apellido)
        _dni_valido(data.dni)

        with self.db.session() as s:
            if self._dni_ocupado(s, data.dni):
                raise InvalidDataError("ya existe un paciente con ese dni")

            row = models.Paciente(
                nombre=data.nombre.strip(),
                apellido=data.apellido.strip(),
                domicilio=data.domicilio,
                dni=data.dni,
                fecha_alta=data.fecha_alta,
            )
            s.add(row)
            try:
                s.flush()
            except IntegrityError as e:
                raise InvalidDataError("ya existe un paciente con ese dni") from e
            logger.info("Paciente creado id=%s", row.id)
            return _paciente(row)

    def update(self, paciente_id: int, cambios: Mapping[str, Any]) -> schemas.Paciente:
        with self.db.session() as s:
            row = s.get(models.Paciente, paciente_id)
            if row is None:
                raise NotFoundError("paciente no encontrado")

            _aplicar(row, cambios)
            _requeridos(nombre=row.nombre, apellido=row.apellido)
            row.nombre = row.nombre.strip()
            row.apellido = row.apellido.strip()
            _dni_valido(row.dni)
            if self._dni_ocupado(s, row.dni, excluir_id=row.id):
                raise ConflictError("ya existe un paciente con ese dni")

            try:
                s.flush()
            except IntegrityError as e:
                raise ConflictError("ya existe un paciente con ese dni") from e
            return _paciente(row)

    def delete(self, paciente_id: int) -> None:
        with self.db.session() as s:
            row = s.get(models.Paciente, paciente_id)
            if row is None:
                raise NotFoundError("paciente no encontrado")
            s.delete(row)

    @staticmethod
    def _dni_ocupado(s: Session, dni: float, excluir_id: int | None = None) -> bool:
        q = select(models.Paciente.id).where(models.Paciente.dni == dni)
        if excluir_id is not None:
            q = q.where(models.Paciente.id != excluir_id)
        return s.execute(q.limit(1)).first() is not None


# =========================
# Dentistas
# =========================
class DentistaService:
    def __init__(self, db: Database) -> None:
        self.db = db

    def list_all(self) -> list[schemas.Dentista]:
        with self.db.session() as s:
            rows = s.scalars(select(models.Dentista).order_by(models.Dentista.apellido, models.Dentista.nombre))
            return [_dentista(r) for r in rows]

    def get_by_id(self, dentista_id: int) -> schemas.Dentista:
        with self.db.session() as s:
            row = s.get(models.Dentista, dentista_id)
            if row is None:
                raise NotFoundError("dentista no encontrado")
            return _dentista(row)

    def get_by_matricula(self, matricula: str) -> schemas.Dentista:
        with self.db.session() as s:
            row = s.execute(
                select(models.Dentista).where(models.Dentista.matricula == matricula.strip())
            ).scalar_one_or_none()
            if row is None:
                raise NotFoundError("odontologo inexistente")
            return _dentista(row)

    def create(self, data: schemas.DentistaIn) -> schemas.Dentista:
        _requeridos(apellido=data.apellido, nombre=data.nombre, matricula=data.matricula)
        matricula = data.matricula.strip()

        with self.db.session() as s:
            if self._matricula_ocupada(s, matricula):
                raise InvalidDataError("ya existe un dentista con esa matricula")

            row = models.Dentista(apellido=data.apellido.strip(), nombre=data.nombre.strip(), matricula=matricula)
            s.add(row)
            try:
                s.flush()
            except IntegrityError as e:
                raise InvalidDataError("ya existe un dentista con esa matricula") from e
            logger.info("Dentista creado id=%s matricula=%s", row.id, row.matricula)
            return _dentista(row)

    def update(self, dentista_id: int, cambios: Mapping[str, Any]) -> schemas.Dentista:
        with self.db.session() as s:
            row = s.get(models.Dentista, dentista_id)
            if row is None:
                raise NotFoundError("dentista no encontrado")

            _aplicar(row, cambios)
            _requeridos(apellido=row.apellido, nombre=row.nombre, matricula=row.matricula)
            row.apellido = row.apellido.strip()
            row.nombre = row.nombre.strip()
            row.matricula = row.matricula.strip()
            if self._matricula_ocupada(s, row.matricula, excluir_id=row.id):
                raise ConflictError("ya existe un dentista con esa matricula")

            try:
                s.flush()
            except IntegrityError as e:
                raise ConflictError("ya existe un dentista con esa matricula") from e
            return _dentista(row)

    def delete(self, dentista_id: int) -> None:
        with self.db.session() as s:
            row = s.get(models.Dentista, dentista_id)
            if row is None:
                raise NotFoundError("dentista no encontrado")
            s.delete(row)

    @staticmethod
    def _matricula_ocupada(s: Session, matricula: str, excluir_id: int | None = None) -> bool:
        q = select(models.Dentista.id).where(models.Dentista.matricula == matricula)
        if excluir_id is not None:
            q = q.where(models.Dentista.id != excluir_id)
        return s.execute(q.limit(1)).first() is not None


# =========================
# Turnos
# =========================
class TurnoService:
    def __init__(self, db: Database) -> None:
        self.db = db

    def list_all(self) -> list[schemas.Turno]:
        with self.db.session() as s:
            return [_turno(r) for r in s.scalars(select(models.Turno).order_by(models.Turno.id))]

    def get_by_id(self, turno_id: int) -> schemas.Turno:
        with self.db.session() as s:
            row = s.get(models.Turno, turno_id)
            if row is None:
                raise NotFoundError("turno no encontrado")
            return _turno(row)

    def get_by_dni(self, dni: float) -> list[schemas.Turno]:
        """Turnos del paciente con ese DNI, en orden de alta."""
        with self.db.session() as s:
            paciente_id = s.execute(
                select(models.Paciente.id).where(models.Paciente.dni == dni)
            ).scalar_one_or_none()
            if paciente_id is None:
                raise NotFoundError("paciente inexistente")

            rows = s.scalars(
                select(models.Turno).where(models.Turno.paciente_id == str(paciente_id)).order_by(models.Turno.id)
            ).all()
            if not rows:
                raise NotFoundError("el paciente no tiene turnos")
            return [_turno(r) for r in rows]

    def create(self, data: schemas.TurnoIn) -> schemas.Turno:
        """
        Use case: dar un turno.
        - fecha, paciente y odontólogo obligatorios
        - paciente y odontólogo deben existir (sólo se verifica aquí, no al actualizar)
        """
        _requeridos(fechaHora=data.fecha_hora, paciente=data.paciente_id, odontologo=data.dentista_id)

        with self.db.session() as s:
            paciente_id = _ref_id(data.paciente_id)
            if paciente_id is None or s.get(models.Paciente, paciente_id) is None:
                raise InvalidDataError("paciente inexistente")

            dentista_id = _ref_id(data.dentista_id)
            if dentista_id is None or s.get(models.Dentista, dentista_id) is None:
                raise InvalidDataError("odontologo inexistente")

            row = models.Turno(
                fecha_hora=data.fecha_hora,
                descripcion=data.descripcion,
                # referencias normalizadas: get_by_dni compara contra str(id)
                paciente_id=str(paciente_id),
                dentista_id=str(dentista_id),
            )
            s.add(row)
            s.flush()
            logger.info("Turno creado id=%s paciente=%s odontologo=%s", row.id, row.paciente_id, row.dentista_id)
            return _turno(row)

    def update(self, turno_id: int, cambios: Mapping[str, Any]) -> schemas.Turno:
        with self.db.session() as s:
            row = s.get(models.Turno, turno_id)
            if row is None:
                raise NotFoundError("turno no encontrado")

            _aplicar(row, cambios)
            _requeridos(fechaHora=row.fecha_hora, paciente=row.paciente_id, odontologo=row.dentista_id)
            s.flush()
            return _turno(row)

    def delete(self, turno_id: int) -> None:
        with self.db.session() as s:
            row = s.get(models.Turno, turno_id)
            if row is None:
                raise NotFoundError("turno no encontrado")
            s.delete(row)
