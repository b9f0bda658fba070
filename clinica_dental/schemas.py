from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    # JSON en camelCase, atributos en snake_case
    model_config = ConfigDict(populate_by_name=True)



# Turno

class TurnoIn(_Schema):
    """Cuerpo de POST /turnos y PUT /turnos/{id} (reemplazo completo)."""
    fecha_hora: str = Field("", alias="fechaHora")
    descripcion: str = ""
    paciente_id: str = Field("", alias="paciente")
    dentista_id: str = Field("", alias="odontologo")


class Turno(TurnoIn):
    id: int


class TurnoPatch(_Schema):
    # todo opcional: sólo se aplican los campos presentes en el request
    fecha_hora: str | None = Field(None, alias="fechaHora")
    descripcion: str | None = None
    paciente_id: str | None = Field(None, alias="paciente")
    dentista_id: str | None = Field(None, alias="odontologo")


class TurnoByDniAndMatricula(_Schema):
    dni: float
    matricula: str
    fecha_hora: str = Field("", alias="fechaHora")
    descripcion: str = ""



# Paciente

class PacienteIn(_Schema):
    nombre: str
    apellido: str
    domicilio: str = ""
    dni: float
    fecha_alta: str = Field("", alias="fechaAlta")


class Paciente(PacienteIn):
    id: int


class PacientePatch(_Schema):
    nombre: str | None = None
    apellido: str | None = None
    domicilio: str | None = None
    dni: float | None = None
    fecha_alta: str | None = Field(None, alias="fechaAlta")



# Dentista

class DentistaIn(_Schema):
    apellido: str
    nombre: str
    matricula: str


class Dentista(DentistaIn):
    id: int


class DentistaPatch(_Schema):
    apellido: str | None = None
    nombre: str | None = None
    matricula: str | None = None
