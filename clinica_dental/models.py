from __future__ import annotations

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class Paciente(Base):
    __tablename__ = "pacientes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(80), nullable=False)
    apellido: Mapped[str] = mapped_column(String(80), nullable=False)
    domicilio: Mapped[str] = mapped_column(String(160), nullable=False, default="")
    dni: Mapped[float] = mapped_column(Float, nullable=False, unique=True)
    fecha_alta: Mapped[str] = mapped_column(String(40), nullable=False, default="")

    def __repr__(self) -> str:
        return f"Paciente({self.nombre} {self.apellido}, DNI {self.dni:.0f})"


class Dentista(Base):
    __tablename__ = "dentistas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    apellido: Mapped[str] = mapped_column(String(80), nullable=False)
    nombre: Mapped[str] = mapped_column(String(80), nullable=False)
    matricula: Mapped[str] = mapped_column(String(40), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"Dentista({self.nombre} {self.apellido}, MP {self.matricula})"


class Turno(Base):
    __tablename__ = "turnos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha_hora: Mapped[str] = mapped_column(String(40), nullable=False)
    descripcion: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # referencias como texto (id del paciente / dentista), sin FK:
    # la existencia se verifica sólo al crear
    paciente_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    dentista_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
