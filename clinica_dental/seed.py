from __future__ import annotations

from sqlalchemy import select

from .db import Database
from .models import Dentista, Paciente


def seed_base(db: Database) -> None:
    """
    Carga datos mínimos (idempotente):
    - dentistas (por matrícula)
    - pacientes (por DNI)
    """
    with db.session() as s:
        dentistas = [
            ("Gomez", "Lucia", "MP-1001"),
            ("Fernandez", "Martin", "MP-1002"),
        ]
        for apellido, nombre, matricula in dentistas:
            if s.execute(select(Dentista).where(Dentista.matricula == matricula)).scalar_one_or_none() is None:
                s.add(Dentista(apellido=apellido, nombre=nombre, matricula=matricula))

        pacientes = [
            ("Ana", "Perez", "Calle Falsa 123", 30111222.0, "2024-03-01"),
            ("Jorge", "Diaz", "Av. Siempre Viva 742", 28999111.0, "2024-05-12"),
        ]
        for nombre, apellido, domicilio, dni, alta in pacientes:
            if s.execute(select(Paciente).where(Paciente.dni == dni)).scalar_one_or_none() is None:
                s.add(Paciente(nombre=nombre, apellido=apellido, domicilio=domicilio, dni=dni, fecha_alta=alta))
