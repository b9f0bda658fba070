"""
Fixtures comunes: app sobre SQLite en memoria, cliente HTTP y datos base.
"""

import pytest
from fastapi.testclient import TestClient

from clinica_dental.api_main import create_app
from clinica_dental.config import Settings
from clinica_dental.db import Database

TOKEN = "secreto-de-prueba"


@pytest.fixture
def settings() -> Settings:
    return Settings(token=TOKEN, database_url="sqlite://")


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    application = create_app(settings, database)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth():
    return {"TOKEN": TOKEN}


@pytest.fixture
def paciente(client, auth):
    r = client.post(
        "/pacientes",
        json={"nombre": "Ana", "apellido": "Perez", "domicilio": "Calle Falsa 123", "dni": 30111222, "fechaAlta": "2024-03-01"},
        headers=auth,
    )
    assert r.status_code == 201
    return r.json()["data"]


@pytest.fixture
def dentista(client, auth):
    r = client.post("/dentistas", json={"apellido": "Gomez", "nombre": "Lucia", "matricula": "MP-1001"}, headers=auth)
    assert r.status_code == 201
    return r.json()["data"]


@pytest.fixture
def turno(client, auth, paciente, dentista):
    body = {
        "fechaHora": "2026-11-02 10:30",
        "descripcion": "Control anual",
        "paciente": str(paciente["id"]),
        "odontologo": str(dentista["id"]),
    }
    r = client.post("/turnos", json=body, headers=auth)
    assert r.status_code == 201
    return r.json()["data"]
