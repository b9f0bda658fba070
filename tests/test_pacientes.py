"""
Tests HTTP del recurso /pacientes.
"""

import pytest
from fastapi import status


class TestPacientes:
    def test_create_y_get(self, client, paciente):
        assert paciente["dni"] == 30111222
        assert paciente["fechaAlta"] == "2024-03-01"

        r = client.get(f"/pacientes/{paciente['id']}")
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == paciente

    def test_get_by_dni(self, client, paciente):
        r = client.get("/pacientes", params={"DNI": "30111222"})
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"]["id"] == paciente["id"]

    def test_get_by_dni_inexistente(self, client):
        assert client.get("/pacientes", params={"DNI": "1"}).status_code == status.HTTP_404_NOT_FOUND

    def test_get_by_dni_invalido(self, client):
        assert client.get("/pacientes", params={"DNI": "x"}).status_code == status.HTTP_400_BAD_REQUEST

    def test_get_id_invalido(self, client):
        assert client.get("/pacientes/abc").status_code == status.HTTP_400_BAD_REQUEST

    def test_create_sin_token(self, client):
        r = client.post("/pacientes", json={"nombre": "A", "apellido": "B", "dni": 1})
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.parametrize(
        "body",
        [
            {"apellido": "Perez", "dni": 1},
            {"nombre": "Ana", "apellido": "Perez"},
            {"nombre": "Ana", "apellido": "Perez", "dni": "no"},
        ],
    )
    def test_create_cuerpo_invalido(self, client, auth, body):
        r = client.post("/pacientes", json=body, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.json()["message"] == "invalid json"

    def test_create_nombre_vacio(self, client, auth):
        r = client.post("/pacientes", json={"nombre": " ", "apellido": "Perez", "dni": 5}, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.json()["message"] == "nombre es obligatorio"

    def test_create_dni_duplicado(self, client, auth, paciente):
        r = client.post("/pacientes", json={"nombre": "Otra", "apellido": "Persona", "dni": 30111222}, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.json()["message"] == "ya existe un paciente con ese dni"

    def test_put(self, client, auth, paciente):
        body = {"nombre": "Ana Maria", "apellido": "Perez", "domicilio": "Otra 1", "dni": 30111222, "fechaAlta": "2024-03-02"}
        r = client.put(f"/pacientes/{paciente['id']}", json=body, headers=auth)
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == {"id": paciente["id"], **body}

    def test_put_inexistente(self, client, auth):
        r = client.put("/pacientes/9", json={"nombre": "A", "apellido": "B", "dni": 2}, headers=auth)
        assert r.status_code == status.HTTP_404_NOT_FOUND

    def test_patch_dni_de_otro_paciente(self, client, auth, paciente):
        r = client.post("/pacientes", json={"nombre": "Jorge", "apellido": "Diaz", "dni": 28999111}, headers=auth)
        otro = r.json()["data"]

        r = client.patch(f"/pacientes/{otro['id']}", json={"dni": 30111222}, headers=auth)
        assert r.status_code == status.HTTP_409_CONFLICT

    def test_patch_parcial(self, client, auth, paciente):
        r = client.patch(f"/pacientes/{paciente['id']}", json={"domicilio": "Nueva 456"}, headers=auth)
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == {**paciente, "domicilio": "Nueva 456"}

    def test_patch_normaliza_nombres(self, client, auth, paciente):
        r = client.patch(f"/pacientes/{paciente['id']}", json={"nombre": "  Ana Maria ", "apellido": " Perez"}, headers=auth)
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"]["nombre"] == "Ana Maria"
        assert r.json()["data"]["apellido"] == "Perez"

    def test_delete(self, client, auth, paciente):
        assert client.delete(f"/pacientes/{paciente['id']}", headers=auth).status_code == status.HTTP_204_NO_CONTENT
        assert client.delete(f"/pacientes/{paciente['id']}", headers=auth).status_code == status.HTTP_404_NOT_FOUND
