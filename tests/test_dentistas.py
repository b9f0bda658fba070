"""
Tests HTTP del recurso /dentistas.
"""

import pytest
from fastapi import status


class TestDentistas:
    def test_get_by_id(self, client, dentista):
        r = client.get(f"/dentistas/{dentista['id']}")
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == {"id": dentista["id"], "apellido": "Gomez", "nombre": "Lucia", "matricula": "MP-1001"}

    def test_get_inexistente(self, client):
        assert client.get("/dentistas/3").status_code == status.HTTP_404_NOT_FOUND

    def test_get_by_matricula(self, client, dentista):
        r = client.get("/dentistas", params={"matricula": "MP-1001"})
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"]["id"] == dentista["id"]

    @pytest.mark.parametrize("params", [{}, {"matricula": "  "}])
    def test_get_by_matricula_invalida(self, client, params):
        r = client.get("/dentistas", params=params)
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.json()["message"] == "matricula invalida"

    @pytest.mark.parametrize("faltante", ["apellido", "nombre", "matricula"])
    def test_create_campos_obligatorios(self, client, auth, faltante):
        body = {"apellido": "Gomez", "nombre": "Lucia", "matricula": "MP-1"}
        del body[faltante]
        r = client.post("/dentistas", json=body, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_matricula_duplicada(self, client, auth, dentista):
        r = client.post("/dentistas", json={"apellido": "X", "nombre": "Y", "matricula": "MP-1001"}, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.json()["message"] == "ya existe un dentista con esa matricula"

    def test_create_token_invalido(self, client):
        r = client.post("/dentistas", json={"apellido": "X", "nombre": "Y", "matricula": "Z"}, headers={"TOKEN": "nope"})
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    def test_put(self, client, auth, dentista):
        body = {"apellido": "Gomez", "nombre": "Lucia Ines", "matricula": "MP-2002"}
        r = client.put(f"/dentistas/{dentista['id']}", json=body, headers=auth)
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == {"id": dentista["id"], **body}

    def test_put_incompleto(self, client, auth, dentista):
        r = client.put(f"/dentistas/{dentista['id']}", json={"apellido": "Gomez"}, headers=auth)
        assert r.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_matricula_ocupada(self, client, auth, dentista):
        r = client.post("/dentistas", json={"apellido": "Fernandez", "nombre": "Martin", "matricula": "MP-1002"}, headers=auth)
        otro = r.json()["data"]

        r = client.patch(f"/dentistas/{otro['id']}", json={"matricula": "MP-1001"}, headers=auth)
        assert r.status_code == status.HTTP_409_CONFLICT

    def test_patch(self, client, auth, dentista):
        r = client.patch(f"/dentistas/{dentista['id']}", json={"nombre": "Lu"}, headers=auth)
        assert r.status_code == status.HTTP_200_OK
        assert r.json()["data"] == {**dentista, "nombre": "Lu"}

    def test_delete(self, client, auth, dentista):
        assert client.delete(f"/dentistas/{dentista['id']}", headers=auth).status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/dentistas/{dentista['id']}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_id_invalido(self, client, auth):
        assert client.delete("/dentistas/1.0", headers=auth).status_code == status.HTTP_400_BAD_REQUEST
