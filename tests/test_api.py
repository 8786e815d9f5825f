import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from cadastro.app import app, get_auth_service, get_firestore_service
from cadastro.core import messages
from cadastro.core.clients import Client
from cadastro.services.auth_service import AuthResult, AuthServiceError
from cadastro.services.firestore_service import ClientNotFoundError, FirestoreServiceError


AUTH_HEADERS = {"Authorization": "Bearer good-token"}
PAYLOAD = {"nome": "Ana", "email": "ana@exemplo.com", "telefone": "1199", "endereco": "Rua A"}


class ApiTests(unittest.TestCase):
    def setUp(self):
        self.auth = MagicMock()
        self.auth.lookup.side_effect = self._lookup
        self.fs = MagicMock()
        app.dependency_overrides[get_auth_service] = lambda: self.auth
        app.dependency_overrides[get_firestore_service] = lambda: self.fs
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    @staticmethod
    def _lookup(token):
        if token != "good-token":
            raise AuthServiceError("INVALID_ID_TOKEN")
        return {"localId": "uid-1", "email": "ana@exemplo.com"}

    def test_health(self):
        res = self.client.get("/health")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"status": "ok"})

    def test_clients_require_token(self):
        res = self.client.get("/clientes")
        self.assertEqual(res.status_code, 401)
        self.fs.list_clients.assert_not_called()

    def test_clients_reject_invalid_token(self):
        res = self.client.get("/clientes", headers={"Authorization": "Bearer bad"})
        self.assertEqual(res.status_code, 401)

    def test_list_clients_with_search(self):
        self.fs.list_clients.return_value = [
            Client("a1", "Ana", "ana@exemplo.com", "1199", "Rua A"),
            Client("b2", "Bia", "bia@exemplo.com", "2188", "Rua B"),
        ]

        res = self.client.get("/clientes", params={"q": "bia"}, headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.json(),
            [{"id": "b2", "nome": "Bia", "email": "bia@exemplo.com", "telefone": "2188", "endereco": "Rua B"}],
        )

    def test_get_client(self):
        self.fs.get_client.return_value = Client("a1", "Ana", "ana@exemplo.com", "1199", "Rua A")

        res = self.client.get("/clientes/a1", headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"id": "a1", **PAYLOAD})
        self.fs.get_client.assert_called_once_with("a1")

    def test_get_missing_client(self):
        self.fs.get_client.side_effect = ClientNotFoundError("ghost")

        res = self.client.get("/clientes/ghost", headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], messages.CLIENT_NOT_FOUND)

    def test_create_client(self):
        self.fs.create_client.return_value = "new-id"

        res = self.client.post("/clientes", json=PAYLOAD, headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.json(), {"id": "new-id"})
        form = self.fs.create_client.call_args.args[0]
        self.assertEqual(form.to_document(), PAYLOAD)

    def test_create_client_validates_body(self):
        res = self.client.post("/clientes", json={**PAYLOAD, "email": "invalido"}, headers=AUTH_HEADERS)
        self.assertEqual(res.status_code, 422)

        res = self.client.post("/clientes", json={**PAYLOAD, "nome": "   "}, headers=AUTH_HEADERS)
        self.assertEqual(res.status_code, 422)
        self.fs.create_client.assert_not_called()

    def test_update_client(self):
        res = self.client.put("/clientes/a1", json=PAYLOAD, headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(self.fs.update_client.call_args.args[0], "a1")

    def test_update_missing_client(self):
        self.fs.update_client.side_effect = ClientNotFoundError("ghost")

        res = self.client.put("/clientes/ghost", json=PAYLOAD, headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], messages.CLIENT_NOT_FOUND)

    def test_delete_client(self):
        res = self.client.delete("/clientes/a1", headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 200)
        self.fs.delete_client.assert_called_once_with("a1")

    def test_backend_failure_is_502(self):
        self.fs.list_clients.side_effect = FirestoreServiceError("down")

        res = self.client.get("/clientes", headers=AUTH_HEADERS)

        self.assertEqual(res.status_code, 502)
        self.assertEqual(res.json()["detail"], messages.CLIENTS_LOAD_ERROR)

    def test_login(self):
        self.auth.sign_in.return_value = AuthResult("uid-1", "ana@exemplo.com", "id", "refresh", 3600)

        res = self.client.post("/auth/login", json={"email": "ana@exemplo.com", "password": "secret1"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["id_token"], "id")

    def test_login_failure(self):
        self.auth.sign_in.side_effect = AuthServiceError("INVALID_LOGIN_CREDENTIALS")

        res = self.client.post("/auth/login", json={"email": "ana@exemplo.com", "password": "wrong"})

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["detail"], messages.LOGIN_ERROR)

    def test_register_existing_email(self):
        self.auth.sign_up.side_effect = AuthServiceError("EMAIL_EXISTS")

        res = self.client.post("/auth/register", json={"email": "ana@exemplo.com", "password": "secret1"})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["detail"], messages.REGISTER_EMAIL_EXISTS)

    def test_register_short_password(self):
        res = self.client.post("/auth/register", json={"email": "ana@exemplo.com", "password": "123"})

        self.assertEqual(res.status_code, 400)
        self.auth.sign_up.assert_not_called()


if __name__ == "__main__":
    unittest.main()
