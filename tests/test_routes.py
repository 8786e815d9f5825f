import unittest

from cadastro.core import routes


class ResolveRouteTests(unittest.TestCase):
    def test_unauthenticated_clients_redirects_to_login(self):
        self.assertEqual(routes.resolve_route("/clientes", False), routes.LOGIN)

    def test_authenticated_clients_is_allowed(self):
        self.assertEqual(routes.resolve_route("/clientes", True), routes.CLIENTS)

    def test_root_redirects_to_login(self):
        self.assertEqual(routes.resolve_route("/", False), routes.LOGIN)
        self.assertEqual(routes.resolve_route("/", True), routes.LOGIN)

    def test_public_routes_stay(self):
        self.assertEqual(routes.resolve_route("/login", False), routes.LOGIN)
        self.assertEqual(routes.resolve_route("/registro", False), routes.REGISTER)

    def test_unknown_route_redirects_to_login(self):
        self.assertEqual(routes.resolve_route("/admin", True), routes.LOGIN)

    def test_normalizes_trailing_slash_and_query(self):
        self.assertEqual(routes.normalize("/clientes/?q=ana"), "/clientes")
        self.assertEqual(routes.normalize(""), "/")


if __name__ == "__main__":
    unittest.main()
