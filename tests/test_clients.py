import unittest

from cadastro.core import messages
from cadastro.core.clients import Client, ClientForm, filter_clients, is_valid_email


def _clients():
    return [
        Client("a1", "Maria Souza", "maria@exemplo.com", "(11) 98888-0000", "Rua das Flores, 10"),
        Client("b2", "João Lima", "joao@empresa.com.br", "21 3333-4444", "Av. Brasil, 200"),
        Client("c3", "Ana Paula", "ana@teste.org", "31 91234-5678", "Praça Sete, Belo Horizonte"),
    ]


class FilterClientsTests(unittest.TestCase):
    def test_empty_term_keeps_all_in_order(self):
        rows = filter_clients(_clients(), "")
        self.assertEqual([c.id for c in rows], ["a1", "b2", "c3"])

    def test_matches_name_case_insensitively(self):
        rows = filter_clients(_clients(), "MARIA")
        self.assertEqual([c.id for c in rows], ["a1"])

    def test_matches_email(self):
        rows = filter_clients(_clients(), "empresa.com")
        self.assertEqual([c.id for c in rows], ["b2"])

    def test_matches_phone(self):
        rows = filter_clients(_clients(), "91234")
        self.assertEqual([c.id for c in rows], ["c3"])

    def test_matches_address_case_insensitively(self):
        rows = filter_clients(_clients(), "belo horizonte")
        self.assertEqual([c.id for c in rows], ["c3"])

    def test_term_matching_several_fields_returns_each_row_once(self):
        rows = filter_clients(_clients(), "a")
        self.assertEqual(len(rows), 3)

    def test_no_match(self):
        self.assertEqual(filter_clients(_clients(), "zzz"), [])


class ClientFormTests(unittest.TestCase):
    def test_blank_fields_are_reported(self):
        form = ClientForm(nome="  ", email="x@y.com", telefone="", endereco="Rua 1")
        errors = form.validate()
        self.assertEqual(
            errors,
            [
                messages.FIELD_REQUIRED.format(field="Nome"),
                messages.FIELD_REQUIRED.format(field="Telefone"),
            ],
        )

    def test_invalid_email(self):
        form = ClientForm(nome="A", email="sem-arroba", telefone="1", endereco="R")
        self.assertEqual(form.validate(), [messages.EMAIL_INVALID])

    def test_valid_form_has_no_errors(self):
        form = ClientForm(nome="A", email="a@b.c", telefone="1", endereco="R")
        self.assertEqual(form.validate(), [])

    def test_to_document_strips_and_keeps_four_fields(self):
        form = ClientForm(nome=" Ana ", email="ana@x.com ", telefone=" 1 ", endereco=" Rua ")
        self.assertEqual(
            form.to_document(),
            {"nome": "Ana", "email": "ana@x.com", "telefone": "1", "endereco": "Rua"},
        )

    def test_from_client_and_reset(self):
        form = ClientForm.from_client(_clients()[0])
        self.assertEqual(form.nome, "Maria Souza")
        form.reset()
        self.assertEqual(form, ClientForm())

    def test_email_rules(self):
        self.assertTrue(is_valid_email("a@b"))
        self.assertFalse(is_valid_email("a@@b"))
        self.assertFalse(is_valid_email("a b@c"))
        self.assertFalse(is_valid_email("@b"))


class ClientDocumentTests(unittest.TestCase):
    def test_missing_fields_read_as_empty(self):
        client = Client.from_document("x", {"nome": "Só nome"})
        self.assertEqual(client, Client("x", "Só nome", "", "", ""))


if __name__ == "__main__":
    unittest.main()
