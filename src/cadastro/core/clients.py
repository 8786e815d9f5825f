from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping

from cadastro.core import messages


CLIENT_FIELDS = ("nome", "email", "telefone", "endereco")

FIELD_LABELS = {
    "nome": "Nome",
    "email": "E-mail",
    "telefone": "Telefone",
    "endereco": "Endereço",
}


@dataclass
class Client:
    id: str
    nome: str = ""
    email: str = ""
    telefone: str = ""
    endereco: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "Client":
        return cls(
            id=doc_id,
            nome=str(data.get("nome") or ""),
            email=str(data.get("email") or ""),
            telefone=str(data.get("telefone") or ""),
            endereco=str(data.get("endereco") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ClientForm:
    nome: str = ""
    email: str = ""
    telefone: str = ""
    endereco: str = ""

    @classmethod
    def from_client(cls, client: Client) -> "ClientForm":
        return cls(
            nome=client.nome,
            email=client.email,
            telefone=client.telefone,
            endereco=client.endereco,
        )

    def reset(self) -> None:
        self.nome = ""
        self.email = ""
        self.telefone = ""
        self.endereco = ""

    def validate(self) -> List[str]:
        errors: List[str] = []
        for name in CLIENT_FIELDS:
            if not getattr(self, name).strip():
                errors.append(messages.FIELD_REQUIRED.format(field=FIELD_LABELS[name]))
        if self.email.strip() and not is_valid_email(self.email.strip()):
            errors.append(messages.EMAIL_INVALID)
        return errors

    def to_document(self) -> Dict[str, str]:
        return {name: getattr(self, name).strip() for name in CLIENT_FIELDS}


def is_valid_email(value: str) -> bool:
    # Same leniency as a browser's type=email input.
    if any(ch.isspace() for ch in value) or value.count("@") != 1:
        return False
    local, domain = value.split("@")
    return bool(local) and bool(domain)


def matches(client: Client, term: str) -> bool:
    needle = term.lower()
    return any(needle in getattr(client, name).lower() for name in CLIENT_FIELDS)


def filter_clients(clients: Iterable[Client], term: str) -> List[Client]:
    """
    Keep the clients whose nome, email, telefone or endereco contains
    ``term``, ignoring case. An empty term keeps everything in order.
    """
    if not term:
        return list(clients)
    return [client for client in clients if matches(client, term)]
