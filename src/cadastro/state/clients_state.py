from typing import List, Optional

import structlog

from cadastro.core import messages, routes
from cadastro.core.clients import Client, ClientForm, filter_clients
from cadastro.services.firestore_service import FirestoreService, FirestoreServiceError
from cadastro.state.auth_provider import AuthProvider
from cadastro.state.notifier import Navigate, Notifier


logger = structlog.get_logger(__name__)


class ClientsState:
    """State behind the clients screen: list, search, modal form and deletion."""

    def __init__(self, service: FirestoreService, notify: Notifier) -> None:
        self.service = service
        self.notify = notify
        self.clients: List[Client] = []
        self.loading = True
        self.search_term = ""
        self.modal_open = False
        self.editing: Optional[Client] = None
        self.form = ClientForm()
        self.pending_delete_id: Optional[str] = None

    @property
    def filtered_clients(self) -> List[Client]:
        return filter_clients(self.clients, self.search_term)

    @property
    def modal_title(self) -> str:
        return "Editar Cliente" if self.editing else "Novo Cliente"

    @property
    def submit_label(self) -> str:
        return "Atualizar" if self.editing else "Cadastrar"

    def fetch(self) -> None:
        try:
            self.clients = self.service.list_clients()
        except FirestoreServiceError as exc:
            logger.error("Could not load clients", error=str(exc))
            self.notify.error(messages.CLIENTS_LOAD_ERROR)
        finally:
            self.loading = False

    def open_new(self) -> None:
        self.editing = None
        self.form.reset()
        self.modal_open = True

    def open_edit(self, client: Client) -> None:
        self.editing = client
        self.form = ClientForm.from_client(client)
        self.modal_open = True

    def close_modal(self) -> None:
        self.modal_open = False

    def submit(self) -> bool:
        errors = self.form.validate()
        if errors:
            self.notify.error(errors[0])
            return False

        editing = self.editing
        try:
            if editing:
                self.service.update_client(editing.id, self.form)
                self.notify.success(messages.CLIENT_UPDATED)
            else:
                self.service.create_client(self.form)
                self.notify.success(messages.CLIENT_CREATED)
        except FirestoreServiceError as exc:
            logger.error(
                "Could not save client",
                client_id=editing.id if editing else None,
                error=str(exc),
            )
            self.notify.error(messages.CLIENT_UPDATE_ERROR if editing else messages.CLIENT_CREATE_ERROR)
            return False

        self.modal_open = False
        self.fetch()
        self.form.reset()
        self.editing = None
        return True

    def request_delete(self, client_id: str) -> None:
        self.pending_delete_id = client_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        client_id = self.pending_delete_id
        self.pending_delete_id = None
        if not client_id:
            return False
        try:
            self.service.delete_client(client_id)
        except FirestoreServiceError as exc:
            logger.error("Could not delete client", client_id=client_id, error=str(exc))
            self.notify.error(messages.CLIENT_DELETE_ERROR)
            return False

        self.notify.success(messages.CLIENT_DELETED)
        self.fetch()
        return True

    def logout(self, auth: AuthProvider, navigate: Navigate) -> bool:
        try:
            auth.logout()
        except OSError as exc:
            # the persisted session file could not be removed
            logger.error("Logout failed", error=str(exc))
            self.notify.error(messages.LOGOUT_ERROR)
            return False
        navigate(routes.LOGIN)
        return True
