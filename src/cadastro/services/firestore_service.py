from typing import Any, List, Optional

import structlog

try:
    from google.api_core import exceptions as gexc
    from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
    from google.cloud import firestore
except ModuleNotFoundError as exc:
    raise ModuleNotFoundError(
        "Missing dependency 'google-cloud-firestore'. Run pip install -e . first."
    ) from exc

from cadastro.config.settings import settings
from cadastro.core.clients import Client, ClientForm


logger = structlog.get_logger(__name__)

# RetryError and transport/credential failures do not derive from GoogleAPICallError.
BACKEND_ERRORS = (gexc.GoogleAPIError, GoogleAuthError)


class FirestoreServiceError(Exception):
    pass


class ClientNotFoundError(FirestoreServiceError):
    pass


class FirestoreService:
    def __init__(self, project_id: str, collection: str = "clients", client: Optional[Any] = None) -> None:
        if client is None:
            if not project_id:
                raise FirestoreServiceError("Missing FIREBASE_PROJECT_ID in environment")
            try:
                client = firestore.Client(project=project_id)
            except DefaultCredentialsError as exc:
                raise FirestoreServiceError("Google credentials not found for Firestore") from exc
        self.db = client
        self.collection_name = collection

    @classmethod
    def from_settings(cls) -> "FirestoreService":
        return cls(settings.firebase_project_id, collection=settings.clients_collection)

    def _collection(self):
        return self.db.collection(self.collection_name)

    def list_clients(self) -> List[Client]:
        try:
            docs = self._collection().stream()
            return [Client.from_document(doc.id, doc.to_dict() or {}) for doc in docs]
        except BACKEND_ERRORS as exc:
            logger.error("Failed to list clients", error=str(exc))
            raise FirestoreServiceError(str(exc)) from exc

    def get_client(self, client_id: str) -> Client:
        try:
            snap = self._collection().document(client_id).get()
        except BACKEND_ERRORS as exc:
            raise FirestoreServiceError(str(exc)) from exc
        if not snap.exists:
            raise ClientNotFoundError(client_id)
        return Client.from_document(snap.id, snap.to_dict() or {})

    def create_client(self, form: ClientForm) -> str:
        ref = self._collection().document()
        try:
            ref.set(form.to_document())
        except BACKEND_ERRORS as exc:
            logger.error("Failed to create client", error=str(exc))
            raise FirestoreServiceError(str(exc)) from exc
        logger.info("Client created", client_id=ref.id)
        return ref.id

    def update_client(self, client_id: str, form: ClientForm) -> None:
        try:
            self._collection().document(client_id).update(form.to_document())
        except gexc.NotFound as exc:
            raise ClientNotFoundError(client_id) from exc
        except BACKEND_ERRORS as exc:
            logger.error("Failed to update client", client_id=client_id, error=str(exc))
            raise FirestoreServiceError(str(exc)) from exc
        logger.info("Client updated", client_id=client_id)

    def delete_client(self, client_id: str) -> None:
        try:
            self._collection().document(client_id).delete()
        except BACKEND_ERRORS as exc:
            logger.error("Failed to delete client", client_id=client_id, error=str(exc))
            raise FirestoreServiceError(str(exc)) from exc
        logger.info("Client deleted", client_id=client_id)
