from dataclasses import dataclass

from cadastro.config.settings import settings
from cadastro.services.auth_service import FirebaseAuthService
from cadastro.services.firestore_service import FirestoreService
from cadastro.state.auth_provider import AuthProvider
from cadastro.state.session_state import SessionStore


@dataclass
class AppState:
    auth: AuthProvider
    clients: FirestoreService

    @classmethod
    def from_settings(cls) -> "AppState":
        return cls(
            auth=AuthProvider(FirebaseAuthService.from_settings(), SessionStore(settings.session_file)),
            clients=FirestoreService.from_settings(),
        )
