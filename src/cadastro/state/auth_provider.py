from typing import Callable, List, Optional

import structlog

from cadastro.services.auth_service import AuthResult, AuthServiceError, FirebaseAuthService
from cadastro.state.session_state import SessionState, SessionStore


logger = structlog.get_logger(__name__)

AuthListener = Callable[[Optional[SessionState]], None]


class AuthProvider:
    """
    Owns the signed-in session and tells subscribers when it changes.

    ``loading`` stays True until ``initialize`` has tried to restore a
    persisted session, so guarded views can wait instead of redirecting.
    """

    def __init__(self, auth: FirebaseAuthService, store: Optional[SessionStore] = None) -> None:
        self.auth = auth
        self.store = store
        self.session = SessionState()
        self.loading = True
        self._listeners: List[AuthListener] = []

    @property
    def current_user(self) -> Optional[SessionState]:
        return self.session if self.session.is_authenticated else None

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def initialize(self) -> None:
        try:
            stored = self.store.load() if self.store else None
            if stored and stored.refresh_token:
                try:
                    result = self.auth.refresh(stored.refresh_token)
                    result.email = result.email or (stored.email or "")
                    self._set_session(result)
                    logger.info("Session restored", uid=result.uid)
                except AuthServiceError as exc:
                    logger.warning("Stored session rejected", error=exc.code)
                    self.session.clear()
                    self.store.clear()
        finally:
            self.loading = False
            self._notify()

    def login(self, email: str, password: str) -> AuthResult:
        result = self.auth.sign_in(email, password)
        self._set_session(result)
        self._notify()
        return result

    def register(self, email: str, password: str) -> AuthResult:
        result = self.auth.sign_up(email, password)
        self._set_session(result)
        self._notify()
        return result

    def logout(self) -> None:
        uid = self.session.uid
        if self.store:
            self.store.clear()
        self.session.clear()
        logger.info("Signed out", uid=uid)
        self._notify()

    def _set_session(self, result: AuthResult) -> None:
        self.session.apply(
            uid=result.uid,
            email=result.email,
            id_token=result.id_token,
            refresh_token=result.refresh_token,
        )
        if self.store:
            self.store.save(self.session)

    def _notify(self) -> None:
        user = self.current_user
        for listener in list(self._listeners):
            listener(user)
