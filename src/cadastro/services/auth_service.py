from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import structlog
from requests import RequestException

from cadastro.config.settings import settings


logger = structlog.get_logger(__name__)


class AuthServiceError(Exception):
    @property
    def code(self) -> str:
        return str(self.args[0]) if self.args else "AUTH_ERROR"


@dataclass
class AuthResult:
    uid: str
    email: str
    id_token: str
    refresh_token: str
    expires_in: int = 3600


class FirebaseAuthService:
    IDENTITY_BASE_URL = "https://identitytoolkit.googleapis.com/v1"
    SECURE_TOKEN_BASE_URL = "https://securetoken.googleapis.com/v1"

    SIGN_UP_PATH = "/accounts:signUp"
    SIGN_IN_PATH = "/accounts:signInWithPassword"
    LOOKUP_PATH = "/accounts:lookup"
    TOKEN_PATH = "/token"

    def __init__(self, api_key: str, emulator_host: str = "", timeout: float = 15) -> None:
        if not api_key:
            raise AuthServiceError("Missing FIREBASE_API_KEY in environment")
        self.api_key = api_key
        self.timeout = timeout
        if emulator_host:
            root = f"http://{emulator_host.rstrip('/')}"
            self.identity_url = f"{root}/identitytoolkit.googleapis.com/v1"
            self.secure_token_url = f"{root}/securetoken.googleapis.com/v1"
        else:
            self.identity_url = self.IDENTITY_BASE_URL
            self.secure_token_url = self.SECURE_TOKEN_BASE_URL

    @classmethod
    def from_settings(cls) -> "FirebaseAuthService":
        return cls(
            settings.firebase_api_key,
            emulator_host=settings.firebase_auth_emulator_host,
            timeout=settings.auth_timeout_seconds,
        )

    def sign_up(self, email: str, password: str) -> AuthResult:
        payload = {
            "email": email,
            "password": password,
            "returnSecureToken": True,
        }
        data = self._post(f"{self.identity_url}{self.SIGN_UP_PATH}", json=payload)
        logger.info("Firebase account created", email=email)
        return self._to_result(data, email)

    def sign_in(self, email: str, password: str) -> AuthResult:
        payload = {
            "email": email,
            "password": password,
            "returnSecureToken": True,
        }
        data = self._post(f"{self.identity_url}{self.SIGN_IN_PATH}", json=payload)
        logger.info("Firebase sign-in succeeded", email=email)
        return self._to_result(data, email)

    def refresh(self, refresh_token: str) -> AuthResult:
        """Exchange a refresh token for a new ID token."""
        data = self._post(
            f"{self.secure_token_url}{self.TOKEN_PATH}",
            data={"grant_type": "refresh_token", "refresh_token": refresh_token},
        )
        uid = str(data.get("user_id") or "")
        if not uid:
            raise AuthServiceError("INVALID_REFRESH_RESPONSE")
        return AuthResult(
            uid=uid,
            email="",
            id_token=str(data.get("id_token") or ""),
            refresh_token=str(data.get("refresh_token") or refresh_token),
            expires_in=int(data.get("expires_in") or 3600),
        )

    def lookup(self, id_token: str) -> Dict[str, Any]:
        """Return the account behind an ID token, or raise if the token is invalid."""
        data = self._post(f"{self.identity_url}{self.LOOKUP_PATH}", json={"idToken": id_token})
        users = data.get("users") or []
        if not users:
            raise AuthServiceError("USER_NOT_FOUND")
        return dict(users[0])

    def _post(
        self,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            res = requests.post(
                url,
                params={"key": self.api_key},
                json=json,
                data=data,
                timeout=self.timeout,
            )
        except RequestException as exc:
            logger.warning("Firebase Auth unreachable", url=url, error=str(exc))
            raise AuthServiceError("AUTH_SERVICE_UNAVAILABLE") from exc
        try:
            body = res.json()
        except ValueError as exc:
            raise AuthServiceError("AUTH_SERVICE_UNAVAILABLE") from exc

        if res.status_code >= 400:
            error_key = self._error_key(body)
            logger.warning("Firebase Auth rejected request", status=res.status_code, error=error_key)
            raise AuthServiceError(error_key)

        return body

    @staticmethod
    def _error_key(body: Dict[str, Any]) -> str:
        error = body.get("error") or {}
        if isinstance(error, dict):
            message = str(error.get("message") or "AUTH_ERROR")
        else:
            message = str(error)
        # WEAK_PASSWORD : Password should be at least 6 characters
        return message.split(" : ", maxsplit=1)[0].strip() or "AUTH_ERROR"

    @staticmethod
    def _to_result(data: Dict[str, Any], email: str) -> AuthResult:
        uid = str(data.get("localId") or "")
        id_token = str(data.get("idToken") or "")
        if not uid or not id_token:
            raise AuthServiceError("INVALID_FIREBASE_SESSION")
        return AuthResult(
            uid=uid,
            email=str(data.get("email") or email),
            id_token=id_token,
            refresh_token=str(data.get("refreshToken") or ""),
            expires_in=int(data.get("expiresIn") or 3600),
        )
