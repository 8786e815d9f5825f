from dataclasses import dataclass

import structlog

from cadastro.core import messages, routes
from cadastro.services.auth_service import AuthServiceError
from cadastro.state.auth_provider import AuthProvider
from cadastro.state.notifier import Navigate, Notifier


logger = structlog.get_logger(__name__)


@dataclass
class LoginForm:
    email: str = ""
    password: str = ""
    submitting: bool = False

    def submit(self, auth: AuthProvider, notify: Notifier, navigate: Navigate) -> bool:
        email = self.email.strip()
        if not email or not self.password:
            notify.error(messages.LOGIN_REQUIRED_FIELDS)
            return False

        self.submitting = True
        try:
            auth.login(email, self.password)
        except AuthServiceError as exc:
            logger.warning("Login failed", email=email, error=exc.code)
            notify.error(messages.LOGIN_ERROR)
            return False
        finally:
            self.submitting = False

        notify.success(messages.LOGIN_SUCCESS)
        navigate(routes.CLIENTS)
        return True


@dataclass
class RegisterForm:
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    submitting: bool = False

    def check(self) -> str:
        """Return the first local validation error, or an empty string."""
        if not self.email.strip() or not self.password or not self.confirm_password:
            return messages.REGISTER_REQUIRED_FIELDS
        if self.password != self.confirm_password:
            return messages.REGISTER_PASSWORD_MISMATCH
        if len(self.password) < messages.MIN_PASSWORD_LENGTH:
            return messages.REGISTER_WEAK_PASSWORD
        return ""

    def submit(self, auth: AuthProvider, notify: Notifier, navigate: Navigate) -> bool:
        problem = self.check()
        if problem:
            notify.error(problem)
            return False

        email = self.email.strip()
        self.submitting = True
        try:
            auth.register(email, self.password)
        except AuthServiceError as exc:
            logger.warning("Registration failed", email=email, error=exc.code)
            if exc.code == "EMAIL_EXISTS":
                notify.error(messages.REGISTER_EMAIL_EXISTS)
            else:
                notify.error(messages.REGISTER_ERROR)
            return False
        finally:
            self.submitting = False

        notify.success(messages.REGISTER_SUCCESS)
        navigate(routes.CLIENTS)
        return True
