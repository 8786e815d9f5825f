from dataclasses import asdict, dataclass
import json
from pathlib import Path
from typing import Optional

import structlog


logger = structlog.get_logger(__name__)


@dataclass
class SessionState:
    uid: Optional[str] = None
    email: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.uid and self.id_token)

    def apply(self, uid: str, email: str, id_token: str, refresh_token: str) -> None:
        self.uid = uid
        self.email = email or self.email
        self.id_token = id_token
        self.refresh_token = refresh_token

    def clear(self) -> None:
        self.uid = None
        self.email = None
        self.id_token = None
        self.refresh_token = None


class SessionStore:
    """
    Keeps the refresh token between runs, the way the web SDK keeps its
    auth state in browser storage. ID tokens are never written to disk.

    Saving is best effort: a session that cannot be written still works
    for the current run, it just will not survive a restart.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path).expanduser() if path else None

    def load(self) -> Optional[SessionState]:
        if self.path is None or not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session file", path=str(self.path), error=str(exc))
            return None
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed session file", path=str(self.path))
            return None
        if not raw.get("uid") or not raw.get("refresh_token"):
            return None
        return SessionState(
            uid=raw["uid"],
            email=raw.get("email"),
            refresh_token=raw["refresh_token"],
        )

    def save(self, session: SessionState) -> None:
        if self.path is None or not session.refresh_token:
            return
        data = asdict(session)
        data.pop("id_token", None)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not persist session", path=str(self.path), error=str(exc))

    def clear(self) -> None:
        if self.path is not None and self.path.exists():
            self.path.unlink()
