from contextlib import asynccontextmanager
from typing import Dict, List, Optional

import structlog
from fastapi import Depends, FastAPI, Header, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from cadastro.config.logging import configure_logging
from cadastro.config.settings import settings
from cadastro.core import messages
from cadastro.core.clients import ClientForm, filter_clients
from cadastro.services.auth_service import AuthResult, AuthServiceError, FirebaseAuthService
from cadastro.services.firestore_service import ClientNotFoundError, FirestoreService, FirestoreServiceError


logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(settings.log_level, settings.log_json)
    logger.info("API starting", collection=settings.clients_collection)
    yield


app = FastAPI(title="Cadastro de Clientes API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AuthPayload(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class ClientPayload(BaseModel):
    nome: str = Field(min_length=1, pattern=r"\S")
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    telefone: str = Field(min_length=1, pattern=r"\S")
    endereco: str = Field(min_length=1, pattern=r"\S")

    def to_form(self) -> ClientForm:
        return ClientForm(**self.model_dump())


def get_auth_service() -> FirebaseAuthService:
    try:
        return FirebaseAuthService.from_settings()
    except AuthServiceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def get_firestore_service() -> FirestoreService:
    try:
        return FirestoreService.from_settings()
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def require_user(
    authorization: Optional[str] = Header(default=None),
    auth: FirebaseAuthService = Depends(get_auth_service),
) -> Dict:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing bearer token")
    token = authorization.split(" ", maxsplit=1)[1].strip()
    try:
        return auth.lookup(token)
    except AuthServiceError as exc:
        logger.warning("Rejected bearer token", error=exc.code)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.code) from exc


def _auth_response(result: AuthResult) -> Dict:
    return {
        "uid": result.uid,
        "email": result.email,
        "id_token": result.id_token,
        "refresh_token": result.refresh_token,
        "expires_in": result.expires_in,
    }


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/auth/register")
def register(payload: AuthPayload, auth: FirebaseAuthService = Depends(get_auth_service)) -> Dict:
    if len(payload.password) < messages.MIN_PASSWORD_LENGTH:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.REGISTER_WEAK_PASSWORD)
    try:
        return _auth_response(auth.sign_up(payload.email.strip(), payload.password))
    except AuthServiceError as exc:
        detail = messages.REGISTER_EMAIL_EXISTS if exc.code == "EMAIL_EXISTS" else messages.REGISTER_ERROR
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail) from exc


@app.post("/auth/login")
def login(payload: AuthPayload, auth: FirebaseAuthService = Depends(get_auth_service)) -> Dict:
    try:
        return _auth_response(auth.sign_in(payload.email.strip(), payload.password))
    except AuthServiceError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=messages.LOGIN_ERROR) from exc


@app.get("/clientes")
def list_clients(
    q: str = "",
    _user: Dict = Depends(require_user),
    fs: FirestoreService = Depends(get_firestore_service),
) -> List[Dict]:
    try:
        clients = fs.list_clients()
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=messages.CLIENTS_LOAD_ERROR) from exc
    return [client.to_dict() for client in filter_clients(clients, q)]


@app.get("/clientes/{client_id}")
def get_client(
    client_id: str,
    _user: Dict = Depends(require_user),
    fs: FirestoreService = Depends(get_firestore_service),
) -> Dict[str, str]:
    try:
        return fs.get_client(client_id).to_dict()
    except ClientNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CLIENT_NOT_FOUND) from exc
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=messages.CLIENTS_LOAD_ERROR) from exc


@app.post("/clientes", status_code=status.HTTP_201_CREATED)
def create_client(
    payload: ClientPayload,
    _user: Dict = Depends(require_user),
    fs: FirestoreService = Depends(get_firestore_service),
) -> Dict[str, str]:
    try:
        client_id = fs.create_client(payload.to_form())
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=messages.CLIENT_CREATE_ERROR) from exc
    return {"id": client_id}


@app.put("/clientes/{client_id}")
def update_client(
    client_id: str,
    payload: ClientPayload,
    _user: Dict = Depends(require_user),
    fs: FirestoreService = Depends(get_firestore_service),
) -> Dict[str, str]:
    try:
        fs.update_client(client_id, payload.to_form())
    except ClientNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CLIENT_NOT_FOUND) from exc
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=messages.CLIENT_UPDATE_ERROR) from exc
    return {"status": "updated"}


@app.delete("/clientes/{client_id}")
def delete_client(
    client_id: str,
    _user: Dict = Depends(require_user),
    fs: FirestoreService = Depends(get_firestore_service),
) -> Dict[str, str]:
    try:
        fs.delete_client(client_id)
    except FirestoreServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=messages.CLIENT_DELETE_ERROR) from exc
    return {"status": "deleted"}
