"""
Backend d'authentification de CineScope.

Application FastAPI independante du catalogue : inscription et connexion
contre la table users. Aucun jeton n'est emis, le client conserve
directement l'utilisateur retourne.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from ..container import Container
from ..core.exceptions import DuplicateEmailError, UserNotFoundError, WrongPasswordError
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.repositories import SQLModelUserRepository
from ..services.auth import AuthService


class SignupRequest(BaseModel):
    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(user_repo=SQLModelUserRepository(session))


router = APIRouter()


@router.get("/test")
async def test():
    """Verifie que le backend repond."""
    return {"message": "Backend working"}


@router.post("/signup")
def signup(payload: SignupRequest, service: AuthService = Depends(get_auth_service)):
    """Inscription. 400 si l'email est deja enregistre."""
    try:
        user = service.signup(payload.name, payload.email, payload.password)
    except DuplicateEmailError as e:
        return JSONResponse(status_code=400, content={"message": e.message})
    return {"message": "Signup successful", "user": user.public_view()}


@router.post("/login")
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Connexion. 404 si l'email est inconnu, 400 si le mot de passe differe."""
    try:
        user = service.login(payload.email, payload.password)
    except UserNotFoundError as e:
        return JSONResponse(status_code=404, content={"message": e.message})
    except WrongPasswordError as e:
        return JSONResponse(status_code=400, content={"message": e.message})
    return {"message": "Login successful", "user": user.public_view()}


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Erreur serveur sur {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"message": "Server error"})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cree les tables au démarrage."""
    app.state.container.database.init()
    yield


def create_auth_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit le backend d'authentification.

    Args:
        container: Container DI a utiliser (un nouveau par defaut)
    """
    container = container if container is not None else Container()
    app = FastAPI(title="CineScope Auth API", version="1.0.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.config().auth_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, server_error_handler)
    app.include_router(router)
    return app


app = create_auth_app()
