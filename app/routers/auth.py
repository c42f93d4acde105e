# app/routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.core.auth import clear_session_cookie, get_session_token, set_session_cookie
from app.core.sessions import SessionStore, get_session_store
from app.database import get_session
from app.repositories.profile_repo import ProfileRepository
from app.repositories.user_repo import UserRepository
from app.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, RegisterResponse
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService

router = APIRouter(tags=["Auth"])

user_repo = UserRepository()
profile_service = ProfileService(ProfileRepository())
service = AuthService(user_repo, profile_service)


@router.post(
    "/cadastro",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
):
    """
    Sign up: create the account and its profile.

    Required:
      - email, senha, tipo_pessoa, nome_completo, cpf_cnpj
    """
    user_id = service.register(session, payload)
    return RegisterResponse(message="Usuário cadastrado com sucesso!", userId=user_id)


@router.post("/login", response_model=MessageResponse)
def login(
    payload: LoginRequest,
    response: Response,
    session: Session = Depends(get_session),
    store: SessionStore = Depends(get_session_store),
):
    """
    Log in with e-mail and password.

    On success the signed session id is set as an HTTP-only cookie,
    valid for 24 hours from now.
    """
    token = service.login(session, store, payload)
    set_session_cookie(response, token)
    return MessageResponse(message="Login realizado com sucesso!")


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
):
    """
    End the current session and clear the cookie.

    Auth:
      - Requires a live session, else 401.
    """
    service.logout(store, token)
    clear_session_cookie(response)
    return MessageResponse(message="Logout realizado com sucesso!")
