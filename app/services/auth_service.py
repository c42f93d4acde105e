# app/services/auth_service.py
import logging
from typing import NoReturn

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.security import hash_password, verify_password
from app.core.sessions import SessionStore
from app.core.validation import missing_fields
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

REGISTER_REQUIRED = ("email", "senha", "tipo_pessoa", "nome_completo", "cpf_cnpj")
LOGIN_REQUIRED = ("email", "senha")

MISSING_FIELDS = "Campos obrigatórios faltando."
EMAIL_TAKEN = "E-mail já cadastrado."
INVALID_CREDENTIALS = "Credenciais inválidas."


class AuthService:
    """
    Accounts and login sessions.

    Responsibilities:
      - store only bcrypt digests, never raw passwords
      - sign-up creates the user and its profile atomically
      - one generic 401 for unknown e-mail and wrong password alike
      - map login/logout onto the session store
    """

    def __init__(self, user_repo: UserRepository, profile_service: ProfileService):
        self.user_repo = user_repo
        self.profile_service = profile_service

    # ----- Credentials -----

    def ensure_email_free(self, session: Session, email: str) -> None:
        if self.user_repo.get_by_email(session, email) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=EMAIL_TAKEN,
            )

    def create_credentials(self, session: Session, email: str, secret: str) -> User:
        """
        Insert a user holding the digest of ``secret`` (no commit).

        Raises:
            HTTPException(409): if the e-mail is already registered.
        """
        self.ensure_email_free(session, email)
        user = User(email=email, senha=hash_password(secret))
        return self.user_repo.create(session, user)

    def verify_credentials(self, session: Session, email: str, secret: str) -> int:
        """
        Return the user id for a matching e-mail/password pair.

        Raises:
            HTTPException(401): unknown e-mail or wrong password
                (indistinguishable to the caller).
        """
        user = self.user_repo.get_by_email(session, email)
        if user is None or not verify_password(secret, user.senha):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=INVALID_CREDENTIALS,
            )
        return user.id

    # ----- Sign-up -----

    def register(self, session: Session, payload: RegisterRequest) -> int:
        """
        Create a user and its profile in a single transaction.

        Order of checks:
          1. required fields present (400)
          2. e-mail free (409)
          3. cpf_cnpj free (409)

        Nothing is committed unless both rows were written.

        The pre-checks only give nicer messages; if a concurrent
        sign-up wins the race, the unique constraints reject the insert
        and the same 409 is returned.

        Returns:
            The new user's id.
        """
        if missing_fields(payload, REGISTER_REQUIRED):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=MISSING_FIELDS,
            )

        try:
            user = self.create_credentials(session, payload.email, payload.senha)
            self.profile_service.create(session, user.id, payload)
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.info("Sign-up for %s rejected by a unique constraint", payload.email)
            self._raise_conflict(session, payload)

        logger.info("Registered user %s", user.id)
        return user.id

    def _raise_conflict(self, session: Session, payload: RegisterRequest) -> NoReturn:
        self.ensure_email_free(session, payload.email)
        self.profile_service.ensure_cpf_cnpj_free(session, payload.cpf_cnpj)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="E-mail ou CPF/CNPJ já cadastrado.",
        )

    # ----- Sessions -----

    def login(
        self,
        session: Session,
        store: SessionStore,
        payload: LoginRequest,
    ) -> str:
        """
        Check credentials and open a new login session.

        Other sessions of the same user stay valid.

        Returns:
            The raw session token (the router signs it into the cookie).
        """
        if missing_fields(payload, LOGIN_REQUIRED):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=MISSING_FIELDS,
            )

        user_id = self.verify_credentials(session, payload.email, payload.senha)
        token = store.create(user_id)
        logger.debug("User %s logged in", user_id)
        return token

    def logout(self, store: SessionStore, token: str | None) -> None:
        """
        Destroy the caller's session.

        Raises:
            HTTPException(401): if the token is not a live session.
        """
        if not store.destroy(token):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Não autenticado.",
            )
        logger.debug("Session closed")
