# app/services/profile_service.py
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.validation import missing_fields, is_missing
from app.models.profile import Profile
from app.repositories.profile_repo import ProfileRepository
from app.schemas.auth import RegisterRequest
from app.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("tipo_pessoa", "nome_completo", "cpf_cnpj")

CPF_CNPJ_TAKEN = "CPF/CNPJ já cadastrado."
PROFILE_NOT_FOUND = "Perfil não encontrado."


class ProfileService:
    """
    Business logic for Profile.

    Responsibilities:
      - one profile per user, created inside the sign-up transaction
      - cpf_cnpj unique across profiles (pre-check for a friendly
        message; the unique constraint is what actually guarantees it)
      - full-overwrite updates by the owner only
    """

    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    def ensure_cpf_cnpj_free(
        self,
        session: Session,
        cpf_cnpj: str,
        owner_id: int | None = None,
    ) -> None:
        """
        Raise 409 if ``cpf_cnpj`` belongs to a profile of another user.
        """
        existing = self.repo.get_by_cpf_cnpj(session, cpf_cnpj)
        if existing is not None and existing.usuario_id != owner_id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=CPF_CNPJ_TAKEN,
            )

    def create(
        self,
        session: Session,
        user_id: int,
        payload: RegisterRequest,
    ) -> Profile:
        """
        Insert the profile for a freshly created user (no commit).

        Raises:
            HTTPException(400): tipo_pessoa, nome_completo or cpf_cnpj missing.
            HTTPException(409): cpf_cnpj already used by another profile.
        """
        if missing_fields(payload, IDENTITY_FIELDS):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Campos obrigatórios faltando.",
            )
        self.ensure_cpf_cnpj_free(session, payload.cpf_cnpj)

        profile = Profile(
            usuario_id=user_id,
            tipo_pessoa=payload.tipo_pessoa,
            nome_completo=payload.nome_completo,
            cpf_cnpj=payload.cpf_cnpj,
            endereco=payload.endereco,
            numero=payload.numero,
            complemento=payload.complemento,
            bairro=payload.bairro,
            cidade=payload.cidade,
            estado=payload.estado,
            cep=payload.cep,
            telefone=payload.telefone,
            telefone_empresa=payload.telefone_empresa,
            whatsapp=payload.whatsapp,
            mostrar_dados_orcamento=payload.mostrar_dados_orcamento,
        )
        return self.repo.create(session, profile)

    def get(self, session: Session, user_id: int) -> Profile:
        """
        Return the profile owned by ``user_id``.

        Raises:
            HTTPException(404): if the user has no profile.
        """
        profile = self.repo.get_for_user(session, user_id)
        if not profile:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=PROFILE_NOT_FOUND,
            )
        return profile

    def update(
        self,
        session: Session,
        user_id: int,
        payload: ProfileUpdate,
    ) -> Profile:
        """
        Overwrite every editable field of the caller's profile.

        Fields missing from the payload become null. Re-sending the
        current values succeeds.

        Raises:
            HTTPException(400): nome_completo empty or cpf_cnpj missing
                (checked before any storage access).
            HTTPException(404): no profile for this user.
            HTTPException(409): cpf_cnpj belongs to another profile.
        """
        if is_missing(payload.nome_completo):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="O nome completo é obrigatório.",
            )
        if is_missing(payload.cpf_cnpj):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Campos obrigatórios faltando.",
            )

        profile = self.get(session, user_id)

        self.ensure_cpf_cnpj_free(session, payload.cpf_cnpj, owner_id=user_id)

        for field, value in payload.model_dump().items():
            setattr(profile, field, value)

        try:
            return self.repo.update(session, profile)
        except IntegrityError:
            session.rollback()
            logger.info("Profile update for user %s hit a constraint", user_id)
            # Lost a race on cpf_cnpj: report it like the pre-check does.
            self.ensure_cpf_cnpj_free(session, payload.cpf_cnpj, owner_id=user_id)
            raise
