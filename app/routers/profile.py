# app/routers/profile.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.repositories.profile_repo import ProfileRepository
from app.schemas.auth import MessageResponse
from app.schemas.profile import ProfileRead, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/perfil", tags=["Profile"])

repo = ProfileRepository()
service = ProfileService(repo)


@router.get("", response_model=ProfileRead)
def read_my_profile(
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Return the authenticated user's profile.
    """
    return service.get(session, user_id)


@router.put("", response_model=MessageResponse)
def update_my_profile(
    payload: ProfileUpdate,
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Replace the authenticated user's profile data.

    nome_completo is mandatory; every other field is overwritten with
    what was sent (or null).
    """
    service.update(session, user_id, payload)
    return MessageResponse(message="Perfil atualizado com sucesso!")
