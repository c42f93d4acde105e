# app/routers/quotes.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.repositories.quote_repo import QuoteRepository
from app.schemas.auth import MessageResponse
from app.schemas.quote import QuoteCreate, QuoteCreated, QuoteRead, QuoteUpdate
from app.services.quote_service import QuoteService

router = APIRouter(prefix="/orcamentos", tags=["Quotes"])

repo = QuoteRepository()
service = QuoteService(repo)


@router.post(
    "",
    response_model=QuoteCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_quote(
    payload: QuoteCreate,
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Create a quote owned by the authenticated user.

    grau_esferico_od and grau_esferico_oe are required.
    """
    quote = service.create(session, user_id, payload)
    return QuoteCreated(message="Orçamento criado com sucesso!", orcamentoId=quote.id)


@router.get("", response_model=list[QuoteRead])
def list_my_quotes(
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    List every quote of the authenticated user.
    """
    return service.list_for_user(session, user_id)


@router.get("/{quote_id}", response_model=QuoteRead)
def get_my_quote(
    quote_id: int,
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Get a single quote belonging to the current user.
    """
    return service.get_one(session, user_id, quote_id)


@router.put("/{quote_id}", response_model=MessageResponse)
def update_my_quote(
    quote_id: int,
    payload: QuoteUpdate,
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Replace all fields of one of the current user's quotes.
    """
    service.update(session, user_id, quote_id, payload)
    return MessageResponse(message="Orçamento atualizado com sucesso!")


@router.delete("/{quote_id}", response_model=MessageResponse)
def delete_my_quote(
    quote_id: int,
    user_id: int = Depends(require_auth),
    session: Session = Depends(get_session),
):
    """
    Delete one of the current user's quotes.
    """
    service.delete(session, user_id, quote_id)
    return MessageResponse(message="Orçamento excluído com sucesso!")
