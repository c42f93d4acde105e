# app/services/quote_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.validation import missing_fields
from app.models.quote import Quote
from app.repositories.quote_repo import QuoteRepository
from app.schemas.quote import QuoteCreate, QuoteUpdate

logger = logging.getLogger(__name__)

SPHERICAL_FIELDS = ("grau_esferico_od", "grau_esferico_oe")

QUOTE_NOT_FOUND = "Orçamento não encontrado ou não pertence ao usuário."


class QuoteService:
    """
    Business logic for quotes.

    Responsibilities:
      - require both spherical powers on create (nothing else is checked)
      - scope every read/write to the calling user
      - answer 404 both for missing quotes and for quotes owned by
        another user
    """

    def __init__(self, repo: QuoteRepository):
        self.repo = repo

    def create(self, session: Session, user_id: int, payload: QuoteCreate) -> Quote:
        """
        Store a new quote for ``user_id``.

        Raises:
            HTTPException(400): grau_esferico_od or grau_esferico_oe absent.
        """
        if missing_fields(payload, SPHERICAL_FIELDS):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Graus esféricos são obrigatórios.",
            )

        quote = Quote(usuario_id=user_id, **payload.model_dump())
        quote = self.repo.create(session, quote)
        logger.debug("User %s created quote %s", user_id, quote.id)
        return quote

    def list_for_user(self, session: Session, user_id: int) -> list[Quote]:
        """All quotes of ``user_id`` in storage order."""
        return self.repo.list_for_user(session, user_id)

    def get_one(self, session: Session, user_id: int, quote_id: int) -> Quote:
        """
        Return one quote owned by ``user_id``.

        Raises:
            HTTPException(404): no such quote for this user.
        """
        quote = self.repo.get_for_user(session, user_id, quote_id)
        if not quote:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=QUOTE_NOT_FOUND,
            )
        return quote

    def update(
        self,
        session: Session,
        user_id: int,
        quote_id: int,
        payload: QuoteUpdate,
    ) -> Quote:
        """
        Overwrite all 17 fields of an owned quote.

        Omitted fields become null. Re-sending identical values
        succeeds; only a missing/foreign quote yields 404.
        """
        quote = self.get_one(session, user_id, quote_id)
        for field, value in payload.model_dump().items():
            setattr(quote, field, value)
        return self.repo.update(session, quote)

    def delete(self, session: Session, user_id: int, quote_id: int) -> None:
        """
        Delete an owned quote.

        Raises:
            HTTPException(404): no such quote for this user (including a
                second delete of the same id).
        """
        quote = self.get_one(session, user_id, quote_id)
        self.repo.delete(session, quote)
        logger.debug("User %s deleted quote %s", user_id, quote_id)
