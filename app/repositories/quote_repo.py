# app/repositories/quote_repo.py
from sqlmodel import Session, select

from app.models.quote import Quote


class QuoteRepository:
    """
    Data access layer for quotes.

    Single-row lookups always filter by (id, usuario_id): a quote owned
    by someone else looks exactly like a missing one.
    """

    def list_for_user(self, session: Session, user_id: int) -> list[Quote]:
        stmt = select(Quote).where(Quote.usuario_id == user_id)
        return list(session.exec(stmt).all())

    def get_for_user(
        self,
        session: Session,
        user_id: int,
        quote_id: int,
    ) -> Quote | None:
        stmt = select(Quote).where(
            Quote.id == quote_id, Quote.usuario_id == user_id
        )
        return session.exec(stmt).first()

    # CRUD
    def create(self, session: Session, quote: Quote) -> Quote:
        session.add(quote)
        session.commit()
        session.refresh(quote)
        return quote

    def update(self, session: Session, quote: Quote) -> Quote:
        session.add(quote)
        session.commit()
        session.refresh(quote)
        return quote

    def delete(self, session: Session, quote: Quote) -> None:
        session.delete(quote)
        session.commit()
