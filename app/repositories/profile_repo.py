# app/repositories/profile_repo.py
from sqlmodel import Session, select

from app.models.profile import Profile


class ProfileRepository:
    """
    Data access layer for profiles (one row per user).
    """

    def get_for_user(self, session: Session, user_id: int) -> Profile | None:
        stmt = select(Profile).where(Profile.usuario_id == user_id)
        return session.exec(stmt).first()

    def get_by_cpf_cnpj(self, session: Session, cpf_cnpj: str) -> Profile | None:
        stmt = select(Profile).where(Profile.cpf_cnpj == cpf_cnpj)
        return session.exec(stmt).first()

    def create(self, session: Session, profile: Profile) -> Profile:
        """
        Insert a Profile without committing; part of the sign-up
        transaction.
        """
        session.add(profile)
        session.flush()
        session.refresh(profile)
        return profile

    def update(self, session: Session, profile: Profile) -> Profile:
        """Persist changes to an existing Profile."""
        session.add(profile)
        session.commit()
        session.refresh(profile)
        return profile
