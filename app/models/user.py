# app/models/user.py
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Login account.

    Identity:
      - id: generated integer key, returned as ``userId`` on sign-up
      - email: unique, compared exactly as stored

    ``senha`` holds the bcrypt digest, never the raw password.
    Each user owns exactly one Profile and any number of Quotes.
    """

    __tablename__ = "usuarios"

    id: int | None = Field(default=None, primary_key=True)

    email: str = Field(
        unique=True,
        index=True,
        max_length=255,
        description="Login e-mail",
    )

    senha: str = Field(
        max_length=255,
        description="bcrypt digest of the password",
    )
