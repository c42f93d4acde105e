# app/database.py
from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import Settings, get_settings

# ---------------------------------------------------------
# MySQL connection pool
#
# - pool_size=DB_POOL_SIZE : at most 10 storage connections by default
# - max_overflow=0         : never open connections beyond the pool
# - pool_timeout           : requests beyond capacity wait in line
#                            for a connection instead of failing fast
#                            (None: wait with no limit)
# - pool_pre_ping=True     : validate connections before using them
#
# An in-memory SQLite URL ("sqlite://") gets a single shared
# connection instead, so every session sees the same database.
# ---------------------------------------------------------


def build_engine(settings: Settings) -> Engine:
    """Create the storage engine described by ``settings``."""
    url = settings.database_url

    if str(url).startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        url,
        echo=False,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )


@lru_cache
def get_engine() -> Engine:
    """Process-wide engine, built on first use."""
    return build_engine(get_settings())


def create_db_and_tables() -> None:
    """
    Verify storage connectivity and create all tables defined in
    SQLModel metadata if they do not exist.

    This is called once on application startup; any exception here
    aborts startup.
    """
    engine = get_engine()
    with engine.connect():
        pass
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    The session (and its pooled connection) is released when the
    request finishes, whether the handler succeeded or raised.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(get_engine()) as session:
        yield session
