# app/core/security.py
import bcrypt
from jose import jws, JWSError

from app.core.config import get_settings

settings = get_settings()

SESSION_COOKIE_ALG = "HS256"

# bcrypt only looks at the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(secret: str) -> str:
    """
    One-way, salted bcrypt digest of ``secret``.

    Cost factor comes from BCRYPT_ROUNDS.
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret_bytes(secret), salt).decode("ascii")


def verify_password(secret: str, digest: str) -> bool:
    """Check ``secret`` against a stored bcrypt digest."""
    return bcrypt.checkpw(_secret_bytes(secret), digest.encode("ascii"))


def sign_session_token(token: str) -> str:
    """
    Sign a session id for the cookie channel.

    The cookie carries ``<jws compact serialization>`` of the raw token,
    keyed by SESSION_SECRET, so a tampered cookie never reaches the
    session store.
    """
    return jws.sign(token.encode("utf-8"), settings.SESSION_SECRET, algorithm=SESSION_COOKIE_ALG)


def unsign_session_token(cookie_value: str) -> str | None:
    """
    Return the session id inside a signed cookie value, or None if the
    value is malformed or the signature does not verify.
    """
    try:
        payload = jws.verify(cookie_value, settings.SESSION_SECRET, algorithms=[SESSION_COOKIE_ALG])
    except JWSError:
        return None
    return payload.decode("utf-8")
