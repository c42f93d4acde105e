# app/core/validation.py
from typing import Any, Iterable


def is_missing(value: Any) -> bool:
    """
    Presence check used by the services.

    None and blank strings are missing; 0, 0.0 and False are values.
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def missing_fields(payload: Any, names: Iterable[str]) -> list[str]:
    """Names from ``names`` whose value on ``payload`` is missing."""
    return [name for name in names if is_missing(getattr(payload, name, None))]
