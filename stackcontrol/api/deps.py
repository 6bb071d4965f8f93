from __future__ import annotations

from fastapi import HTTPException, status

from stackcontrol.config import load_settings
from stackcontrol.session_store import SessionStore

_STORE: SessionStore | None = None


def get_store() -> SessionStore:
    """FastAPI dependency for the process-wide session registry (override in tests).

    Bad environment settings surface as 422, like every other rejected input.
    """

    global _STORE
    if _STORE is None:
        try:
            settings = load_settings()
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
        _STORE = SessionStore(default_seed=settings.seed)
    return _STORE


def reset_store_for_tests() -> None:
    global _STORE
    _STORE = None
