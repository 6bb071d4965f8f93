from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from stackcontrol.api.deps import get_store
from stackcontrol.api.models import CommandResponse, SessionCreateRequest, SessionListResponse, SessionState
from stackcontrol.commands import parse_command
from stackcontrol.session_store import SessionStore, StoredSession

logger = logging.getLogger(__name__)

router = APIRouter()


def _require(store: SessionStore, session_id: UUID) -> StoredSession:
    try:
        return store.require(session_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/session", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def create_session_route(
    payload: SessionCreateRequest | None = None,
    store: SessionStore = Depends(get_store),
) -> SessionState:
    seed = payload.seed if payload is not None else None
    stored = store.create(seed=seed)
    logger.info("session %s created (seed=%s)", stored.session_id, stored.seed)
    return SessionState.from_stored(stored)


@router.get("/session", response_model=SessionListResponse)
async def list_sessions_route(store: SessionStore = Depends(get_store)) -> SessionListResponse:
    return SessionListResponse(sessions=[SessionState.from_stored(s) for s in store.list_sessions()])


@router.get("/session/{session_id}", response_model=SessionState)
async def get_session_route(session_id: UUID, store: SessionStore = Depends(get_store)) -> SessionState:
    return SessionState.from_stored(_require(store, session_id))


@router.post("/session/{session_id}/commands/{command}", response_model=CommandResponse)
async def command_route(
    session_id: UUID,
    command: str,
    store: SessionStore = Depends(get_store),
) -> CommandResponse:
    """Apply one menu command.

    Rejected commands (full/empty containers, unmet swap requirements, unknown names, ended
    sessions) still return 200 with `ok=false`; only a missing session is an HTTP error.
    """

    stored = _require(store, session_id)
    result = stored.controller.apply(parse_command(command))
    return CommandResponse.from_result(result, stored)
