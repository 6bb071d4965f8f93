from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from stackcontrol.core.events import SessionEvent
from stackcontrol.pieces import Piece
from stackcontrol.session import CommandResult
from stackcontrol.session_store import StoredSession


class SessionCreateRequest(BaseModel):
    # Omit for a random seed.
    seed: int | None = Field(default=None, ge=0)


class PieceModel(BaseModel):
    type: str
    id: int

    @classmethod
    def from_piece(cls, piece: Piece) -> "PieceModel":
        return cls(type=piece.type.value, id=piece.id)


class SessionEventModel(BaseModel):
    seq: int
    type: str
    command: str
    payload: dict[str, Any] = Field(default_factory=dict)
    ts: datetime

    @classmethod
    def from_event(cls, event: SessionEvent) -> "SessionEventModel":
        return cls(seq=event.seq, type=event.type, command=event.command, payload=event.payload, ts=event.ts)


class SessionState(BaseModel):
    session_id: UUID
    created_at: datetime
    seed: int
    active: bool

    queue_capacity: int
    stack_capacity: int

    # Front -> back.
    queue: list[PieceModel]
    # Top -> base.
    stack: list[PieceModel]

    history: list[SessionEventModel] = Field(default_factory=list)

    @classmethod
    def from_stored(cls, stored: StoredSession) -> "SessionState":
        snap = stored.controller.snapshot()
        return cls(
            session_id=stored.session_id,
            created_at=stored.created_at,
            seed=stored.seed,
            active=snap.active,
            queue_capacity=snap.queue_capacity,
            stack_capacity=snap.stack_capacity,
            queue=[PieceModel.from_piece(p) for p in snap.queue],
            stack=[PieceModel.from_piece(p) for p in snap.stack],
            history=[SessionEventModel.from_event(e) for e in stored.controller.history],
        )


class SessionListResponse(BaseModel):
    sessions: list[SessionState]


class CommandResponse(BaseModel):
    command: str
    ok: bool
    error: str | None = None
    messages: list[str] = Field(default_factory=list)
    piece_ids: list[int] = Field(default_factory=list)
    state: SessionState

    @classmethod
    def from_result(cls, result: CommandResult, stored: StoredSession) -> "CommandResponse":
        return cls(
            command=result.command.value,
            ok=result.ok,
            error=result.error.value if result.error else None,
            messages=list(result.messages),
            piece_ids=list(result.piece_ids),
            state=SessionState.from_stored(stored),
        )
