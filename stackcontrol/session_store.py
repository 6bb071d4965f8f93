from __future__ import annotations

import itertools
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from stackcontrol.config import resolve_seed
from stackcontrol.pieces import PieceFactory
from stackcontrol.session import SessionController


def _now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(slots=True)
class StoredSession:
    session_id: UUID
    created_at: datetime
    # For reproducibility/debugging.
    seed: int
    controller: SessionController
    # Creation order; breaks ties between equal timestamps.
    seq: int = 0


class SessionStore:
    """Process-local registry of sessions.

    Nothing is written anywhere else: restarting the process starts from scratch.
    """

    def __init__(self, *, default_seed: int | None = None) -> None:
        self._sessions: dict[UUID, StoredSession] = {}
        self._seq = itertools.count(1)
        self.default_seed = default_seed

    def create(self, *, seed: int | None = None) -> StoredSession:
        resolved = resolve_seed(seed if seed is not None else self.default_seed)
        stored = StoredSession(
            session_id=uuid4(),
            created_at=_now(),
            seed=resolved,
            controller=SessionController(factory=PieceFactory.from_seed(resolved)),
            seq=next(self._seq),
        )
        self._sessions[stored.session_id] = stored
        return stored

    def get(self, session_id: UUID) -> StoredSession | None:
        return self._sessions.get(session_id)

    def require(self, session_id: UUID) -> StoredSession:
        stored = self.get(session_id)
        if stored is None:
            raise LookupError("Session not found")
        return stored

    def list_sessions(self) -> list[StoredSession]:
        out = list(self._sessions.values())
        out.sort(key=lambda s: (s.created_at, s.seq), reverse=True)
        return out

    def clear(self) -> None:
        self._sessions.clear()
