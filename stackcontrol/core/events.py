from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

EventType = Literal[
    "SESSION_STARTED",
    "COMMAND_APPLIED",
    "COMMAND_REJECTED",
    "SESSION_ENDED",
]


@dataclass(frozen=True, slots=True)
class SessionEvent:
    type: EventType
    seq: int
    command: str
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, seq: int, command: str, payload: dict[str, Any]) -> "SessionEvent":
        return SessionEvent(type=type, seq=seq, command=command, payload=payload, ts=datetime.now(timezone.utc))
