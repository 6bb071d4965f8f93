from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from stackcontrol.pieces import Piece


class ErrorKind(StrEnum):
    capacity_exceeded = "capacity_exceeded"
    underflow = "underflow"
    precondition = "precondition"
    invalid_command = "invalid_command"
    session_ended = "session_ended"


@dataclass(frozen=True, slots=True)
class OpResult:
    """Outcome of a container or exchange operation.

    - `ok`: whether the operation mutated anything.
    - `error`: set iff `ok` is False.
    - `pieces`: the pieces the operation touched. For a failed enqueue/push this is the
      dropped piece; for a failed dequeue/pop it is empty.
    """

    ok: bool
    error: ErrorKind | None = None
    message: str = ""
    pieces: tuple[Piece, ...] = ()

    @staticmethod
    def success(*, pieces: tuple[Piece, ...] = (), message: str = "") -> "OpResult":
        return OpResult(ok=True, error=None, message=message, pieces=pieces)

    @staticmethod
    def failure(error: ErrorKind, message: str, *, pieces: tuple[Piece, ...] = ()) -> "OpResult":
        return OpResult(ok=False, error=error, message=message, pieces=pieces)

    @property
    def piece(self) -> Piece | None:
        return self.pieces[0] if self.pieces else None
