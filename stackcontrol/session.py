from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from stackcontrol.commands import Command, parse_command
from stackcontrol.core.containers import QUEUE_CAPACITY, STACK_CAPACITY, BoundedQueue, BoundedStack
from stackcontrol.core.events import SessionEvent
from stackcontrol.core.exchange import swap_front_with_top, swap_three
from stackcontrol.core.preconditions import pipeline_for
from stackcontrol.core.results import ErrorKind, OpResult
from stackcontrol.fsm import SessionFSM
from stackcontrol.pieces import Piece, PieceFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """What the outer layer renders after a command.

    `piece_ids` lists every piece the command touched, in the order the messages mention them.
    """

    command: Command
    ok: bool
    error: ErrorKind | None
    messages: tuple[str, ...]
    piece_ids: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    queue: tuple[Piece, ...]
    stack: tuple[Piece, ...]
    queue_capacity: int
    stack_capacity: int
    active: bool


def _ids(pieces: tuple[Piece, ...]) -> tuple[int, ...]:
    return tuple(p.id for p in pieces)


class SessionController:
    """Applies menu commands to one queue/stack pair.

    Policy:
    - play and stash take a piece out of the queue, so they top it back up with a fresh piece.
    - retrieve takes from the stack only; the queue is left as is.
    - exchanges are delegated to `stackcontrol.core.exchange`.
    """

    def __init__(
        self,
        *,
        factory: PieceFactory,
        queue_capacity: int = QUEUE_CAPACITY,
        stack_capacity: int = STACK_CAPACITY,
        fill: bool = True,
    ) -> None:
        self.factory = factory
        self.queue = BoundedQueue(queue_capacity)
        self.stack = BoundedStack(stack_capacity)
        self.fsm = SessionFSM()
        self.history: list[SessionEvent] = []

        if fill:
            while not self.queue.is_full():
                self.queue.enqueue(self.factory.generate())
        self._record("SESSION_STARTED", command="start", payload={"queue_ids": list(_ids(self.queue.snapshot_ordered()))})

    @property
    def active(self) -> bool:
        return not self.fsm.is_ended

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            queue=self.queue.snapshot_ordered(),
            stack=self.stack.snapshot_ordered(),
            queue_capacity=self.queue.capacity,
            stack_capacity=self.stack.capacity,
            active=self.active,
        )

    def apply(self, command: Command | str) -> CommandResult:
        cmd = parse_command(command)

        if self.fsm.is_ended:
            result = CommandResult(
                command=cmd,
                ok=False,
                error=ErrorKind.session_ended,
                messages=("The session has ended.",),
            )
        else:
            result = self._handlers()[cmd]()

        if result.ok:
            logger.info("command %s applied: %s", cmd.value, " ".join(result.messages))
        else:
            logger.info("command %s rejected (%s): %s", cmd.value, result.error, " ".join(result.messages))

        self._record(
            "COMMAND_APPLIED" if result.ok else "COMMAND_REJECTED",
            command=cmd.value,
            payload={
                "error": result.error.value if result.error else None,
                "piece_ids": list(result.piece_ids),
            },
        )
        if cmd == Command.quit and result.ok:
            self._record("SESSION_ENDED", command=cmd.value, payload={})
        return result

    def _handlers(self) -> dict[Command, Callable[[], CommandResult]]:
        return {
            Command.play: self.play,
            Command.stash: self.stash,
            Command.retrieve: self.retrieve,
            Command.swap_front_top: self.swap_front_top,
            Command.swap_three: self.swap_three,
            Command.quit: self.quit,
            Command.invalid: self.invalid,
        }

    def _refill(self) -> tuple[Piece, str]:
        new = self.factory.generate()
        # Cannot fail: a piece just left the queue.
        self.queue.enqueue(new)
        return new, f"New piece {new.label} entered the queue."

    def play(self) -> CommandResult:
        out = self.queue.dequeue()
        if not out.ok:
            return _from_op(Command.play, out)
        played = out.pieces[0]
        new, refill_msg = self._refill()
        return CommandResult(
            command=Command.play,
            ok=True,
            error=None,
            messages=(f"Piece {played.label} was played.", refill_msg),
            piece_ids=(played.id, new.id),
        )

    def stash(self) -> CommandResult:
        violation = pipeline_for("stash").first_violation(queue=self.queue, stack=self.stack)
        if violation is not None:
            return CommandResult(command=Command.stash, ok=False, error=ErrorKind.precondition, messages=(violation,))

        moved = self.queue.dequeue().pieces[0]
        self.stack.push(moved)
        new, refill_msg = self._refill()
        return CommandResult(
            command=Command.stash,
            ok=True,
            error=None,
            messages=(f"Piece {moved.label} moved to the reserve.", refill_msg),
            piece_ids=(moved.id, new.id),
        )

    def retrieve(self) -> CommandResult:
        out = self.stack.pop()
        if not out.ok:
            return _from_op(Command.retrieve, out)
        used = out.pieces[0]
        return CommandResult(
            command=Command.retrieve,
            ok=True,
            error=None,
            messages=(f"Reserve piece {used.label} was used.",),
            piece_ids=(used.id,),
        )

    def swap_front_top(self) -> CommandResult:
        return _from_op(Command.swap_front_top, swap_front_with_top(self.queue, self.stack))

    def swap_three(self) -> CommandResult:
        return _from_op(Command.swap_three, swap_three(self.queue, self.stack))

    def quit(self) -> CommandResult:
        self.fsm.finish()
        return CommandResult(command=Command.quit, ok=True, error=None, messages=("Ending the game...",))

    def invalid(self) -> CommandResult:
        return CommandResult(
            command=Command.invalid,
            ok=False,
            error=ErrorKind.invalid_command,
            messages=("Invalid option. Try again.",),
        )

    def _record(self, type_: str, *, command: str, payload: dict[str, object]) -> None:
        self.history.append(
            SessionEvent.now(type=type_, seq=len(self.history) + 1, command=command, payload=payload)  # type: ignore[arg-type]
        )


def _from_op(command: Command, op: OpResult) -> CommandResult:
    return CommandResult(
        command=command,
        ok=op.ok,
        error=op.error,
        messages=(op.message,),
        piece_ids=_ids(op.pieces),
    )
