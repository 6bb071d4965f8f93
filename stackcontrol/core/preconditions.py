from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from stackcontrol.core.containers import BoundedQueue, BoundedStack


class Precondition(ABC):
    """A small, composable check run before a cross-container action mutates anything.

    Returns the violation message, or None when satisfied.
    """

    @abstractmethod
    def check(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class QueueMinCount(Precondition):
    minimum: int
    message: str

    def check(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        return None if queue.count >= self.minimum else self.message


@dataclass(frozen=True, slots=True)
class StackMinCount(Precondition):
    minimum: int
    message: str

    def check(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        return None if stack.count >= self.minimum else self.message


@dataclass(frozen=True, slots=True)
class StackFull(Precondition):
    message: str

    def check(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        return None if stack.is_full() else self.message


@dataclass(frozen=True, slots=True)
class StackNotFull(Precondition):
    message: str

    def check(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        return self.message if stack.is_full() else None


@dataclass(frozen=True, slots=True)
class PreconditionPipeline:
    checks: tuple[Precondition, ...]

    def first_violation(self, *, queue: BoundedQueue, stack: BoundedStack) -> str | None:
        for c in self.checks:
            violation = c.check(queue=queue, stack=stack)
            if violation is not None:
                return violation
        return None


SWAP_THREE_COUNT = 3

SWAP_ONE_MESSAGE = "Queue and stack must each hold at least 1 piece for the swap."
SWAP_THREE_MESSAGE = "Queue must hold >= 3 pieces and the stack must be FULL (3 pieces) for this swap."

# Order is significant: the first violation is the one reported.
DEFAULT_PIPELINES: dict[str, PreconditionPipeline] = {
    "stash": PreconditionPipeline(
        checks=(
            StackNotFull(message="Reserve stack is full!"),
            QueueMinCount(minimum=1, message="Queue is empty! Nothing to reserve."),
        )
    ),
    "swap_front_top": PreconditionPipeline(
        checks=(
            QueueMinCount(minimum=1, message=SWAP_ONE_MESSAGE),
            StackMinCount(minimum=1, message=SWAP_ONE_MESSAGE),
        )
    ),
    "swap_three": PreconditionPipeline(
        checks=(
            QueueMinCount(minimum=SWAP_THREE_COUNT, message=SWAP_THREE_MESSAGE),
            StackMinCount(minimum=SWAP_THREE_COUNT, message=SWAP_THREE_MESSAGE),
            StackFull(message=SWAP_THREE_MESSAGE),
        )
    ),
}


def pipeline_for(action: str) -> PreconditionPipeline:
    pipe = DEFAULT_PIPELINES.get(action)
    if pipe is None:
        raise ValueError(f"Unknown action: {action}")
    return pipe
