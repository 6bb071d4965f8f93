from __future__ import annotations

import logging

from stackcontrol.core.containers import BoundedQueue, BoundedStack
from stackcontrol.core.preconditions import SWAP_THREE_COUNT, pipeline_for
from stackcontrol.core.results import ErrorKind, OpResult

logger = logging.getLogger(__name__)


def swap_front_with_top(queue: BoundedQueue, stack: BoundedStack) -> OpResult:
    """Exchange the queue front with the stack top in place.

    Only stored values move; counts, head and top are unchanged.
    `pieces` is (previous front, previous top).
    """

    violation = pipeline_for("swap_front_top").first_violation(queue=queue, stack=stack)
    if violation is not None:
        logger.debug("swap_front_top rejected: %s", violation)
        return OpResult.failure(ErrorKind.precondition, violation)

    top = stack.swap_at(stack.top, queue.peek_front())  # type: ignore[arg-type]
    front = queue.swap_at(0, top)

    return OpResult.success(
        pieces=(front, top),
        message=f"Queue front piece (ID:{front.id}) swapped with stack top piece (ID:{top.id}).",
    )


def swap_three(queue: BoundedQueue, stack: BoundedStack) -> OpResult:
    """Exchange the first three queued pieces with the three reserved ones.

    Queue logical position i pairs with stack storage position i (base first), so the
    queue front receives the stack base. Either every pair is exchanged or nothing is.
    `pieces` is the previous queue front-three followed by the previous stack base-to-top.
    """

    violation = pipeline_for("swap_three").first_violation(queue=queue, stack=stack)
    if violation is not None:
        logger.debug("swap_three rejected: %s", violation)
        return OpResult.failure(ErrorKind.precondition, violation)

    from_queue = []
    from_stack = []
    for i in range(SWAP_THREE_COUNT):
        reserved = stack.peek(i)
        upcoming = queue.swap_at(i, reserved)  # type: ignore[arg-type]
        stack.swap_at(i, upcoming)
        from_queue.append(upcoming)
        from_stack.append(reserved)

    return OpResult.success(
        pieces=tuple(from_queue) + tuple(from_stack),  # type: ignore[arg-type]
        message="The first 3 queue pieces were swapped with the reserve stack.",
    )
