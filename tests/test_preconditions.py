from __future__ import annotations

import pytest

from stackcontrol.core.containers import BoundedQueue, BoundedStack
from stackcontrol.core.preconditions import pipeline_for
from stackcontrol.pieces import Piece, PieceType


def _full_stack() -> BoundedStack:
    s = BoundedStack()
    for pid in (1, 2, 3):
        s.push(Piece(type=PieceType.Z, id=pid))
    return s


def test_stash_reports_full_stack_before_empty_queue() -> None:
    violation = pipeline_for("stash").first_violation(queue=BoundedQueue(), stack=_full_stack())
    assert violation == "Reserve stack is full!"


def test_stash_reports_empty_queue() -> None:
    violation = pipeline_for("stash").first_violation(queue=BoundedQueue(), stack=BoundedStack())
    assert violation == "Queue is empty! Nothing to reserve."


def test_satisfied_pipeline_returns_none() -> None:
    q = BoundedQueue()
    for pid in (4, 5, 6):
        q.enqueue(Piece(type=PieceType.J, id=pid))
    assert pipeline_for("swap_three").first_violation(queue=q, stack=_full_stack()) is None
    assert pipeline_for("swap_front_top").first_violation(queue=q, stack=_full_stack()) is None


def test_unknown_action_pipeline_raises() -> None:
    with pytest.raises(ValueError) as e:
        pipeline_for("nope")
    assert "Unknown action" in str(e.value)
