from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from stackcontrol.fsm import SessionFSM


def test_session_fsm_starts_active_and_finishes_once() -> None:
    fsm = SessionFSM()
    assert fsm.active.is_active
    assert not fsm.is_ended

    fsm.finish()
    assert fsm.is_ended

    with pytest.raises(TransitionNotAllowed):
        fsm.finish()
