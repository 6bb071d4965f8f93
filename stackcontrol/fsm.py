from __future__ import annotations

from statemachine import State, StateMachine


class SessionFSM(StateMachine):
    """Lifecycle of a session: commands are accepted while active; quit ends it for good."""

    active = State("active", value="active", initial=True)
    ended = State("ended", value="ended", final=True)

    finish = active.to(ended)

    @property
    def is_ended(self) -> bool:
        return self.ended.is_active
