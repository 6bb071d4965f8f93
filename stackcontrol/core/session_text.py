from __future__ import annotations

from stackcontrol.commands import MENU_CHOICES, Command
from stackcontrol.pieces import Piece

EMPTY = "[ Empty ]"

_MENU_LABELS: dict[Command, str] = {
    Command.play: "Play piece (removes the front, a new one joins the back)",
    Command.stash: "Send queue piece to the reserve (Queue -> Stack)",
    Command.retrieve: "Use reserve piece (Stack -> Game)",
    Command.swap_front_top: "Swap queue FRONT with stack TOP",
    Command.swap_three: "Swap the 3 FIRST queue pieces with the 3 reserved",
    Command.quit: "Quit",
}


def _listing(pieces: tuple[Piece, ...]) -> str:
    if not pieces:
        return EMPTY
    return "[ " + " ".join(p.label for p in pieces) + " ]"


def render_queue(pieces: tuple[Piece, ...]) -> str:
    return "\n".join(["Upcoming pieces (Front -> Back):", _listing(pieces)])


def render_stack(pieces: tuple[Piece, ...]) -> str:
    return "\n".join(["Reserve stack (Top -> Base):", _listing(pieces)])


def render_board(*, queue: tuple[Piece, ...], stack: tuple[Piece, ...]) -> str:
    return "\n".join(
        [
            "--- Tetris Stack Control ---",
            render_queue(queue),
            render_stack(stack),
            "----------------------------",
        ]
    )


def render_menu() -> str:
    """Menu in display order: numbered actions first, quit (0) last."""

    keys = [*sorted(k for k in MENU_CHOICES if k != "0"), "0"]
    lines = ["Options:"]
    lines.extend(f"{k} - {_MENU_LABELS[MENU_CHOICES[k]]}" for k in keys)
    return "\n".join(lines)
