from __future__ import annotations

import logging
from collections.abc import Callable

from stackcontrol.commands import Command, parse_command
from stackcontrol.config import configure_logging, load_settings, resolve_seed
from stackcontrol.core.session_text import render_board, render_menu
from stackcontrol.pieces import PieceFactory
from stackcontrol.session import SessionController

logger = logging.getLogger(__name__)

PROMPT = "Choose your action: "


def run_menu(
    *,
    controller: SessionController,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Interactive loop: show state, read a choice, apply it, report.

    Returns the number of commands applied (quit included). End of input is treated as quit.
    """

    applied = 0
    while controller.active:
        snap = controller.snapshot()
        write(render_board(queue=snap.queue, stack=snap.stack))
        write(render_menu())
        try:
            raw = read(PROMPT)
        except EOFError:
            raw = Command.quit.value

        result = controller.apply(parse_command(raw))
        applied += 1
        for line in result.messages:
            write(line)
    return applied


def main() -> int:
    settings = load_settings()
    configure_logging(settings)

    seed = resolve_seed(settings.seed)
    logger.info("starting session with seed=%s", seed)
    controller = SessionController(factory=PieceFactory.from_seed(seed))
    run_menu(controller=controller)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
