from __future__ import annotations

from collections.abc import Callable, Iterator

from stackcontrol.cli import PROMPT, run_menu
from stackcontrol.session import SessionController


def _reader(answers: list[str]) -> tuple[Callable[[str], str], list[str]]:
    it: Iterator[str] = iter(answers)
    prompts: list[str] = []

    def _read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _read, prompts


def test_menu_applies_choices_until_quit(controller: SessionController) -> None:
    read, prompts = _reader(["1", "2", "abc", "0", "1"])
    out: list[str] = []

    applied = run_menu(controller=controller, read=read, write=out.append)

    assert applied == 4
    assert prompts == [PROMPT] * 4
    assert not controller.active
    assert any("ID:1" in line and "was played" in line for line in out)
    assert any("moved to the reserve" in line for line in out)
    assert "Invalid option. Try again." in out
    assert out[-1] == "Ending the game..."
    # Board is shown before every prompt.
    assert sum(1 for line in out if line.startswith("--- Tetris Stack Control")) == 4


def test_menu_treats_end_of_input_as_quit(controller: SessionController) -> None:
    read, _ = _reader([])
    out: list[str] = []

    assert run_menu(controller=controller, read=read, write=out.append) == 1
    assert not controller.active
