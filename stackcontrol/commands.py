from __future__ import annotations

from enum import StrEnum


class Command(StrEnum):
    play = "play"
    stash = "stash"
    retrieve = "retrieve"
    swap_front_top = "swap_front_top"
    swap_three = "swap_three"
    quit = "quit"
    invalid = "invalid"


# Numbering of the interactive menu.
MENU_CHOICES: dict[str, Command] = {
    "1": Command.play,
    "2": Command.stash,
    "3": Command.retrieve,
    "4": Command.swap_front_top,
    "5": Command.swap_three,
    "0": Command.quit,
}


def parse_command(raw: str | Command | None) -> Command:
    """Resolve a menu number or command name.

    Anything unrecognized (including empty input) maps to `Command.invalid` rather than
    raising; the session reports it as an invalid selection.
    """

    if isinstance(raw, Command):
        return raw
    text = (raw or "").strip().casefold()
    # Menu numbers are read as a leading integer, so "01" and "1 abc" select option 1.
    head = text.split()[0] if text else ""
    if head.removeprefix("-").isdecimal():
        text = str(int(head))
    text = text.replace("-", "_")
    if text in MENU_CHOICES:
        return MENU_CHOICES[text]
    try:
        return Command(text)
    except ValueError:
        return Command.invalid
