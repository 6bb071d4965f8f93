from __future__ import annotations

from stackcontrol.core.session_text import EMPTY, render_board, render_menu, render_queue, render_stack
from stackcontrol.pieces import Piece, PieceType


def test_render_queue_lists_front_to_back() -> None:
    text = render_queue((Piece(type=PieceType.T, id=1), Piece(type=PieceType.L, id=2)))
    assert text.splitlines() == ["Upcoming pieces (Front -> Back):", "[ ID:1(T) ID:2(L) ]"]


def test_render_empty_containers() -> None:
    assert render_stack(()).splitlines()[1] == EMPTY
    board = render_board(queue=(), stack=())
    assert board.count(EMPTY) == 2


def test_render_menu_lists_quit_last() -> None:
    lines = render_menu().splitlines()
    assert lines[0] == "Options:"
    assert [line.split(" - ")[0] for line in lines[1:]] == ["1", "2", "3", "4", "5", "0"]
