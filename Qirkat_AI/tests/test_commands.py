"""Command-line parsing and move checks used by the session."""

import pytest

from Qirkat_AI.Board import BLACK, WHITE, Board
from Qirkat_AI.Move import index, parse_move
from Qirkat_AI.engine import referee
from Qirkat_AI.engine.commands import Command, parse_command
from Qirkat_AI.engine.errors import EngineError, IllegalMoveError, ParseError


@pytest.mark.parametrize(
    "line,expected",
    [
        ("start", Command("start", ())),
        ("  START ", Command("start", ())),
        ("clear", Command("clear", ())),
        ("set white w---- -b--- ----- ----- -----", Command("set", ("white", "w---- -b--- ----- ----- -----"))),
        ("seed 17", Command("seed", ("17",))),
        ("manual BLACK", Command("manual", ("black",))),
        ("auto dumbWhite", Command("auto", ("dumbwhite",))),
        ("load games/one.txt", Command("load", ("games/one.txt",))),
        ("dump", Command("dump", ())),
        ("?", Command("help", ())),
        ("quit", Command("quit", ())),
        ("C2-C3", Command("move", ("c2-c3",))),
        ("a3-c1-e3", Command("move", ("a3-c1-e3",))),
        ("-", Command("move", ("-",))),
        ("", Command("blank", ())),
        ("# a comment", Command("blank", ())),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


def test_end_of_input():
    assert parse_command(None) == Command("eof", ())


@pytest.mark.parametrize("line", ["frobnicate", "seed", "auto green", "manual", "c2-c6"])
def test_unknown_commands(line):
    with pytest.raises(ParseError, match="Command not understood"):
        parse_command(line)


def test_check_move_reports_illegal_moves():
    b = Board()
    assert referee.check_move(parse_move("c2-c3"), b, WHITE)
    with pytest.raises(IllegalMoveError):
        referee.check_move(parse_move("a1-b1"), b, WHITE)
    with pytest.raises(IllegalMoveError, match="White's move"):
        referee.check_move(parse_move("c4-c3"), b, BLACK)


def test_check_move_blames_the_engine():
    with pytest.raises(EngineError, match="something wrong with AI"):
        referee.check_move(parse_move("a1-b1"), Board(), WHITE, automated=True)


def test_classify_clicked_squares():
    b = Board()
    c2, c3, c4 = index("c", "2"), index("c", "3"), index("c", "4")
    assert referee.classify_input(b, [c2]) == referee.PARTIAL
    assert referee.classify_input(b, [c2, c3]) == referee.COMPLETE
    assert referee.classify_input(b, [c2, c4]) == referee.INVALID
    assert referee.classify_input(b, [c4]) == referee.INVALID
    assert referee.classify_input(b, [c2, index("e", "5")]) == referee.INVALID
    assert referee.classify_input(b, []) == referee.INVALID


def test_classify_unfinished_jump_chain():
    b = Board("--w-- --b-- ----- -b-b- -----", WHITE)
    c1, c3, a5 = index("c", "1"), index("c", "3"), index("a", "5")
    assert referee.classify_input(b, [c1, c3]) == referee.PARTIAL
    assert referee.classify_input(b, [c1, c3, a5]) == referee.COMPLETE
