"""Square naming, move construction, and move text."""

import pytest

from Qirkat_AI.Move import (
    PASS,
    col,
    index,
    move,
    move_from_squares,
    parse_move,
    path_move,
    row,
    valid_index,
    valid_square,
)
from Qirkat_AI.engine.errors import ParseError


def test_square_indexing():
    assert index("a", "1") == 0
    assert index("c", "2") == 7
    assert index("e", "5") == 24
    assert index("A", "2") == 5
    assert col(24) == "e" and row(24) == "5"
    assert col(7) == "c" and row(7) == "2"


def test_square_validity():
    assert valid_square("e", "5")
    assert not valid_square("f", "1")
    assert not valid_square("a", "6")
    assert not valid_square("", "1")
    assert valid_index(0) and valid_index(24)
    assert not valid_index(25)
    assert not valid_index(-1)
    with pytest.raises(ParseError):
        index("f", "1")


def test_jumped_square_is_the_midpoint():
    mv = move_from_squares("a", "1", "c", "3")
    assert mv.jumped_col == "b"
    assert mv.jumped_row == "2"
    assert mv.jumped_index == index("b", "2")

    mv = move_from_squares("c", "3", "e", "1")
    assert mv.jumped_col == "d"
    assert mv.jumped_row == "2"

    mv = move_from_squares("a", "3", "a", "5")
    assert mv.jumped_col == "a"
    assert mv.jumped_row == "4"


def test_sideways_direction():
    assert not move_from_squares("c", "3", "e", "1").is_left_move
    assert not move_from_squares("c", "3", "e", "1").is_right_move
    assert move_from_squares("c", "3", "d", "3").is_right_move
    assert move_from_squares("c", "3", "b", "3").is_left_move
    # Forward steps and sideways jumps are neither
    assert move_from_squares("c", "3", "c", "4").direction == "other"
    assert move_from_squares("c", "3", "a", "3").direction == "other"
    assert PASS.direction == "none"


def test_parse_step_and_pass():
    assert parse_move("c2-c3") == move(7, 12)
    assert parse_move(" C2-C3 ") == move(7, 12)
    assert parse_move("-") is PASS
    assert PASS.is_pass and not PASS.is_jump and not PASS.is_step
    assert str(PASS) == "-"
    assert str(parse_move("C2-C3")) == "c2-c3"


def test_parse_jump_chain():
    mv = parse_move("b2-b4-d2-d4")
    assert mv.is_jump
    assert str(mv) == "b2-b4-d2-d4"
    assert mv.squares() == (6, 16, 8, 18)
    assert [str(h) for h in mv.hops()] == ["b2-b4", "b4-d2", "d2-d4"]
    assert mv.tail.from_index == 16
    assert mv.last_index == index("d", "4")
    assert path_move([6, 16, 8, 18]) == mv


@pytest.mark.parametrize(
    "text",
    ["", "c2", "c2-c6", "f1-f2", "a1-a4", "a1-b3", "c2-c3-c4", "c2--c3", "c3-c5-c4"],
)
def test_malformed_move_text(text):
    with pytest.raises(ParseError):
        parse_move(text)


def test_impossible_geometry_rejected():
    with pytest.raises(ParseError):
        move(0, 0)
    with pytest.raises(ParseError):
        move(0, 25)
    with pytest.raises(ParseError):
        path_move([0])
    # A continuation must start where the first jump lands
    with pytest.raises(ParseError):
        move(0, 10, move(12, 2))


def test_moves_compare_structurally():
    assert move(1, 2) == move(1, 2)
    assert hash(move(1, 2)) == hash(move(1, 2))
    assert move(0, 10, move(10, 20)) != move(0, 10)
    assert sorted([move(7, 12), move(2, 12), move(2, 7)]) == [move(2, 7), move(2, 12), move(7, 12)]
    assert repr(move(7, 12)) == "Move('c2-c3')"
