"""Jump chains and the rule against reversing a sideways step."""

import pytest

from Qirkat_AI.Board import BLACK, EMPTY, WHITE, Board
from Qirkat_AI.Move import index, move, parse_move
from Qirkat_AI.engine.errors import IllegalMoveError

# White on c1 can take c2, then continue over b4 or over d4
BRANCHING = "--w-- --b-- ----- -b-b- -----"
# As above, but the d4 branch continues over d5 and b4, capturing everything
SWEEP = "--w-- --b-- ----- -b-b- ---b-"


def test_branching_chains_are_enumerated_separately():
    b = Board(BRANCHING, WHITE)
    jumps = b.get_jumps(index("c", "1"))
    assert set(jumps) == {parse_move("c1-c3-a5"), parse_move("c1-c3-e5")}
    assert set(b.get_moves()) == set(jumps)


def test_sibling_branches_do_not_share_captures():
    b = Board(SWEEP, WHITE)
    assert set(b.get_moves()) == {parse_move("c1-c3-a5"), parse_move("c1-c3-e5-c5-a3")}


def test_partial_chain_is_not_a_legal_move():
    b = Board(BRANCHING, WHITE)
    partial = parse_move("c1-c3")
    assert not b.check_jump(partial)
    assert b.check_jump(partial, allow_partial=True)
    assert not b.legal_move(partial)
    assert b.check_jump(parse_move("c1-c3-e5"))
    with pytest.raises(IllegalMoveError, match="incomplete"):
        b.make_move(partial)


def test_chain_removes_every_captured_piece():
    b = Board(BRANCHING, WHITE)
    b.make_move(parse_move("c1-c3-e5"))
    for name in ("c1", "c2", "c3", "d4"):
        assert b.get(index(name[0], name[1])) == EMPTY
    assert b.get(index("e", "5")) == WHITE
    assert b.get(index("b", "4")) == BLACK
    assert b.whose_move() == BLACK
    assert not b.game_over()


def test_no_diagonal_jumps_from_odd_squares():
    b = Board("-w--- --b-- ----- ----- -----", WHITE)
    assert not b.jump_possible()
    assert not b.check_jump(parse_move("b1-d3"))
    assert set(b.get_moves()) == {parse_move(t) for t in ("b1-a1", "b1-c1", "b1-b2")}


def test_jumps_may_go_backward():
    b = Board("----- ----- --b-- --w-- -----", BLACK)
    assert b.get_moves() == [parse_move("c3-c5")]
    b.make_move(parse_move("c3-c5"))
    assert b.game_over()
    assert b.winner() == BLACK


def test_sideways_step_cannot_be_reversed_next_turn():
    b = Board("----- --w-- ----- ----- b---b", WHITE)
    b.make_move(parse_move("c2-d2"))
    b.make_move(parse_move("a5-a4"))
    back = parse_move("d2-c2")
    assert not b.legal_move(back)
    assert b.illegal_reason(back) == "step would reverse the previous move"
    assert back not in b.get_moves()
    assert parse_move("d2-d3") in b.get_moves()


def test_forward_steps_leave_no_marker():
    b = Board("----- --w-- ----- ----- b---b", WHITE)
    b.make_move(parse_move("c2-c3"))
    assert all(b.draw_at(k) is None for k in range(25))


def test_marker_leaves_with_the_piece():
    b = Board("----- --w-- ----- ----- b---b", WHITE)
    b.make_move(parse_move("c2-d2"))
    b.make_move(parse_move("a5-a4"))
    b.make_move(parse_move("d2-d3"))
    assert b.draw_at(index("d", "2")) is None


def test_capture_lifts_reversal_markers():
    b = Board("w---- --w-- -b--- ----- ----b", WHITE)
    b.make_move(parse_move("c2-d2"))
    b.make_move(parse_move("b3-b2"))
    assert b.get_moves() == [parse_move("a1-c3")]
    b.make_move(parse_move("a1-c3"))
    assert all(b.draw_at(k) is None for k in range(25))
    b.make_move(parse_move("e5-e4"))
    assert b.legal_move(parse_move("d2-c2"))


def test_undoing_a_capture_restores_reversal_markers():
    b = Board("w---- --w-- -b--- ----- ----b", WHITE)
    b.make_move(parse_move("c2-d2"))
    b.make_move(parse_move("b3-b2"))
    before = b.clone()
    b.make_move(parse_move("a1-c3"))
    assert b.draw_at(index("d", "2")) is None
    b.undo()
    assert b == before
    assert b.draw_at(index("d", "2")) == parse_move("d2-c2")
    assert b.get(index("b", "2")) == BLACK
    assert b.whose_move() == WHITE


def test_forbidden_reversal_can_leave_no_move():
    b = Board("--w-- wwb-- ----- ----- -----", BLACK)
    assert b.get_moves() == [parse_move("c2-d2")]
    b.set_draw(index("c", "2"), move(index("c", "2"), index("d", "2")))
    assert b.check_game_over()
    assert b.winner() == WHITE
    assert b.get_moves() == []


def test_blocked_black_loses():
    b = Board("--bbb w---- ----- ----- -----", BLACK)
    b.set_draw(2, move(2, 1))
    assert b.check_game_over()
    assert b.game_over()
    assert b.winner() == WHITE
