"""Static evaluation for Qirkat positions (material count, terminal scores)."""

from ..Board import BLACK, WHITE

INFTY = 10 ** 9
# Score of a decided game: positive when White has won, negative when Black has
WINNING_VALUE = INFTY


def material(board):
    """Number of white pieces minus number of black pieces."""
    return board.count(WHITE) - board.count(BLACK)


def static_score(board):
    """
    Heuristic value of BOARD from White's point of view.
    A finished game scores +/- WINNING_VALUE against the side left without a move.
    """
    if board.game_over():
        return -WINNING_VALUE if board.whose_move() == WHITE else WINNING_VALUE
    return material(board)
