"""Move validation for the game loop and for click-by-click move entry."""

from ..Board import color_name
from ..Move import path_move
from .errors import EngineError, IllegalMoveError, ParseError

COMPLETE = "complete"
PARTIAL = "partial"
INVALID = "invalid"


def check_move(move, board, color, automated=False):
    """
    Validate MOVE played by COLOR on BOARD.
    Raises IllegalMoveError for a bad move, or EngineError when the move came
    from an automated player (an engine must never play an illegal move).
    """
    try:
        if board.whose_move() != color:
            raise IllegalMoveError(f"invalid move: {color_name(board.whose_move())}'s move")
        reason = board.illegal_reason(move)
        if reason is not None:
            raise IllegalMoveError(f"invalid move {move}: {reason}")
    except IllegalMoveError as exc:
        if automated:
            raise EngineError(f"something wrong with AI: {exc}") from exc
        raise
    return True


def classify_input(board, squares):
    """
    Classify the square indices clicked so far by the player to move.

    COMPLETE: they form a legal move. PARTIAL: they could still grow into one
    (a lone own piece, or a valid but unfinished jump chain). INVALID otherwise.
    """
    squares = list(squares)
    mover = board.whose_move()
    if not squares or board.get(squares[0]) != mover:
        return INVALID
    if len(squares) == 1:
        return PARTIAL
    try:
        move = path_move(squares)
    except ParseError:
        return INVALID
    if board.legal_move(move):
        return COMPLETE
    if move.is_jump and board.check_jump(move, allow_partial=True):
        return PARTIAL
    return INVALID
