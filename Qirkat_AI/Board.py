"""Board state, move legality, move generation (including jump chains), and undo."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .Move import (
    MAX_INDEX,
    ROWS,
    SIDE,
    Move,
    col_index,
    index,
    row_index,
    square_name,
    valid_index,
)
from .engine.errors import IllegalMoveError, ParseError, StateError

LOGGER = logging.getLogger(__name__)

# Cells hold -1 (black), 0 (empty), 1 (white)
WHITE = 1
BLACK = -1
EMPTY = 0

SHORT_NAMES = {WHITE: "w", BLACK: "b", EMPTY: "-"}
LONG_NAMES = {WHITE: "White", BLACK: "Black"}
_FROM_CHAR = {"w": WHITE, "b": BLACK, "-": EMPTY}

# Bottom row first
INITIAL_LAYOUT = "w w w w w  w w w w w  b b - w w  b b b b b  b b b b b"

STEP_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
JUMP_DIRECTIONS = [(2 * dr, 2 * dc) for dr, dc in STEP_DIRECTIONS]


def opposite(color):
    return -color


def color_name(color):
    return LONG_NAMES[color]


def parse_color(text):
    """Map 'white'/'black' (any case) to WHITE/BLACK."""
    key = str(text).strip().lower()
    if key == "white":
        return WHITE
    if key == "black":
        return BLACK
    raise StateError(f"not a valid piece color: {text}")


def far_row(color):
    """Row from which COLOR can no longer step."""
    return SIDE - 1 if color == WHITE else 0


def _offset(k, dr, dc):
    """Index DR rows and DC columns away from K, or None if that is off the board."""
    r = row_index(k) + dr
    c = col_index(k) + dc
    if 0 <= r < SIDE and 0 <= c < SIDE:
        return r * SIDE + c
    return None


def _direction_allowed(k, dr, dc):
    # Odd squares only connect orthogonally
    return k % 2 == 0 or dr == 0 or dc == 0


def _jump_targets(cells, k):
    """Yield (landing, captured) for every single jump open to the piece on K."""
    color = cells[k]
    if color == EMPTY:
        return
    for dr, dc in JUMP_DIRECTIONS:
        if not _direction_allowed(k, dr, dc):
            continue
        to = _offset(k, dr, dc)
        if to is None:
            continue
        mid = _offset(k, dr // 2, dc // 2)
        if cells[mid] == -color and cells[to] == EMPTY:
            yield to, mid


def _apply_jump(cells, k, to, captured):
    cells[to] = cells[k]
    cells[k] = EMPTY
    cells[captured] = EMPTY


def _jump_chains(cells, k):
    """Return every maximal jump chain for the piece on K.

    Each branch captures on its own copy of CELLS, so sibling branches never
    see each other's captures.
    """
    chains = []
    for to, captured in _jump_targets(cells, k):
        branch = list(cells)
        _apply_jump(branch, k, to, captured)
        head = Move(k, to)
        tails = _jump_chains(branch, to)
        if tails:
            chains.extend(head.then(tail) for tail in tails)
        else:
            chains.append(head)
    return chains


class Board:
    """A Qirkat position plus the history needed to undo moves.

    Subscribers registered with `subscribe` are called with the board after
    every change (move, undo, setup).
    """

    def __init__(self, layout: Optional[str] = INITIAL_LAYOUT, to_move: int = WHITE):
        self.cells = [EMPTY] * (MAX_INDEX + 1)
        self.to_move = to_move
        self.history = []
        # draws[k]: the step that would reverse the last sideways step onto k
        self.draws: List[Optional[Move]] = [None] * (MAX_INDEX + 1)
        self._game_over = True
        self._listeners: List[Callable[["Board"], None]] = []
        if layout is not None:
            self.set_pieces(layout, to_move)

    # Setup -----------------------------------------------------------------------
    def clear(self):
        """Reset to the standard starting position with White to move."""
        self.set_pieces(INITIAL_LAYOUT, WHITE)

    def set_pieces(self, text: str, to_move: int):
        """Set the contents from 25 characters of b, w or - (bottom row first).

        Whitespace is ignored. On error the board is left unchanged.
        """
        if to_move not in (WHITE, BLACK):
            raise StateError("bad player color")
        if not isinstance(text, str):
            raise ParseError("bad board description")
        compact = "".join(text.split()).lower()
        if len(compact) != MAX_INDEX + 1 or any(ch not in _FROM_CHAR for ch in compact):
            raise ParseError(f"bad board description: {text!r}")

        self.cells = [_FROM_CHAR[ch] for ch in compact]
        self.to_move = to_move
        self.draws = [None] * (MAX_INDEX + 1)
        self.history = []
        self.check_game_over()
        LOGGER.debug("set up %s with %s to move", compact, color_name(to_move))
        self._notify()

    def set_draw(self, k: int, mv: Optional[Move]):
        """Install (or clear, with None) the reversal marker for square K."""
        self.draws[k] = mv

    def clone(self) -> "Board":
        """Independent copy of the position and its history, without subscribers."""
        new_board = Board(layout=None)
        new_board.cells = self.cells[:]
        new_board.to_move = self.to_move
        new_board.history = self.history[:]
        new_board.draws = self.draws[:]
        new_board._game_over = self._game_over
        return new_board

    def constant_view(self) -> "BoardView":
        return BoardView(self)

    # Queries ---------------------------------------------------------------------
    def get(self, k: int) -> int:
        if not valid_index(k):
            raise IndexError(f"not a valid square: {k}")
        return self.cells[k]

    def get_square(self, c: str, r: str) -> int:
        return self.get(index(c, r))

    def whose_move(self) -> int:
        return self.to_move

    def game_over(self) -> bool:
        """True iff the player to move has no legal move."""
        return self._game_over

    def winner(self) -> Optional[int]:
        return -self.to_move if self._game_over else None

    def count(self, color: int) -> int:
        return sum(1 for v in self.cells if v == color)

    def draw_at(self, k: int) -> Optional[Move]:
        return self.draws[k]

    def layout(self) -> str:
        """25-character description accepted by set_pieces."""
        return "".join(SHORT_NAMES[v] for v in self.cells)

    # Legality --------------------------------------------------------------------
    def legal_move(self, mv: Optional[Move]) -> bool:
        return self.illegal_reason(mv) is None

    def illegal_reason(self, mv: Optional[Move]) -> Optional[str]:
        """Return why MV is illegal for the player to move, or None if it is legal."""
        if mv is None or mv.is_pass:
            return "cannot pass"
        mover = self.to_move
        if self.cells[mv.from_index] != mover:
            return f"no {color_name(mover)} piece on {square_name(mv.from_index)}"
        if self.cells[mv.to_index] != EMPTY:
            return f"{square_name(mv.to_index)} is occupied"
        if mv.is_jump:
            return self._jump_problem(mv, allow_partial=False)

        if row_index(mv.from_index) == far_row(mover):
            return f"{color_name(mover)} cannot step from its far row"
        dr = mv.row1 - mv.row0
        if dr * (1 if mover == WHITE else -1) < 0:
            return "pieces cannot step backward"
        if not _direction_allowed(mv.from_index, dr, mv.col1 - mv.col0):
            return f"no diagonal steps from {square_name(mv.from_index)}"
        if self.jump_possible():
            return "jump possible"
        if self._is_forbidden_reversal(mv):
            return "step would reverse the previous move"
        return None

    def _is_forbidden_reversal(self, mv):
        return mv.is_step and self.draws[mv.from_index] == mv

    def check_jump(self, mv: Optional[Move], allow_partial: bool = False) -> bool:
        """True iff MV is a valid jump chain for the piece it starts from.

        Unless ALLOW_PARTIAL, the chain must also be complete: its landing
        square may offer no further capture.
        """
        if mv is None:
            return True
        return self._jump_problem(mv, allow_partial) is None

    def _jump_problem(self, mv, allow_partial):
        if not mv.is_jump:
            return "not a jump"
        cells = self.cells[:]
        color = cells[mv.from_index]
        if color == EMPTY:
            return f"no piece on {square_name(mv.from_index)}"
        for hop in mv.hops():
            if not _direction_allowed(hop.from_index, hop.row1 - hop.row0, hop.col1 - hop.col0):
                return f"no diagonal jumps from {square_name(hop.from_index)}"
            if cells[hop.to_index] != EMPTY:
                return f"{square_name(hop.to_index)} is occupied"
            if cells[hop.jumped_index] != -color:
                return f"nothing to capture on {square_name(hop.jumped_index)}"
            _apply_jump(cells, hop.from_index, hop.to_index, hop.jumped_index)
        if not allow_partial and any(True for _ in _jump_targets(cells, mv.last_index)):
            return "jump chain is incomplete"
        return None

    def jump_possible(self, k: Optional[int] = None) -> bool:
        """True iff the player to move can capture from K (or from anywhere if K is None)."""
        if k is None:
            return any(self.jump_possible(i) for i in range(MAX_INDEX + 1))
        if self.cells[k] != self.to_move:
            return False
        return any(True for _ in _jump_targets(self.cells, k))

    # Generation ------------------------------------------------------------------
    def get_moves(self) -> List[Move]:
        """All legal moves: only jump chains if any capture exists, else steps."""
        if self._game_over:
            return []
        return self._legal_moves()

    def _legal_moves(self):
        own = [k for k in range(MAX_INDEX + 1) if self.cells[k] == self.to_move]
        jumps = [mv for k in own for mv in _jump_chains(self.cells, k)]
        if jumps:
            return jumps
        return [mv for k in own for mv in self._steps_from(k)]

    def get_jumps(self, k: int) -> List[Move]:
        """All complete jump chains for the piece on K if it belongs to the player to move."""
        if self.cells[k] != self.to_move:
            return []
        return _jump_chains(self.cells, k)

    def get_steps(self, k: int) -> List[Move]:
        """Legal non-capturing moves from K (none while any capture is available)."""
        if self.jump_possible():
            return []
        return self._steps_from(k)

    def _steps_from(self, k):
        color = self.cells[k]
        if color != self.to_move or row_index(k) == far_row(color):
            return []
        backward = -1 if color == WHITE else 1
        result = []
        for dr, dc in STEP_DIRECTIONS:
            if dr == backward or not _direction_allowed(k, dr, dc):
                continue
            to = _offset(k, dr, dc)
            if to is None or self.cells[to] != EMPTY:
                continue
            mv = Move(k, to)
            if self._is_forbidden_reversal(mv):
                continue
            result.append(mv)
        return result

    def check_game_over(self):
        """Recompute the game-over flag: over iff the player to move is stuck."""
        own = [k for k in range(MAX_INDEX + 1) if self.cells[k] == self.to_move]
        has_move = self.jump_possible() or any(self._steps_from(k) for k in own)
        self._game_over = not has_move
        return self._game_over

    # Mutation --------------------------------------------------------------------
    def make_move(self, mv: Move):
        """Apply MV for the player to move; raise IllegalMoveError if it is not legal."""
        if mv is None or mv.is_pass:
            raise IllegalMoveError("invalid move: cannot pass")
        if self.cells[mv.from_index] != self.to_move:
            raise IllegalMoveError(f"invalid move: {color_name(self.to_move)}'s move")
        reason = self.illegal_reason(mv)
        if reason is not None:
            raise IllegalMoveError(f"invalid move {mv}: {reason}")

        self.history.append(self._snapshot())
        if mv.is_jump:
            for hop in mv.hops():
                _apply_jump(self.cells, hop.from_index, hop.to_index, hop.jumped_index)
            # A capture invalidates every pending reversal marker
            self.draws = [None] * (MAX_INDEX + 1)
        else:
            self.cells[mv.to_index] = self.cells[mv.from_index]
            self.cells[mv.from_index] = EMPTY
            self.draws[mv.from_index] = None
            if mv.is_left_move or mv.is_right_move:
                self.draws[mv.to_index] = mv.reverse()

        self.to_move = -self.to_move
        self.check_game_over()
        self._notify()

    def undo(self):
        """Restore the position before the last move."""
        if not self.history:
            raise StateError("Cannot undo anymore")
        self._restore(self.history.pop())
        self._notify()

    def _snapshot(self):
        return tuple(self.cells), self.to_move, tuple(self.draws), self._game_over

    def _restore(self, snapshot):
        cells, to_move, draws, game_over = snapshot
        self.cells = list(cells)
        self.to_move = to_move
        self.draws = list(draws)
        self._game_over = game_over

    # Observers -------------------------------------------------------------------
    def subscribe(self, listener: Callable[["Board"], None]):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[["Board"], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    # Display ---------------------------------------------------------------------
    def to_string(self, legend: bool = False) -> str:
        """Text picture of the board, top row first; LEGEND adds coordinates."""
        lines = []
        for r in range(SIDE - 1, -1, -1):
            pieces = " ".join(SHORT_NAMES[self.cells[r * SIDE + c]] for c in range(SIDE))
            lines.append(f"  {ROWS[r]} {pieces}" if legend else f"  {pieces}")
        text = "\n".join(lines)
        if legend:
            text += "\n    a b c d e"
        return text

    def __str__(self):
        return self.to_string(False)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells and self.to_move == other.to_move and self.draws == other.draws

    __hash__ = None


class BoardView:
    """Read-only window onto a Board; exposes queries but no mutators."""

    _QUERIES = frozenset({
        "get", "get_square", "whose_move", "game_over", "winner", "count", "draw_at",
        "layout", "legal_move", "illegal_reason", "check_jump", "jump_possible",
        "get_moves", "get_jumps", "get_steps", "clone", "to_string", "to_move",
        "subscribe", "unsubscribe",
    })

    def __init__(self, board: Board):
        self._board = board

    @property
    def cells(self):
        return tuple(self._board.cells)

    def __getattr__(self, name):
        if name in self._QUERIES:
            return getattr(self._board, name)
        raise AttributeError(f"read-only board view has no attribute {name!r}")

    def __str__(self):
        return str(self._board)
