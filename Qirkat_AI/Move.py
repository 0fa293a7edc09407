"""Square indexing and move values (steps, jumps, and jump chains).

Squares are numbered 0..24 in row-major order with row 0 at the bottom.
Columns are lettered a..e and rows numbered 1..5 in move text, so index 0
is a1 and index 24 is e5.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional, Tuple

from .engine.errors import ParseError

SIDE = 5
MAX_INDEX = SIDE * SIDE - 1
COLUMNS = "abcde"
ROWS = "12345"

# Step directions, classified from the column delta of sideways steps
NONE = "none"
LEFT = "left"
RIGHT = "right"
OTHER = "other"

_MOVE_PATTERN = re.compile(r"[a-e][1-5](?:-[a-e][1-5])+")


def valid_index(k) -> bool:
    return isinstance(k, int) and not isinstance(k, bool) and 0 <= k <= MAX_INDEX


def valid_square(c, r) -> bool:
    """True iff column letter C and row digit R name a square on the board."""
    return (
        isinstance(c, str)
        and isinstance(r, str)
        and len(c) == 1
        and len(r) == 1
        and c.lower() in COLUMNS
        and r in ROWS
    )


def index(c: str, r: str) -> int:
    if not valid_square(c, r):
        raise ParseError(f"not a square: {c}{r}")
    return COLUMNS.index(c.lower()) + ROWS.index(r) * SIDE


def col_index(k: int) -> int:
    return k % SIDE


def row_index(k: int) -> int:
    return k // SIDE


def col(k: int) -> str:
    return COLUMNS[col_index(k)]


def row(k: int) -> str:
    return ROWS[row_index(k)]


def square_name(k: int) -> str:
    return col(k) + row(k)


@total_ordering
@dataclass(frozen=True)
class Move:
    """A pass, a single step, or a jump with an optional continuation.

    The captured square of a jump is always the midpoint of its endpoints.
    Instances are validated on construction, so every Move describes a
    geometrically possible step or jump chain (not necessarily a legal one).
    """

    from_index: Optional[int]
    to_index: Optional[int]
    tail: Optional["Move"] = None

    def __post_init__(self):
        if self.from_index is None:
            if self.to_index is not None or self.tail is not None:
                raise ParseError("a pass has no squares")
            return
        if not (valid_index(self.from_index) and valid_index(self.to_index)):
            raise ParseError(f"square index out of range: {self.from_index}, {self.to_index}")
        dc = abs(self.col1 - self.col0)
        dr = abs(self.row1 - self.row0)
        is_step = max(dc, dr) == 1
        is_jump = dc in (0, 2) and dr in (0, 2) and (dc, dr) != (0, 0)
        if not (is_step or is_jump):
            raise ParseError(f"{square_name(self.from_index)}-{square_name(self.to_index)} is neither a step nor a jump")
        if self.tail is not None:
            if not is_jump or not self.tail.is_jump:
                raise ParseError("only jumps can be chained")
            if self.tail.from_index != self.to_index:
                raise ParseError("jump continuation must start where the previous jump lands")

    # Coordinates -----------------------------------------------------------------
    @property
    def col0(self) -> int:
        return col_index(self.from_index)

    @property
    def row0(self) -> int:
        return row_index(self.from_index)

    @property
    def col1(self) -> int:
        return col_index(self.to_index)

    @property
    def row1(self) -> int:
        return row_index(self.to_index)

    # Classification --------------------------------------------------------------
    @property
    def is_pass(self) -> bool:
        return self.from_index is None

    @property
    def is_jump(self) -> bool:
        if self.is_pass:
            return False
        return abs(self.col1 - self.col0) == 2 or abs(self.row1 - self.row0) == 2

    @property
    def is_step(self) -> bool:
        return not self.is_pass and not self.is_jump

    @property
    def direction(self) -> str:
        """NONE, LEFT, RIGHT or OTHER; only sideways steps are LEFT/RIGHT."""
        if self.is_pass or self.from_index == self.to_index:
            return NONE
        if self.is_jump or self.row1 != self.row0:
            return OTHER
        return LEFT if self.col1 < self.col0 else RIGHT

    @property
    def is_left_move(self) -> bool:
        return self.direction == LEFT

    @property
    def is_right_move(self) -> bool:
        return self.direction == RIGHT

    @property
    def jumped_col(self) -> str:
        """Column letter of the square between the endpoints."""
        return COLUMNS[(self.col0 + self.col1) // 2]

    @property
    def jumped_row(self) -> str:
        return ROWS[(self.row0 + self.row1) // 2]

    @property
    def jumped_index(self) -> int:
        return (self.col0 + self.col1) // 2 + (self.row0 + self.row1) // 2 * SIDE

    @property
    def last_index(self) -> Optional[int]:
        """Square where the whole chain ends."""
        if self.tail is None:
            return self.to_index
        return self.tail.last_index

    # Chains ----------------------------------------------------------------------
    def hops(self) -> List["Move"]:
        """Split a jump chain into its single jumps."""
        result = []
        mv = self
        while mv is not None:
            result.append(Move(mv.from_index, mv.to_index))
            mv = mv.tail
        return result

    def squares(self) -> Tuple[int, ...]:
        if self.is_pass:
            return ()
        result = [self.from_index]
        mv = self
        while mv is not None:
            result.append(mv.to_index)
            mv = mv.tail
        return tuple(result)

    def then(self, tail: "Move") -> "Move":
        """Return this jump followed by the jump chain TAIL."""
        if self.tail is None:
            return Move(self.from_index, self.to_index, tail)
        return Move(self.from_index, self.to_index, self.tail.then(tail))

    def reverse(self) -> "Move":
        """The step that undoes this one."""
        return Move(self.to_index, self.from_index)

    def __lt__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.squares() < other.squares()

    def __str__(self):
        if self.is_pass:
            return "-"
        return "-".join(square_name(k) for k in self.squares())

    def __repr__(self):
        return f"Move('{self}')"


PASS = Move(None, None)


def move(k0: int, k1: int, tail: Optional[Move] = None) -> Move:
    """The step or jump from index K0 to index K1, followed by TAIL."""
    return Move(k0, k1, tail)


def move_from_squares(c0: str, r0: str, c1: str, r1: str, tail: Optional[Move] = None) -> Move:
    return Move(index(c0, r0), index(c1, r1), tail)


def parse_move(text: str) -> Move:
    """Parse `c0r0-c1r1[-c2r2...]`, or `-` for a pass."""
    if not isinstance(text, str):
        raise ParseError(f"bad move: {text!r}")
    text = text.strip().lower()
    if text == "-":
        return PASS
    if not _MOVE_PATTERN.fullmatch(text):
        raise ParseError(f"bad move: {text!r}")
    names = text.split("-")
    return path_move(index(name[0], name[1]) for name in names)


def path_move(squares) -> Move:
    """The step or jump chain visiting the square indices SQUARES in order."""
    squares = list(squares)
    if len(squares) < 2:
        raise ParseError("a move needs at least two squares")
    result = None
    for start, end in reversed(list(zip(squares, squares[1:]))):
        result = Move(start, end, result)
    return result
