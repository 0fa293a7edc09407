"""Error kinds raised by the board, the search, and the command layer."""


class QirkatError(Exception):
    """Base class for every error raised by the package."""


class ParseError(QirkatError, ValueError):
    """Malformed move, board, or command text."""


class IllegalMoveError(QirkatError, ValueError):
    """A move that violates the rules on the current board."""


class StateError(QirkatError):
    """An operation that the current board or session state does not allow."""


class EngineError(QirkatError, RuntimeError):
    """The search engine produced an illegal move or had nothing to play.

    Never caught by the game loop: an engine that plays illegally is a bug.
    """


# Errors reported to the user without ending the session
RECOVERABLE = (ParseError, IllegalMoveError, StateError)
