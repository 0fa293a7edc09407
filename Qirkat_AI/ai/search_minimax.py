"""Fixed-depth minimax with alpha-beta pruning and an immediate-win shortcut."""

import logging
import random
import time

from . import heuristic
from ..Board import WHITE, color_name
from ..engine.errors import EngineError

LOGGER = logging.getLogger(__name__)

INFTY = heuristic.INFTY
DEFAULT_DEPTH = 4


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search.

    Only the move found by the last root call survives between searches.
    With ``dumb=True`` the search is skipped and a random legal move is
    returned instead. ``prune=False`` disables the cut-offs (plain minimax),
    which changes the number of visited nodes but never the value found.
    """

    def __init__(self, depth=DEFAULT_DEPTH, prune=True, dumb=False, rng=None, stats=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.depth = depth
        self.prune = prune
        self.dumb = dumb
        self.rng = random.Random() if rng is None else rng
        self.stats_list = stats

        self.last_found_move = None
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board, color):
        """Return a legal move for COLOR, the player to move on BOARD.

        BOARD is never modified; the search works on its own copies.
        """
        root = board.clone()
        # The search never undoes, so the game history is not carried along
        root.history = []
        if root.whose_move() != color:
            raise EngineError(f"asked to move for {color_name(color)} on {color_name(root.whose_move())}'s turn")
        if root.game_over():
            raise EngineError(f"no legal moves for {color_name(color)}")

        self.last_found_move = None
        self.node_counter = 0
        self.start_time = time.time()

        if self.dumb:
            self.last_found_move = self.rng.choice(root.get_moves())
        else:
            sense = 1 if color == WHITE else -1
            value = self.find_move(root, self.depth, True, sense, -INFTY, INFTY)
            LOGGER.debug("%s search value %d after %d nodes", color_name(color), value, self.node_counter)

        move = self.last_found_move
        if move is None or not root.legal_move(move):
            raise EngineError(f"search produced an illegal move for {color_name(color)}: {move}")

        if self.stats_list is not None:
            self._record_stats(color)
        return move

    def find_move(self, board, depth, save_move, sense, alpha, beta):
        """
        Return the minimax value of BOARD searched DEPTH plies deep.

        SENSE is 1 when the player to move maximises (White) and -1 when it
        minimises (Black). When SAVE_MOVE, the chosen move is recorded in
        last_found_move. Depth 0 and finished games return the static score
        without recording anything.
        """
        self.node_counter += 1
        if depth == 0 or board.game_over():
            return heuristic.static_score(board)

        children = []
        for mv in board.get_moves():
            child = board.clone()
            child.make_move(mv)
            if child.game_over():
                # The opponent has no reply: take the win outright
                if save_move:
                    self.last_found_move = mv
                return sense * INFTY
            children.append((mv, child))

        best = None
        best_score = 0
        for mv, child in children:
            score = self.find_move(child, depth - 1, False, -sense, alpha, beta)
            if best is None or score * sense > best_score * sense:
                best_score = score
                best = mv
                if sense == 1:
                    alpha = max(alpha, best_score)
                else:
                    beta = min(beta, best_score)
                if self.prune and beta <= alpha:
                    break

        if save_move:
            self.last_found_move = best
        return best_score

    def _record_stats(self, color):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color, depth=DEFAULT_DEPTH, dumb=False, rng=None, stats=None, prune=True):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(depth=depth, prune=prune, dumb=dumb, rng=rng, stats=stats)
    return searcher.choose_move(board, color)
