"""Computer player: alpha-beta search, or random legal moves in dumb mode."""

from .Board import color_name
from .Player import Player
from .ai import search_minimax
from .utils import timer
from .utils.logger import log_event


class AIPlayer(Player):
    automated = True

    def __init__(self, color, depth=search_minimax.DEFAULT_DEPTH, dumb=False, rng=None, logger=log_event):
        super().__init__(color)
        self.depth = depth
        self.dumb = dumb
        self.rng = rng
        self.logger = logger
        self.stats = []

    def next_move(self, board):
        with timer.timing("random" if self.dumb else "search"):
            move = search_minimax.choose_move(
                board,
                self.color,
                depth=self.depth,
                dumb=self.dumb,
                rng=self.rng,
                stats=self.stats,
            )
        self.logger(f"{color_name(self.color)} moves {move}.")
        return move
