"""Abstract player interface for human or AI controllers."""

from .Board import color_name
from .Move import parse_move


class Player:
    # True for players whose moves come from the search engine
    automated = False

    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return the next Move on BOARD, or None if play stopped while waiting."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Takes move text from a callback, normally the session's command reader."""

    def __init__(self, color, get_move):
        super().__init__(color)
        self.get_move = get_move
        self.prompt = f"{color_name(color)}: "

    def next_move(self, board):
        text = self.get_move(self.prompt)
        if text is None:
            return None
        return parse_move(text)


class GuiHumanPlayer(Player):
    def __init__(self, color, view, on_close=None):
        super().__init__(color)
        self.view = view
        self.on_close = on_close

    def next_move(self, board):
        text = self.view.wait_for_move(board, self.color)
        if text is None:
            if self.on_close:
                self.on_close()
            return None
        return parse_move(text)
