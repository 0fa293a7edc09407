"""Game session: command dispatch, player selection, and the turn loop."""

import random
import sys
from pathlib import Path

from .AIPlayer import AIPlayer
from .Board import BLACK, WHITE, Board, color_name, parse_color
from .Move import parse_move
from .Player import GuiHumanPlayer, HumanPlayer
from .ai import search_minimax
from .engine import commands, referee
from .engine.errors import RECOVERABLE, StateError
from .utils import timer
from .utils.logger import log_error, log_event

SETUP = "setup"
PLAYING = "playing"

HELP_PATH = Path(__file__).resolve().parent / "help.txt"


def console_source(prompt):
    """Read one line from the terminal; None at end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def script_source(lines):
    """A command source that replays LINES and then reports end of input."""
    remaining = iter(lines)

    def source(prompt):
        return next(remaining, None)

    return source


PLAYER_KINDS = ("manual", "auto", "dumb")
# Player kinds selected by `clear` unless the session is configured otherwise
DEFAULT_KINDS = {WHITE: "manual", BLACK: "auto"}


class Qirkatgame:
    def __init__(self, board=None, source=console_source, depth=search_minimax.DEFAULT_DEPTH,
                 white_player=None, black_player=None, default_kinds=None, gui=None,
                 logger=log_event, error_logger=log_error, output=print, rng=None):
        self.board = Board() if board is None else board
        self.view = self.board.constant_view()
        self.depth = depth
        self.default_kinds = dict(DEFAULT_KINDS if default_kinds is None else default_kinds)
        self.gui = gui
        self.logger = logger
        self.error_logger = error_logger
        self.output = output
        self.rng = random.Random() if rng is None else rng
        self.state = SETUP
        self.quit_requested = False
        self._sources = [source]

        # Color -> player behaviour; replaced by `manual`, `auto` and `clear`
        self.players = self.default_players()
        if white_player is not None:
            self.players[WHITE] = white_player
        if black_player is not None:
            self.players[BLACK] = black_player

        self._commands = {
            commands.BLANK: lambda operands: None,
            commands.START: self.do_start,
            commands.CLEAR: self.do_clear,
            commands.SET: self.do_set,
            commands.SEED: self.do_seed,
            commands.MANUAL: self.do_manual,
            commands.AUTO: self.do_auto,
            commands.LOAD: self.do_load,
            commands.DUMP: self.do_dump,
            commands.HELP: self.do_help,
            commands.QUIT: self.do_quit,
            commands.EOF_KIND: self.do_quit,
            commands.MOVE: self.do_move,
        }

    def make_player(self, kind, color):
        """Build the player behaviour KIND ("manual", "auto" or "dumb") for COLOR."""
        if kind == "manual":
            if self.gui is not None:
                return GuiHumanPlayer(color, self.gui, on_close=self.do_quit)
            return HumanPlayer(color, self.get_move_command)
        if kind in PLAYER_KINDS:
            return AIPlayer(color, depth=self.depth, dumb=(kind == "dumb"), rng=self.rng, logger=self.logger)
        raise StateError(f"unknown player kind: {kind}")

    def default_players(self):
        return {color: self.make_player(kind, color) for color, kind in self.default_kinds.items()}

    # Session ---------------------------------------------------------------------
    def process(self):
        """Run commands and games until quit or end of input."""
        self.do_clear()
        while not self.quit_requested:
            while self.state == SETUP and not self.quit_requested:
                self.do_command()
            if self.quit_requested:
                break
            self.play()
        timer.report_total_times(self.logger)

    def play(self):
        """
        Play the current position until the game ends or a command stops it.
        Returns the winning color, or None if play was interrupted.
        """
        self.state = PLAYING
        self.board.check_game_over()
        while self.state == PLAYING and not self.board.game_over():
            color = self.board.whose_move()
            player = self.players[color]
            try:
                move = player.next_move(self.view)
                if move is None:
                    # The player's input ended or a command left play mode
                    self.state = SETUP
                    continue
                referee.check_move(move, self.board, color, automated=player.automated)
                self.board.make_move(move)
            except RECOVERABLE as exc:
                self.error_logger(str(exc))

        winner = None
        if self.state == PLAYING:
            winner = self.board.winner()
            self.logger(f"Game over: {color_name(winner)} wins.")
        self.state = SETUP
        return winner

    def do_command(self):
        """Read and perform one command; errors are reported, not raised."""
        line = self._read_line("qirkat: ")
        try:
            self.execute(commands.parse_command(line))
        except RECOVERABLE as exc:
            self.error_logger(str(exc))

    def get_move_command(self, prompt):
        """
        Read commands while playing until one is a move, and return its text.
        Other commands are performed as they arrive. Returns None once the
        session leaves play mode.
        """
        while self.state == PLAYING:
            line = self._read_line(prompt)
            try:
                cmnd = commands.parse_command(line)
                if cmnd.kind == commands.MOVE:
                    return cmnd.operands[0]
                self.execute(cmnd)
            except RECOVERABLE as exc:
                self.error_logger(str(exc))
        return None

    def execute(self, cmnd):
        self._commands[cmnd.kind](cmnd.operands)

    def _read_line(self, prompt):
        # Scripts pushed by `load` are read first; the base source is never popped
        while len(self._sources) > 1:
            line = self._sources[-1](prompt)
            if line is not None:
                return line
            self._sources.pop()
        return self._sources[0](prompt)

    # Command processors ----------------------------------------------------------
    def do_start(self, operands=()):
        self.state = PLAYING

    def do_clear(self, operands=()):
        self.state = SETUP
        self.board.clear()
        self.players = self.default_players()

    def do_set(self, operands):
        color_text, layout = operands
        color = parse_color(color_text)
        self.state = SETUP
        self.board.set_pieces(layout, color)

    def do_seed(self, operands):
        try:
            seed = int(operands[0])
        except ValueError:
            # Non-numeric seeds select the largest one
            seed = sys.maxsize
        self.rng.seed(seed)

    def do_manual(self, operands):
        self.state = SETUP
        color = parse_color(operands[0])
        self.players[color] = self.make_player("manual", color)

    def do_auto(self, operands):
        self.state = SETUP
        name = operands[0]
        dumb = name.startswith("dumb")
        color = parse_color(name[len("dumb"):] if dumb else name)
        self.players[color] = self.make_player("dumb" if dumb else "auto", color)

    def do_load(self, operands):
        path = Path(operands[0])
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise StateError(f"Cannot open file {path}") from exc
        self._sources.append(script_source(lines))

    def do_dump(self, operands=()):
        self.output(f"===\n{self.board}\n===")

    def do_help(self, operands=()):
        try:
            self.output(HELP_PATH.read_text(encoding="utf-8"))
        except OSError:
            self.error_logger("No help available.")

    def do_quit(self, operands=()):
        self.quit_requested = True
        self.state = SETUP

    def do_move(self, operands):
        self.board.make_move(parse_move(operands[0]))
