"""Qirkat_AI package exports."""

from .Board import Board, BoardView, WHITE, BLACK, EMPTY
from .Move import Move, PASS, parse_move
from .Qirkatgame import Qirkatgame
from .Player import Player, HumanPlayer, GuiHumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for rules plumbing, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "BoardView",
    "WHITE",
    "BLACK",
    "EMPTY",
    "Move",
    "PASS",
    "parse_move",
    "Qirkatgame",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
