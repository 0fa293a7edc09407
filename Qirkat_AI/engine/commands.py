"""Parse session command lines (start, clear, set, seed, manual, auto, ...)."""

import re
from collections import namedtuple

from .errors import ParseError

Command = namedtuple("Command", ["kind", "operands"])

BLANK = "blank"
START = "start"
CLEAR = "clear"
SET = "set"
SEED = "seed"
MANUAL = "manual"
AUTO = "auto"
LOAD = "load"
DUMP = "dump"
HELP = "help"
QUIT = "quit"
MOVE = "move"
EOF_KIND = "eof"

_PATTERNS = [
    (BLANK, r"(?:#.*)?"),
    (START, r"start"),
    (CLEAR, r"clear"),
    (SET, r"set\s+(\S+)\s+(.+)"),
    (SEED, r"seed\s+(\S+)"),
    (MANUAL, r"manual\s+(white|black)"),
    (AUTO, r"auto\s+(white|black|dumbwhite|dumbblack)"),
    (LOAD, r"load\s+(\S+)"),
    (DUMP, r"dump"),
    (HELP, r"help|\?"),
    (QUIT, r"quit"),
    (MOVE, r"(-|[a-e][1-5](?:-[a-e][1-5])+)"),
]
_COMPILED = [(kind, re.compile(pattern, re.IGNORECASE)) for kind, pattern in _PATTERNS]


def parse_command(line):
    """Return the Command for LINE; None (end of input) gives an EOF command."""
    if line is None:
        return Command(EOF_KIND, ())
    text = line.strip()
    for kind, pattern in _COMPILED:
        match = pattern.fullmatch(text)
        if match:
            operands = tuple(match.groups())
            if kind in (MANUAL, AUTO, MOVE):
                operands = tuple(op.lower() for op in operands)
            return Command(kind, operands)
    raise ParseError(f"Command not understood: {text}")
