"""Entry point for Qirkat sessions. Load config, choose players, run the command loop."""

import logging
import random
from pathlib import Path

import yaml

from Qirkat_AI.Board import BLACK, WHITE, color_name
from Qirkat_AI.Qirkatgame import DEFAULT_KINDS, PLAYER_KINDS, Qirkatgame, console_source
from Qirkat_AI.utils.cli import parse_args
from Qirkat_AI.utils.logger import log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Qirkat_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        log_event(f"Settings file {path} not found; using defaults")
        return {}


def startup_source(script_path, fallback=console_source):
    """Command source that loads SCRIPT_PATH first, then reads from FALLBACK."""
    pending = [f"load {script_path}"] if script_path else []

    def source(prompt):
        if pending:
            return pending.pop(0)
        return fallback(prompt)

    return source


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    depth = args.depth or settings.get("search_depth", 4)
    kinds = {
        WHITE: args.white or settings.get("white", "manual"),
        BLACK: args.black or settings.get("black", "auto"),
    }
    for color, kind in kinds.items():
        if kind not in PLAYER_KINDS:
            log_event(f"Unknown player kind {kind!r} for {color_name(color)}; using {DEFAULT_KINDS[color]}")
            kinds[color] = DEFAULT_KINDS[color]
    seed = args.seed if args.seed is not None else settings.get("seed")
    use_gui = args.gui or bool(settings.get("gui", False))

    view = None
    if use_gui:
        from Qirkat_AI.gui.pygame_view import PygameView

        view = PygameView(window_size=settings.get("window_size", 600))

    game = Qirkatgame(
        source=startup_source(args.load),
        depth=depth,
        default_kinds=kinds,
        gui=view,
        logger=log_event,
        rng=random.Random(seed),
    )
    if view:
        view.attach(game.board)

    try:
        game.process()
    finally:
        if view:
            view.close()


if __name__ == "__main__":
    main()
