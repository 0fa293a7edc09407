"""CLI options for choosing players, search depth, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Qirkat with an alpha-beta opponent")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--depth", type=int, help="Search depth for computer players")
    parser.add_argument(
        "--white",
        choices=["manual", "auto", "dumb"],
        default=None,
        help="Who plays White (default from settings)",
    )
    parser.add_argument(
        "--black",
        choices=["manual", "auto", "dumb"],
        default=None,
        help="Who plays Black (default from settings)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer players' random source")
    parser.add_argument("--load", default=None, help="Command script to run before reading the console")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for manual players)")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser.parse_args(argv)
