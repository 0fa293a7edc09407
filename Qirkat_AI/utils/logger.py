"""Lightweight reporting of moves, errors and results to the console."""

import datetime
import sys


def _timestamp():
    return datetime.datetime.now().strftime("%H:%M:%S")


def log_event(message):
    print(f"[{_timestamp()}] {message}")


def log_error(message):
    print(f"[{_timestamp()}] Error: {message}", file=sys.stderr)
