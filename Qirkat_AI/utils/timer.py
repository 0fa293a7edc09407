"""Process-wide timing of engine moves."""

import time
from contextlib import contextmanager

# label -> [moves timed, seconds spent]
_totals = {}


@contextmanager
def timing(label="search"):
    start = time.perf_counter()
    try:
        yield
    finally:
        record(label, time.perf_counter() - start)


def record(label, seconds):
    entry = _totals.setdefault(label, [0, 0.0])
    entry[0] += 1
    entry[1] += seconds


def total_times():
    return {label: (count, seconds) for label, (count, seconds) in _totals.items()}


def reset():
    _totals.clear()


def report_total_times(logger=print):
    for label, (count, seconds) in sorted(_totals.items()):
        logger(f"{label}: {count} moves in {seconds:.2f}s ({seconds / count:.3f}s per move)")
