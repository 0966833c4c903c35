"""Timing helper for the long-running wsdottie scripts."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Timer:
    started: float
    elapsed: Optional[float] = None


@contextmanager
def timed_block(label: str, *, log: logging.Logger = logger):
    """
    Log `label` on entry and its duration on exit.

    The yielded Timer has ``elapsed`` (seconds) set once the block ends,
    whether it finished or raised:

        with timed_block("Capturing sample data") as timer:
            capture()
        print(f"took {timer.elapsed:.1f}s")
    """
    log.info("[status] %s...", label)
    timer = Timer(started=time.perf_counter())
    try:
        yield timer
    finally:
        timer.elapsed = time.perf_counter() - timer.started
        log.info("[status] %s done (%.2fs)", label, timer.elapsed)
