# gridbarrier/utils/logging_utils.py
from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Optional

_QUIET = False


def set_quiet(quiet: bool) -> None:
    global _QUIET
    _QUIET = bool(quiet)


def log(msg: str) -> None:
    if _QUIET:
        return
    t = time.strftime("%H:%M:%S")
    print(f"[{t}] {msg}", flush=True)


@dataclass
class StageTimer:
    """Logs start/finish of a named stage with its wall time."""
    name: str
    start: Optional[float] = None
    elapsed: float = 0.0

    def __enter__(self):
        log(f"▶ START: {self.name}")
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - (self.start or time.perf_counter())
        if exc is None:
            log(f"✔ DONE:  {self.name}  (took {self.elapsed:.2f}s)")
        else:
            log(f"✖ FAIL:  {self.name}  (after {self.elapsed:.2f}s)  err={exc!r}")
        return False
