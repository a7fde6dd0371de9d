"""
scoreboard.py: Current score, the best record, and end-of-run results.
"""

from typing import Optional, Protocol

from .data_models import SessionResult
from .logger import get_logger

log = get_logger("scoreboard")


class BestRecordStore(Protocol):
    def load_best_record(self) -> int: ...
    def save_best_record(self, best: int) -> bool: ...


class Scoreboard:
    """
    Holds the in-memory best record. The store is only told about new
    bests; whether it manages to keep them does not matter here.
    """

    def __init__(self, store: Optional[BestRecordStore] = None):
        self.store = store
        self.best = store.load_best_record() if store is not None else 0

    def best_record(self) -> int:
        return self.best

    def record(self, score: int) -> SessionResult:
        """Closes out a run and updates the best record if it was beaten."""
        new_best = score > self.best
        if new_best:
            self.best = score
            log.info("New best record: %d", score)
            if self.store is not None:
                self.store.save_best_record(score)
        return SessionResult(score=score, best=self.best, new_best=new_best)
