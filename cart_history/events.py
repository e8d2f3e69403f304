# cart_history/events.py
import logging
from dataclasses import dataclass, asdict
from typing import Callable

logger = logging.getLogger("cart_history")


@dataclass(frozen=True)
class HistoryEvent:
    """Trace record emitted once per history operation."""
    operation: str
    undo_before: int
    undo_after: int
    redo_before: int
    redo_after: int
    applied: bool = True

    def to_dict(self) -> dict:
        return asdict(self)


HistoryObserver = Callable[[HistoryEvent], None]


def log_event(event: HistoryEvent) -> None:
    """Default observer: one DEBUG line per operation."""
    if not event.applied:
        logger.debug("%s: nothing to apply (undo=%d, redo=%d)",
                     event.operation, event.undo_before, event.redo_before)
        return
    logger.debug(
        "%s: undo %d -> %d, redo %d -> %d",
        event.operation,
        event.undo_before,
        event.undo_after,
        event.redo_before,
        event.redo_after,
    )
