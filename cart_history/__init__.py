from cart_history.caretaker import CartCaretaker
from cart_history.errors import CartHistoryError, SnapshotError
from cart_history.events import HistoryEvent, HistoryObserver, log_event
from cart_history.originator import CartOriginator
from cart_history.registry import HistoryRegistry
from cart_history.snapshot import CartSnapshot

__all__ = [
    "CartCaretaker",
    "CartHistoryError",
    "CartOriginator",
    "CartSnapshot",
    "HistoryEvent",
    "HistoryObserver",
    "HistoryRegistry",
    "SnapshotError",
    "log_event",
]
