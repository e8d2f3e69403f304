# cart_history/registry.py
import asyncio
from typing import Callable, Dict, Iterable, Optional

from cart_history.caretaker import CartCaretaker
from cart_history.events import HistoryObserver
from cart_history.originator import CartOriginator


class HistoryRegistry:
    """
    One caretaker per session key, kept in memory for the process lifetime.

    Each key also gets an asyncio.Lock. Callers that await between touching a
    caretaker (an edit that checkpoints, calls upstream, then writes the new
    cart) hold lock(key) for the whole sequence so requests of one session
    take turns.
    """

    def __init__(self, observers: Optional[Iterable[HistoryObserver]] = None,
                 factory: Optional[Callable[[], CartCaretaker]] = None):
        self._observers = list(observers) if observers is not None else None
        self._factory = factory or self._new_caretaker
        self._sessions: Dict[str, CartCaretaker] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _new_caretaker(self) -> CartCaretaker:
        return CartCaretaker(CartOriginator(), observers=self._observers)

    def get(self, key: str) -> CartCaretaker:
        caretaker = self._sessions.get(key)
        if caretaker is None:
            caretaker = self._sessions[key] = self._factory()
        return caretaker

    def lock(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    def discard(self, key: str) -> bool:
        lock = self._locks.get(key)
        if lock is not None and not lock.locked():
            del self._locks[key]
        return self._sessions.pop(key, None) is not None

    def __contains__(self, key: str) -> bool:
        return key in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
