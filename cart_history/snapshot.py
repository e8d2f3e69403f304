# cart_history/snapshot.py
import copy
from datetime import datetime, timezone
from typing import Any, List

from cart_history.errors import SnapshotError


class CartSnapshot:
    """
    Point-in-time copy of a cart item list.

    The list is deep-copied on the way in and again on the way out, so neither
    the list the snapshot was built from nor any list handed out by
    get_state() shares mutable references with the stored copy.
    """

    __slots__ = ("_state", "created_at")

    def __init__(self, state: List[Any]):
        try:
            self._state = copy.deepcopy(list(state))
        except (TypeError, copy.Error, RecursionError) as exc:
            raise SnapshotError(f"Cannot snapshot cart state: {exc}") from exc
        self.created_at = datetime.now(timezone.utc)

    def get_state(self) -> List[Any]:
        return copy.deepcopy(self._state)

    def __len__(self) -> int:
        return len(self._state)

    def __repr__(self) -> str:
        return f"CartSnapshot(items={len(self._state)}, created_at={self.created_at.isoformat()})"
