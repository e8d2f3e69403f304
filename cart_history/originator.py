# cart_history/originator.py
import copy
from typing import Any, List, Optional

from cart_history.snapshot import CartSnapshot


class CartOriginator:
    """Owns the live cart item list; the only way in is set_state/restore."""

    def __init__(self, state: Optional[List[Any]] = None):
        self._state: List[Any] = []
        if state is not None:
            self.set_state(state)

    def set_state(self, state: List[Any]) -> None:
        """Replace the live list wholesale. Items are not validated."""
        self._state = copy.deepcopy(list(state))

    def items(self) -> List[Any]:
        """Return a copy of the live list."""
        return copy.deepcopy(self._state)

    def save(self) -> CartSnapshot:
        return CartSnapshot(self._state)

    def restore(self, snapshot: CartSnapshot) -> None:
        self._state = snapshot.get_state()
