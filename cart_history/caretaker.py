# cart_history/caretaker.py
from typing import Any, Iterable, List, Optional

from cart_history.events import HistoryEvent, HistoryObserver, log_event
from cart_history.originator import CartOriginator
from cart_history.snapshot import CartSnapshot


class CartCaretaker:
    """
    Undo/redo history for one CartOriginator.

    Two stacks of snapshots, most recent last. backup() checkpoints the live
    state and invalidates the redo chain; undo()/redo() move one step,
    keeping the state they move away from on the opposite stack.

    Calls against one caretaker must not overlap: undo()/redo() mutate both
    stacks and the originator in several steps.
    """

    def __init__(self, originator: CartOriginator, observers: Optional[Iterable[HistoryObserver]] = None):
        self.originator = originator
        self._undo_stack: List[CartSnapshot] = []
        self._redo_stack: List[CartSnapshot] = []
        self._observers: List[HistoryObserver] = list(observers) if observers is not None else [log_event]

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def subscribe(self, observer: HistoryObserver) -> None:
        self._observers.append(observer)

    def backup(self) -> None:
        """Checkpoint the originator's live state. Clears the redo stack."""
        undo_before, redo_before = self.undo_depth, self.redo_depth
        snapshot = self.originator.save()
        self._undo_stack.append(snapshot)
        self._redo_stack.clear()
        self._emit("backup", undo_before, redo_before)

    def undo(self, current_state: Optional[List[Any]] = None) -> Optional[List[Any]]:
        """
        Step back one checkpoint.

        current_state is the caller's view of the cart right before this call;
        it is what a later redo() returns to. When omitted the originator's
        live state is used. Returns the restored items, or None when there is
        nothing to undo (no state is touched in that case).
        """
        return self._step("undo", self._undo_stack, self._redo_stack, current_state)

    def redo(self, current_state: Optional[List[Any]] = None) -> Optional[List[Any]]:
        """Mirror of undo(): step forward one undone checkpoint, or return None."""
        return self._step("redo", self._redo_stack, self._undo_stack, current_state)

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    def has_history(self) -> bool:
        return self.can_undo()

    def clear(self) -> None:
        """Forget both stacks. The live state is left as is."""
        undo_before, redo_before = self.undo_depth, self.redo_depth
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._emit("clear", undo_before, redo_before)

    def _step(self, operation: str, source: List[CartSnapshot], target: List[CartSnapshot],
              current_state: Optional[List[Any]]) -> Optional[List[Any]]:
        undo_before, redo_before = self.undo_depth, self.redo_depth
        if not source:
            self._emit(operation, undo_before, redo_before, applied=False)
            return None

        if current_state is not None:
            self.originator.set_state(current_state)
        # the state being left must be on the opposite stack before the pop
        target.append(self.originator.save())

        snapshot = source.pop()
        self.originator.restore(snapshot)
        self._emit(operation, undo_before, redo_before)
        return self.originator.items()

    def _emit(self, operation: str, undo_before: int, redo_before: int, applied: bool = True) -> None:
        event = HistoryEvent(
            operation=operation,
            undo_before=undo_before,
            undo_after=self.undo_depth,
            redo_before=redo_before,
            redo_after=self.redo_depth,
            applied=applied,
        )
        for observer in self._observers:
            observer(event)
