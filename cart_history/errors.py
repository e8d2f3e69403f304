# cart_history/errors.py


class CartHistoryError(Exception):
    """Base class for errors raised by the cart history package."""


class SnapshotError(CartHistoryError):
    """The cart state could not be copied into a snapshot."""
