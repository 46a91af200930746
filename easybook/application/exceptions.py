class LedgerError(RuntimeError):
    """Base class for rejected ledger operations."""
    pass


class RescheduleNotAllowedError(LedgerError):
    """Raised when rescheduling a booking that is no longer pending."""
    pass


class EmptyCartError(LedgerError):
    """Raised when checking out with nothing in the cart."""
    pass
