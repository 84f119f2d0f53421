class ReferralError(Exception):
    """Business rule rejection. ``reason`` is safe to show to the caller."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class InvalidLevel(ReferralError):
    pass


class AlreadyActive(ReferralError):
    pass


class InsufficientFunds(ReferralError):
    def __init__(self, required):
        super().__init__(f"Insufficient coins. Required: {required}.")
        self.required = required


class UserNotFound(ReferralError):
    pass


class UnknownAction(ReferralError):
    pass


class TransactionConflict(ReferralError):
    pass


class TransactionOrderError(RuntimeError):
    """A record was read after a write was queued in the same transaction."""
