# cricket_auction/errors.py
"""
Domain errors raised by the auction engine and rendered by the HTTP layer
as ``{"error": message}`` with the class' status code.
"""


class AuctionError(Exception):
    status_code = 500
    default_message = "Auction error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(AuctionError):
    status_code = 404
    default_message = "Not found"


class ValidationFailure(AuctionError):
    status_code = 400
    default_message = "Invalid request"


class InsufficientCredits(ValidationFailure):
    default_message = "Not enough credits"


class RosterFull(ValidationFailure):
    default_message = "Team already has the maximum number of players"


class BidTooLow(ValidationFailure):
    default_message = "Bid must be higher than current bid"


class ProtectedState(ValidationFailure):
    default_message = "Cannot modify a sold player"


class AuctionConflict(AuctionError):
    status_code = 409
    default_message = "Record was modified concurrently, please retry"


class StoreUnavailable(AuctionError):
    status_code = 500
    default_message = "Database unavailable"
